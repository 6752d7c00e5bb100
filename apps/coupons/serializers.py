"""Serializers for coupons."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Coupon


class CouponSerializer(serializers.ModelSerializer):
    booking_number = serializers.ReadOnlyField(source='booking.booking_number')
    is_expired = serializers.ReadOnlyField()
    is_active = serializers.ReadOnlyField()

    class Meta:
        model = Coupon
        fields = [
            'id',
            'code',
            'category',
            'discount_percent',
            'description',
            'booking',
            'booking_number',
            'earned_at',
            'expires_at',
            'is_used',
            'is_expired',
            'is_active',
        ]
        read_only_fields = fields
