"""Serializers for reviews.

Provide both read and write serializers for the ``Review`` model. The
write serializer only shapes input; eligibility and rating checks live
in ``services.submit_review``. The reviewer is inferred from the request.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Review


class ReviewCreateSerializer(serializers.Serializer):
    """Input for submitting a review."""

    booking = serializers.UUIDField()
    rating = serializers.JSONField(help_text='Integer from 1 to 5')
    review_text = serializers.CharField(required=False, allow_blank=True, default='')
    pet_behavior_feedback = serializers.CharField(required=False, allow_blank=True, default='')
    host_experience_feedback = serializers.CharField(required=False, allow_blank=True, default='')


class ReviewSerializer(serializers.ModelSerializer):
    """Read serializer for reviews including related ids."""

    booking_number = serializers.ReadOnlyField(source='booking.booking_number')
    reviewer_name = serializers.ReadOnlyField(source='reviewer.display_name')
    reviewee_name = serializers.ReadOnlyField(source='reviewee.display_name')

    class Meta:
        model = Review
        fields = [
            'id',
            'booking',
            'booking_number',
            'reviewer',
            'reviewer_name',
            'reviewee',
            'reviewee_name',
            'rating',
            'review_text',
            'pet_behavior_feedback',
            'host_experience_feedback',
            'created_at',
        ]
        read_only_fields = fields
