"""Admin registration for coupons."""

from __future__ import annotations

from django.contrib import admin

from .models import Coupon


@admin.register(Coupon)
class CouponAdmin(admin.ModelAdmin):
    list_display = ("code", "host", "category", "discount_percent", "earned_at", "expires_at", "is_used")
    list_filter = ("category", "is_used")
    search_fields = ("code", "host__email", "booking__booking_number")
