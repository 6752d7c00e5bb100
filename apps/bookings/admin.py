"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "booking_number",
        "owner",
        "host",
        "status",
        "check_in_date",
        "check_out_date",
        "created_at",
    )
    list_filter = ("status", "check_in_date", "check_out_date", "emergency_permission")
    search_fields = ("booking_number", "owner__email", "host__email")
    filter_horizontal = ("pets",)
    readonly_fields = (
        "booking_number",
        "status",
        "rejection_reason",
        "cancellation_reason",
        "cancelled_by",
        "owner_confirmed_dropoff",
        "host_confirmed_receiving",
        "host_confirmed_completion",
        "owner_confirmed_pickup",
        "completed_at",
        "version",
        "created_at",
        "updated_at",
    )
