"""Admin registration for availability windows."""

from __future__ import annotations

from django.contrib import admin

from .models import HostAvailability


@admin.register(HostAvailability)
class HostAvailabilityAdmin(admin.ModelAdmin):
    list_display = ("host", "available_from", "available_to", "max_pets")
    list_filter = ("available_from",)
    search_fields = ("host__email",)
    readonly_fields = ("created_at", "updated_at")
