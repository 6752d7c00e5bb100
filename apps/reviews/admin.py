"""Admin registration for reviews."""

from __future__ import annotations

from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("booking", "reviewer", "reviewee", "rating", "created_at")
    list_filter = ("rating",)
    search_fields = ("booking__booking_number", "reviewer__email", "reviewee__email")
    readonly_fields = ("created_at",)
