"""Admin registration for pets."""

from __future__ import annotations

from django.contrib import admin

from .models import Pet


@admin.register(Pet)
class PetAdmin(admin.ModelAdmin):
    list_display = ("name", "species", "breed", "owner", "is_vaccinated", "created_at")
    list_filter = ("species", "is_vaccinated", "is_neutered")
    search_fields = ("name", "breed", "owner__email")
    readonly_fields = ("created_at", "updated_at")
