"""Serializers for pets."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Pet


class PetSerializer(serializers.ModelSerializer):
    owner_id = serializers.ReadOnlyField(source="owner.id")

    class Meta:
        model = Pet
        fields = [
            "id",
            "owner_id",
            "name",
            "species",
            "breed",
            "age_years",
            "age_months",
            "gender",
            "weight_kg",
            "is_vaccinated",
            "is_neutered",
            "friendly_with_pets",
            "friendly_with_humans",
            "medical_conditions",
            "medicines",
            "food_type",
            "feeding_schedule",
            "walking_schedule",
            "special_instructions",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "owner_id", "created_at", "updated_at"]
