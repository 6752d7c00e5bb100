"""Serializers for availability windows."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import HostAvailability


class HostAvailabilitySerializer(serializers.ModelSerializer):
    host_id = serializers.ReadOnlyField(source="host.id")

    class Meta:
        model = HostAvailability
        fields = [
            "id",
            "host_id",
            "available_from",
            "available_to",
            "max_pets",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "host_id", "created_at", "updated_at"]

    def validate(self, attrs):  # type: ignore
        start = attrs.get("available_from", getattr(self.instance, "available_from", None))
        end = attrs.get("available_to", getattr(self.instance, "available_to", None))
        if start and end and start > end:
            raise serializers.ValidationError(
                {"available_to": "The end date cannot be earlier than the start date."}
            )
        return attrs
