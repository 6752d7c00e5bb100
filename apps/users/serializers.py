"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Profile of the current user."""

    display_name = serializers.ReadOnlyField()

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "username",
            "first_name",
            "last_name",
            "display_name",
            "phone",
            "role",
            "city",
            "area",
            "bio",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "email",
            "created_at",
            "updated_at",
        ]


class PublicUserSerializer(serializers.ModelSerializer):
    """Short public card shown to the other party of a booking."""

    display_name = serializers.ReadOnlyField()

    class Meta:
        model = User
        fields = ["id", "display_name", "role", "city", "area", "bio"]


class HostSerializer(PublicUserSerializer):
    """Host directory card with the host's review score."""

    average_rating = serializers.SerializerMethodField()
    review_count = serializers.IntegerField(read_only=True)

    class Meta(PublicUserSerializer.Meta):
        fields = PublicUserSerializer.Meta.fields + ["average_rating", "review_count"]

    def get_average_rating(self, obj) -> float | None:
        if obj.average_rating is None:
            return None
        return round(float(obj.average_rating), 2)
