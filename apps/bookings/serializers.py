"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import PublicUserSerializer

from .models import Booking


class BookingCreateSerializer(serializers.Serializer):
    """Booking request by the owner; the owner is taken from the request."""

    host_id = serializers.IntegerField()
    pet_ids = serializers.ListField(child=serializers.IntegerField(), allow_empty=False)
    check_in_date = serializers.DateField()
    check_out_date = serializers.DateField()
    drop_off_time = serializers.TimeField(required=False, allow_null=True)
    pick_up_time = serializers.TimeField(required=False, allow_null=True)
    special_instructions = serializers.CharField(required=False, allow_blank=True, default="")
    emergency_permission = serializers.BooleanField(required=False, default=False)

    def validate(self, attrs):  # type: ignore
        if attrs["check_out_date"] < attrs["check_in_date"]:
            raise serializers.ValidationError(
                {"check_out_date": "Check-out date cannot be before check-in date."}
            )
        return attrs


class TransitionReasonSerializer(serializers.Serializer):
    """Optional free-text reason for reject and cancel."""

    reason = serializers.CharField(required=False, allow_blank=True, default="")


class BookingSerializer(serializers.ModelSerializer):
    """Detailed booking representation for both participants."""

    owner = PublicUserSerializer(read_only=True)
    host = PublicUserSerializer(read_only=True)
    pet_ids = serializers.PrimaryKeyRelatedField(source="pets", many=True, read_only=True)
    nights = serializers.ReadOnlyField()

    class Meta:
        model = Booking
        fields = [
            "id",
            "booking_number",
            "owner",
            "host",
            "pet_ids",
            "check_in_date",
            "check_out_date",
            "nights",
            "drop_off_time",
            "pick_up_time",
            "special_instructions",
            "emergency_permission",
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
        ]
        read_only_fields = fields
