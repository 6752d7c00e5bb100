"""API views for host availability windows."""

from __future__ import annotations

from datetime import date

from django.db import models  # type: ignore
from rest_framework import permissions, serializers, viewsets  # type: ignore

from .filters import HostAvailabilityFilterSet
from .models import HostAvailability
from .serializers import HostAvailabilitySerializer


class IsHostAccount(permissions.BasePermission):
    """Reading is open to signed-in users; writing needs host mode."""

    message = "Enable host mode in your profile to manage availability."

    def has_permission(self, request, view):  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        return request.user.is_host()


class HostAvailabilityViewSet(viewsets.ModelViewSet):
    """Hosts manage their own windows; ``?host=<id>`` lists another host's."""

    serializer_class = HostAvailabilitySerializer
    permission_classes = [permissions.IsAuthenticated, IsHostAccount]
    filterset_class = HostAvailabilityFilterSet

    def get_queryset(self):  # type: ignore
        qs = HostAvailability.objects.select_related("host")
        if self.request.method in permissions.SAFE_METHODS and self.request.query_params.get("host"):
            return qs
        return qs.filter(host=self.request.user)

    def _validate_overlap(self, start: date, end: date, exclude_id: int | None = None) -> None:
        qs = HostAvailability.objects.filter(
            host=self.request.user,
            available_from__lte=end,
            available_to__gte=start,
        )
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        if qs.exists():
            raise serializers.ValidationError(
                "These dates overlap with another of your availability windows."
            )

    def perform_create(self, serializer):  # type: ignore
        self._validate_overlap(
            serializer.validated_data["available_from"],
            serializer.validated_data["available_to"],
        )
        serializer.save(host=self.request.user)

    def perform_update(self, serializer):  # type: ignore
        instance: HostAvailability = serializer.instance
        self._validate_overlap(
            serializer.validated_data.get("available_from", instance.available_from),
            serializer.validated_data.get("available_to", instance.available_to),
            exclude_id=instance.id,
        )
        serializer.save()
