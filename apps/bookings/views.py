"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .domain.actions import build_action
from .filters import BookingFilterSet
from .models import Booking
from .serializers import BookingCreateSerializer, BookingSerializer, TransitionReasonSerializer
from .services import apply_transition, bookings_for_user, request_booking


class BookingViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet,
):
    """Booking requests and their lifecycle.

    Transition endpoints only pass the actor and the action to the
    lifecycle controller; authorisation and state checks happen there so
    that a non-participant gets 403 rather than 404.
    """

    permission_classes = [permissions.IsAuthenticated]
    filterset_class = BookingFilterSet

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BookingCreateSerializer
        if self.action in ("reject", "cancel"):
            return TransitionReasonSerializer
        return BookingSerializer

    def get_queryset(self):  # type: ignore
        return bookings_for_user(self.request.user)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = request_booking(owner_id=request.user.pk, **serializer.validated_data)
        return self._booking_response(booking.id, status.HTTP_201_CREATED)

    def _booking_response(self, booking_id, status_code=status.HTTP_200_OK):
        booking = Booking.objects.select_related("owner", "host").prefetch_related("pets").get(pk=booking_id)
        data = BookingSerializer(booking, context=self.get_serializer_context()).data
        return Response(data, status=status_code)

    def _transition(self, request, pk, name: str):
        serializer = TransitionReasonSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking_action = build_action(name, serializer.validated_data["reason"])
        booking = apply_transition(pk, booking_action, request.user.pk)
        return self._booking_response(booking.id)

    @action(detail=True, methods=["post"])
    def accept(self, request, pk=None):  # type: ignore
        return self._transition(request, pk, "accept")

    @action(detail=True, methods=["post"])
    def reject(self, request, pk=None):  # type: ignore
        return self._transition(request, pk, "reject")

    @action(detail=True, methods=["post"])
    def confirm(self, request, pk=None):  # type: ignore
        return self._transition(request, pk, "confirm")

    @action(detail=True, methods=["post"], url_path="confirm-dropoff")
    def confirm_dropoff(self, request, pk=None):  # type: ignore
        return self._transition(request, pk, "confirm-dropoff")

    @action(detail=True, methods=["post"], url_path="confirm-receiving")
    def confirm_receiving(self, request, pk=None):  # type: ignore
        return self._transition(request, pk, "confirm-receiving")

    @action(detail=True, methods=["post"], url_path="confirm-completion")
    def confirm_completion(self, request, pk=None):  # type: ignore
        return self._transition(request, pk, "confirm-completion")

    @action(detail=True, methods=["post"], url_path="confirm-pickup")
    def confirm_pickup(self, request, pk=None):  # type: ignore
        return self._transition(request, pk, "confirm-pickup")

    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):  # type: ignore
        return self._transition(request, pk, "cancel")
