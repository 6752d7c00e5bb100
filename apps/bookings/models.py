"""Booking persistence models for PetStay."""

from __future__ import annotations

import uuid

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Booking(models.Model):
    """A pet stay requested by an owner from a host.

    State changes go through ``apps.bookings.services.apply_transition``;
    the row itself is only written by the booking repository.
    """

    class Status(models.TextChoices):
        REQUESTED = "requested", _("Requested")
        ACCEPTED = "accepted", _("Accepted")
        CONFIRMED = "confirmed", _("Confirmed")
        IN_PROGRESS = "in_progress", _("In progress")
        COMPLETED = "completed", _("Completed")
        CANCELLED = "cancelled", _("Cancelled")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    booking_number = models.CharField(max_length=32, unique=True, editable=False)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="owner_bookings",
    )
    host = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="host_bookings",
    )
    pets = models.ManyToManyField("pets.Pet", related_name="bookings")
    check_in_date = models.DateField()
    check_out_date = models.DateField()
    drop_off_time = models.TimeField(null=True, blank=True)
    pick_up_time = models.TimeField(null=True, blank=True)
    special_instructions = models.TextField(blank=True)
    emergency_permission = models.BooleanField(
        default=False,
        help_text=_("Host may seek veterinary care in an emergency."),
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.REQUESTED,
    )
    rejection_reason = models.TextField(blank=True)
    cancellation_reason = models.TextField(blank=True)
    cancelled_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    owner_confirmed_dropoff = models.BooleanField(default=False)
    host_confirmed_receiving = models.BooleanField(default=False)
    host_confirmed_completion = models.BooleanField(default=False)
    owner_confirmed_pickup = models.BooleanField(default=False)
    completed_at = models.DateTimeField(null=True, blank=True)
    version = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(check_out_date__gte=models.F("check_in_date")),
                name="booking_valid_dates",
            ),
            models.CheckConstraint(
                condition=~models.Q(owner=models.F("host")),
                name="booking_owner_not_host",
            ),
        ]
        indexes = [
            models.Index(fields=["owner", "status"]),
            models.Index(fields=["host", "status"]),
            models.Index(fields=["status", "check_in_date"]),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.booking_number} ({self.status})"

    @property
    def nights(self) -> int:
        return (self.check_out_date - self.check_in_date).days

    def is_participant(self, user) -> bool:
        return user.pk in (self.owner_id, self.host_id)
