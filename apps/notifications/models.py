"""Notification model.

Defines a simple notification entity delivered to users via the web
interface. Notifications are created by domain event handlers (new
booking request, accepted or rejected request) and by reminder tasks,
and consumed by recipients. Each notification can be marked as read.
"""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Notification(models.Model):
    """A message sent to a user about some event."""

    class Type(models.TextChoices):
        NEW_REQUEST = 'new_request', _('New booking request')
        REQUEST_ACCEPTED = 'request_accepted', _('Request accepted')
        REQUEST_REJECTED = 'request_rejected', _('Request rejected')
        BOOKING_CANCELLED = 'booking_cancelled', _('Booking cancelled')
        BOOKING_REMINDER = 'booking_reminder', _('Booking reminder')
        REVIEW_REMINDER = 'review_reminder', _('Review reminder')
        MESSAGE = 'message', _('Message')

    user = models.ForeignKey(
        'users.CustomUser', on_delete=models.CASCADE, related_name='notifications'
    )
    type = models.CharField(max_length=32, choices=Type.choices)
    title = models.CharField(max_length=255)
    message = models.TextField()
    booking = models.ForeignKey(
        'bookings.Booking',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='notifications',
    )
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'is_read']),
            models.Index(fields=['user', 'booking', 'type']),
        ]

    def __str__(self) -> str:
        return f"Notification to {self.user_id}: {self.title}"
