"""Notification services.

``notify`` is the single emitter used by event handlers and reminder
tasks. It never raises: a failed notification must not fail the
operation that caused it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from .models import Notification

if TYPE_CHECKING:  # pragma: no cover
    from apps.users.models import CustomUser

logger = logging.getLogger(__name__)


def notify(
    recipient_id: int,
    type: str,
    title: str,
    message: str,
    booking_id: UUID | None = None,
) -> Notification | None:
    """
    Create an in-app notification.

    Returns the notification, or None when it could not be stored.
    """
    try:
        notification = Notification.objects.create(
            user_id=recipient_id,
            type=type,
            title=title,
            message=message,
            booking_id=booking_id,
        )
    except Exception as e:
        logger.error(
            f"Failed to create '{type}' notification for user {recipient_id}: {e}",
            exc_info=True,
        )
        return None

    logger.info(f"Notification '{type}' created for user {recipient_id}: {title}")
    return notification


def already_notified(recipient_id: int, type: str, booking_id: UUID) -> bool:
    """True if the user already got a notification of this type for the booking."""
    return Notification.objects.filter(
        user_id=recipient_id,
        type=type,
        booking_id=booking_id,
    ).exists()


def unread_count(user: "CustomUser") -> int:
    return Notification.objects.filter(user=user, is_read=False).count()


def mark_all_read(user: "CustomUser") -> int:
    """Mark every unread notification of the user as read; returns how many changed."""
    updated = Notification.objects.filter(user=user, is_read=False).update(is_read=True)
    logger.info(f"Marked {updated} notifications as read for user {user.pk}")
    return updated
