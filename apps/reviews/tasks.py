"""Celery tasks for the review domain."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore

from apps.bookings.models import Booking
from apps.notifications.models import Notification
from apps.notifications.services import already_notified, notify

from .models import Review

logger = logging.getLogger(__name__)


@shared_task(name="reviews.send_review_reminders")
def send_review_reminders() -> dict[str, int]:
    """
    Ask participants of completed bookings to leave a review.

    A participant who has already reviewed the booking, or who was
    already reminded, is skipped.

    Returns:
        dict: {"sent": number of reminders created}
    """
    sent_count = 0
    completed = Booking.objects.filter(status=Booking.Status.COMPLETED).select_related("owner", "host")

    for booking in completed:
        reviewed_by = set(
            Review.objects.filter(booking=booking).values_list("reviewer_id", flat=True)
        )
        reminders = (
            (booking.owner_id, booking.host.display_name),
            (booking.host_id, booking.owner.display_name),
        )
        for recipient_id, counterparty in reminders:
            if recipient_id in reviewed_by:
                continue
            if already_notified(recipient_id, Notification.Type.REVIEW_REMINDER, booking.id):
                continue
            if notify(
                recipient_id,
                Notification.Type.REVIEW_REMINDER,
                "Leave a Review",
                f"How was booking {booking.booking_number}? Share your experience with {counterparty}.",
                booking_id=booking.id,
            ):
                sent_count += 1

    if sent_count > 0:
        logger.info(f"Sent {sent_count} review reminders")

    return {"sent": sent_count}
