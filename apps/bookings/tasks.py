"""Celery tasks for the booking domain."""

from __future__ import annotations

import logging
from datetime import timedelta

from celery import shared_task  # type: ignore
from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore

from apps.notifications.models import Notification
from apps.notifications.services import already_notified, notify

from .models import Booking

logger = logging.getLogger(__name__)


# ============================================================================
# PERIODIC TASKS (run by Celery Beat)
# ============================================================================

@shared_task(name="bookings.send_upcoming_booking_reminders")
def send_upcoming_booking_reminders() -> dict[str, int]:
    """
    Remind both parties of a confirmed stay that starts soon.

    Looks at confirmed bookings whose check-in falls within
    ``BOOKING_REMINDER_DAYS_AHEAD`` days. Each participant gets at most
    one reminder per booking.

    Returns:
        dict: {"sent": number of reminders created}
    """
    today = timezone.localdate()
    horizon = today + timedelta(days=settings.BOOKING_REMINDER_DAYS_AHEAD)
    sent_count = 0

    upcoming_bookings = Booking.objects.filter(
        status=Booking.Status.CONFIRMED,
        check_in_date__gte=today,
        check_in_date__lte=horizon,
    ).select_related("owner", "host")

    for booking in upcoming_bookings:
        when = booking.check_in_date.strftime("%d %b %Y")
        reminders = (
            (booking.owner_id, f"Drop-off with {booking.host.display_name} is on {when}."),
            (booking.host_id, f"{booking.owner.display_name} will drop off their pets on {when}."),
        )
        for recipient_id, message in reminders:
            if already_notified(recipient_id, Notification.Type.BOOKING_REMINDER, booking.id):
                continue
            if notify(
                recipient_id,
                Notification.Type.BOOKING_REMINDER,
                "Upcoming Booking",
                message,
                booking_id=booking.id,
            ):
                sent_count += 1

    if sent_count > 0:
        logger.info(f"Sent {sent_count} booking reminders")

    return {"sent": sent_count}
