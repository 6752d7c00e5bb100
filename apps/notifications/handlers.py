"""
Booking event handlers producing notifications

Registered on the message bus by ``NotificationsConfig.ready``. Each
handler runs after the booking transaction has committed.
"""

import logging

from apps.bookings.domain.events import (
    BookingAccepted,
    BookingCancelled,
    BookingRejected,
    BookingRequested,
)
from shared.application.message_bus import message_bus

from .models import Notification
from .services import notify

logger = logging.getLogger(__name__)


def notify_host_of_request(event: BookingRequested):
    notify(
        event.host_id,
        Notification.Type.NEW_REQUEST,
        "New Booking Request",
        f"You have a new booking request {event.booking_number} "
        f"for {event.check_in_date:%d %b %Y} - {event.check_out_date:%d %b %Y}.",
        booking_id=event.booking_id,
    )


def notify_owner_of_acceptance(event: BookingAccepted):
    notify(
        event.owner_id,
        Notification.Type.REQUEST_ACCEPTED,
        "Booking Accepted",
        f"Your booking request {event.booking_number} has been accepted. "
        f"Please confirm the booking.",
        booking_id=event.booking_id,
    )


def notify_owner_of_rejection(event: BookingRejected):
    notify(
        event.owner_id,
        Notification.Type.REQUEST_REJECTED,
        "Booking Rejected",
        f"Your booking request {event.booking_number} has been declined. Reason: {event.reason}",
        booking_id=event.booking_id,
    )


def notify_counterparty_of_cancellation(event: BookingCancelled):
    message = f"Booking {event.booking_number} has been cancelled by the other party."
    if event.reason:
        message = f"{message} Reason: {event.reason}"
    notify(
        event.recipient_id,
        Notification.Type.BOOKING_CANCELLED,
        "Booking Cancelled",
        message,
        booking_id=event.booking_id,
    )


def register():
    message_bus.register_event_handler(BookingRequested, notify_host_of_request)
    message_bus.register_event_handler(BookingAccepted, notify_owner_of_acceptance)
    message_bus.register_event_handler(BookingRejected, notify_owner_of_rejection)
    message_bus.register_event_handler(BookingCancelled, notify_counterparty_of_cancellation)
    logger.debug("Notification handlers registered")
