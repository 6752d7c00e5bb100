"""Coupon issuance on booking completion."""

import logging

from apps.bookings.domain.events import BookingCompleted
from shared.application.message_bus import message_bus

from .services import issue_coupon_for_booking

logger = logging.getLogger(__name__)


def issue_coupon_on_completion(event: BookingCompleted):
    issue_coupon_for_booking(event.booking_id)


def register():
    message_bus.register_event_handler(BookingCompleted, issue_coupon_on_completion)
    logger.debug("Coupon handlers registered")
