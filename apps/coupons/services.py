"""Coupon issuance.

Each completed booking earns its host one coupon. The category cycles
through pet food, accessories and general by the position of the
booking among the host's completed bookings.
"""

from __future__ import annotations

import calendar
import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, NamedTuple
from uuid import UUID

from django.conf import settings  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore
from django.utils import timezone  # type: ignore

from .models import Coupon

logger = logging.getLogger(__name__)

MAX_CODE_ATTEMPTS = 5


class CouponKind(NamedTuple):
    category: str
    prefix: str
    discount_percent: int
    description: str


COUPON_KINDS = (
    CouponKind(Coupon.Category.PET_FOOD, 'PF', 15, 'Get 15% off on premium pet food'),
    CouponKind(Coupon.Category.ACCESSORIES, 'ACC', 20, 'Get 20% off on pet accessories'),
    CouponKind(Coupon.Category.GENERAL, 'GEN', 10, 'Get 10% off on all pet products'),
)


@dataclass(frozen=True)
class DerivedCoupon:
    """Coupon computed from a completed booking, not yet stored."""

    code: str
    category: str
    discount_percent: int
    description: str
    booking_id: UUID
    booking_number: str
    earned_at: datetime
    expires_at: datetime
    is_expired: bool


def add_months(moment: datetime, months: int) -> datetime:
    """Shift by calendar months; the day is clamped to the end of the target month."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def kind_for_index(index: int) -> CouponKind:
    return COUPON_KINDS[index % len(COUPON_KINDS)]


def generate_code(booking_id: UUID, kind: CouponKind) -> str:
    """``<PF|ACC|GEN>-<first 8 chars of the booking id>-<3 random digits>``"""
    short_id = str(booking_id)[:8].upper()
    return f"{kind.prefix}-{short_id}-{random.randint(0, 999):03d}"


def derive_coupons(bookings: Iterable, now: datetime | None = None) -> list[DerivedCoupon]:
    """
    Compute coupons for a host's bookings without touching the database.

    Only completed bookings count; the category index is the position
    among them in the given order. Bookings need ``id``,
    ``booking_number``, ``status`` and ``completed_at`` (or
    ``updated_at``).
    """
    now = now or timezone.now()
    months = settings.COUPON_VALIDITY_MONTHS
    coupons = []
    completed = [b for b in bookings if getattr(b.status, 'value', b.status) == 'completed']
    for index, booking in enumerate(completed):
        kind = kind_for_index(index)
        earned_at = getattr(booking, 'completed_at', None) or booking.updated_at
        expires_at = add_months(earned_at, months)
        coupons.append(DerivedCoupon(
            code=generate_code(booking.id, kind),
            category=str(kind.category),
            discount_percent=kind.discount_percent,
            description=kind.description,
            booking_id=booking.id,
            booking_number=booking.booking_number,
            earned_at=earned_at,
            expires_at=expires_at,
            is_expired=expires_at <= now,
        ))
    return coupons


def issue_coupon_for_booking(booking_id: UUID) -> Coupon | None:
    """
    Store the coupon earned by a completed booking.

    Idempotent: an existing coupon for the booking is returned as is.
    Returns None if the booking is missing or not completed. A code that
    collides with another coupon is regenerated.
    """
    from apps.bookings.models import Booking

    existing = Coupon.objects.filter(booking_id=booking_id).first()
    if existing:
        return existing

    booking = Booking.objects.filter(pk=booking_id, status=Booking.Status.COMPLETED).first()
    if booking is None:
        logger.warning(f"Not issuing coupon: booking {booking_id} is missing or not completed")
        return None

    kind = kind_for_index(Coupon.objects.filter(host_id=booking.host_id).count())
    earned_at = booking.completed_at or timezone.now()
    expires_at = add_months(earned_at, settings.COUPON_VALIDITY_MONTHS)

    for attempt in range(1, MAX_CODE_ATTEMPTS + 1):
        code = generate_code(booking.id, kind)
        try:
            with transaction.atomic():
                coupon = Coupon.objects.create(
                    code=code,
                    category=kind.category,
                    discount_percent=kind.discount_percent,
                    description=kind.description,
                    host_id=booking.host_id,
                    booking=booking,
                    earned_at=earned_at,
                    expires_at=expires_at,
                )
        except IntegrityError:
            # Concurrent issuance for the same booking
            existing = Coupon.objects.filter(booking_id=booking_id).first()
            if existing:
                return existing
            if not Coupon.objects.filter(code=code).exists():
                raise
            logger.warning(f"Coupon code {code} already taken (attempt {attempt}), generating another")
            continue

        logger.info(f"Issued coupon {coupon.code} to host {booking.host_id} for booking {booking.booking_number}")
        return coupon

    raise IntegrityError(f"Could not generate a unique coupon code for booking {booking.booking_number}")
