"""Review eligibility gate.

Reviews unlock only when a booking is completed. Each participant may
review the other side exactly once; a review never changes the booking.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore
from django.db.models import Avg, Count  # type: ignore

from apps.bookings.models import Booking
from shared.domain.exceptions import DuplicateReview, Forbidden, InvalidRating, InvalidTransition, NotFound

from .models import Review

logger = logging.getLogger(__name__)

RATING_VALUES = range(1, 6)


def _get_booking(booking_id: UUID) -> Booking | None:
    try:
        return Booking.objects.get(pk=booking_id)
    except (Booking.DoesNotExist, ValueError, DjangoValidationError):
        return None


def can_review(booking_id: UUID, reviewer_id: int) -> bool:
    """True iff the booking is completed, the reviewer took part and has not reviewed yet."""
    booking = _get_booking(booking_id)
    if booking is None:
        return False
    if reviewer_id not in (booking.owner_id, booking.host_id):
        return False
    if booking.status != Booking.Status.COMPLETED:
        return False
    return not Review.objects.filter(booking=booking, reviewer_id=reviewer_id).exists()


def _validate_rating(rating) -> int:
    if isinstance(rating, bool) or not isinstance(rating, int) or rating not in RATING_VALUES:
        raise InvalidRating(f"Rating must be an integer between 1 and 5, got {rating!r}.")
    return rating


def submit_review(
    booking_id: UUID,
    reviewer_id: int,
    rating,
    review_text: str = '',
    *,
    pet_behavior_feedback: str = '',
    host_experience_feedback: str = '',
) -> Review:
    """
    Store a review of the counterparty.

    Raises NotFound, Forbidden, InvalidRating, InvalidTransition or
    DuplicateReview, checked in that order.
    """
    booking = _get_booking(booking_id)
    if booking is None:
        raise NotFound(f"Booking {booking_id} not found.")
    if reviewer_id not in (booking.owner_id, booking.host_id):
        raise Forbidden("Only participants of the booking can review it.")
    rating = _validate_rating(rating)
    if booking.status != Booking.Status.COMPLETED:
        raise InvalidTransition(
            f"Reviews are only possible for completed bookings (current: {booking.status})."
        )
    if Review.objects.filter(booking=booking, reviewer_id=reviewer_id).exists():
        raise DuplicateReview("You have already reviewed this booking.")

    reviewee_id = booking.host_id if reviewer_id == booking.owner_id else booking.owner_id

    try:
        with transaction.atomic():
            review = Review.objects.create(
                booking=booking,
                reviewer_id=reviewer_id,
                reviewee_id=reviewee_id,
                rating=rating,
                review_text=review_text or '',
                pet_behavior_feedback=pet_behavior_feedback or '',
                host_experience_feedback=host_experience_feedback or '',
            )
    except IntegrityError:
        # Lost a race against a concurrent submission by the same reviewer
        raise DuplicateReview("You have already reviewed this booking.")

    logger.info(
        f"Review {review.pk} stored for booking {booking.booking_number}: "
        f"{reviewer_id} -> {reviewee_id}, rating {rating}"
    )
    return review


def rating_summary(user_id: int) -> dict:
    """Average rating, count and per-star breakdown of reviews received by the user."""
    reviews = Review.objects.filter(reviewee_id=user_id)
    aggregate = reviews.aggregate(average=Avg('rating'), count=Count('id'))

    breakdown = {value: 0 for value in RATING_VALUES}
    for row in reviews.order_by().values('rating').annotate(total=Count('id')):
        breakdown[row['rating']] = row['total']

    average = aggregate['average'] or 0
    average = float(Decimal(str(average)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))
    return {
        'user_id': user_id,
        'average_rating': average,
        'review_count': aggregate['count'],
        'breakdown': breakdown,
    }
