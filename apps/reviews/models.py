"""Models for the review domain.

Defines the ``Review`` entity: feedback one participant of a completed
booking leaves about the other. Each review includes a numerical
rating, a text and optional feedback specific to the reviewer's side.
One participant can leave at most one review per booking.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Review(models.Model):
    """Review left by the owner or the host of a completed booking."""

    booking = models.ForeignKey(
        'bookings.Booking', on_delete=models.CASCADE, related_name='reviews'
    )
    reviewer = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='reviews_written'
    )
    reviewee = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='reviews_received'
    )
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
        help_text=_('Rating from 1 to 5'),
    )
    review_text = models.TextField(blank=True)
    pet_behavior_feedback = models.TextField(
        blank=True,
        help_text=_('Host feedback about the pets'),
    )
    host_experience_feedback = models.TextField(
        blank=True,
        help_text=_('Owner feedback about the stay with the host'),
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['booking', 'reviewer'],
                name='review_one_per_booking_reviewer',
            ),
            models.CheckConstraint(
                condition=models.Q(rating__gte=1) & models.Q(rating__lte=5),
                name='review_rating_range',
            ),
        ]
        indexes = [
            models.Index(fields=['reviewee', '-created_at']),
        ]

    def __str__(self) -> str:
        return f"Review by {self.reviewer_id} for {self.reviewee_id} (Rating: {self.rating})"
