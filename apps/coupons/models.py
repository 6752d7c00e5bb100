"""Coupon model."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Coupon(models.Model):
    """Discount coupon earned by a host for a completed booking."""

    class Category(models.TextChoices):
        PET_FOOD = 'pet_food', _('Pet food')
        ACCESSORIES = 'accessories', _('Accessories')
        GENERAL = 'general', _('General')

    code = models.CharField(max_length=32, unique=True)
    category = models.CharField(max_length=20, choices=Category.choices)
    discount_percent = models.PositiveSmallIntegerField()
    description = models.CharField(max_length=255)
    host = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='coupons'
    )
    booking = models.OneToOneField(
        'bookings.Booking', on_delete=models.CASCADE, related_name='coupon'
    )
    earned_at = models.DateTimeField()
    expires_at = models.DateTimeField()
    is_used = models.BooleanField(default=False)

    class Meta:
        ordering = ['-earned_at']
        indexes = [models.Index(fields=['host', '-earned_at'])]

    def __str__(self) -> str:
        return f"{self.code} ({self.discount_percent}% {self.category})"

    @property
    def is_expired(self) -> bool:
        return self.expires_at <= timezone.now()

    @property
    def is_active(self) -> bool:
        return not self.is_used and not self.is_expired
