"""Host availability windows."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class HostAvailability(models.Model):
    """A date range in which a host accepts up to ``max_pets`` pets."""

    host = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="availability_windows",
    )
    available_from = models.DateField()
    available_to = models.DateField()
    max_pets = models.PositiveSmallIntegerField(default=1, validators=[MinValueValidator(1)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Availability window")
        verbose_name_plural = _("Availability windows")
        ordering = ["available_from"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(available_to__gte=models.F("available_from")),
                name="availability_valid_range",
            ),
            models.CheckConstraint(
                condition=models.Q(max_pets__gte=1),
                name="availability_max_pets_positive",
            ),
        ]
        indexes = [models.Index(fields=["host", "available_from", "available_to"])]

    def __str__(self) -> str:
        return f"{self.host_id}: {self.available_from} - {self.available_to} (max {self.max_pets})"
