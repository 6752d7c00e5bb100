"""Pet records owned by platform users."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Pet(models.Model):
    """A pet that can be included in booking requests by its owner."""

    class Species(models.TextChoices):
        DOG = "dog", _("Dog")
        CAT = "cat", _("Cat")
        BIRD = "bird", _("Bird")
        RABBIT = "rabbit", _("Rabbit")
        OTHER = "other", _("Other")

    class Gender(models.TextChoices):
        MALE = "male", _("Male")
        FEMALE = "female", _("Female")

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="pets",
    )
    name = models.CharField(max_length=100)
    species = models.CharField(max_length=20, choices=Species.choices, default=Species.DOG)
    breed = models.CharField(max_length=100, blank=True)
    age_years = models.PositiveSmallIntegerField(null=True, blank=True)
    age_months = models.PositiveSmallIntegerField(null=True, blank=True)
    gender = models.CharField(max_length=10, choices=Gender.choices, blank=True)
    weight_kg = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0"))],
    )
    is_vaccinated = models.BooleanField(default=False)
    is_neutered = models.BooleanField(default=False)
    friendly_with_pets = models.BooleanField(default=True)
    friendly_with_humans = models.BooleanField(default=True)
    medical_conditions = models.TextField(blank=True)
    medicines = models.TextField(blank=True)
    food_type = models.CharField(max_length=100, blank=True)
    feeding_schedule = models.CharField(max_length=255, blank=True)
    walking_schedule = models.CharField(max_length=255, blank=True)
    special_instructions = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Pet")
        verbose_name_plural = _("Pets")
        ordering = ["name"]
        indexes = [models.Index(fields=["owner"])]

    def __str__(self) -> str:
        return f"{self.name} ({self.get_species_display()})"
