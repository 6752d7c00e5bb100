"""FilterSet definitions for review listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Review


class ReviewFilterSet(django_filters.FilterSet):
    """``user`` selects reviews a user received; ``rating`` filters by stars."""

    user = django_filters.NumberFilter(field_name="reviewee_id", lookup_expr="exact")
    booking = django_filters.UUIDFilter(field_name="booking_id", lookup_expr="exact")
    rating = django_filters.NumberFilter(field_name="rating", lookup_expr="exact")
    rating_min = django_filters.NumberFilter(field_name="rating", lookup_expr="gte")

    class Meta:
        model = Review
        fields = ["user", "booking", "rating"]
