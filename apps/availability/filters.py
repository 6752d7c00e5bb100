"""FilterSet definitions for availability windows."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import HostAvailability


class HostAvailabilityFilterSet(django_filters.FilterSet):
    """``start``/``end`` keep windows that overlap the given range."""

    host = django_filters.NumberFilter(field_name="host_id")
    start = django_filters.DateFilter(field_name="available_to", lookup_expr="gte")
    end = django_filters.DateFilter(field_name="available_from", lookup_expr="lte")
    pets = django_filters.NumberFilter(field_name="max_pets", lookup_expr="gte")

    class Meta:
        model = HostAvailability
        fields = ["host"]
