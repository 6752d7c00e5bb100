"""FilterSet definitions for booking listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Booking


class BookingFilterSet(django_filters.FilterSet):
    """Narrow the current user's bookings by status and by their side of the booking."""

    status = django_filters.ChoiceFilter(choices=Booking.Status.choices)
    role = django_filters.ChoiceFilter(
        choices=[("owner", "Owner"), ("host", "Host")],
        method="filter_role",
    )
    check_in_from = django_filters.DateFilter(field_name="check_in_date", lookup_expr="gte")
    check_in_to = django_filters.DateFilter(field_name="check_in_date", lookup_expr="lte")

    class Meta:
        model = Booking
        fields = ["status", "role"]

    def filter_role(self, queryset, name, value):  # type: ignore
        user = getattr(self.request, "user", None)
        if user is None:
            return queryset
        if value == "owner":
            return queryset.filter(owner=user)
        return queryset.filter(host=user)
