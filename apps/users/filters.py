"""FilterSet definitions for the host directory."""

from __future__ import annotations

import django_filters  # type: ignore
from django.contrib.auth import get_user_model  # type: ignore
from django.db.models import Exists, OuterRef, Q  # type: ignore

User = get_user_model()


class HostFilterSet(django_filters.FilterSet):
    """Search hosts by place, name, own pets and availability."""

    city = django_filters.CharFilter(field_name="city", lookup_expr="icontains")
    area = django_filters.CharFilter(field_name="area", lookup_expr="icontains")
    search = django_filters.CharFilter(method="filter_search")
    has_pets = django_filters.BooleanFilter(method="filter_has_pets")
    # Relative to the requesting user's own city and area
    location = django_filters.ChoiceFilter(
        choices=[("same_city", "Same city"), ("same_area", "Same area")],
        method="filter_location",
    )
    available_on = django_filters.DateFilter(method="filter_available_on")

    class Meta:
        model = User
        fields = ["city", "area"]

    def filter_search(self, queryset, name, value):  # type: ignore
        value = value.strip()
        if not value:
            return queryset
        query = (
            Q(city__icontains=value)
            | Q(area__icontains=value)
            | Q(first_name__icontains=value)
            | Q(last_name__icontains=value)
            | Q(username__icontains=value)
        )
        return queryset.filter(query)

    def filter_has_pets(self, queryset, name, value):  # type: ignore
        from apps.pets.models import Pet

        owns_pets = Exists(Pet.objects.filter(owner=OuterRef("pk")))
        return queryset.filter(owns_pets if value else ~owns_pets)

    def filter_location(self, queryset, name, value):  # type: ignore
        user = getattr(self.request, "user", None)
        if user is None or not user.city:
            return queryset.none()
        queryset = queryset.filter(city__iexact=user.city)
        if value == "same_area":
            queryset = queryset.filter(area__iexact=user.area)
        return queryset

    def filter_available_on(self, queryset, name, value):  # type: ignore
        from apps.availability.models import HostAvailability

        windows = HostAvailability.objects.filter(
            host=OuterRef("pk"),
            available_from__lte=value,
            available_to__gte=value,
        )
        return queryset.filter(Exists(windows))
