"""FilterSet for the notification inbox."""

from __future__ import annotations

from django_filters import rest_framework as filters  # type: ignore

from .models import Notification


class NotificationFilterSet(filters.FilterSet):
    unread = filters.BooleanFilter(method="filter_unread")
    type = filters.ChoiceFilter(choices=Notification.Type.choices)

    class Meta:
        model = Notification
        fields = ["unread", "type"]

    def filter_unread(self, queryset, name, value):  # type: ignore
        return queryset.filter(is_read=not value)
