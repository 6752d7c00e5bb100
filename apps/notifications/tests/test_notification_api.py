"""API tests for notifications."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.notifications.models import Notification
from apps.notifications.services import notify
from apps.users.models import User


class NotificationAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(email="user@example.com", password="pass12345")
        self.other = User.objects.create_user(email="other@example.com", password="pass12345")
        self.first = notify(self.user.pk, Notification.Type.MESSAGE, "Hello", "First")
        self.second = notify(self.user.pk, Notification.Type.MESSAGE, "Hello", "Second")
        notify(self.other.pk, Notification.Type.MESSAGE, "Hello", "Not yours")
        self.client.force_authenticate(self.user)

    def test_list_shows_only_own_notifications(self) -> None:
        response = self.client.get(reverse("notification-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual({n["message"] for n in response.data}, {"First", "Second"})

    def test_mark_read(self) -> None:
        response = self.client.post(reverse("notification-mark-read", args=[self.first.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.first.refresh_from_db()
        self.assertTrue(self.first.is_read)

    def test_cannot_mark_someone_elses_notification(self) -> None:
        foreign = Notification.objects.get(user=self.other)
        response = self.client.post(reverse("notification-mark-read", args=[foreign.pk]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        foreign.refresh_from_db()
        self.assertFalse(foreign.is_read)

    def test_unread_count_and_mark_all_read(self) -> None:
        count_url = reverse("notification-unread-count")
        self.assertEqual(self.client.get(count_url).data["unread_count"], 2)

        response = self.client.post(reverse("notification-mark-all-read"))

        self.assertEqual(response.data["updated"], 2)
        self.assertEqual(self.client.get(count_url).data["unread_count"], 0)
        self.assertEqual(Notification.objects.filter(user=self.other, is_read=False).count(), 1)

    def test_unread_filter(self) -> None:
        self.client.post(reverse("notification-mark-read", args=[self.first.pk]))

        response = self.client.get(reverse("notification-list"), {"unread": "true"})

        self.assertEqual([n["id"] for n in response.data], [self.second.pk])

    def test_read_filter_and_type_filter(self) -> None:
        self.client.post(reverse("notification-mark-read", args=[self.first.pk]))

        read = self.client.get(reverse("notification-list"), {"unread": "false"})
        by_type = self.client.get(reverse("notification-list"), {"type": Notification.Type.NEW_REQUEST})

        self.assertEqual([n["id"] for n in read.data], [self.first.pk])
        self.assertEqual(by_type.data, [])

    def test_unknown_type_is_bad_request(self) -> None:
        response = self.client.get(reverse("notification-list"), {"type": "nonsense"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
