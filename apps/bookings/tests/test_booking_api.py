"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import date, timedelta

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.notifications.models import Notification
from apps.pets.models import Pet
from apps.users.models import User


class BookingAPITests(APITestCase):
    """Covers booking requests, lifecycle endpoints and error mapping."""

    def setUp(self) -> None:
        self.owner = User.objects.create_user(
            email="owner@example.com",
            password="OwnerPass123",
            role=User.RoleChoices.OWNER,
        )
        self.host = User.objects.create_user(
            email="host@example.com",
            password="HostPass123",
            role=User.RoleChoices.HOST,
        )
        self.stranger = User.objects.create_user(
            email="stranger@example.com",
            password="StrangerPass123",
            role=User.RoleChoices.BOTH,
        )
        self.pet = Pet.objects.create(owner=self.owner, name="Rex", species=Pet.Species.DOG)
        self.client.force_authenticate(self.owner)
        self.list_url = reverse("booking-list")

    def _payload(self, **overrides) -> dict:
        check_in = date.today() + timedelta(days=7)
        payload = {
            "host_id": self.host.pk,
            "pet_ids": [self.pet.pk],
            "check_in_date": str(check_in),
            "check_out_date": str(check_in + timedelta(days=4)),
            "drop_off_time": "09:30",
            "special_instructions": "Feed twice a day",
            "emergency_permission": True,
        }
        payload.update(overrides)
        return payload

    def _create_booking(self) -> str:
        response = self.client.post(self.list_url, self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        return response.data["id"]

    def _post_action(self, user: User, booking_id: str, name: str, data: dict | None = None):
        self.client.force_authenticate(user)
        url = reverse(f"booking-{name}", args=[booking_id])
        with self.captureOnCommitCallbacks(execute=True):
            return self.client.post(url, data or {}, format="json")

    def test_owner_can_request_booking(self) -> None:
        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.post(self.list_url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["status"], "requested")
        self.assertEqual(response.data["pet_ids"], [self.pet.pk])
        booking = Booking.objects.get()
        self.assertEqual(booking.owner, self.owner)
        self.assertEqual(booking.host, self.host)
        self.assertTrue(booking.emergency_permission)
        self.assertTrue(
            Notification.objects.filter(user=self.host, type=Notification.Type.NEW_REQUEST).exists()
        )

    def test_request_with_reversed_dates_is_rejected(self) -> None:
        payload = self._payload(check_in_date="2024-06-05", check_out_date="2024-06-01")
        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Booking.objects.exists())

    def test_request_with_foreign_pet_returns_validation_code(self) -> None:
        foreign_pet = Pet.objects.create(owner=self.stranger, name="Tom")
        response = self.client.post(self.list_url, self._payload(pet_ids=[foreign_pet.pk]), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "validation_error")

    def test_list_shows_bookings_of_both_parties(self) -> None:
        booking_id = self._create_booking()

        self.client.force_authenticate(self.host)
        host_view = self.client.get(self.list_url)
        self.client.force_authenticate(self.stranger)
        stranger_view = self.client.get(self.list_url)

        self.assertEqual([b["id"] for b in host_view.data], [booking_id])
        self.assertEqual(stranger_view.data, [])

    def test_full_lifecycle_over_api(self) -> None:
        booking_id = self._create_booking()

        steps = [
            (self.host, "accept", "accepted"),
            (self.owner, "confirm", "confirmed"),
            (self.owner, "confirm-dropoff", "in_progress"),
            (self.host, "confirm-receiving", "in_progress"),
            (self.host, "confirm-completion", "in_progress"),
            (self.owner, "confirm-pickup", "completed"),
        ]
        for user, name, expected in steps:
            response = self._post_action(user, booking_id, name)
            self.assertEqual(response.status_code, status.HTTP_200_OK, (name, response.data))
            self.assertEqual(response.data["status"], expected)

        self.assertTrue(response.data["owner_confirmed_pickup"])
        self.assertIsNotNone(response.data["completed_at"])

    def test_owner_cannot_accept(self) -> None:
        booking_id = self._create_booking()

        response = self._post_action(self.owner, booking_id, "accept")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["code"], "forbidden")

    def test_non_participant_gets_forbidden(self) -> None:
        booking_id = self._create_booking()

        response = self._post_action(self.stranger, booking_id, "cancel")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_out_of_order_action_is_conflict(self) -> None:
        booking_id = self._create_booking()

        response = self._post_action(self.owner, booking_id, "confirm")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["code"], "invalid_transition")

    def test_reject_requires_reason(self) -> None:
        booking_id = self._create_booking()

        response = self._post_action(self.host, booking_id, "reject", {"reason": ""})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Booking.objects.get().status, Booking.Status.REQUESTED)

    def test_reject_with_reason(self) -> None:
        booking_id = self._create_booking()

        response = self._post_action(self.host, booking_id, "reject", {"reason": "No space"})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], "cancelled")
        self.assertEqual(response.data["rejection_reason"], "No space")

    def test_unknown_booking_is_not_found(self) -> None:
        response = self._post_action(self.host, "00000000-0000-0000-0000-000000000000", "accept")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["code"], "not_found")

    def test_requires_authentication(self) -> None:
        self.client.force_authenticate(None)
        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_stranger_rejecting_without_reason_is_forbidden(self) -> None:
        booking_id = self._create_booking()

        response = self._post_action(self.stranger, booking_id, "reject", {})

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["code"], "forbidden")

    def test_rejecting_missing_booking_without_reason_is_not_found(self) -> None:
        response = self._post_action(self.host, "00000000-0000-0000-0000-000000000000", "reject", {})

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["code"], "not_found")

    def test_cancel_notifies_the_other_party(self) -> None:
        booking_id = self._create_booking()

        response = self._post_action(self.owner, booking_id, "cancel", {"reason": "Trip moved"})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        notification = Notification.objects.get(user=self.host, type=Notification.Type.BOOKING_CANCELLED)
        self.assertIn("Trip moved", notification.message)

    def test_list_filters_by_role_and_status(self) -> None:
        booking_id = self._create_booking()
        self.client.force_authenticate(self.host)

        as_host = self.client.get(self.list_url, {"role": "host", "status": "requested"})
        as_owner = self.client.get(self.list_url, {"role": "owner"})
        accepted = self.client.get(self.list_url, {"status": "accepted"})

        self.assertEqual([b["id"] for b in as_host.data], [booking_id])
        self.assertEqual(as_owner.data, [])
        self.assertEqual(accepted.data, [])

    def test_invalid_list_filters_are_bad_request(self) -> None:
        self._create_booking()

        for params in ({"status": "bogus"}, {"role": "guest"}, {"check_in_from": "not-a-date"}):
            response = self.client.get(self.list_url, params)
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, params)
