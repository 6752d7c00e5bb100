"""API tests for the host directory."""

from __future__ import annotations

from datetime import date

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.availability.models import HostAvailability
from apps.bookings import services as booking_services
from apps.pets.models import Pet
from apps.reviews.models import Review
from apps.users.models import User


class HostDirectoryAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(
            email="owner@example.com",
            password="pass12345",
            city="Almaty",
            area="Medeu",
        )
        self.near = User.objects.create_user(
            email="near@example.com",
            password="pass12345",
            role=User.RoleChoices.HOST,
            first_name="Aigerim",
            last_name="Sadykova",
            city="Almaty",
            area="Medeu",
        )
        self.same_city = User.objects.create_user(
            email="city@example.com",
            password="pass12345",
            role=User.RoleChoices.BOTH,
            first_name="Dana",
            city="almaty",
            area="Bostandyk",
        )
        self.far = User.objects.create_user(
            email="far@example.com",
            password="pass12345",
            role=User.RoleChoices.HOST,
            first_name="Marat",
            city="Astana",
            area="Yesil",
        )
        User.objects.create_user(
            email="inactive@example.com",
            password="pass12345",
            role=User.RoleChoices.HOST,
            is_active=False,
        )
        self.url = reverse("host-list")
        self.client.force_authenticate(self.owner)

    def _ids(self, params: dict | None = None) -> list[int]:
        response = self.client.get(self.url, params or {})
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        return [item["id"] for item in response.data]

    def test_lists_active_hosts_only(self) -> None:
        self.assertCountEqual(self._ids(), [self.near.pk, self.same_city.pk, self.far.pk])

    def test_excludes_the_requesting_host(self) -> None:
        self.client.force_authenticate(self.same_city)
        self.assertCountEqual(self._ids(), [self.near.pk, self.far.pk])

    def test_city_and_area_filters_are_case_insensitive(self) -> None:
        self.assertCountEqual(self._ids({"city": "ALMA"}), [self.near.pk, self.same_city.pk])
        self.assertEqual(self._ids({"area": "yes"}), [self.far.pk])

    def test_search_matches_place_and_name(self) -> None:
        self.assertEqual(self._ids({"search": "sadyk"}), [self.near.pk])
        self.assertEqual(self._ids({"search": "astana"}), [self.far.pk])

    def test_location_relative_to_the_requesting_user(self) -> None:
        self.assertCountEqual(self._ids({"location": "same_city"}), [self.near.pk, self.same_city.pk])
        self.assertEqual(self._ids({"location": "same_area"}), [self.near.pk])

    def test_has_pets_filter(self) -> None:
        Pet.objects.create(owner=self.far, name="Bars")
        Pet.objects.create(owner=self.far, name="Tuzik")

        self.assertEqual(self._ids({"has_pets": "true"}), [self.far.pk])
        self.assertCountEqual(self._ids({"has_pets": "false"}), [self.near.pk, self.same_city.pk])

    def test_available_on_filter(self) -> None:
        HostAvailability.objects.create(
            host=self.near, available_from=date(2024, 6, 1), available_to=date(2024, 6, 10)
        )
        HostAvailability.objects.create(
            host=self.near, available_from=date(2024, 6, 5), available_to=date(2024, 6, 20), max_pets=2
        )

        self.assertEqual(self._ids({"available_on": "2024-06-06"}), [self.near.pk])
        self.assertEqual(self._ids({"available_on": "2024-07-01"}), [])

    def test_rating_summary_in_listing(self) -> None:
        pet = Pet.objects.create(owner=self.owner, name="Rex")
        for check_in, rating in ((date(2024, 6, 1), 4), (date(2024, 7, 1), 5)):
            booking = booking_services.request_booking(
                owner_id=self.owner.pk,
                host_id=self.far.pk,
                pet_ids=[pet.pk],
                check_in_date=check_in,
                check_out_date=check_in,
            )
            Review.objects.create(booking_id=booking.id, reviewer=self.owner, reviewee=self.far, rating=rating)

        response = self.client.get(self.url)

        self.assertEqual(response.data[0]["id"], self.far.pk)
        self.assertEqual(response.data[0]["average_rating"], 4.5)
        self.assertEqual(response.data[0]["review_count"], 2)
        unrated = next(item for item in response.data if item["id"] == self.near.pk)
        self.assertIsNone(unrated["average_rating"])
        self.assertEqual(unrated["review_count"], 0)

    def test_invalid_filters_are_bad_request(self) -> None:
        for params in ({"location": "nearby"}, {"available_on": "soon"}):
            response = self.client.get(self.url, params)
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, params)

    def test_retrieve_host_card(self) -> None:
        response = self.client.get(reverse("host-detail", args=[self.near.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["city"], "Almaty")

    def test_owner_only_account_is_not_in_directory(self) -> None:
        self.client.force_authenticate(self.near)
        response = self.client.get(reverse("host-detail", args=[self.owner.pk]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
