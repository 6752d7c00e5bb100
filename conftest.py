"""Shared pytest fixtures for PetStay tests."""

from __future__ import annotations

from datetime import date

import pytest
from rest_framework.test import APIClient

from apps.bookings import services as booking_services
from apps.bookings.domain import actions
from apps.pets.models import Pet
from apps.users.models import User


@pytest.fixture
def owner(db):
    return User.objects.create_user(
        email="owner@example.com",
        password="OwnerPass123",
        first_name="Olivia",
        role=User.RoleChoices.OWNER,
    )


@pytest.fixture
def host(db):
    return User.objects.create_user(
        email="host@example.com",
        password="HostPass123",
        first_name="Harry",
        role=User.RoleChoices.HOST,
    )


@pytest.fixture
def stranger(db):
    return User.objects.create_user(
        email="stranger@example.com",
        password="StrangerPass123",
        role=User.RoleChoices.BOTH,
    )


@pytest.fixture
def pet(owner):
    return Pet.objects.create(owner=owner, name="Rex", species=Pet.Species.DOG)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def requested_booking(owner, host, pet):
    """Booking B1: 2024-06-01 to 2024-06-05, one pet, status requested."""
    return booking_services.request_booking(
        owner_id=owner.pk,
        host_id=host.pk,
        pet_ids=[pet.pk],
        check_in_date=date(2024, 6, 1),
        check_out_date=date(2024, 6, 5),
    )


@pytest.fixture
def completed_booking(requested_booking, owner, host):
    steps = (
        (actions.AcceptRequest(), host),
        (actions.ConfirmBooking(), owner),
        (actions.ConfirmDropoff(), owner),
        (actions.ConfirmReceiving(), host),
        (actions.ConfirmCompletion(), host),
        (actions.ConfirmPickup(), owner),
    )
    booking = requested_booking
    for action, actor in steps:
        booking = booking_services.apply_transition(booking.id, action, actor.pk)
    return booking
