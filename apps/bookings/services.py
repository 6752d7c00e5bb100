"""Service functions for booking workflows.

Views, tasks and other apps go through these functions rather than
instantiating the command handlers themselves.
"""

from __future__ import annotations

from typing import Iterable, TYPE_CHECKING
from uuid import UUID

from django.db.models import Q  # type: ignore

from .application.command_handlers import (
    BookingLifecycleController,
    RequestBookingCommand,
    RequestBookingHandler,
)
from .domain.actions import BookingAction
from .repositories import DjangoBookingRepository

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .domain.entities import Booking as BookingEntity


def request_booking(
    *,
    owner_id: int,
    host_id: int,
    pet_ids: Iterable[int],
    check_in_date,
    check_out_date,
    drop_off_time=None,
    pick_up_time=None,
    special_instructions: str = "",
    emergency_permission: bool = False,
) -> "BookingEntity":
    """Create a booking in ``requested``; the host is notified after commit."""

    command = RequestBookingCommand(
        owner_id=owner_id,
        host_id=host_id,
        pet_ids=frozenset(pet_ids),
        check_in_date=check_in_date,
        check_out_date=check_out_date,
        drop_off_time=drop_off_time,
        pick_up_time=pick_up_time,
        special_instructions=special_instructions,
        emergency_permission=emergency_permission,
    )
    return RequestBookingHandler(DjangoBookingRepository()).handle(command)


def apply_transition(booking_id: UUID, action: BookingAction, actor_id: int) -> "BookingEntity":
    """Run one lifecycle action on behalf of ``actor_id``."""

    return BookingLifecycleController(DjangoBookingRepository()).apply_transition(
        booking_id, action, actor_id
    )


def bookings_for_user(user, *, role: str | None = None):
    """Bookings where the user is the owner, the host, or either."""

    from .models import Booking

    qs = Booking.objects.select_related("owner", "host").prefetch_related("pets")
    if role == "owner":
        return qs.filter(owner=user)
    if role == "host":
        return qs.filter(host=user)
    return qs.filter(Q(owner=user) | Q(host=user))
