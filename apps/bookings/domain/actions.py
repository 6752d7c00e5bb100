"""
Booking Actions

The closed set of lifecycle actions a participant can request. Each
action knows which aggregate method it maps to; the lifecycle controller
loads the booking, applies the action and persists the result.
"""

from dataclasses import dataclass, fields
from typing import ClassVar, Dict, Type, Union

from shared.domain.exceptions import ValidationError
from apps.bookings.domain.entities import Booking


@dataclass(frozen=True)
class AcceptRequest:
    name: ClassVar[str] = 'accept'

    def apply(self, booking: Booking, actor_id: int) -> bool:
        return booking.accept(actor_id)


@dataclass(frozen=True)
class RejectRequest:
    reason: str = ''
    name: ClassVar[str] = 'reject'

    def apply(self, booking: Booking, actor_id: int) -> bool:
        return booking.reject(actor_id, self.reason)


@dataclass(frozen=True)
class ConfirmBooking:
    name: ClassVar[str] = 'confirm'

    def apply(self, booking: Booking, actor_id: int) -> bool:
        return booking.confirm(actor_id)


@dataclass(frozen=True)
class ConfirmDropoff:
    name: ClassVar[str] = 'confirm-dropoff'

    def apply(self, booking: Booking, actor_id: int) -> bool:
        return booking.confirm_dropoff(actor_id)


@dataclass(frozen=True)
class ConfirmReceiving:
    name: ClassVar[str] = 'confirm-receiving'

    def apply(self, booking: Booking, actor_id: int) -> bool:
        return booking.confirm_receiving(actor_id)


@dataclass(frozen=True)
class ConfirmCompletion:
    name: ClassVar[str] = 'confirm-completion'

    def apply(self, booking: Booking, actor_id: int) -> bool:
        return booking.confirm_completion(actor_id)


@dataclass(frozen=True)
class ConfirmPickup:
    name: ClassVar[str] = 'confirm-pickup'

    def apply(self, booking: Booking, actor_id: int) -> bool:
        return booking.confirm_pickup(actor_id)


@dataclass(frozen=True)
class CancelBooking:
    reason: str = ''
    name: ClassVar[str] = 'cancel'

    def apply(self, booking: Booking, actor_id: int) -> bool:
        return booking.cancel(actor_id, self.reason)


BookingAction = Union[
    AcceptRequest,
    RejectRequest,
    ConfirmBooking,
    ConfirmDropoff,
    ConfirmReceiving,
    ConfirmCompletion,
    ConfirmPickup,
    CancelBooking,
]

ACTIONS_BY_NAME: Dict[str, Type] = {
    action.name: action
    for action in (
        AcceptRequest,
        RejectRequest,
        ConfirmBooking,
        ConfirmDropoff,
        ConfirmReceiving,
        ConfirmCompletion,
        ConfirmPickup,
        CancelBooking,
    )
}


def build_action(name: str, reason: str = '') -> BookingAction:
    """
    Build the action registered under ``name``

    ``reason`` is passed to actions that carry one (reject, cancel) and
    ignored by the rest. Its presence is checked by the aggregate so
    that actor and booking checks come first.
    """
    action_type = ACTIONS_BY_NAME.get(name)
    if action_type is None:
        raise ValidationError(f"Unknown booking action '{name}'.")
    if any(f.name == 'reason' for f in fields(action_type)):
        return action_type(reason=reason)
    return action_type()
