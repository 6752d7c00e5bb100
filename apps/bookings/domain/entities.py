"""
Booking Domain Entities

Core business entities for the booking domain:
- BookingStatus: FSM states for the booking lifecycle
- Booking: aggregate root owning the status and the handshake flags
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum

from django.utils import timezone

from shared.domain.base import Aggregate
from shared.domain.exceptions import Forbidden, InvalidTransition, ValidationError


class BookingStatus(Enum):
    """
    Booking Status Finite State Machine

    State transitions:
    - REQUESTED -> ACCEPTED (host accepts)
    - REQUESTED -> CANCELLED (host rejects with a reason, or either party cancels)
    - ACCEPTED -> CONFIRMED (owner confirms)
    - ACCEPTED -> CANCELLED (either party cancels)
    - CONFIRMED -> IN_PROGRESS (owner confirms drop-off)
    - IN_PROGRESS -> IN_PROGRESS (host confirms receiving, then completion)
    - IN_PROGRESS -> COMPLETED (owner confirms pickup)

    There is no way out of CONFIRMED or IN_PROGRESS other than forward.
    """
    REQUESTED = 'requested'
    ACCEPTED = 'accepted'
    CONFIRMED = 'confirmed'
    IN_PROGRESS = 'in_progress'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'

    @property
    def is_terminal(self) -> bool:
        return self in (BookingStatus.COMPLETED, BookingStatus.CANCELLED)


CANCELLABLE_STATUSES = (BookingStatus.REQUESTED, BookingStatus.ACCEPTED)


@dataclass(kw_only=True)
class Booking(Aggregate):
    """
    Booking Aggregate Root

    One owner, one host, a set of the owner's pets and a date range.

    Key invariants:
    - check_out_date >= check_in_date
    - at least one pet; owner and host are different users
    - handshake flags are set in order: owner drop-off, host receiving,
      host completion, owner pickup; COMPLETED iff all four are set
    - rejection_reason is only set by the host's reject action

    Every transition method checks the actor first (Forbidden), then the
    state (InvalidTransition). Handshake confirmations that are already
    satisfied return False and leave the booking untouched.
    """

    booking_number: str
    owner_id: int
    host_id: int
    pet_ids: frozenset[int]
    check_in_date: date
    check_out_date: date
    drop_off_time: time | None = None
    pick_up_time: time | None = None
    special_instructions: str = ''
    emergency_permission: bool = False

    status: BookingStatus = BookingStatus.REQUESTED
    rejection_reason: str = ''
    cancellation_reason: str = ''
    cancelled_by_id: int | None = None

    # Two-sided handshake for drop-off and pickup
    owner_confirmed_dropoff: bool = False
    host_confirmed_receiving: bool = False
    host_confirmed_completion: bool = False
    owner_confirmed_pickup: bool = False

    completed_at: datetime | None = None
    # Optimistic lock; the repository bumps it on every save
    version: int = 0

    def __post_init__(self):
        self.pet_ids = frozenset(self.pet_ids)

    def validate(self):
        """Check the invariants of a new request"""
        if self.check_out_date < self.check_in_date:
            raise ValidationError("Check-out date cannot be before check-in date.")
        if not self.pet_ids:
            raise ValidationError("At least one pet is required for a booking.")
        if self.owner_id == self.host_id:
            raise ValidationError("Owner and host must be different users.")

    # ----- Actors ------------------------------------------------------------

    def is_participant(self, user_id: int) -> bool:
        return user_id in (self.owner_id, self.host_id)

    def counterparty_of(self, user_id: int) -> int:
        """The other side of the booking for a participant."""
        if user_id == self.owner_id:
            return self.host_id
        if user_id == self.host_id:
            return self.owner_id
        raise Forbidden("User is not a participant of this booking.")

    def _require_host(self, actor_id: int):
        if actor_id != self.host_id:
            raise Forbidden("Only the host of this booking can perform this action.")

    def _require_owner(self, actor_id: int):
        if actor_id != self.owner_id:
            raise Forbidden("Only the owner of this booking can perform this action.")

    def _require_participant(self, actor_id: int):
        if not self.is_participant(actor_id):
            raise Forbidden("User is not a participant of this booking.")

    def _require_status(self, action: str, *allowed: BookingStatus):
        if self.status not in allowed:
            expected = ', '.join(s.value for s in allowed)
            raise InvalidTransition(
                f"Cannot {action} a booking in status {self.status.value}. "
                f"Expected: {expected}."
            )

    def _touch(self):
        self.updated_at = timezone.now()

    # ----- Transitions -------------------------------------------------------

    def accept(self, actor_id: int) -> bool:
        """REQUESTED -> ACCEPTED (host)"""
        from apps.bookings.domain.events import BookingAccepted

        self._require_host(actor_id)
        self._require_status('accept', BookingStatus.REQUESTED)

        self.status = BookingStatus.ACCEPTED
        self._touch()
        self.add_event(BookingAccepted(
            aggregate_id=self.id,
            booking_id=self.id,
            booking_number=self.booking_number,
            owner_id=self.owner_id,
            host_id=self.host_id,
        ))
        return True

    def reject(self, actor_id: int, reason: str) -> bool:
        """REQUESTED -> CANCELLED (host, reason required)"""
        from apps.bookings.domain.events import BookingRejected

        self._require_host(actor_id)
        reason = (reason or '').strip()
        if not reason:
            raise ValidationError("A reason is required to reject a booking request.")
        self._require_status('reject', BookingStatus.REQUESTED)

        self.status = BookingStatus.CANCELLED
        self.rejection_reason = reason
        self.cancelled_by_id = actor_id
        self._touch()
        self.add_event(BookingRejected(
            aggregate_id=self.id,
            booking_id=self.id,
            booking_number=self.booking_number,
            owner_id=self.owner_id,
            host_id=self.host_id,
            reason=reason,
        ))
        return True

    def confirm(self, actor_id: int) -> bool:
        """ACCEPTED -> CONFIRMED (owner)"""
        self._require_owner(actor_id)
        self._require_status('confirm', BookingStatus.ACCEPTED)

        self.status = BookingStatus.CONFIRMED
        self._touch()
        return True

    def confirm_dropoff(self, actor_id: int) -> bool:
        """CONFIRMED -> IN_PROGRESS (owner hands the pets over)"""
        self._require_owner(actor_id)
        if self.owner_confirmed_dropoff:
            return False
        self._require_status('confirm drop-off for', BookingStatus.CONFIRMED)

        self.owner_confirmed_dropoff = True
        self.status = BookingStatus.IN_PROGRESS
        self._touch()
        return True

    def confirm_receiving(self, actor_id: int) -> bool:
        """Host confirms the pets were received; requires the owner's drop-off"""
        self._require_host(actor_id)
        if self.host_confirmed_receiving:
            return False
        self._require_status('confirm receiving for', BookingStatus.CONFIRMED, BookingStatus.IN_PROGRESS)
        if not self.owner_confirmed_dropoff:
            raise InvalidTransition("The owner has not confirmed the drop-off yet.")

        self.host_confirmed_receiving = True
        self.status = BookingStatus.IN_PROGRESS
        self._touch()
        return True

    def confirm_completion(self, actor_id: int) -> bool:
        """Host marks the stay as finished; requires receiving"""
        self._require_host(actor_id)
        if self.host_confirmed_completion:
            return False
        self._require_status('confirm completion for', BookingStatus.IN_PROGRESS)
        if not self.host_confirmed_receiving:
            raise InvalidTransition("The host has not confirmed receiving the pets yet.")

        self.host_confirmed_completion = True
        self._touch()
        return True

    def confirm_pickup(self, actor_id: int) -> bool:
        """IN_PROGRESS -> COMPLETED (owner picks the pets up)"""
        from apps.bookings.domain.events import BookingCompleted

        self._require_owner(actor_id)
        if self.owner_confirmed_pickup:
            return False
        self._require_status('confirm pickup for', BookingStatus.IN_PROGRESS)
        if not self.host_confirmed_completion:
            raise InvalidTransition("The host has not confirmed completion yet.")

        self.owner_confirmed_pickup = True
        self.status = BookingStatus.COMPLETED
        self.completed_at = timezone.now()
        self.updated_at = self.completed_at
        self.add_event(BookingCompleted(
            aggregate_id=self.id,
            booking_id=self.id,
            booking_number=self.booking_number,
            owner_id=self.owner_id,
            host_id=self.host_id,
            completed_at=self.completed_at,
        ))
        return True

    def cancel(self, actor_id: int, reason: str = '') -> bool:
        """REQUESTED/ACCEPTED -> CANCELLED (either party)"""
        from apps.bookings.domain.events import BookingCancelled

        self._require_participant(actor_id)
        self._require_status('cancel', *CANCELLABLE_STATUSES)

        old_status = self.status
        self.status = BookingStatus.CANCELLED
        self.cancellation_reason = (reason or '').strip()
        self.cancelled_by_id = actor_id
        self._touch()
        self.add_event(BookingCancelled(
            aggregate_id=self.id,
            booking_id=self.id,
            booking_number=self.booking_number,
            cancelled_by_id=actor_id,
            recipient_id=self.counterparty_of(actor_id),
            reason=self.cancellation_reason,
            old_status=old_status.value,
        ))
        return True

    # ----- Queries -----------------------------------------------------------

    @property
    def handshake_complete(self) -> bool:
        return all((
            self.owner_confirmed_dropoff,
            self.host_confirmed_receiving,
            self.host_confirmed_completion,
            self.owner_confirmed_pickup,
        ))

    @property
    def nights(self) -> int:
        return (self.check_out_date - self.check_in_date).days

    def __str__(self):
        return f"Booking {self.booking_number} ({self.status.value})"

    def __repr__(self):
        return (
            f"Booking(id={self.id}, booking_number={self.booking_number}, "
            f"status={self.status.value}, owner={self.owner_id}, host={self.host_id})"
        )
