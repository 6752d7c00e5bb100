"""
Booking Command Handlers

These are the use cases for the booking domain.
They orchestrate domain operations within transactions.

Commands:
- RequestBookingCommand: An owner asks a host to look after their pets
- BookingLifecycleController.apply_transition: every later state change
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Optional
from uuid import UUID, uuid4
import logging

from django.contrib.auth import get_user_model

from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import NotFound, ValidationError
from apps.bookings.domain.actions import BookingAction
from apps.bookings.domain.entities import Booking, BookingStatus
from apps.bookings.domain.events import BookingRequested

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class RequestBookingCommand:
    """
    Command to request a new booking

    The owner is always the authenticated user issuing the request.
    """
    owner_id: int
    host_id: int
    pet_ids: frozenset = field(default_factory=frozenset)
    check_in_date: Optional[date] = None
    check_out_date: Optional[date] = None
    drop_off_time: Optional[time] = None
    pick_up_time: Optional[time] = None
    special_instructions: str = ''
    emergency_permission: bool = False


# ===== Command Handlers =====

class RequestBookingHandler:
    """
    Handler for RequestBooking command

    Validates the parties and pets, stores the booking in REQUESTED and
    emits BookingRequested (the host is notified after commit).
    """

    def __init__(self, booking_repo):
        self.booking_repo = booking_repo

    def handle(self, command: RequestBookingCommand) -> Booking:
        logger.info(
            f"Requesting booking: owner {command.owner_id}, host {command.host_id}, "
            f"dates {command.check_in_date} - {command.check_out_date}"
        )

        if command.check_in_date is None or command.check_out_date is None:
            raise ValidationError("Check-in and check-out dates are required.")

        self._validate_host(command.host_id)
        self._validate_pets(command.owner_id, command.pet_ids)

        booking = Booking(
            id=uuid4(),
            booking_number=self._generate_booking_number(),
            owner_id=command.owner_id,
            host_id=command.host_id,
            pet_ids=frozenset(command.pet_ids),
            check_in_date=command.check_in_date,
            check_out_date=command.check_out_date,
            drop_off_time=command.drop_off_time,
            pick_up_time=command.pick_up_time,
            special_instructions=command.special_instructions or '',
            emergency_permission=command.emergency_permission,
            status=BookingStatus.REQUESTED,
        )
        booking.validate()

        booking.add_event(BookingRequested(
            aggregate_id=booking.id,
            booking_id=booking.id,
            booking_number=booking.booking_number,
            owner_id=booking.owner_id,
            host_id=booking.host_id,
            check_in_date=booking.check_in_date,
            check_out_date=booking.check_out_date,
        ))

        with DjangoUnitOfWork() as uow:
            self.booking_repo.add(booking)
            uow.collect_events(booking)

        logger.info(f"Booking requested: {booking.booking_number} (ID: {booking.id})")
        return booking

    def _validate_host(self, host_id: int):
        User = get_user_model()
        host = User.objects.filter(pk=host_id, is_active=True).first()
        if host is None:
            raise NotFound(f"Host {host_id} not found.")
        if not host.is_host():
            raise ValidationError("The selected user does not offer pet hosting.")

    def _validate_pets(self, owner_id: int, pet_ids):
        from apps.pets.models import Pet

        pet_ids = set(pet_ids)
        if not pet_ids:
            raise ValidationError("At least one pet is required for a booking.")
        owned = set(
            Pet.objects.filter(pk__in=pet_ids, owner_id=owner_id).values_list('pk', flat=True)
        )
        missing = pet_ids - owned
        if missing:
            raise ValidationError(
                f"Pets {sorted(missing)} do not exist or do not belong to you."
            )

    def _generate_booking_number(self) -> str:
        """Generate unique booking number: BK{timestamp}{random}"""
        timestamp = datetime.now().strftime('%Y%m%d%H%M%S')
        random_part = uuid4().hex[:6].upper()
        return f"BK{timestamp}{random_part}"


class BookingLifecycleController:
    """
    Single entry point for every booking state change

    Strategy:
    1. Start database transaction (atomic)
    2. Load the Booking aggregate (NotFound)
    3. Apply the action: actor check (Forbidden), then precondition
       (InvalidTransition)
    4. Save with a compare-and-swap on version (ConcurrentModification)
    5. Commit, then publish events (notifications, coupons)
    """

    def __init__(self, booking_repo):
        self.booking_repo = booking_repo

    def apply_transition(self, booking_id: UUID, action: BookingAction, actor_id: int) -> Booking:
        logger.info(f"Applying '{action.name}' to booking {booking_id} by user {actor_id}")

        with DjangoUnitOfWork() as uow:
            booking = self.booking_repo.get_by_id(booking_id)
            if not booking:
                raise NotFound(f"Booking {booking_id} not found.")

            changed = action.apply(booking, actor_id)
            if not changed:
                logger.info(
                    f"'{action.name}' already satisfied for booking {booking.booking_number}, nothing to do"
                )
                return booking

            self.booking_repo.save(booking)
            uow.collect_events(booking)

        logger.info(
            f"Booking {booking.booking_number} is now {booking.status.value} after '{action.name}'"
        )
        return booking
