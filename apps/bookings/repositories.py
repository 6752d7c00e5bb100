"""
Booking Repository

Maps the Booking aggregate to the ``bookings.Booking`` row. Saves use a
compare-and-swap on ``version`` so two concurrent transitions on the
same booking cannot both win.
"""

from typing import Optional
from uuid import UUID
import logging

from django.core.exceptions import ValidationError as DjangoValidationError

from apps.bookings.domain.entities import Booking, BookingStatus
from apps.bookings.models import Booking as BookingModel
from shared.domain.exceptions import ConcurrentModification

logger = logging.getLogger(__name__)

# Columns a lifecycle transition may change
MUTABLE_FIELDS = (
    'status',
    'rejection_reason',
    'cancellation_reason',
    'owner_confirmed_dropoff',
    'host_confirmed_receiving',
    'host_confirmed_completion',
    'owner_confirmed_pickup',
    'completed_at',
    'updated_at',
)


class DjangoBookingRepository:
    """Loads and stores Booking aggregates through the Django ORM"""

    def get_by_id(self, booking_id: UUID) -> Optional[Booking]:
        try:
            row = BookingModel.objects.prefetch_related('pets').get(pk=booking_id)
        except (BookingModel.DoesNotExist, ValueError, DjangoValidationError):
            return None
        return self.to_entity(row)

    def add(self, booking: Booking) -> BookingModel:
        """Insert a freshly requested booking"""
        row = BookingModel.objects.create(
            id=booking.id,
            booking_number=booking.booking_number,
            owner_id=booking.owner_id,
            host_id=booking.host_id,
            check_in_date=booking.check_in_date,
            check_out_date=booking.check_out_date,
            drop_off_time=booking.drop_off_time,
            pick_up_time=booking.pick_up_time,
            special_instructions=booking.special_instructions,
            emergency_permission=booking.emergency_permission,
            status=booking.status.value,
            version=booking.version,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )
        row.pets.set(booking.pet_ids)
        return row

    def save(self, booking: Booking):
        """
        Persist a transition

        Raises ConcurrentModification when the stored version no longer
        matches the one the aggregate was loaded with.
        """
        values = {name: getattr(booking, name) for name in MUTABLE_FIELDS}
        values['status'] = booking.status.value
        values['cancelled_by_id'] = booking.cancelled_by_id
        values['version'] = booking.version + 1

        updated = BookingModel.objects.filter(
            pk=booking.id,
            version=booking.version,
        ).update(**values)

        if updated == 0:
            logger.warning(f"Version conflict saving booking {booking.id} at version {booking.version}")
            raise ConcurrentModification(
                f"Booking {booking.booking_number} was changed by another request. Reload and retry."
            )

        booking.version += 1

    @staticmethod
    def to_entity(row: BookingModel) -> Booking:
        return Booking(
            id=row.id,
            booking_number=row.booking_number,
            owner_id=row.owner_id,
            host_id=row.host_id,
            pet_ids=frozenset(pet.pk for pet in row.pets.all()),
            check_in_date=row.check_in_date,
            check_out_date=row.check_out_date,
            drop_off_time=row.drop_off_time,
            pick_up_time=row.pick_up_time,
            special_instructions=row.special_instructions,
            emergency_permission=row.emergency_permission,
            status=BookingStatus(row.status),
            rejection_reason=row.rejection_reason,
            cancellation_reason=row.cancellation_reason,
            cancelled_by_id=row.cancelled_by_id,
            owner_confirmed_dropoff=row.owner_confirmed_dropoff,
            host_confirmed_receiving=row.host_confirmed_receiving,
            host_confirmed_completion=row.host_confirmed_completion,
            owner_confirmed_pickup=row.owner_confirmed_pickup,
            completed_at=row.completed_at,
            version=row.version,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
