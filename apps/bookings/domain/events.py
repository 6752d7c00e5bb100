"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after successful transaction commits.
"""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from shared.domain.base import DomainEvent


# ===== Booking Events =====

@dataclass(kw_only=True)
class BookingRequested(DomainEvent):
    """
    Event: An owner requested a stay with a host

    Triggers:
    - Notify the host (new_request)
    """
    booking_id: UUID
    booking_number: str
    owner_id: int
    host_id: int
    check_in_date: date
    check_out_date: date


@dataclass(kw_only=True)
class BookingAccepted(DomainEvent):
    """
    Event: Host accepted the request (REQUESTED -> ACCEPTED)

    Triggers:
    - Notify the owner (request_accepted)
    """
    booking_id: UUID
    booking_number: str
    owner_id: int
    host_id: int


@dataclass(kw_only=True)
class BookingRejected(DomainEvent):
    """
    Event: Host rejected the request (REQUESTED -> CANCELLED)

    Triggers:
    - Notify the owner with the reason (request_rejected)
    """
    booking_id: UUID
    booking_number: str
    owner_id: int
    host_id: int
    reason: str


@dataclass(kw_only=True)
class BookingCompleted(DomainEvent):
    """
    Event: Owner picked the pets up (IN_PROGRESS -> COMPLETED)

    Triggers:
    - Issue a coupon to the host
    - Review reminders (Celery beat)
    """
    booking_id: UUID
    booking_number: str
    owner_id: int
    host_id: int
    completed_at: datetime


@dataclass(kw_only=True)
class BookingCancelled(DomainEvent):
    """
    Event: Either party cancelled before the stay was confirmed

    Triggers:
    - Notify the other party (booking_cancelled)
    """
    booking_id: UUID
    booking_number: str
    cancelled_by_id: int
    recipient_id: int
    reason: str
    old_status: str
