"""Unit tests for the Booking aggregate state machine."""

from __future__ import annotations

from datetime import date

import pytest

from apps.bookings.domain import actions
from apps.bookings.domain.entities import Booking, BookingStatus
from apps.bookings.domain.events import BookingAccepted, BookingCompleted, BookingRejected
from shared.domain.exceptions import Forbidden, InvalidTransition, ValidationError

OWNER, HOST, STRANGER = 1, 2, 3


def make_booking(**overrides) -> Booking:
    values = dict(
        booking_number="BK20240601000000ABCDEF",
        owner_id=OWNER,
        host_id=HOST,
        pet_ids={10},
        check_in_date=date(2024, 6, 1),
        check_out_date=date(2024, 6, 5),
    )
    values.update(overrides)
    return Booking(**values)


def advance_to(status: BookingStatus) -> Booking:
    booking = make_booking()
    path = [
        (BookingStatus.ACCEPTED, lambda b: b.accept(HOST)),
        (BookingStatus.CONFIRMED, lambda b: b.confirm(OWNER)),
        (BookingStatus.IN_PROGRESS, lambda b: b.confirm_dropoff(OWNER)),
    ]
    for _, step in path:
        if booking.status == status:
            break
        step(booking)
    booking.clear_events()
    return booking


def test_validate_rejects_reversed_dates():
    booking = make_booking(check_in_date=date(2024, 6, 5), check_out_date=date(2024, 6, 1))
    with pytest.raises(ValidationError):
        booking.validate()


def test_validate_allows_same_day_stay():
    make_booking(check_out_date=date(2024, 6, 1)).validate()


def test_validate_requires_pets_and_distinct_parties():
    with pytest.raises(ValidationError):
        make_booking(pet_ids=set()).validate()
    with pytest.raises(ValidationError):
        make_booking(host_id=OWNER).validate()


def test_accept_by_host_emits_event():
    booking = make_booking()

    assert booking.accept(HOST) is True

    assert booking.status is BookingStatus.ACCEPTED
    assert [type(e) for e in booking.events] == [BookingAccepted]


def test_accept_by_owner_is_forbidden():
    booking = make_booking()
    with pytest.raises(Forbidden):
        booking.accept(OWNER)
    assert booking.status is BookingStatus.REQUESTED


def test_reject_requires_reason_and_sets_it():
    booking = make_booking()
    with pytest.raises(ValidationError):
        booking.reject(HOST, "   ")

    booking.reject(HOST, "Fully booked that week")

    assert booking.status is BookingStatus.CANCELLED
    assert booking.rejection_reason == "Fully booked that week"
    assert isinstance(booking.events[0], BookingRejected)


def test_reject_action_without_reason_fails_on_the_aggregate():
    action = actions.RejectRequest()

    with pytest.raises(Forbidden):
        action.apply(make_booking(), STRANGER)
    with pytest.raises(ValidationError):
        action.apply(make_booking(), HOST)


def test_confirm_receiving_before_dropoff_is_invalid():
    booking = advance_to(BookingStatus.CONFIRMED)

    with pytest.raises(InvalidTransition):
        booking.confirm_receiving(HOST)

    assert booking.status is BookingStatus.CONFIRMED
    assert booking.host_confirmed_receiving is False
    assert booking.events == []


def test_full_handshake_completes_booking():
    booking = advance_to(BookingStatus.IN_PROGRESS)

    booking.confirm_receiving(HOST)
    assert booking.status is BookingStatus.IN_PROGRESS
    booking.confirm_completion(HOST)
    assert booking.status is BookingStatus.IN_PROGRESS
    booking.confirm_pickup(OWNER)

    assert booking.status is BookingStatus.COMPLETED
    assert booking.handshake_complete
    assert booking.completed_at is not None
    assert isinstance(booking.events[-1], BookingCompleted)


def test_pickup_before_completion_is_invalid():
    booking = advance_to(BookingStatus.IN_PROGRESS)
    booking.confirm_receiving(HOST)

    with pytest.raises(InvalidTransition):
        booking.confirm_pickup(OWNER)


def test_completion_requires_receiving():
    booking = advance_to(BookingStatus.IN_PROGRESS)
    with pytest.raises(InvalidTransition):
        booking.confirm_completion(HOST)


def test_repeated_handshake_confirmation_is_a_no_op():
    booking = advance_to(BookingStatus.IN_PROGRESS)

    assert booking.confirm_dropoff(OWNER) is False

    assert booking.events == []
    assert booking.status is BookingStatus.IN_PROGRESS


def test_strict_actions_fail_when_repeated():
    booking = advance_to(BookingStatus.ACCEPTED)
    with pytest.raises(InvalidTransition):
        booking.accept(HOST)


@pytest.mark.parametrize(
    "action",
    [
        actions.AcceptRequest(),
        actions.RejectRequest(reason="no"),
        actions.ConfirmBooking(),
        actions.ConfirmDropoff(),
        actions.ConfirmReceiving(),
        actions.ConfirmCompletion(),
        actions.ConfirmPickup(),
        actions.CancelBooking(),
    ],
)
def test_non_participant_is_always_forbidden(action):
    booking = make_booking()
    with pytest.raises(Forbidden):
        action.apply(booking, STRANGER)


@pytest.mark.parametrize("actor", [OWNER, HOST])
def test_either_party_can_cancel_before_confirmation(actor):
    booking = advance_to(BookingStatus.ACCEPTED)

    booking.cancel(actor, "Plans changed")

    assert booking.status is BookingStatus.CANCELLED
    assert booking.cancellation_reason == "Plans changed"
    assert booking.cancelled_by_id == actor
    assert booking.rejection_reason == ""


@pytest.mark.parametrize("status", [BookingStatus.CONFIRMED, BookingStatus.IN_PROGRESS])
def test_no_cancellation_once_confirmed(status):
    booking = advance_to(status)
    with pytest.raises(InvalidTransition):
        booking.cancel(OWNER)


def test_counterparty_of():
    booking = make_booking()
    assert booking.counterparty_of(OWNER) == HOST
    assert booking.counterparty_of(HOST) == OWNER
    with pytest.raises(Forbidden):
        booking.counterparty_of(STRANGER)


def test_actions_registry_covers_every_action():
    assert set(actions.ACTIONS_BY_NAME) == {
        "accept",
        "reject",
        "confirm",
        "confirm-dropoff",
        "confirm-receiving",
        "confirm-completion",
        "confirm-pickup",
        "cancel",
    }


def test_build_action_carries_reason_only_where_used():
    assert actions.build_action("reject", "Full") == actions.RejectRequest(reason="Full")
    assert actions.build_action("cancel", "Sick") == actions.CancelBooking(reason="Sick")
    assert actions.build_action("accept", "ignored") == actions.AcceptRequest()


def test_build_action_unknown_name():
    with pytest.raises(ValidationError):
        actions.build_action("teleport")


def completed_booking() -> Booking:
    booking = advance_to(BookingStatus.IN_PROGRESS)
    booking.confirm_receiving(HOST)
    booking.confirm_completion(HOST)
    booking.confirm_pickup(OWNER)
    booking.clear_events()
    return booking


def cancelled_booking() -> Booking:
    booking = make_booking()
    booking.reject(HOST, "Away that week")
    booking.clear_events()
    return booking


def booking_in(status: BookingStatus) -> Booking:
    if status is BookingStatus.COMPLETED:
        return completed_booking()
    if status is BookingStatus.CANCELLED:
        return cancelled_booking()
    return advance_to(status)


ACTORS = {
    "accept": HOST,
    "reject": HOST,
    "confirm": OWNER,
    "confirm-dropoff": OWNER,
    "confirm-receiving": HOST,
    "confirm-completion": HOST,
    "confirm-pickup": OWNER,
    "cancel": OWNER,
}

# Pairs with no transition. IN_PROGRESS here means drop-off only; repeated
# handshake confirmations are no-ops and are covered separately.
INVALID_PAIRS = [
    (BookingStatus.REQUESTED, "confirm"),
    (BookingStatus.REQUESTED, "confirm-dropoff"),
    (BookingStatus.REQUESTED, "confirm-receiving"),
    (BookingStatus.REQUESTED, "confirm-completion"),
    (BookingStatus.REQUESTED, "confirm-pickup"),
    (BookingStatus.ACCEPTED, "accept"),
    (BookingStatus.ACCEPTED, "reject"),
    (BookingStatus.ACCEPTED, "confirm-dropoff"),
    (BookingStatus.ACCEPTED, "confirm-receiving"),
    (BookingStatus.ACCEPTED, "confirm-completion"),
    (BookingStatus.ACCEPTED, "confirm-pickup"),
    (BookingStatus.CONFIRMED, "accept"),
    (BookingStatus.CONFIRMED, "reject"),
    (BookingStatus.CONFIRMED, "confirm"),
    (BookingStatus.CONFIRMED, "confirm-receiving"),
    (BookingStatus.CONFIRMED, "confirm-completion"),
    (BookingStatus.CONFIRMED, "confirm-pickup"),
    (BookingStatus.CONFIRMED, "cancel"),
    (BookingStatus.IN_PROGRESS, "accept"),
    (BookingStatus.IN_PROGRESS, "reject"),
    (BookingStatus.IN_PROGRESS, "confirm"),
    (BookingStatus.IN_PROGRESS, "confirm-completion"),
    (BookingStatus.IN_PROGRESS, "confirm-pickup"),
    (BookingStatus.IN_PROGRESS, "cancel"),
    (BookingStatus.COMPLETED, "accept"),
    (BookingStatus.COMPLETED, "reject"),
    (BookingStatus.COMPLETED, "confirm"),
    (BookingStatus.COMPLETED, "cancel"),
] + [(BookingStatus.CANCELLED, name) for name in ACTORS]


@pytest.mark.parametrize(
    "status,name", INVALID_PAIRS, ids=[f"{s.value}-{n}" for s, n in INVALID_PAIRS]
)
def test_actions_outside_the_transition_table_are_invalid(status, name):
    booking = booking_in(status)
    flags = (
        booking.owner_confirmed_dropoff,
        booking.host_confirmed_receiving,
        booking.host_confirmed_completion,
        booking.owner_confirmed_pickup,
    )

    with pytest.raises(InvalidTransition):
        actions.build_action(name, "Some reason").apply(booking, ACTORS[name])

    assert booking.status is status
    assert (
        booking.owner_confirmed_dropoff,
        booking.host_confirmed_receiving,
        booking.host_confirmed_completion,
        booking.owner_confirmed_pickup,
    ) == flags
    assert booking.events == []
