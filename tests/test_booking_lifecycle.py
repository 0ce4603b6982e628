"""Booking status lifecycle and its enforcement in BookingService."""

import asyncio

import pytest

from conftest import make_booking
from homecare_api.app.core.errors import BookingValidationError, InvalidTransitionError, NotFoundError
from homecare_api.app.schemas.booking import BookingCreate, BookingStatus, BookingUpdate
from homecare_api.app.services.booking_lifecycle import (
    ACTIVE_STATUSES,
    TERMINAL_STATUSES,
    check_transition,
    is_transition_allowed,
)
from homecare_api.app.services.booking_service import BookingService
from homecare_api.app.schemas.user import UserRole


S = BookingStatus


@pytest.mark.parametrize(
    "current, target",
    [
        (S.PENDING, S.CONFIRMED),
        (S.PENDING, S.CANCELLED),
        (S.CONFIRMED, S.IN_PROGRESS),
        (S.CONFIRMED, S.COMPLETED),
        (S.CONFIRMED, S.CANCELLED),
        (S.IN_PROGRESS, S.COMPLETED),
        (S.COMPLETED, S.DISPUTED),
        (S.CANCELLED, S.CANCELLED),
    ],
)
def test_allowed_transitions(current, target):
    assert is_transition_allowed(current, target)


@pytest.mark.parametrize(
    "current, target",
    [
        (S.PENDING, S.COMPLETED),
        (S.PENDING, S.DISPUTED),
        (S.COMPLETED, S.PENDING),
        (S.CANCELLED, S.CONFIRMED),
        (S.DISPUTED, S.COMPLETED),
    ],
)
def test_disallowed_transitions(current, target):
    assert not is_transition_allowed(current, target)


def test_status_groups():
    assert TERMINAL_STATUSES == {S.CANCELLED, S.DISPUTED}
    assert ACTIVE_STATUSES == {S.PENDING, S.CONFIRMED, S.IN_PROGRESS}


def test_check_transition_accepts_plain_strings():
    check_transition("pending", "confirmed", strict=True)


def test_strict_check_raises_with_status_field():
    with pytest.raises(InvalidTransitionError) as excinfo:
        check_transition(S.COMPLETED, S.PENDING, strict=True)
    assert excinfo.value.field == "status"
    assert "completed" in excinfo.value.message and "pending" in excinfo.value.message


def test_permissive_check_lets_anything_through():
    check_transition(S.COMPLETED, S.PENDING, strict=False)


def test_confirm_pending_booking_keeps_other_fields(storage, people):
    booking = make_booking(storage, people["customer"].id, people["service"].id, provider_id=people["provider"].id)
    assert booking.status == S.PENDING

    updated = asyncio.run(BookingService.update_booking(booking.id, BookingUpdate(status="confirmed")))

    assert updated.status == S.CONFIRMED
    assert updated.customer_id == people["customer"].id
    assert updated.service_id == people["service"].id
    assert updated.total_price == 15000


def test_strict_service_rejects_reopening(storage, people, strict_transitions):
    booking = make_booking(storage, people["customer"].id, people["service"].id, status=S.COMPLETED)
    with pytest.raises(InvalidTransitionError):
        asyncio.run(BookingService.update_booking(booking.id, BookingUpdate(status="pending")))
    assert storage.get_booking(booking.id).status == S.COMPLETED


def test_permissive_service_allows_reopening(storage, people):
    booking = make_booking(storage, people["customer"].id, people["service"].id, status=S.COMPLETED)
    updated = asyncio.run(BookingService.update_booking(booking.id, BookingUpdate(status="pending")))
    assert updated.status == S.PENDING


def test_update_unknown_booking_is_not_found(storage):
    with pytest.raises(NotFoundError):
        asyncio.run(BookingService.update_booking(404, BookingUpdate(status="confirmed")))
    with pytest.raises(NotFoundError):
        asyncio.run(BookingService.update_booking(404, BookingUpdate(notes="hello")))


def test_create_booking_prices_from_service(storage, people):
    data = BookingCreate(
        customer_id=people["customer"].id,
        service_id=people["service"].id,
        scheduled_date="2026-11-01T10:00:00Z",
        address="1 Elm St",
    )
    booking = asyncio.run(BookingService.create_booking(data))
    assert booking.total_price == people["service"].price


def test_create_booking_without_price_or_service_fails(storage, people):
    data = BookingCreate(
        customer_id=people["customer"].id,
        service_id=999,
        scheduled_date="2026-11-01T10:00:00Z",
        address="1 Elm St",
    )
    with pytest.raises(BookingValidationError) as excinfo:
        asyncio.run(BookingService.create_booking(data))
    assert excinfo.value.field == "totalPrice"


def test_list_bookings_without_user_id_is_unscoped(storage, people):
    make_booking(storage, people["customer"].id, people["service"].id, provider_id=people["provider"].id)
    make_booking(storage, people["other_customer"].id, people["service"].id, days=1)
    assert len(asyncio.run(BookingService.list_bookings(UserRole.PROVIDER))) == 2
    scoped = asyncio.run(BookingService.list_bookings(UserRole.PROVIDER, people["provider"].id))
    assert [b.customer_id for b in scoped] == [people["customer"].id]
