"""Entity store contract, exercised against both backends."""

from datetime import timedelta

import pytest

from conftest import BASE_DATE, make_booking, make_service, make_user
from homecare_api.app.core.errors import NotFoundError
from homecare_api.app.schemas.booking import BookingStatus, PaymentStatus
from homecare_api.app.schemas.review import ReviewCreate
from homecare_api.app.schemas.user import UserRole
from homecare_api.app.storage import SQLiteStorage, build_storage
from homecare_api.app.core.config import Settings


def test_users_by_role_and_lookup(storage, people):
    providers = storage.get_users_by_role("provider")
    assert [u.name for u in providers] == ["Sarah Jenkins", "Mark Don"]
    assert storage.get_users_by_role(UserRole.ADMIN)[0].email == "admin@example.com"
    assert len(storage.get_users()) == 5
    assert storage.get_user(people["customer"].id).name == "Alice Smith"
    assert storage.get_user(999) is None


def test_user_rating_defaults_to_five(storage):
    assert make_user(storage).rating == 5


def test_update_user_merges_fields(storage, people):
    updated = storage.update_user(people["provider"].id, {"bio": "20 years of home care", "rating": 4})
    assert updated.bio == "20 years of home care"
    assert updated.rating == 4
    assert updated.specialization == "Nursing"
    assert storage.get_user(people["provider"].id) == updated


def test_update_missing_user_raises(storage):
    with pytest.raises(NotFoundError):
        storage.update_user(42, {"name": "Nobody"})


def test_services_round_trip(storage):
    service = make_service(storage, price=12000, category="Therapy", name="Physiotherapy Session")
    assert storage.get_service(service.id) == service
    assert storage.get_services() == [service]
    assert service.is_featured is False
    assert storage.get_service(service.id + 1) is None


def test_create_booking_applies_defaults(storage, people):
    booking = make_booking(storage, people["customer"].id, people["service"].id)
    assert booking.status == BookingStatus.PENDING
    assert booking.payment_status == PaymentStatus.UNPAID
    assert booking.provider_id is None
    assert booking.created_at.tzinfo is not None
    assert storage.get_booking(booking.id) == booking


def test_create_booking_keeps_explicit_status(storage, people):
    booking = make_booking(
        storage,
        people["customer"].id,
        people["service"].id,
        status=BookingStatus.CONFIRMED,
        payment_status=PaymentStatus.PAID,
    )
    assert booking.status == BookingStatus.CONFIRMED
    assert booking.payment_status == PaymentStatus.PAID


def test_booking_ids_increase(storage, people):
    ids = [make_booking(storage, people["customer"].id, people["service"].id, days=i).id for i in range(5)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 5


def test_get_bookings_sorted_by_scheduled_date_desc(storage, people):
    for days in (3, -2, 10, 0, 5):
        make_booking(storage, people["customer"].id, people["service"].id, days=days)
    dates = [b.scheduled_date for b in storage.get_bookings()]
    assert dates == sorted(dates, reverse=True)
    assert dates[0] == BASE_DATE + timedelta(days=10)


def test_user_bookings_scoped_by_role(storage, people):
    customer, other = people["customer"].id, people["other_customer"].id
    provider, other_provider = people["provider"].id, people["other_provider"].id
    service = people["service"].id
    mine = [
        make_booking(storage, customer, service, provider_id=provider, days=1),
        make_booking(storage, customer, service, days=2),
    ]
    theirs = make_booking(storage, other, service, provider_id=other_provider, days=3)

    customer_view = storage.get_user_bookings(customer, "customer")
    assert {b.id for b in customer_view} == {b.id for b in mine}
    assert all(b.customer_id == customer for b in customer_view)

    assert [b.id for b in storage.get_user_bookings(provider, "provider")] == [mine[0].id]
    assert [b.id for b in storage.get_user_bookings(other_provider, UserRole.PROVIDER)] == [theirs.id]
    assert storage.get_user_bookings(people["admin"].id, "admin") == storage.get_bookings()
    assert storage.get_user_bookings(999, "customer") == []


def test_update_booking_changes_only_given_fields(storage, people):
    booking = make_booking(storage, people["customer"].id, people["service"].id)
    updated = storage.update_booking(
        booking.id,
        {"status": BookingStatus.CONFIRMED, "provider_id": people["provider"].id},
    )
    assert updated.status == BookingStatus.CONFIRMED
    assert updated.provider_id == people["provider"].id
    unchanged = {"customer_id", "service_id", "scheduled_date", "address", "notes", "total_price",
                 "payment_status", "created_at", "id"}
    for field in unchanged:
        assert getattr(updated, field) == getattr(booking, field), field
    assert storage.get_booking(booking.id) == updated


def test_update_booking_never_rewrites_created_at(storage, people):
    booking = make_booking(storage, people["customer"].id, people["service"].id)
    updated = storage.update_booking(booking.id, {"created_at": BASE_DATE, "notes": "Gate code 42"})
    assert updated.created_at == booking.created_at
    assert updated.notes == "Gate code 42"


def test_update_missing_booking_raises(storage):
    with pytest.raises(NotFoundError) as excinfo:
        storage.update_booking(7, {"status": BookingStatus.CONFIRMED})
    assert "Booking 7 not found" in str(excinfo.value)


def test_reviews_by_provider_newest_first(storage, people):
    booking = make_booking(storage, people["customer"].id, people["service"].id)
    created = [
        storage.create_review(ReviewCreate(
            booking_id=booking.id,
            customer_id=people["customer"].id,
            provider_id=provider.id,
            rating=rating,
        ))
        for provider, rating in (
            (people["provider"], 5),
            (people["other_provider"], 3),
            (people["provider"], 4),
        )
    ]
    reviews = storage.get_reviews_by_provider(people["provider"].id)
    assert [r.id for r in reviews] == [created[2].id, created[0].id]
    assert storage.get_reviews_by_provider(999) == []


def test_sqlite_data_survives_reopening(tmp_path):
    path = str(tmp_path / "persist.db")
    first = SQLiteStorage(path)
    customer = make_user(first)
    service = make_service(first)
    booking = make_booking(first, customer.id, service.id, notes="Ring twice")

    reopened = SQLiteStorage(path)
    assert reopened.get_booking(booking.id) == booking
    assert reopened.get_user(customer.id) == customer


def test_build_storage_selects_backend(tmp_path):
    assert type(build_storage(Settings(storage_backend="memory"))).__name__ == "MemoryStorage"
    sqlite_store = build_storage(Settings(storage_backend="sqlite", database_url=str(tmp_path / "x.db")))
    assert isinstance(sqlite_store, SQLiteStorage)
    with pytest.raises(ValueError):
        build_storage(Settings(storage_backend="mongo"))


def test_returned_records_are_detached_from_the_store(storage, people):
    booking = make_booking(storage, people["customer"].id, people["service"].id)
    booking.total_price = 1

    fetched = storage.get_booking(booking.id)
    fetched.status = BookingStatus.CANCELLED
    fetched.total_price = 2
    storage.get_bookings()[0].notes = "changed"
    storage.get_user_bookings(people["customer"].id, "customer")[0].address = "elsewhere"

    stored = storage.get_booking(booking.id)
    assert stored.status == BookingStatus.PENDING
    assert stored.total_price == 15000
    assert stored.notes is None
    assert stored.address == "123 Health Ave, Wellness City"

    storage.get_user(people["customer"].id).name = "Mallory"
    storage.get_users_by_role("provider")[0].rating = 0
    storage.get_service(people["service"].id).price = 0
    assert storage.get_user(people["customer"].id).name == "Alice Smith"
    assert storage.get_user(people["provider"].id).rating == 5
    assert storage.get_services()[0].price == 15000
