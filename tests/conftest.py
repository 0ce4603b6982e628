"""Shared fixtures: a fresh store per test (both backends) and an API client."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from homecare_api.app.core.config import settings
from homecare_api.app.schemas.booking import BookingCreate
from homecare_api.app.schemas.service import ServiceCreate
from homecare_api.app.schemas.user import UserCreate, UserRole
from homecare_api.app.storage import MemoryStorage, SQLiteStorage, set_storage


BASE_DATE = datetime(2026, 10, 20, 9, 0, tzinfo=timezone.utc)


@pytest.fixture(params=["memory", "sqlite"])
def storage(request, tmp_path):
    if request.param == "memory":
        store = MemoryStorage()
    else:
        store = SQLiteStorage(str(tmp_path / "homecare-test.db"))
    set_storage(store)
    yield store
    set_storage(None)


@pytest.fixture
def client(storage, monkeypatch):
    monkeypatch.setattr(settings, "seed_data", False)
    from homecare_api.app.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def strict_transitions(monkeypatch):
    monkeypatch.setattr(settings, "booking_transitions", "strict")


def make_user(storage, role=UserRole.CUSTOMER, name="Alice Smith", **extra):
    email = extra.pop("email", f"{name.split()[0].lower()}@example.com")
    return storage.create_user(UserCreate(role=role, name=name, email=email, **extra))


def make_service(storage, price=15000, category="Nursing", name="Home Nursing Care"):
    return storage.create_service(ServiceCreate(
        name=name,
        description=f"{name} at home.",
        category=category,
        price=price,
        duration_minutes=60,
    ))


def make_booking(storage, customer_id, service_id, provider_id=None, days=0, **extra):
    extra.setdefault("total_price", 15000)
    return storage.create_booking(BookingCreate(
        customer_id=customer_id,
        provider_id=provider_id,
        service_id=service_id,
        scheduled_date=BASE_DATE + timedelta(days=days),
        address="123 Health Ave, Wellness City",
        **extra,
    ))


@pytest.fixture
def people(storage):
    """A customer, two providers, an admin and a 15000 nursing service."""
    return {
        "customer": make_user(storage),
        "other_customer": make_user(storage, name="Bob Jones"),
        "provider": make_user(storage, role=UserRole.PROVIDER, name="Sarah Jenkins", specialization="Nursing"),
        "other_provider": make_user(storage, role=UserRole.PROVIDER, name="Mark Don"),
        "admin": make_user(storage, role=UserRole.ADMIN, name="Admin User"),
        "service": make_service(storage),
    }
