"""
Demo data for a fresh store.

``seed_storage`` fills an empty store with one customer, two
providers, an administrator, three services and two bookings so the
web client has something to show.  It does nothing if any user
already exists, which makes it safe to call on every start.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from ..schemas.base import utcnow
from ..schemas.booking import BookingCreate, BookingStatus
from ..schemas.service import ServiceCreate
from ..schemas.user import UserCreate, UserRole
from ..storage.base import Storage


logger = logging.getLogger(__name__)

DEMO_ADDRESS = "123 Health Ave, Wellness City"


def seed_storage(storage: Storage, now: Optional[datetime] = None) -> bool:
    """Populate ``storage`` with demo records if it has no users.

    Returns True when data was written.
    """
    if storage.get_users():
        logger.debug("Store already holds users; skipping seed")
        return False

    now = now or utcnow()

    customer = storage.create_user(UserCreate(
        role=UserRole.CUSTOMER,
        name="Alice Smith",
        email="alice@example.com",
        avatar_url="https://i.pravatar.cc/150?u=alice",
    ))
    provider_1 = storage.create_user(UserCreate(
        role=UserRole.PROVIDER,
        name="Dr. Sarah Jenkins",
        email="sarah@example.com",
        avatar_url="https://i.pravatar.cc/150?u=sarah",
        specialization="Nursing",
    ))
    provider_2 = storage.create_user(UserCreate(
        role=UserRole.PROVIDER,
        name="Nurse Mark Don",
        email="mark@example.com",
        avatar_url="https://i.pravatar.cc/150?u=mark",
        specialization="Therapy",
    ))
    storage.create_user(UserCreate(
        role=UserRole.ADMIN,
        name="Admin User",
        email="admin@example.com",
        avatar_url="https://i.pravatar.cc/150?u=admin",
    ))

    nursing = storage.create_service(ServiceCreate(
        name="Home Nursing Care",
        description="Professional nursing care in the comfort of your home.",
        category="Nursing",
        price=15000,
        duration_minutes=120,
        image_url="https://images.unsplash.com/photo-1579684385127-1ef15d508118?w=800&q=80",
        is_featured=True,
    ))
    therapy = storage.create_service(ServiceCreate(
        name="Physiotherapy Session",
        description="Expert physiotherapy to help you recover faster.",
        category="Therapy",
        price=12000,
        duration_minutes=60,
        image_url="https://images.unsplash.com/photo-1576091160399-112ba8d25d1d?w=800&q=80",
    ))
    storage.create_service(ServiceCreate(
        name="Post-Surgery Support",
        description="Comprehensive support after surgical procedures.",
        category="Recovery",
        price=20000,
        duration_minutes=240,
        image_url="https://images.unsplash.com/photo-1581594693702-fbdc51b2763b?w=800&q=80",
    ))

    storage.create_booking(BookingCreate(
        customer_id=customer.id,
        provider_id=provider_1.id,
        service_id=nursing.id,
        status=BookingStatus.CONFIRMED,
        scheduled_date=now + timedelta(days=1),
        address=DEMO_ADDRESS,
        notes="Please ring the bell twice.",
        total_price=nursing.price,
    ))
    storage.create_booking(BookingCreate(
        customer_id=customer.id,
        provider_id=provider_2.id,
        service_id=therapy.id,
        status=BookingStatus.PENDING,
        scheduled_date=now + timedelta(days=7),
        address=DEMO_ADDRESS,
        notes="Looking forward to the session.",
        total_price=therapy.price,
    ))

    logger.info("Seeded demo data: 4 users, 3 services, 2 bookings")
    return True
