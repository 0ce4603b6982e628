"""
Top‑level API router.

Aggregates the resource routers under a single router that the
application mounts at ``/api``.  When a resource is added, include its
router here.
"""

from fastapi import APIRouter

from .endpoints import bookings, dashboard, reviews, services, users


router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(services.router, prefix="/services", tags=["services"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(reviews.router, prefix="/reviews", tags=["reviews"])
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
