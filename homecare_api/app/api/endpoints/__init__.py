"""
Endpoint modules.

Each module defines an ``APIRouter`` for one resource (users,
services, bookings, reviews, dashboard).  They are aggregated in
``api/router.py``.
"""
