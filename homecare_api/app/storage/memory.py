"""
In‑memory entity store.

Records live in plain dictionaries keyed by id.  A single lock guards
every operation so that the store can be shared between the worker
threads of the ASGI server.  Nothing survives a restart.

Callers always receive copies; the stored models are never handed out,
so changing a returned record does not change the store.
"""

import itertools
from threading import Lock
from typing import Any, Dict, List, Optional, TypeVar

from pydantic import BaseModel

from ..core.errors import NotFoundError
from ..schemas.base import utcnow
from ..schemas.booking import BookingCreate, BookingRead, BookingStatus, PaymentStatus
from ..schemas.review import ReviewCreate, ReviewRead
from ..schemas.service import ServiceCreate, ServiceRead
from ..schemas.user import UserCreate, UserRead
from .base import Storage, role_value, scope_bookings, sort_bookings


ModelT = TypeVar("ModelT", bound=BaseModel)


def _copy(model: Optional[ModelT]) -> Optional[ModelT]:
    return model.model_copy() if model is not None else None


class MemoryStorage(Storage):
    """Dictionary backed implementation of :class:`Storage`."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[int, UserRead] = {}
        self._services: Dict[int, ServiceRead] = {}
        self._bookings: Dict[int, BookingRead] = {}
        self._reviews: Dict[int, ReviewRead] = {}
        # Separate counters per collection; ids are never reused.
        self._user_ids = itertools.count(1)
        self._service_ids = itertools.count(1)
        self._booking_ids = itertools.count(1)
        self._review_ids = itertools.count(1)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def get_users(self) -> List[UserRead]:
        with self._lock:
            return [u.model_copy() for u in self._users.values()]

    def get_user(self, user_id: int) -> Optional[UserRead]:
        with self._lock:
            return _copy(self._users.get(user_id))

    def get_users_by_role(self, role: str) -> List[UserRead]:
        role = role_value(role)
        with self._lock:
            return [u.model_copy() for u in self._users.values() if u.role.value == role]

    def create_user(self, data: UserCreate) -> UserRead:
        with self._lock:
            user = UserRead(id=next(self._user_ids), **data.model_dump())
            self._users[user.id] = user
        return user.model_copy()

    def update_user(self, user_id: int, updates: Dict[str, Any]) -> UserRead:
        with self._lock:
            existing = self._users.get(user_id)
            if existing is None:
                raise NotFoundError("User", user_id)
            updates = {k: v for k, v in updates.items() if k != "id"}
            user = UserRead.model_validate({**existing.model_dump(), **updates})
            self._users[user_id] = user
        return user.model_copy()

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------
    def get_services(self) -> List[ServiceRead]:
        with self._lock:
            return [s.model_copy() for s in self._services.values()]

    def get_service(self, service_id: int) -> Optional[ServiceRead]:
        with self._lock:
            return _copy(self._services.get(service_id))

    def create_service(self, data: ServiceCreate) -> ServiceRead:
        with self._lock:
            service = ServiceRead(id=next(self._service_ids), **data.model_dump())
            self._services[service.id] = service
        return service.model_copy()

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def get_bookings(self) -> List[BookingRead]:
        with self._lock:
            return [b.model_copy() for b in sort_bookings(self._bookings.values())]

    def get_booking(self, booking_id: int) -> Optional[BookingRead]:
        with self._lock:
            return _copy(self._bookings.get(booking_id))

    def get_user_bookings(self, user_id: int, role: str) -> List[BookingRead]:
        with self._lock:
            bookings = sort_bookings(scope_bookings(self._bookings.values(), user_id, role))
            return [b.model_copy() for b in bookings]

    def create_booking(self, data: BookingCreate) -> BookingRead:
        fields = data.model_dump()
        fields["status"] = fields.get("status") or BookingStatus.PENDING
        fields["payment_status"] = fields.get("payment_status") or PaymentStatus.UNPAID
        with self._lock:
            booking = BookingRead(id=next(self._booking_ids), created_at=utcnow(), **fields)
            self._bookings[booking.id] = booking
        return booking.model_copy()

    def update_booking(self, booking_id: int, updates: Dict[str, Any]) -> BookingRead:
        with self._lock:
            existing = self._bookings.get(booking_id)
            if existing is None:
                raise NotFoundError("Booking", booking_id)
            updates = {k: v for k, v in updates.items() if k not in {"id", "created_at"}}
            booking = BookingRead.model_validate({**existing.model_dump(), **updates})
            self._bookings[booking_id] = booking
        return booking.model_copy()

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------
    def create_review(self, data: ReviewCreate) -> ReviewRead:
        with self._lock:
            review = ReviewRead(id=next(self._review_ids), created_at=utcnow(), **data.model_dump())
            self._reviews[review.id] = review
        return review.model_copy()

    def get_reviews_by_provider(self, provider_id: int) -> List[ReviewRead]:
        with self._lock:
            reviews = [r.model_copy() for r in self._reviews.values() if r.provider_id == provider_id]
        return sorted(reviews, key=lambda r: (r.created_at, r.id), reverse=True)
