"""
SQLite backed entity store.

Each operation opens its own connection through ``core.db`` and closes
it before returning, so the store can be shared freely between
requests.  Enum members are stored as their string values, booleans
as 0/1 and timestamps as ISO‑8601 UTC strings with microsecond
precision, which keeps ``ORDER BY scheduled_date`` chronological.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from ..core.db import get_connection, get_database_path, init_db
from ..core.errors import NotFoundError
from ..schemas.base import as_utc, utcnow
from ..schemas.booking import BookingCreate, BookingRead, BookingStatus, PaymentStatus
from ..schemas.review import ReviewCreate, ReviewRead
from ..schemas.service import ServiceCreate, ServiceRead
from ..schemas.user import UserCreate, UserRead, UserRole
from .base import Storage, role_value


logger = logging.getLogger(__name__)

USER_COLUMNS = (
    "role", "name", "email", "avatar_url", "phone", "address", "bio", "specialization", "rating",
)
SERVICE_COLUMNS = (
    "name", "description", "category", "price", "duration_minutes", "image_url", "is_featured",
)
BOOKING_COLUMNS = (
    "customer_id", "provider_id", "service_id", "status", "scheduled_date", "address",
    "notes", "total_price", "payment_status", "created_at",
)
REVIEW_COLUMNS = (
    "booking_id", "customer_id", "provider_id", "rating", "comment", "created_at",
)

BOOKING_ORDER = "ORDER BY scheduled_date DESC, id DESC"


def _to_db(value: Any) -> Any:
    """Convert a Python value to something sqlite3 can bind."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return as_utc(value).isoformat(timespec="microseconds")
    if isinstance(value, bool):
        return 1 if value else 0
    return value


class SQLiteStorage(Storage):
    """Relational implementation of :class:`Storage` on top of ``sqlite3``."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = get_database_path(db_path)
        version = init_db(self.db_path)
        logger.info("Using SQLite store at %s (schema version %s)", self.db_path, version)

    # ------------------------------------------------------------------
    # Low level helpers
    # ------------------------------------------------------------------
    def _fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(sql, tuple(params)).fetchall()
            return [dict(row) for row in rows]
        finally:
            conn.close()

    def _fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[Dict[str, Any]]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(sql, tuple(params)).fetchone()
            return dict(row) if row else None
        finally:
            conn.close()

    def _insert(self, table: str, values: Dict[str, Any]) -> int:
        columns = list(values)
        placeholders = ", ".join("?" for _ in columns)
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders})",
                tuple(_to_db(values[c]) for c in columns),
            )
            conn.commit()
            return cursor.lastrowid
        finally:
            conn.close()

    def _update(self, table: str, entity: str, row_id: int, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ``updates`` to one row and return the row as stored afterwards.

        Raises ``NotFoundError`` if no row has the given id.  An empty
        ``updates`` mapping leaves the row untouched.
        """
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            if not cursor.execute(f"SELECT id FROM {table} WHERE id = ?", (row_id,)).fetchone():
                raise NotFoundError(entity, row_id)
            if updates:
                assignments = ", ".join(f"{key} = ?" for key in updates)
                values = [_to_db(value) for value in updates.values()]
                values.append(row_id)
                cursor.execute(f"UPDATE {table} SET {assignments} WHERE id = ?", tuple(values))
                conn.commit()
            row = cursor.execute(f"SELECT * FROM {table} WHERE id = ?", (row_id,)).fetchone()
            return dict(row)
        finally:
            conn.close()

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def get_users(self) -> List[UserRead]:
        return [UserRead.model_validate(row) for row in self._fetch_all("SELECT * FROM users ORDER BY id")]

    def get_user(self, user_id: int) -> Optional[UserRead]:
        row = self._fetch_one("SELECT * FROM users WHERE id = ?", (user_id,))
        return UserRead.model_validate(row) if row else None

    def get_users_by_role(self, role: str) -> List[UserRead]:
        rows = self._fetch_all("SELECT * FROM users WHERE role = ? ORDER BY id", (role_value(role),))
        return [UserRead.model_validate(row) for row in rows]

    def create_user(self, data: UserCreate) -> UserRead:
        values = {column: getattr(data, column) for column in USER_COLUMNS}
        user_id = self._insert("users", values)
        return UserRead(id=user_id, **values)

    def update_user(self, user_id: int, updates: Dict[str, Any]) -> UserRead:
        updates = {k: v for k, v in updates.items() if k in USER_COLUMNS}
        return UserRead.model_validate(self._update("users", "User", user_id, updates))

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------
    def get_services(self) -> List[ServiceRead]:
        return [ServiceRead.model_validate(row) for row in self._fetch_all("SELECT * FROM services ORDER BY id")]

    def get_service(self, service_id: int) -> Optional[ServiceRead]:
        row = self._fetch_one("SELECT * FROM services WHERE id = ?", (service_id,))
        return ServiceRead.model_validate(row) if row else None

    def create_service(self, data: ServiceCreate) -> ServiceRead:
        values = {column: getattr(data, column) for column in SERVICE_COLUMNS}
        service_id = self._insert("services", values)
        return ServiceRead(id=service_id, **values)

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def get_bookings(self) -> List[BookingRead]:
        rows = self._fetch_all(f"SELECT * FROM bookings {BOOKING_ORDER}")
        return [BookingRead.model_validate(row) for row in rows]

    def get_booking(self, booking_id: int) -> Optional[BookingRead]:
        row = self._fetch_one("SELECT * FROM bookings WHERE id = ?", (booking_id,))
        return BookingRead.model_validate(row) if row else None

    def get_user_bookings(self, user_id: int, role: str) -> List[BookingRead]:
        role = role_value(role)
        if role == UserRole.CUSTOMER.value:
            rows = self._fetch_all(
                f"SELECT * FROM bookings WHERE customer_id = ? {BOOKING_ORDER}", (user_id,)
            )
        elif role == UserRole.PROVIDER.value:
            rows = self._fetch_all(
                f"SELECT * FROM bookings WHERE provider_id = ? {BOOKING_ORDER}", (user_id,)
            )
        else:
            return self.get_bookings()
        return [BookingRead.model_validate(row) for row in rows]

    def create_booking(self, data: BookingCreate) -> BookingRead:
        values = {column: getattr(data, column, None) for column in BOOKING_COLUMNS}
        values["status"] = values["status"] or BookingStatus.PENDING
        values["payment_status"] = values["payment_status"] or PaymentStatus.UNPAID
        values["created_at"] = utcnow()
        booking_id = self._insert("bookings", values)
        return BookingRead(id=booking_id, **values)

    def update_booking(self, booking_id: int, updates: Dict[str, Any]) -> BookingRead:
        updates = {k: v for k, v in updates.items() if k in BOOKING_COLUMNS and k != "created_at"}
        return BookingRead.model_validate(self._update("bookings", "Booking", booking_id, updates))

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------
    def create_review(self, data: ReviewCreate) -> ReviewRead:
        values = {column: getattr(data, column, None) for column in REVIEW_COLUMNS}
        values["created_at"] = utcnow()
        review_id = self._insert("reviews", values)
        return ReviewRead(id=review_id, **values)

    def get_reviews_by_provider(self, provider_id: int) -> List[ReviewRead]:
        rows = self._fetch_all(
            "SELECT * FROM reviews WHERE provider_id = ? ORDER BY created_at DESC, id DESC",
            (provider_id,),
        )
        return [ReviewRead.model_validate(row) for row in rows]
