"""
Entity store contract.

``Storage`` is the single interface the service layer and the routers
talk to.  Two implementations exist: ``MemoryStorage`` keeps records
in dictionaries and ``SQLiteStorage`` persists them through
``core.db``.  Both return the Pydantic ``*Read`` models, order
bookings by scheduled date (newest first) and raise ``NotFoundError``
when an update targets a missing id.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from ..schemas.booking import BookingCreate, BookingRead
from ..schemas.review import ReviewCreate, ReviewRead
from ..schemas.service import ServiceCreate, ServiceRead
from ..schemas.user import UserCreate, UserRead, UserRole


class Storage(ABC):
    """Abstract entity store for users, services, bookings and reviews."""

    # Users
    @abstractmethod
    def get_users(self) -> List[UserRead]: ...

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[UserRead]: ...

    @abstractmethod
    def get_users_by_role(self, role: str) -> List[UserRead]: ...

    @abstractmethod
    def create_user(self, data: UserCreate) -> UserRead: ...

    @abstractmethod
    def update_user(self, user_id: int, updates: Dict[str, Any]) -> UserRead: ...

    # Services
    @abstractmethod
    def get_services(self) -> List[ServiceRead]: ...

    @abstractmethod
    def get_service(self, service_id: int) -> Optional[ServiceRead]: ...

    @abstractmethod
    def create_service(self, data: ServiceCreate) -> ServiceRead: ...

    # Bookings
    @abstractmethod
    def get_bookings(self) -> List[BookingRead]: ...

    @abstractmethod
    def get_booking(self, booking_id: int) -> Optional[BookingRead]: ...

    @abstractmethod
    def get_user_bookings(self, user_id: int, role: str) -> List[BookingRead]: ...

    @abstractmethod
    def create_booking(self, data: BookingCreate) -> BookingRead: ...

    @abstractmethod
    def update_booking(self, booking_id: int, updates: Dict[str, Any]) -> BookingRead: ...

    # Reviews
    @abstractmethod
    def create_review(self, data: ReviewCreate) -> ReviewRead: ...

    @abstractmethod
    def get_reviews_by_provider(self, provider_id: int) -> List[ReviewRead]: ...


def role_value(role: Any) -> str:
    """Accept either a ``UserRole`` member or its plain string value."""
    return role.value if isinstance(role, UserRole) else str(role)


def scope_bookings(bookings: Iterable[BookingRead], user_id: int, role: str) -> List[BookingRead]:
    """Filter bookings down to what ``role`` is allowed to see.

    Customers see bookings they made, providers the bookings assigned
    to them.  Any other role (admin) sees every booking.
    """
    role = role_value(role)
    if role == UserRole.CUSTOMER.value:
        return [b for b in bookings if b.customer_id == user_id]
    if role == UserRole.PROVIDER.value:
        return [b for b in bookings if b.provider_id == user_id]
    return list(bookings)


def sort_bookings(bookings: Iterable[BookingRead]) -> List[BookingRead]:
    """Newest scheduled date first; ties broken by id, newest first."""
    return sorted(bookings, key=lambda b: (b.scheduled_date, b.id), reverse=True)
