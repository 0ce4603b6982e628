"""
Business logic for bookings.

The ``BookingService`` creates bookings on behalf of customers,
returns the bookings visible to a requester's role and applies
partial updates (status changes by providers and admins, provider
assignment, payment status).  Status changes go through the lifecycle
checks in ``booking_lifecycle``.

The requester's role is taken at face value; there is no
authentication behind it.
"""

import logging
from typing import List, Optional

from ..core.errors import BookingValidationError, NotFoundError
from ..schemas.booking import BookingCreate, BookingRead, BookingUpdate
from ..schemas.user import UserRole
from ..storage import get_storage
from .booking_lifecycle import check_transition


class BookingService:
    """Service for creating, listing and updating bookings."""

    @classmethod
    async def list_bookings(
        cls,
        role: Optional[UserRole] = None,
        user_id: Optional[int] = None,
    ) -> List[BookingRead]:
        """Return the bookings visible to ``role``/``user_id``.

        Admins, and callers that leave out ``role`` or ``user_id``, get
        every booking.  Results are ordered by scheduled date, newest
        first.
        """
        storage = get_storage()
        if role is None or user_id is None or role == UserRole.ADMIN:
            return storage.get_bookings()
        return storage.get_user_bookings(user_id, role.value)

    @classmethod
    async def get_booking(cls, booking_id: int) -> BookingRead:
        """Retrieve a single booking or raise ``NotFoundError``."""
        booking = get_storage().get_booking(booking_id)
        if booking is None:
            raise NotFoundError("Booking", booking_id)
        return booking

    @classmethod
    async def create_booking(cls, data: BookingCreate) -> BookingRead:
        """Create a booking, pricing it from the service when needed.

        If ``total_price`` is not supplied the price of the referenced
        service is used.  Whether the customer and provider exist is
        not checked here.
        """
        logger = logging.getLogger(__name__)
        storage = get_storage()
        if data.total_price is None:
            service = storage.get_service(data.service_id)
            if service is None:
                raise BookingValidationError(
                    f"Service {data.service_id} does not exist; totalPrice is required",
                    field="totalPrice",
                )
            data = data.model_copy(update={"total_price": service.price})
        booking = storage.create_booking(data)
        logger.info(
            "Customer %s booked service %s for %s (booking %s)",
            booking.customer_id,
            booking.service_id,
            booking.scheduled_date.isoformat(),
            booking.id,
        )
        return booking

    @classmethod
    async def update_booking(
        cls,
        booking_id: int,
        update: BookingUpdate,
        strict: Optional[bool] = None,
    ) -> BookingRead:
        """Merge the fields set on ``update`` into an existing booking.

        A status change is validated against the lifecycle table (only
        enforced in strict mode).  Raises ``NotFoundError`` for an
        unknown id and ``InvalidTransitionError`` for a rejected status
        change.
        """
        logger = logging.getLogger(__name__)
        storage = get_storage()
        updates = update.model_dump(exclude_unset=True)
        if "status" in updates:
            current = storage.get_booking(booking_id)
            if current is None:
                raise NotFoundError("Booking", booking_id)
            check_transition(current.status, updates["status"], strict=strict)
        booking = storage.update_booking(booking_id, updates)
        if updates:
            logger.info("Booking %s updated: %s", booking_id, ", ".join(sorted(updates)))
        return booking
