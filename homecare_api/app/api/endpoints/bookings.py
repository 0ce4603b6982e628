"""
Booking endpoints.

Listing is scoped by the ``role`` and ``userId`` query parameters the
client supplies; nothing verifies them.  Status changes made through
``PATCH /bookings/{id}`` are checked against the booking lifecycle
when strict transitions are configured.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Query, status

from homecare_api.app.api.error_handlers import error_body
from homecare_api.app.core.errors import BookingValidationError, NotFoundError
from homecare_api.app.schemas.booking import BookingCreate, BookingRead, BookingUpdate
from homecare_api.app.schemas.user import UserRole
from homecare_api.app.services.booking_service import BookingService


router = APIRouter()


@router.get("", response_model=List[BookingRead])
async def list_bookings(
    role: Optional[UserRole] = Query(None, description="Role of the requester"),
    user_id: Optional[int] = Query(None, alias="userId", description="ID of the requester"),
) -> List[BookingRead]:
    """List bookings visible to the requester, newest scheduled first.

    Customers get their own bookings, providers the bookings assigned
    to them.  Admins, and callers without a role or ``userId``, get
    every booking.
    """
    return await BookingService.list_bookings(role, user_id)


@router.get("/{booking_id}", response_model=BookingRead)
async def get_booking(booking_id: int = Path(..., description="ID of the booking")) -> BookingRead:
    try:
        return await BookingService.get_booking(booking_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
async def create_booking(data: BookingCreate) -> BookingRead:
    """Book a service.

    ``status`` defaults to ``pending`` and ``paymentStatus`` to
    ``unpaid``; ``totalPrice`` defaults to the service price.
    """
    try:
        return await BookingService.create_booking(data)
    except BookingValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error_body(e.message, e.field))


@router.patch("/{booking_id}", response_model=BookingRead)
async def update_booking(
    update: BookingUpdate,
    booking_id: int = Path(..., description="ID of the booking"),
) -> BookingRead:
    """Merge the supplied fields into a booking.

    Returns 404 for an unknown booking and 400 for a status change the
    lifecycle does not allow (strict mode only).
    """
    try:
        return await BookingService.update_booking(booking_id, update)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except BookingValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error_body(e.message, e.field))
