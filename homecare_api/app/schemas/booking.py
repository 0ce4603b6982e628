"""
Pydantic models for bookings.

A booking links a customer, an optional provider and a service at a
scheduled time.  ``status`` follows the lifecycle described in
``services.booking_lifecycle``; ``payment_status`` moves independently
of it.  Numeric identifiers arriving as strings (``"3"``) are coerced
to integers.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from .base import CamelModel, as_utc


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    DISPUTED = "disputed"


class PaymentStatus(str, Enum):
    UNPAID = "unpaid"
    PAID = "paid"
    REFUNDED = "refunded"


class BookingBase(CamelModel):
    customer_id: int = Field(..., examples=[1])
    provider_id: Optional[int] = Field(None, description="Assigned provider, if any")
    service_id: int = Field(..., examples=[1])
    scheduled_date: datetime = Field(..., examples=["2026-10-18T09:00:00Z"])
    address: str = Field(..., min_length=1, examples=["123 Health Ave, Wellness City"])
    notes: Optional[str] = None

    @field_validator("scheduled_date")
    @classmethod
    def normalise_scheduled_date(cls, v: datetime) -> datetime:
        return as_utc(v)


class BookingCreate(BookingBase):
    """Schema for creating a booking.

    ``status`` and ``payment_status`` are left unset unless the client
    sends them; the store fills in ``pending`` and ``unpaid``.  When
    ``total_price`` is omitted it is taken from the service price.
    """

    status: Optional[BookingStatus] = None
    payment_status: Optional[PaymentStatus] = None
    total_price: Optional[int] = Field(None, ge=0, description="Total in minor currency units")


class BookingUpdate(CamelModel):
    """Partial update of a booking.

    Only the fields present in the request body are merged into the
    stored record.  ``provider_id`` and ``notes`` may be cleared with an
    explicit ``null``; every other field may only be replaced.
    """

    customer_id: Optional[int] = None
    provider_id: Optional[int] = None
    service_id: Optional[int] = None
    status: Optional[BookingStatus] = None
    scheduled_date: Optional[datetime] = None
    address: Optional[str] = Field(None, min_length=1)
    notes: Optional[str] = None
    total_price: Optional[int] = Field(None, ge=0)
    payment_status: Optional[PaymentStatus] = None

    @field_validator(
        "customer_id",
        "service_id",
        "status",
        "scheduled_date",
        "address",
        "total_price",
        "payment_status",
        mode="before",
    )
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field may not be null")
        return v

    @field_validator("scheduled_date")
    @classmethod
    def normalise_scheduled_date(cls, v: datetime) -> datetime:
        return as_utc(v)


class BookingRead(BookingBase):
    id: int
    status: BookingStatus
    total_price: int
    payment_status: PaymentStatus
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def normalise_created_at(cls, v: datetime) -> datetime:
        return as_utc(v)
