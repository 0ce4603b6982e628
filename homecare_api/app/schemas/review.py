"""
Pydantic schemas for provider reviews.

A review is left by a customer for a completed booking and rates the
provider who carried it out.  Reviews cannot be edited once stored.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .base import CamelModel, as_utc


class ReviewCreate(CamelModel):
    """Schema for creating a new review."""

    booking_id: int = Field(..., description="Identifier of the completed booking")
    customer_id: int
    provider_id: int
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: Optional[str] = Field(None, description="Optional textual comment")

    @field_validator("comment")
    @classmethod
    def sanitize_comment(cls, v: Optional[str]) -> Optional[str]:
        """Trim whitespace from the comment and enforce a maximum length."""
        if v is None:
            return None
        v = v.strip()
        if len(v) > 1000:
            raise ValueError("Comment must be 1000 characters or fewer")
        return v or None


class ReviewRead(ReviewCreate):
    """Schema for reading a review from the API."""

    id: int
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def normalise_created_at(cls, v: datetime) -> datetime:
        return as_utc(v)
