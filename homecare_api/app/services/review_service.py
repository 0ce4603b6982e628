"""
Business logic for reviews.

A customer may review the provider of a booking once the booking is
completed.  Reviews are immutable and listed per provider, newest
first.
"""

import logging
from typing import List, Optional

from ..core.errors import BookingValidationError
from ..schemas.booking import BookingStatus
from ..schemas.review import ReviewCreate, ReviewRead
from ..storage import get_storage


class ReviewService:
    """Service for submitting and listing provider reviews."""

    @classmethod
    async def create_review(cls, data: ReviewCreate) -> ReviewRead:
        """Store a review for a completed booking.

        Raises ``BookingValidationError`` (field ``bookingId``) when the
        booking does not exist or has not been completed.
        """
        logger = logging.getLogger(__name__)
        storage = get_storage()
        booking = storage.get_booking(data.booking_id)
        if booking is None:
            raise BookingValidationError(f"Booking {data.booking_id} does not exist", field="bookingId")
        if booking.status != BookingStatus.COMPLETED:
            raise BookingValidationError(
                "Only completed bookings can be reviewed", field="bookingId"
            )
        review = storage.create_review(data)
        logger.info(
            "Customer %s rated provider %s %s/5 (review %s)",
            review.customer_id,
            review.provider_id,
            review.rating,
            review.id,
        )
        return review

    @classmethod
    async def list_reviews(cls, provider_id: Optional[int] = None) -> List[ReviewRead]:
        """Reviews for ``provider_id``; without a provider the list is empty."""
        if provider_id is None:
            return []
        return get_storage().get_reviews_by_provider(provider_id)
