"""Review endpoints."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from homecare_api.app.api.error_handlers import error_body
from homecare_api.app.core.errors import BookingValidationError
from homecare_api.app.schemas.review import ReviewCreate, ReviewRead
from homecare_api.app.services.review_service import ReviewService


router = APIRouter()


@router.post("", response_model=ReviewRead, status_code=status.HTTP_201_CREATED)
async def create_review(data: ReviewCreate) -> ReviewRead:
    """Review the provider of a completed booking."""
    try:
        return await ReviewService.create_review(data)
    except BookingValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error_body(e.message, e.field))


@router.get("", response_model=List[ReviewRead])
async def list_reviews(
    provider_id: Optional[int] = Query(None, alias="providerId"),
) -> List[ReviewRead]:
    """Reviews of one provider, newest first.  Empty without ``providerId``."""
    return await ReviewService.list_reviews(provider_id)
