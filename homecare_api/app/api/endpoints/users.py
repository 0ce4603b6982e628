"""
User endpoints.

There is no login: ``/users/me`` resolves to the first customer and
every other route trusts the caller.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Query, status

from homecare_api.app.core.errors import NotFoundError
from homecare_api.app.schemas.user import UserRead, UserUpdate
from homecare_api.app.services.user_service import UserService


router = APIRouter()


@router.get("/me", response_model=UserRead)
async def read_current_user() -> UserRead:
    """Return the demo "current user" (the first customer).

    Responds with 401 when the store holds no customer.
    """
    user = await UserService.current_user()
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return user


@router.get("", response_model=List[UserRead])
async def list_users(
    role: Optional[str] = Query(None, description="Only return users with this role"),
) -> List[UserRead]:
    """List users, optionally filtered by role.

    An unrecognised role matches nobody and yields an empty list.
    """
    return await UserService.list_users(role)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int = Path(..., description="ID of the user")) -> UserRead:
    try:
        return await UserService.get_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/{user_id}", response_model=UserRead)
async def update_user(
    update: UserUpdate,
    user_id: int = Path(..., description="ID of the user"),
) -> UserRead:
    """Apply a partial update to a user's profile."""
    try:
        return await UserService.update_user(user_id, update)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
