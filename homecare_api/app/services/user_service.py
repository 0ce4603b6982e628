"""
Business logic for users.

Users are never deleted.  ``current_user`` stands in for a session:
it returns the first customer in the store, which is what the web
client treats as "me".
"""

import logging
from typing import List, Optional

from ..core.errors import NotFoundError
from ..schemas.user import UserCreate, UserRead, UserRole, UserUpdate
from ..storage import get_storage


class UserService:
    """Service for listing, creating and updating users."""

    @classmethod
    async def list_users(cls, role: Optional[str] = None) -> List[UserRead]:
        """Return all users, or only those holding ``role``."""
        storage = get_storage()
        if role is None:
            return storage.get_users()
        return storage.get_users_by_role(role)

    @classmethod
    async def get_user(cls, user_id: int) -> UserRead:
        user = get_storage().get_user(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    @classmethod
    async def current_user(cls) -> Optional[UserRead]:
        """Return the first customer, or ``None`` if there is none."""
        customers = get_storage().get_users_by_role(UserRole.CUSTOMER.value)
        return customers[0] if customers else None

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        logger = logging.getLogger(__name__)
        user = get_storage().create_user(data)
        logger.info("Registered %s %s (id %s)", user.role.value, user.email, user.id)
        return user

    @classmethod
    async def update_user(cls, user_id: int, update: UserUpdate) -> UserRead:
        """Apply a partial update.  Raises ``NotFoundError`` for an unknown id."""
        logger = logging.getLogger(__name__)
        updates = update.model_dump(exclude_unset=True)
        user = get_storage().update_user(user_id, updates)
        if updates:
            logger.info("User %s updated: %s", user_id, ", ".join(sorted(updates)))
        return user
