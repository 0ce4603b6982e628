"""
Pydantic models for user data.

A user is a customer, a provider or an administrator.  Provider
specific fields (``specialization``, ``rating``) are optional on every
user so that a single table can hold all three roles.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from .base import CamelModel


class UserRole(str, Enum):
    CUSTOMER = "customer"
    PROVIDER = "provider"
    ADMIN = "admin"


class UserBase(CamelModel):
    role: UserRole = Field(..., examples=["customer"])
    name: str = Field(..., min_length=1, examples=["Alice Smith"])
    email: str = Field(..., min_length=3, examples=["alice@example.com"])
    avatar_url: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    bio: Optional[str] = None
    specialization: Optional[str] = Field(None, description="Provider speciality, e.g. 'Nursing'")
    rating: Optional[int] = Field(5, ge=0, le=5)


class UserCreate(UserBase):
    """Schema for registering a user."""
    pass


class UserUpdate(CamelModel):
    """Partial update of a user.

    Only fields present in the request body are applied.  ``role``,
    ``name`` and ``email`` may be changed but not cleared.
    """

    role: Optional[UserRole] = None
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=3)
    avatar_url: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    bio: Optional[str] = None
    specialization: Optional[str] = None
    rating: Optional[int] = Field(None, ge=0, le=5)

    @field_validator("role", "name", "email", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field may not be null")
        return v


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int
