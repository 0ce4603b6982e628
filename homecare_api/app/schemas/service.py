"""
Pydantic models for the service catalogue.

Prices are integers in minor currency units (cents); a service has no
update operation once created.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class ServiceBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Home Nursing Care"])
    description: str = Field(..., examples=["Professional nursing care in the comfort of your home."])
    category: str = Field(..., min_length=1, examples=["Nursing"])
    price: int = Field(..., ge=0, description="Price in minor currency units", examples=[15000])
    duration_minutes: int = Field(..., gt=0, examples=[120])
    image_url: Optional[str] = None
    is_featured: bool = False


class ServiceCreate(ServiceBase):
    """Schema for adding a service to the catalogue."""
    pass


class ServiceRead(ServiceBase):
    id: int
