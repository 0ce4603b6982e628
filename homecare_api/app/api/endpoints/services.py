"""Service catalogue endpoints."""

from typing import List

from fastapi import APIRouter, HTTPException, Path, status

from homecare_api.app.core.errors import NotFoundError
from homecare_api.app.schemas.service import ServiceCreate, ServiceRead
from homecare_api.app.services.catalog_service import CatalogService


router = APIRouter()


@router.get("", response_model=List[ServiceRead])
async def list_services() -> List[ServiceRead]:
    return await CatalogService.list_services()


@router.get("/{service_id}", response_model=ServiceRead)
async def get_service(service_id: int = Path(..., description="ID of the service")) -> ServiceRead:
    try:
        return await CatalogService.get_service(service_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=ServiceRead, status_code=status.HTTP_201_CREATED)
async def create_service(data: ServiceCreate) -> ServiceRead:
    """Add a service to the catalogue."""
    return await CatalogService.create_service(data)
