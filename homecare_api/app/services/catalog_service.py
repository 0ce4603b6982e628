"""Business logic for the service catalogue."""

import logging
from typing import List

from ..core.errors import NotFoundError
from ..schemas.service import ServiceCreate, ServiceRead
from ..storage import get_storage


class CatalogService:
    """List, fetch and add bookable services."""

    @classmethod
    async def list_services(cls) -> List[ServiceRead]:
        return get_storage().get_services()

    @classmethod
    async def get_service(cls, service_id: int) -> ServiceRead:
        service = get_storage().get_service(service_id)
        if service is None:
            raise NotFoundError("Service", service_id)
        return service

    @classmethod
    async def create_service(cls, data: ServiceCreate) -> ServiceRead:
        service = get_storage().create_service(data)
        logging.getLogger(__name__).info("Added service %s (%s)", service.name, service.id)
        return service
