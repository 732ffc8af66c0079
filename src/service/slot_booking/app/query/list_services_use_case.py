from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.slot_booking.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.slot_booking.domain.entity.service_entity import ServiceEntity


class ListServicesUseCase:
    def __init__(self, *, catalog_query_repo: ICatalogQueryRepo) -> None:
        self.catalog_query_repo = catalog_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        catalog_query_repo: ICatalogQueryRepo = Depends(Provide[Container.catalog_query_repo]),
    ) -> Self:
        return cls(catalog_query_repo=catalog_query_repo)

    @Logger.io
    async def list_services(self) -> List[ServiceEntity]:
        return await self.catalog_query_repo.list_services()

    @Logger.io
    async def get_service(self, *, service_id: int) -> ServiceEntity:
        service = await self.catalog_query_repo.get_service(service_id=service_id)
        if service is None:
            raise NotFoundError('Service not found')
        return service
