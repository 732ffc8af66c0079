from datetime import date
from typing import Callable, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.slot_booking.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.slot_booking.domain.entity.booking_view_entity import SlotDetail


class ListSlotsUseCase:
    def __init__(
        self,
        *,
        catalog_query_repo: ICatalogQueryRepo,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.catalog_query_repo = catalog_query_repo
        self.today = today

    @classmethod
    @inject
    def depends(
        cls,
        catalog_query_repo: ICatalogQueryRepo = Depends(Provide[Container.catalog_query_repo]),
    ) -> Self:
        return cls(catalog_query_repo=catalog_query_repo)

    @Logger.io
    async def list_service_slots(self, *, service_id: int) -> List[SlotDetail]:
        return await self.catalog_query_repo.list_service_slots(service_id=service_id)

    @Logger.io
    async def list_available_slots(self) -> List[SlotDetail]:
        return await self.catalog_query_repo.list_available_slots(today=self.today())
