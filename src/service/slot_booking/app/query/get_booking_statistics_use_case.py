from datetime import date
from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.slot_booking.app.interface.i_statistics_query_repo import IStatisticsQueryRepo
from src.service.slot_booking.domain.entity.booking_statistics_entity import BookingStatistics


class GetBookingStatisticsUseCase:
    """Pull-based dashboard numbers; computed fresh on every call."""

    def __init__(
        self,
        *,
        statistics_query_repo: IStatisticsQueryRepo,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.statistics_query_repo = statistics_query_repo
        self.today = today

    @classmethod
    @inject
    def depends(
        cls,
        statistics_query_repo: IStatisticsQueryRepo = Depends(
            Provide[Container.statistics_query_repo]
        ),
    ) -> Self:
        return cls(statistics_query_repo=statistics_query_repo)

    @Logger.io
    async def execute(self) -> BookingStatistics:
        return await self.statistics_query_repo.get_statistics(today=self.today())
