from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.slot_booking.app.query.get_booking_statistics_use_case import (
    GetBookingStatisticsUseCase,
)
from src.service.slot_booking.driving_adapter.http_controller.schema.stats_schema import (
    StatisticsResponse,
)


router = APIRouter()


@router.get('')
@Logger.io
async def get_statistics(
    use_case: GetBookingStatisticsUseCase = Depends(GetBookingStatisticsUseCase.depends),
) -> StatisticsResponse:
    statistics = await use_case.execute()
    return StatisticsResponse.model_validate(statistics)
