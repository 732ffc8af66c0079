from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.slot_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.slot_booking.domain.booking_errors import BookingNotFoundError
from src.service.slot_booking.domain.entity.booking_view_entity import BookingView


class ListBookingsUseCase:
    def __init__(self, *, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def list_bookings(self) -> List[BookingView]:
        return await self.booking_query_repo.list_views()

    @Logger.io
    async def get_booking(self, *, booking_id: int) -> BookingView:
        view = await self.booking_query_repo.get_view(booking_id=booking_id)
        if view is None:
            raise BookingNotFoundError()
        return view
