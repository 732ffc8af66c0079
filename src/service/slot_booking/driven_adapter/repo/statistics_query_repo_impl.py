from datetime import date
from typing import AsyncContextManager, Callable

from sqlalchemy import and_, case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.slot_booking.app.interface.i_statistics_query_repo import IStatisticsQueryRepo
from src.service.slot_booking.domain.entity.booking_statistics_entity import (
    BookingStatistics,
    ServiceStatistics,
)
from src.service.slot_booking.domain.enum.booking_status import BookingStatus
from src.service.slot_booking.driven_adapter.model.booking_model import BookingModel
from src.service.slot_booking.driven_adapter.model.service_model import ServiceModel
from src.service.slot_booking.driven_adapter.model.slot_model import SlotModel


def _count_status(status: BookingStatus):
    return func.count(case((BookingModel.status == status.value, 1)))


class StatisticsQueryRepoImpl(IStatisticsQueryRepo):
    """
    Aggregates over the committed state.

    All three queries run in one read transaction so the summary and the
    per-service breakdown describe the same snapshot.
    """

    def __init__(self, *, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_statistics(self, *, today: date) -> BookingStatistics:
        summary_query = select(
            _count_status(BookingStatus.CONFIRMED).label('confirmed'),
            _count_status(BookingStatus.CANCELLED).label('cancelled'),
            _count_status(BookingStatus.COMPLETED).label('completed'),
            func.count(BookingModel.id).label('total'),
        )

        available_query = select(func.count(SlotModel.id)).where(
            SlotModel.available.is_(True), SlotModel.slot_date >= today
        )

        # Revenue counts confirmed bookings only
        confirmed_booking = and_(
            BookingModel.slot_id == SlotModel.id,
            BookingModel.status == BookingStatus.CONFIRMED.value,
        )
        by_service_query = (
            select(
                ServiceModel.id,
                ServiceModel.name,
                func.count(BookingModel.id).label('booking_count'),
                func.coalesce(
                    func.sum(case((BookingModel.id.is_not(None), ServiceModel.price), else_=0)),
                    0,
                ).label('total_revenue'),
            )
            .select_from(ServiceModel)
            .outerjoin(SlotModel, SlotModel.service_id == ServiceModel.id)
            .outerjoin(BookingModel, confirmed_booking)
            .group_by(ServiceModel.id, ServiceModel.name)
            .order_by(ServiceModel.name)
        )

        async with self.session_factory() as session:
            async with session.begin():
                summary = (await session.execute(summary_query)).one()
                available_slots = (await session.execute(available_query)).scalar_one()
                by_service_rows = (await session.execute(by_service_query)).all()

        return BookingStatistics(
            confirmed_bookings=summary.confirmed,
            cancelled_bookings=summary.cancelled,
            completed_bookings=summary.completed,
            total_bookings=summary.total,
            available_slots=available_slots,
            by_service=[
                ServiceStatistics(
                    service_id=row.id,
                    name=row.name,
                    booking_count=row.booking_count,
                    total_revenue=int(row.total_revenue),
                )
                for row in by_service_rows
            ],
        )
