from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable, List

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.slot_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.slot_booking.domain.entity.booking_view_entity import BookingView
from src.service.slot_booking.driven_adapter.model.booking_model import BookingModel
from src.service.slot_booking.driven_adapter.model.service_model import ServiceModel
from src.service.slot_booking.driven_adapter.model.slot_model import SlotModel


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ):
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        """
        Get session for query execution.

        If session is injected (from UoW), yield it directly so reads see the
        unit's own uncommitted writes. Otherwise, use session_factory.
        """
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _view_query() -> Select[Any]:
        return (
            select(
                BookingModel.id,
                BookingModel.slot_id,
                BookingModel.customer_name,
                BookingModel.customer_email,
                BookingModel.customer_phone,
                BookingModel.notes,
                BookingModel.status,
                BookingModel.created_at,
                BookingModel.updated_at,
                SlotModel.slot_date,
                SlotModel.slot_time,
                ServiceModel.id.label('service_id'),
                ServiceModel.name.label('service_name'),
                ServiceModel.duration_minutes,
                ServiceModel.price,
            )
            .join(SlotModel, BookingModel.slot_id == SlotModel.id)
            .join(ServiceModel, SlotModel.service_id == ServiceModel.id)
        )

    @staticmethod
    def _to_view(row: Any) -> BookingView:
        return BookingView(**row._mapping)

    @Logger.io
    async def get_view(self, *, booking_id: int) -> BookingView | None:
        async with self._get_session() as session:
            result = await session.execute(
                self._view_query().where(BookingModel.id == booking_id)
            )
            row = result.one_or_none()
            if row is None:
                return None
            return self._to_view(row)

    @Logger.io
    async def list_views(self) -> List[BookingView]:
        async with self._get_session() as session:
            result = await session.execute(
                self._view_query().order_by(
                    SlotModel.slot_date.desc(), SlotModel.slot_time.desc(), BookingModel.id.desc()
                )
            )
            return [self._to_view(row) for row in result.all()]
