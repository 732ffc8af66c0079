from datetime import date
from typing import Any, AsyncContextManager, Callable, List

from sqlalchemy import Select, and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.slot_booking.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.slot_booking.domain.entity.booking_view_entity import SlotDetail
from src.service.slot_booking.domain.entity.service_entity import ServiceEntity
from src.service.slot_booking.domain.enum.booking_status import BookingStatus
from src.service.slot_booking.driven_adapter.model.booking_model import BookingModel
from src.service.slot_booking.driven_adapter.model.service_model import ServiceModel
from src.service.slot_booking.driven_adapter.model.slot_model import SlotModel


class CatalogQueryRepoImpl(ICatalogQueryRepo):
    """Read-only queries over services and their slots."""

    def __init__(self, *, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @staticmethod
    def _to_service(db_service: ServiceModel) -> ServiceEntity:
        return ServiceEntity(
            id=db_service.id,
            name=db_service.name,
            description=db_service.description,
            duration_minutes=db_service.duration_minutes,
            price=db_service.price,
        )

    @staticmethod
    def _slot_detail_query() -> Select[Any]:
        return (
            select(
                SlotModel.id,
                SlotModel.service_id,
                SlotModel.slot_date,
                SlotModel.slot_time,
                SlotModel.available,
                ServiceModel.name.label('service_name'),
                ServiceModel.duration_minutes,
                ServiceModel.price,
                BookingModel.customer_name,
                BookingModel.customer_email,
                BookingModel.status.label('booking_status'),
            )
            .join(ServiceModel, SlotModel.service_id == ServiceModel.id)
            .outerjoin(
                BookingModel,
                and_(
                    BookingModel.slot_id == SlotModel.id,
                    BookingModel.status == BookingStatus.CONFIRMED.value,
                ),
            )
            .order_by(SlotModel.slot_date, SlotModel.slot_time)
        )

    @Logger.io
    async def list_services(self) -> List[ServiceEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(ServiceModel).order_by(ServiceModel.name))
            return [self._to_service(db_service) for db_service in result.scalars().all()]

    @Logger.io
    async def get_service(self, *, service_id: int) -> ServiceEntity | None:
        async with self.session_factory() as session:
            db_service = await session.get(ServiceModel, service_id)
            if db_service is None:
                return None
            return self._to_service(db_service)

    @Logger.io
    async def list_service_slots(self, *, service_id: int) -> List[SlotDetail]:
        async with self.session_factory() as session:
            result = await session.execute(
                self._slot_detail_query().where(SlotModel.service_id == service_id)
            )
            return [SlotDetail(**row._mapping) for row in result.all()]

    @Logger.io
    async def list_available_slots(self, *, today: date) -> List[SlotDetail]:
        async with self.session_factory() as session:
            result = await session.execute(
                self._slot_detail_query().where(
                    SlotModel.available.is_(True), SlotModel.slot_date >= today
                )
            )
            return [SlotDetail(**row._mapping) for row in result.all()]
