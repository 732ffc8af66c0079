"""
Booking Command Repository Implementation

Booking ledger writes bound to the unit of work's session. Nothing here
commits; the unit of work does.
"""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from src.platform.logging.loguru_io import Logger
from src.service.slot_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.slot_booking.domain.entity.booking_entity import Booking
from src.service.slot_booking.domain.enum.booking_status import BookingStatus
from src.service.slot_booking.driven_adapter.model.booking_model import BookingModel


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        return Booking(
            id=db_booking.id,
            slot_id=db_booking.slot_id,
            customer_name=db_booking.customer_name,
            customer_email=db_booking.customer_email,
            customer_phone=db_booking.customer_phone,
            notes=db_booking.notes,
            status=BookingStatus(db_booking.status),
            created_at=db_booking.created_at,
            updated_at=db_booking.updated_at,
        )

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        db_booking = BookingModel(
            slot_id=booking.slot_id,
            customer_name=booking.customer_name,
            customer_email=booking.customer_email,
            customer_phone=booking.customer_phone,
            notes=booking.notes,
            status=booking.status.value,
        )
        self.session.add(db_booking)
        await self.session.flush()  # assigns the id inside the open transaction

        return Booking(
            id=db_booking.id,
            slot_id=booking.slot_id,
            customer_name=booking.customer_name,
            customer_email=booking.customer_email,
            customer_phone=booking.customer_phone,
            notes=booking.notes,
            status=booking.status,
        )

    @Logger.io
    async def get_by_id_for_update(self, *, booking_id: int) -> Booking | None:
        result = await self.session.execute(
            select(BookingModel).where(BookingModel.id == booking_id).with_for_update()
        )
        db_booking = result.scalar_one_or_none()
        if db_booking is None:
            return None
        return self._to_entity(db_booking)

    @Logger.io
    async def update_status(self, *, booking: Booking) -> Booking:
        await self.session.execute(
            update(BookingModel)
            .where(BookingModel.id == booking.id)
            .values(status=booking.status.value, updated_at=func.now())
        )
        return booking
