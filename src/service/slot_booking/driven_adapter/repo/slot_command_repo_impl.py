from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.slot_booking.app.interface.i_slot_command_repo import ISlotCommandRepo
from src.service.slot_booking.domain.entity.slot_entity import SlotEntity
from src.service.slot_booking.driven_adapter.model.slot_model import SlotModel


class SlotCommandRepoImpl(ISlotCommandRepo):
    """Slot writes bound to the unit of work's session."""

    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_slot: SlotModel) -> SlotEntity:
        return SlotEntity(
            id=db_slot.id,
            service_id=db_slot.service_id,
            slot_date=db_slot.slot_date,
            slot_time=db_slot.slot_time,
            available=db_slot.available,
            created_at=db_slot.created_at,
        )

    @Logger.io
    async def get_by_id_for_update(self, *, slot_id: int) -> SlotEntity | None:
        # FOR UPDATE on PostgreSQL; SQLite drops the clause and relies on BEGIN IMMEDIATE
        result = await self.session.execute(
            select(SlotModel).where(SlotModel.id == slot_id).with_for_update()
        )
        db_slot = result.scalar_one_or_none()
        if db_slot is None:
            return None
        return self._to_entity(db_slot)

    @Logger.io
    async def update_availability(self, *, slot: SlotEntity) -> SlotEntity:
        await self.session.execute(
            update(SlotModel).where(SlotModel.id == slot.id).values(available=slot.available)
        )
        return slot
