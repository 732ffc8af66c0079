from abc import ABC, abstractmethod

from src.service.slot_booking.domain.entity.slot_entity import SlotEntity


class ISlotCommandRepo(ABC):
    """
    Slot store writes. Only the reservation coordinator uses this, always
    inside a unit of work.
    """

    @abstractmethod
    async def get_by_id_for_update(self, *, slot_id: int) -> SlotEntity | None:
        """
        Read a slot and hold an exclusive row lock until the unit of work ends

        Returns:
            Slot entity or None if the slot does not exist
        """
        pass

    @abstractmethod
    async def update_availability(self, *, slot: SlotEntity) -> SlotEntity:
        pass
