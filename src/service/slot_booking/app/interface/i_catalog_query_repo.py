from abc import ABC, abstractmethod
from datetime import date
from typing import List

from src.service.slot_booking.domain.entity.booking_view_entity import SlotDetail
from src.service.slot_booking.domain.entity.service_entity import ServiceEntity


class ICatalogQueryRepo(ABC):
    @abstractmethod
    async def list_services(self) -> List[ServiceEntity]:
        pass

    @abstractmethod
    async def get_service(self, *, service_id: int) -> ServiceEntity | None:
        pass

    @abstractmethod
    async def list_service_slots(self, *, service_id: int) -> List[SlotDetail]:
        """All slots of a service ordered by date and time, with confirmed booking info"""
        pass

    @abstractmethod
    async def list_available_slots(self, *, today: date) -> List[SlotDetail]:
        """Available slots dated today or later, ordered by date and time"""
        pass
