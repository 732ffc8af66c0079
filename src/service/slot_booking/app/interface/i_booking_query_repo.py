from abc import ABC, abstractmethod
from typing import List

from src.service.slot_booking.domain.entity.booking_view_entity import BookingView


class IBookingQueryRepo(ABC):
    @abstractmethod
    async def get_view(self, *, booking_id: int) -> BookingView | None:
        """Booking joined with slot and service, or None if missing"""
        pass

    @abstractmethod
    async def list_views(self) -> List[BookingView]:
        """Every booking, newest slot first (slot date desc, slot time desc)"""
        pass
