"""
Booking Command Repository Interface

Booking ledger writes for the reservation coordinator.
"""

from abc import ABC, abstractmethod

from src.service.slot_booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        """
        Insert a booking (not committed until the unit of work commits)

        Returns:
            Booking entity with its generated id
        """
        pass

    @abstractmethod
    async def get_by_id_for_update(self, *, booking_id: int) -> Booking | None:
        """Read a booking and hold an exclusive row lock until the unit of work ends"""
        pass

    @abstractmethod
    async def update_status(self, *, booking: Booking) -> Booking:
        pass
