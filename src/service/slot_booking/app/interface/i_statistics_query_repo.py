from abc import ABC, abstractmethod
from datetime import date

from src.service.slot_booking.domain.entity.booking_statistics_entity import BookingStatistics


class IStatisticsQueryRepo(ABC):
    @abstractmethod
    async def get_statistics(self, *, today: date) -> BookingStatistics:
        """
        Aggregate counts over the committed state

        Args:
            today: Slots dated before this day are not counted as available
        """
        pass
