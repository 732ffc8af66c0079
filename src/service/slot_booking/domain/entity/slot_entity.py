from datetime import date, datetime, time
from typing import Optional

import attrs

from src.service.slot_booking.domain.booking_errors import SlotUnavailableError


@attrs.define
class SlotEntity:
    id: int
    service_id: int
    slot_date: date
    slot_time: time
    available: bool = True
    created_at: Optional[datetime] = None

    def claim(self) -> 'SlotEntity':
        if not self.available:
            raise SlotUnavailableError()
        return attrs.evolve(self, available=False)

    def release(self) -> 'SlotEntity':
        # Reopens unconditionally, past slots included
        return attrs.evolve(self, available=True)
