from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.slot_booking.domain.booking_errors import AlreadyCancelledError
from src.service.slot_booking.domain.enum.booking_status import BookingStatus


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


@attrs.define
class Booking:
    slot_id: int
    customer_name: str
    customer_email: str
    customer_phone: Optional[str] = None
    notes: Optional[str] = None
    status: BookingStatus = BookingStatus.CONFIRMED
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        slot_id: int,
        customer_name: str,
        customer_email: str,
        customer_phone: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> 'Booking':
        if not customer_name or not customer_name.strip():
            raise DomainError('customer_name is required', 400)
        if not customer_email or not customer_email.strip():
            raise DomainError('customer_email is required', 400)

        return cls(
            slot_id=slot_id,
            customer_name=customer_name.strip(),
            customer_email=customer_email.strip(),
            customer_phone=_blank_to_none(customer_phone),
            notes=_blank_to_none(notes),
            status=BookingStatus.CONFIRMED,
        )

    def cancel(self) -> 'Booking':
        # Completed bookings are still cancellable
        if self.status == BookingStatus.CANCELLED:
            raise AlreadyCancelledError()
        return attrs.evolve(self, status=BookingStatus.CANCELLED)
