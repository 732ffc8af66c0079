from datetime import date, datetime, time
from typing import Any, Optional

import attrs


@attrs.define(frozen=True)
class BookingView:
    """
    Booking joined with its slot and service.

    Returned by the API and used as the broadcast payload, so every
    viewer sees the same shape.
    """

    id: int
    slot_id: int
    customer_name: str
    customer_email: str
    customer_phone: Optional[str]
    notes: Optional[str]
    status: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    slot_date: date
    slot_time: time
    service_id: int
    service_name: str
    duration_minutes: int
    price: int

    def to_dict(self) -> dict[str, Any]:
        return attrs.asdict(self)


@attrs.define(frozen=True)
class SlotDetail:
    """A slot with its service and, when booked, the confirmed booking's customer."""

    id: int
    service_id: int
    slot_date: date
    slot_time: time
    available: bool
    service_name: str
    duration_minutes: int
    price: int
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    booking_status: Optional[str] = None
