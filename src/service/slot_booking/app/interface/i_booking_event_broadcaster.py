"""
Booking Event Broadcaster Interface

Use cases depend on this protocol; the driven adapter fans events out to
connected viewers.
"""

from typing import Protocol

from src.service.slot_booking.domain.entity.booking_view_entity import BookingView
from src.service.slot_booking.domain.enum.booking_event_type import BookingEventType


class IBookingEventBroadcaster(Protocol):
    async def publish(self, *, event_type: BookingEventType, booking: BookingView) -> None:
        """
        Deliver one event to every currently connected viewer

        Best-effort: never blocks the caller, no replay, no retry.
        """
        ...
