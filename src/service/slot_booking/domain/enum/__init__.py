"""Slot Booking Domain Enums"""

from src.service.slot_booking.domain.enum.booking_event_type import BookingEventType
from src.service.slot_booking.domain.enum.booking_status import BookingStatus

__all__ = ['BookingEventType', 'BookingStatus']
