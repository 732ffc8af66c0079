"""
Booking Event Type Enum - Domain Value Object

Kinds of real-time notifications fanned out to connected viewers.
"""

from enum import StrEnum


class BookingEventType(StrEnum):
    BOOKING_CREATED = 'booking_created'
    BOOKING_CANCELLED = 'booking_cancelled'
