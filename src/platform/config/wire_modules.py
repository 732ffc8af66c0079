"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.slot_booking.app.command import cancel_booking_use_case, reserve_slot_use_case
from src.service.slot_booking.app.query import (
    get_booking_statistics_use_case,
    list_bookings_use_case,
    list_services_use_case,
    list_slots_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    reserve_slot_use_case,
    cancel_booking_use_case,
    list_bookings_use_case,
    list_services_use_case,
    list_slots_use_case,
    get_booking_statistics_use_case,
]
