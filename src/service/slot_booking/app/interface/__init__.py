"""Application layer interfaces (Ports)"""

from src.service.slot_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.slot_booking.app.interface.i_booking_event_broadcaster import (
    IBookingEventBroadcaster,
)
from src.service.slot_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.slot_booking.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.slot_booking.app.interface.i_slot_command_repo import ISlotCommandRepo
from src.service.slot_booking.app.interface.i_statistics_query_repo import IStatisticsQueryRepo

__all__ = [
    'IBookingCommandRepo',
    'IBookingEventBroadcaster',
    'IBookingQueryRepo',
    'ICatalogQueryRepo',
    'ISlotCommandRepo',
    'IStatisticsQueryRepo',
]
