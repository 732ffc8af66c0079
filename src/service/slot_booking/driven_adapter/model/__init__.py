"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.slot_booking.driven_adapter.model.booking_model import BookingModel
from src.service.slot_booking.driven_adapter.model.service_model import ServiceModel
from src.service.slot_booking.driven_adapter.model.slot_model import SlotModel

__all__ = [
    'BookingModel',
    'ServiceModel',
    'SlotModel',
]
