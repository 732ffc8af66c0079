"""
Booking Event Broadcaster Implementation

Driven Adapter implementing IBookingEventBroadcaster on top of the
platform in-memory broadcaster.

Limitations:
- Single-process only (no cross-instance fan-out)
- Viewers that connect later do not receive earlier events
"""

from src.platform.event.i_in_memory_broadcaster import IInMemoryEventBroadcaster
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.slot_booking.domain.entity.booking_view_entity import BookingView
from src.service.slot_booking.domain.enum.booking_event_type import BookingEventType


BOOKING_CHANNEL = 'bookings'


class BookingEventBroadcasterImpl:
    def __init__(self, *, broadcaster: IInMemoryEventBroadcaster) -> None:
        self.broadcaster = broadcaster

    @staticmethod
    def build_envelope(*, event_type: BookingEventType, booking: BookingView) -> dict:
        return {
            'event_type': event_type.value,
            'booking_id': booking.id,
            'booking': booking.to_dict(),
        }

    async def publish(self, *, event_type: BookingEventType, booking: BookingView) -> None:
        await self.broadcaster.broadcast(
            channel=BOOKING_CHANNEL,
            event_data=self.build_envelope(event_type=event_type, booking=booking),
        )
        metrics.record_event_published(event_type=event_type.value)
        Logger.base.info(f'📤 [BOOKING EVENT] {event_type.value} booking_id={booking.id}')
