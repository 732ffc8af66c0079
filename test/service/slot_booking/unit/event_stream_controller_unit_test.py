from anyio import fail_after
import orjson
import pytest

from src.platform.config.di import container
from src.service.slot_booking.domain.enum.booking_event_type import BookingEventType
from src.service.slot_booking.driven_adapter.broadcaster.booking_event_broadcaster_impl import (
    BOOKING_CHANNEL,
)
from src.service.slot_booking.driving_adapter.http_controller.event_stream_controller import (
    stream_booking_events,
)
from test.shared.utils import make_booking_view


pytestmark = pytest.mark.unit


class TestBookingEventStream:
    @pytest.fixture(autouse=True)
    def fresh_broadcaster(self):
        container.in_memory_broadcaster.reset()
        container.booking_event_broadcaster.reset()
        yield
        container.in_memory_broadcaster.reset()
        container.booking_event_broadcaster.reset()

    async def test_stream_forwards_published_events_as_sse(self):
        in_memory = container.in_memory_broadcaster()
        response = await stream_booking_events()
        events = response.body_iterator

        assert in_memory.subscriber_count(channel=BOOKING_CHANNEL) == 1

        await container.booking_event_broadcaster().publish(
            event_type=BookingEventType.BOOKING_CREATED, booking=make_booking_view(id=3)
        )

        with fail_after(1.0):
            message = await anext(events)

        assert message['event'] == 'booking_created'
        assert orjson.loads(message['data'])['booking_id'] == 3

        # Disconnect drops the subscription
        await events.aclose()
        assert in_memory.subscriber_count(channel=BOOKING_CHANNEL) == 0
