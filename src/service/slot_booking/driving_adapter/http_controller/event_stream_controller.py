from collections.abc import AsyncIterator

import anyio
from fastapi import APIRouter, status
import orjson
from sse_starlette.sse import EventSourceResponse

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.slot_booking.driven_adapter.broadcaster.booking_event_broadcaster_impl import (
    BOOKING_CHANNEL,
)


router = APIRouter()


@router.get('/stream', status_code=status.HTTP_200_OK)
@Logger.io
async def stream_booking_events() -> EventSourceResponse:
    """
    SSE stream of booking_created / booking_cancelled events

    Architecture: Use Case → In-memory Broadcaster → SSE Endpoint → Client

    Flow:
    1. Client connects → endpoint subscribes to the bookings channel
    2. Every committed reservation or cancellation is pushed as it happens
    3. On disconnect the subscription is dropped and its stream closed

    Events published before the client connected are not replayed.
    """
    broadcaster = container.in_memory_broadcaster()
    stream = await broadcaster.subscribe(channel=BOOKING_CHANNEL)
    Logger.base.info('📡 [SSE] Client subscribed to booking events')

    async def event_generator() -> AsyncIterator[dict[str, str]]:
        metrics.sse_connections.inc()
        try:
            async for envelope in stream:
                yield {
                    'event': envelope['event_type'],
                    'data': orjson.dumps(envelope).decode(),
                }
        except anyio.get_cancelled_exc_class():
            Logger.base.info('🔌 [SSE] Client disconnected from booking events')
            raise
        finally:
            metrics.sse_connections.dec()
            with anyio.CancelScope(shield=True):
                await broadcaster.unsubscribe(channel=BOOKING_CHANNEL, stream=stream)

    return EventSourceResponse(event_generator(), ping=settings.SSE_PING_INTERVAL_SECONDS)
