"""
In-memory Event Broadcaster Implementation

Singleton broadcaster (held by the DI container) that fans events out
from use cases to SSE endpoints.
"""

from typing import Dict, List

from anyio import WouldBlock, create_memory_object_stream
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream

from src.platform.logging.loguru_io import Logger


class InMemoryEventBroadcasterImpl:
    """
    In-memory pub/sub keyed by channel name

    Architecture:
    - Use Case → broadcast() → one memory stream per subscriber → SSE Endpoint
    - Each channel has a list of subscriber stream tuples
    - Auto-cleanup empty subscriber lists

    Memory Management:
    - Stream max buffer: `max_buffer_size` events
    - Drop policy: drop for that subscriber if its stream is full (send_nowait raises WouldBlock)
    - Cleanup: Remove empty lists on unsubscribe and close streams
    """

    def __init__(self, *, max_buffer_size: int = 10) -> None:
        self._max_buffer_size = max_buffer_size
        # channel → list of (send_stream, receive_stream) tuples
        self._subscribers: Dict[
            str, List[tuple[MemoryObjectSendStream[dict], MemoryObjectReceiveStream[dict]]]
        ] = {}

    async def subscribe(self, *, channel: str) -> MemoryObjectReceiveStream[dict]:
        send_stream, receive_stream = create_memory_object_stream[dict](
            max_buffer_size=self._max_buffer_size
        )
        self._subscribers.setdefault(channel, []).append((send_stream, receive_stream))

        Logger.base.debug(
            f'📡 [BROADCASTER] Subscribed to {channel} '
            f'(total subscribers: {len(self._subscribers[channel])})'
        )
        return receive_stream

    async def broadcast(self, *, channel: str, event_data: dict) -> None:
        subscribers = self._subscribers.get(channel)
        if not subscribers:
            Logger.base.debug(f'📡 [BROADCASTER] No subscribers on {channel}')
            return

        delivered = 0
        dropped = 0

        # Iterate over a snapshot; unsubscribe may run between deliveries
        for send_stream, _ in list(subscribers):
            try:
                send_stream.send_nowait(event_data)
                delivered += 1
            except WouldBlock:
                # Slow consumer
                dropped += 1
                Logger.base.warning(
                    f'⚠️ [BROADCASTER] Stream full on {channel}, '
                    f'dropping event (type={event_data.get("event_type")})'
                )

        Logger.base.info(
            f'📡 [BROADCASTER] Broadcast to {channel}: delivered={delivered}, dropped={dropped}'
        )

    async def unsubscribe(self, *, channel: str, stream: MemoryObjectReceiveStream[dict]) -> None:
        subscribers = self._subscribers.get(channel)
        if subscribers is None:
            return

        for i, (send_stream, receive_stream) in enumerate(subscribers):
            if receive_stream is stream:
                await send_stream.aclose()
                await receive_stream.aclose()
                subscribers.pop(i)
                Logger.base.debug(
                    f'📡 [BROADCASTER] Unsubscribed from {channel} (remaining: {len(subscribers)})'
                )
                break

        if not subscribers:
            del self._subscribers[channel]
            Logger.base.debug(f'📡 [BROADCASTER] Cleaned up empty list for {channel}')

    def subscriber_count(self, *, channel: str) -> int:
        return len(self._subscribers.get(channel, []))
