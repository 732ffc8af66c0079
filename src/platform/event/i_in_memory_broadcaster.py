"""
In-memory Event Broadcaster Interface

Pub/sub mechanism for distributing events from use cases to the
connected SSE clients of this process.
"""

from typing import Protocol

from anyio.streams.memory import MemoryObjectReceiveStream


class IInMemoryEventBroadcaster(Protocol):
    """
    Interface for in-memory event broadcasting

    Uses anyio's MemoryObjectStream for better async support and type safety.
    """

    async def subscribe(self, *, channel: str) -> MemoryObjectReceiveStream[dict]:
        """
        Subscribe to a channel

        Args:
            channel: Channel name to subscribe to

        Returns:
            MemoryObjectReceiveStream that will receive event dictionaries
        """
        ...

    async def broadcast(self, *, channel: str, event_data: dict) -> None:
        """
        Broadcast event to every current subscriber of the channel

        Note:
            - Silently ignores if no subscribers exist
            - Drops event for a subscriber whose stream is full (never blocks)
        """
        ...

    async def unsubscribe(self, *, channel: str, stream: MemoryObjectReceiveStream[dict]) -> None:
        """
        Unsubscribe and cleanup

        Note:
            - Removes empty subscriber lists to prevent memory leaks
            - Safe to call with non-existent stream
        """
        ...

    def subscriber_count(self, *, channel: str) -> int: ...
