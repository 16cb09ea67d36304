"""
In-process event broadcaster.

Each subscriber gets its own bounded asyncio queue. Publishing never blocks:
when a subscriber's queue is full the oldest event is dropped for that
subscriber only.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from kitchenops.config import get_logger
from kitchenops.core.entities.event import DomainEvent
from kitchenops.core.interfaces.event_publisher import IEventPublisher

logger = get_logger(__name__)


class EventBroadcaster(IEventPublisher):
    """Fan domain events out to any number of local subscribers."""

    def __init__(self, max_queue_size: int = 100):
        self.max_queue_size = max_queue_size
        self._subscribers: set[asyncio.Queue[DomainEvent]] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event to every current subscriber."""
        for queue in list(self._subscribers):
            if queue.full():
                queue.get_nowait()
                logger.warning("event_dropped_for_slow_subscriber", type=event.type.value)
            queue.put_nowait(event)
        logger.debug(
            "event_published",
            type=event.type.value,
            subscribers=len(self._subscribers),
        )

    @asynccontextmanager
    async def subscribe(self) -> AsyncIterator[asyncio.Queue[DomainEvent]]:
        """
        Register a subscriber queue for the duration of the block.

        Usage:
            async with broadcaster.subscribe() as events:
                event = await events.get()
        """
        queue: asyncio.Queue[DomainEvent] = asyncio.Queue(maxsize=self.max_queue_size)
        self._subscribers.add(queue)
        logger.info("event_subscriber_added", subscribers=len(self._subscribers))
        try:
            yield queue
        finally:
            self._subscribers.discard(queue)
            logger.info("event_subscriber_removed", subscribers=len(self._subscribers))


_broadcaster: EventBroadcaster | None = None


def get_event_broadcaster() -> EventBroadcaster:
    """Get singleton broadcaster instance."""
    global _broadcaster
    if _broadcaster is None:
        _broadcaster = EventBroadcaster()
    return _broadcaster


def reset_event_broadcaster() -> None:
    """Reset broadcaster (for testing)."""
    global _broadcaster
    _broadcaster = None
