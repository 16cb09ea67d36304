"""Tests for the in-process event broadcaster."""

from kitchenops.core.entities.event import DomainEvent, EventType
from kitchenops.infrastructure.notifications import (
    EventBroadcaster,
    get_event_broadcaster,
    reset_event_broadcaster,
)


def _event(n: int = 0) -> DomainEvent:
    return DomainEvent(type=EventType.ORDER_UPDATE, data={"n": n})


class TestEventBroadcaster:
    async def test_publish_without_subscribers(self):
        broadcaster = EventBroadcaster()
        await broadcaster.publish(_event())
        assert broadcaster.subscriber_count == 0

    async def test_every_subscriber_receives(self):
        broadcaster = EventBroadcaster()
        async with broadcaster.subscribe() as first, broadcaster.subscribe() as second:
            assert broadcaster.subscriber_count == 2
            await broadcaster.publish(_event(1))

            assert first.get_nowait().data == {"n": 1}
            assert second.get_nowait().data == {"n": 1}

    async def test_unsubscribe_on_exit(self):
        broadcaster = EventBroadcaster()
        async with broadcaster.subscribe():
            pass
        assert broadcaster.subscriber_count == 0

    async def test_full_queue_drops_oldest(self):
        broadcaster = EventBroadcaster(max_queue_size=2)
        async with broadcaster.subscribe() as events:
            for n in range(3):
                await broadcaster.publish(_event(n))

            assert events.qsize() == 2
            assert [events.get_nowait().data["n"] for _ in range(2)] == [1, 2]


def test_singleton_reset():
    first = get_event_broadcaster()
    assert get_event_broadcaster() is first
    reset_event_broadcaster()
    assert get_event_broadcaster() is not first
