"""Domain event delivery."""

from kitchenops.infrastructure.notifications.broadcaster import (
    EventBroadcaster,
    get_event_broadcaster,
    reset_event_broadcaster,
)

__all__ = [
    "EventBroadcaster",
    "get_event_broadcaster",
    "reset_event_broadcaster",
]
