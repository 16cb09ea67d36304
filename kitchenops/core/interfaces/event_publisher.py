"""Abstract interface for domain event publishing."""

from abc import ABC, abstractmethod

from kitchenops.core.entities.event import DomainEvent


class IEventPublisher(ABC):
    """Port for pushing change notifications to live subscribers."""

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """Publish an event. Must not raise on delivery problems."""
        pass
