"""Abstract interface for order storage."""

from abc import ABC, abstractmethod
from datetime import datetime

from kitchenops.core.entities.order import Order, OrderStatus, StatusHistoryEntry


class IOrderStore(ABC):
    """Interface for order persistence, including lines and status history."""

    @abstractmethod
    async def create_order(self, order: Order) -> Order:
        """Create an order with its lines, ingredient snapshot and history."""
        pass

    @abstractmethod
    async def get_order(self, order_id: int) -> Order | None:
        """Get order by ID with lines, ingredients and history loaded."""
        pass

    @abstractmethod
    async def list_orders(
        self,
        status: OrderStatus | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[Order]:
        """List orders, newest order_date first."""
        pass

    @abstractmethod
    async def update_order(self, order: Order) -> Order:
        """
        Persist customer, dates, notes, lines and ingredient snapshot.

        Applies only while the stored order is still Draft; raises
        InvalidStateError otherwise.
        """
        pass

    @abstractmethod
    async def claim_status(
        self, order_id: int, expected: OrderStatus, status: OrderStatus
    ) -> bool:
        """
        Set the status only if it is still `expected`.

        Returns False when another writer changed it first.
        """
        pass

    @abstractmethod
    async def append_status(
        self, order_id: int, entry: StatusHistoryEntry
    ) -> None:
        """Append a history entry and set the order status to entry.status."""
        pass

    @abstractmethod
    async def delete_order(self, order_id: int) -> bool:
        """Delete an order. Returns False if missing."""
        pass
