"""Abstract interface for finished-goods storage."""

from abc import ABC, abstractmethod

from kitchenops.core.entities.finished_goods import FinishedGoods, StockHistoryEntry


class IFinishedGoodsStore(ABC):
    """Interface for finished-goods stock and its transaction log."""

    @abstractmethod
    async def create_item(self, item: FinishedGoods) -> FinishedGoods:
        """Create a finished-goods record, persisting any seeded history."""
        pass

    @abstractmethod
    async def get_item(
        self, item_id: int, include_history: bool = False
    ) -> FinishedGoods | None:
        """Get finished goods by ID, optionally with stock history."""
        pass

    @abstractmethod
    async def get_item_by_name(self, name: str) -> FinishedGoods | None:
        """Get finished goods by exact name."""
        pass

    @abstractmethod
    async def get_item_by_recipe(self, recipe_id: int) -> FinishedGoods | None:
        """Get the finished-goods record produced from a recipe, if any."""
        pass

    @abstractmethod
    async def list_items(self) -> list[FinishedGoods]:
        """List finished goods ordered by name."""
        pass

    @abstractmethod
    async def update_item(self, item: FinishedGoods) -> FinishedGoods:
        """Update name, recipe and unit."""
        pass

    @abstractmethod
    async def delete_item(self, item_id: int) -> bool:
        """Delete a record and its history. Returns False if missing."""
        pass

    @abstractmethod
    async def apply_transaction(
        self, entry: StockHistoryEntry, delta: float
    ) -> bool:
        """
        Conditionally add delta to stock and append entry to the history.

        Nothing is written unless current_stock + delta stays >= 0. Produced
        entries also set last_produced_date. Returns whether it applied.
        """
        pass
