"""Abstract interface for raw-material inventory storage."""

from abc import ABC, abstractmethod

from kitchenops.core.entities.inventory import InventoryItem, PurchaseEntry


class IInventoryStore(ABC):
    """Interface for inventory item and purchase log persistence."""

    @abstractmethod
    async def create_item(self, item: InventoryItem) -> InventoryItem:
        """Create a new inventory item."""
        pass

    @abstractmethod
    async def get_item(
        self, item_id: int, include_history: bool = False
    ) -> InventoryItem | None:
        """Get inventory item by ID, optionally with its purchase log."""
        pass

    @abstractmethod
    async def get_item_by_name(self, name: str) -> InventoryItem | None:
        """Get inventory item by exact (trimmed) name."""
        pass

    @abstractmethod
    async def list_items(self, low_stock_only: bool = False) -> list[InventoryItem]:
        """List items ordered by name; low_stock_only keeps stock <= threshold."""
        pass

    @abstractmethod
    async def update_item(self, item: InventoryItem) -> InventoryItem:
        """Overwrite descriptive fields and stock of an existing item."""
        pass

    @abstractmethod
    async def delete_item(self, item_id: int) -> bool:
        """Delete an item and its purchase log. Returns False if missing."""
        pass

    @abstractmethod
    async def adjust_stock(
        self, item_id: int, delta: float, updated_by: str
    ) -> bool:
        """
        Conditionally add delta to current_stock.

        The update only applies when current_stock + delta stays >= 0, checked
        and written in a single statement. Returns whether it applied.
        """
        pass

    @abstractmethod
    async def record_purchase(self, entry: PurchaseEntry) -> PurchaseEntry:
        """Append a purchase and add its quantity to stock atomically."""
        pass
