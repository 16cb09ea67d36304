"""Inventory item CRUD use cases."""

from datetime import UTC, datetime

from kitchenops.application.dto.requests import (
    CreateInventoryItemRequest,
    UpdateInventoryItemRequest,
)
from kitchenops.application.dto.responses import (
    InventoryItemResponse,
    InventoryListResponse,
    MessageResponse,
)
from kitchenops.application.use_cases.base import StoreBackedUseCase
from kitchenops.application.use_cases.views import inventory_item_to_response
from kitchenops.config import get_logger
from kitchenops.core.entities.actor import Actor
from kitchenops.core.entities.event import EventType
from kitchenops.core.entities.inventory import InventoryItem
from kitchenops.core.exceptions import (
    DuplicateNameError,
    InventoryItemNotFoundError,
    ValidationError,
)

logger = get_logger(__name__)


class CreateInventoryItemUseCase(StoreBackedUseCase):
    """Create a raw-material item with opening stock."""

    async def execute(
        self, request: CreateInventoryItemRequest, actor: Actor
    ) -> InventoryItem:
        """
        Create an inventory item.

        current_stock and opening_stock default to each other, then to 0.

        Raises:
            ValidationError: Blank name.
            DuplicateNameError: Name already in use.
        """
        name = request.name.strip()
        if not name:
            raise ValidationError("name", "Name is required", request.name)

        store = await self._get_inventory_store()
        if await store.get_item_by_name(name) is not None:
            raise DuplicateNameError("Inventory item", name)

        current = request.current_stock
        opening = request.opening_stock
        if current is None:
            current = opening if opening is not None else 0.0
        if opening is None:
            opening = current

        now = datetime.now(UTC)
        item = InventoryItem(
            name=name,
            unit=request.unit,
            current_stock=current,
            threshold_value=request.threshold_value,
            opening_stock=opening,
            opening_stock_date=request.opening_stock_date or now,
            last_updated=now,
            updated_by=actor.user_id,
        )
        item = await store.create_item(item)

        await self._publish_stock_change(item, action="created")
        return item

    def to_response(self, item: InventoryItem) -> InventoryItemResponse:
        return inventory_item_to_response(item)


class UpdateInventoryItemUseCase(StoreBackedUseCase):
    """Update name, unit, stock or threshold of an item."""

    async def execute(
        self,
        item_id: int,
        request: UpdateInventoryItemRequest,
        actor: Actor,
    ) -> InventoryItem:
        store = await self._get_inventory_store()
        item = await store.get_item(item_id)
        if item is None:
            raise InventoryItemNotFoundError(item_id)

        if request.name is not None:
            name = request.name.strip()
            if not name:
                raise ValidationError("name", "Name cannot be blank", request.name)
            if name != item.name:
                existing = await store.get_item_by_name(name)
                if existing is not None and existing.id != item_id:
                    raise DuplicateNameError("Inventory item", name)
            item.name = name
        if request.unit is not None:
            item.unit = request.unit
        if request.current_stock is not None:
            item.current_stock = request.current_stock
        if request.threshold_value is not None:
            item.threshold_value = request.threshold_value

        now = datetime.now(UTC)
        item.last_updated = now
        item.updated_at = now
        item.updated_by = actor.user_id
        item = await store.update_item(item)

        await self._publish_stock_change(item, action="updated")
        return item

    def to_response(self, item: InventoryItem) -> InventoryItemResponse:
        return inventory_item_to_response(item)


class DeleteInventoryItemUseCase(StoreBackedUseCase):
    """Delete an item. Recipes and orders referencing it are left as they are."""

    async def execute(self, item_id: int) -> MessageResponse:
        store = await self._get_inventory_store()
        if not await store.delete_item(item_id):
            raise InventoryItemNotFoundError(item_id)

        await self._publish(EventType.INVENTORY_UPDATE, action="deleted", item_ids=[item_id])
        return MessageResponse(message="Inventory item deleted successfully")


class GetInventoryItemUseCase(StoreBackedUseCase):
    """Fetch an item with its purchase log."""

    async def execute(self, item_id: int) -> InventoryItem:
        store = await self._get_inventory_store()
        item = await store.get_item(item_id, include_history=True)
        if item is None:
            raise InventoryItemNotFoundError(item_id)
        return item

    def to_response(self, item: InventoryItem) -> InventoryItemResponse:
        return inventory_item_to_response(item)


class ListInventoryItemsUseCase(StoreBackedUseCase):
    """List items by name, optionally only those at or below threshold."""

    async def execute(self, low_stock_only: bool = False) -> list[InventoryItem]:
        store = await self._get_inventory_store()
        return await store.list_items(low_stock_only=low_stock_only)

    def to_response(self, items: list[InventoryItem]) -> InventoryListResponse:
        return InventoryListResponse(
            items=[inventory_item_to_response(i) for i in items],
            count=len(items),
        )
