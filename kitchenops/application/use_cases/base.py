"""
Shared wiring for use cases.

Stores and the event publisher are injected for tests; when omitted they
are resolved lazily from the SQLite singletons and the in-process
broadcaster.
"""

from typing import Any

from kitchenops.config import get_logger
from kitchenops.core.entities.event import DomainEvent, EventType
from kitchenops.core.entities.inventory import InventoryItem
from kitchenops.core.interfaces.dashboard_store import IDashboardStore
from kitchenops.core.interfaces.event_publisher import IEventPublisher
from kitchenops.core.interfaces.finished_goods_store import IFinishedGoodsStore
from kitchenops.core.interfaces.inventory_store import IInventoryStore
from kitchenops.core.interfaces.order_store import IOrderStore
from kitchenops.core.interfaces.recipe_store import IRecipeStore
from kitchenops.core.services.order_lifecycle import OrderLifecycleService

logger = get_logger(__name__)


class StoreBackedUseCase:
    """Base class holding optional store and publisher dependencies."""

    def __init__(
        self,
        inventory_store: IInventoryStore | None = None,
        recipe_store: IRecipeStore | None = None,
        order_store: IOrderStore | None = None,
        finished_goods_store: IFinishedGoodsStore | None = None,
        dashboard_store: IDashboardStore | None = None,
        publisher: IEventPublisher | None = None,
    ):
        self._inventory_store = inventory_store
        self._recipe_store = recipe_store
        self._order_store = order_store
        self._finished_goods_store = finished_goods_store
        self._dashboard_store = dashboard_store
        self._publisher = publisher

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from kitchenops.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    async def _get_recipe_store(self) -> IRecipeStore:
        if self._recipe_store is None:
            from kitchenops.infrastructure.storage.sqlite import get_recipe_store

            self._recipe_store = await get_recipe_store()
        return self._recipe_store

    async def _get_order_store(self) -> IOrderStore:
        if self._order_store is None:
            from kitchenops.infrastructure.storage.sqlite import get_order_store

            self._order_store = await get_order_store()
        return self._order_store

    async def _get_finished_goods_store(self) -> IFinishedGoodsStore:
        if self._finished_goods_store is None:
            from kitchenops.infrastructure.storage.sqlite import get_finished_goods_store

            self._finished_goods_store = await get_finished_goods_store()
        return self._finished_goods_store

    async def _get_dashboard_store(self) -> IDashboardStore:
        if self._dashboard_store is None:
            from kitchenops.infrastructure.storage.sqlite import get_dashboard_store

            self._dashboard_store = await get_dashboard_store()
        return self._dashboard_store

    def _get_publisher(self) -> IEventPublisher:
        if self._publisher is None:
            from kitchenops.infrastructure.notifications import get_event_broadcaster

            self._publisher = get_event_broadcaster()
        return self._publisher

    async def _get_lifecycle(self) -> OrderLifecycleService:
        return OrderLifecycleService(
            order_store=await self._get_order_store(),
            recipe_store=await self._get_recipe_store(),
            inventory_store=await self._get_inventory_store(),
            finished_goods_store=await self._get_finished_goods_store(),
            publisher=self._get_publisher(),
        )

    async def _publish(self, event_type: EventType, **data: Any) -> None:
        await self._get_publisher().publish(DomainEvent(type=event_type, data=data))

    async def _publish_stock_change(self, item: InventoryItem, action: str) -> None:
        """Announce an inventory change, plus a low-stock alert when due."""
        await self._publish(
            EventType.INVENTORY_UPDATE,
            action=action,
            item_ids=[item.id],
        )
        if item.is_low_stock:
            logger.info(
                "low_stock_detected",
                item_id=item.id,
                current_stock=item.current_stock,
                threshold_value=item.threshold_value,
            )
            await self._publish(
                EventType.LOW_STOCK_ALERT,
                item_id=item.id,
                name=item.name,
                current_stock=item.current_stock,
                threshold_value=item.threshold_value,
                unit=item.unit.value,
            )
