"""Core interfaces (ports) for dependency injection."""

from kitchenops.core.interfaces.dashboard_store import IDashboardStore
from kitchenops.core.interfaces.event_publisher import IEventPublisher
from kitchenops.core.interfaces.finished_goods_store import IFinishedGoodsStore
from kitchenops.core.interfaces.inventory_store import IInventoryStore
from kitchenops.core.interfaces.order_store import IOrderStore
from kitchenops.core.interfaces.recipe_store import IRecipeStore

__all__ = [
    # Storage interfaces
    "IInventoryStore",
    "IRecipeStore",
    "IOrderStore",
    "IFinishedGoodsStore",
    "IDashboardStore",
    # Notifications
    "IEventPublisher",
]
