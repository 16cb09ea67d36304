"""API route modules."""

from kitchenops.api.routes.dashboard import router as dashboard_router
from kitchenops.api.routes.finished_goods import router as finished_goods_router
from kitchenops.api.routes.health import router as health_router
from kitchenops.api.routes.inventory import router as inventory_router
from kitchenops.api.routes.orders import router as orders_router
from kitchenops.api.routes.recipes import router as recipes_router

__all__ = [
    "health_router",
    "orders_router",
    "inventory_router",
    "recipes_router",
    "finished_goods_router",
    "dashboard_router",
]
