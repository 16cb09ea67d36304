"""SQLite storage implementations."""

from kitchenops.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from kitchenops.infrastructure.storage.sqlite.dashboard_store import SQLiteDashboardStore
from kitchenops.infrastructure.storage.sqlite.finished_goods_store import (
    SQLiteFinishedGoodsStore,
)
from kitchenops.infrastructure.storage.sqlite.inventory_store import SQLiteInventoryStore
from kitchenops.infrastructure.storage.sqlite.order_store import SQLiteOrderStore
from kitchenops.infrastructure.storage.sqlite.recipe_store import SQLiteRecipeStore

# Singleton instances
_inventory_store: SQLiteInventoryStore | None = None
_recipe_store: SQLiteRecipeStore | None = None
_order_store: SQLiteOrderStore | None = None
_finished_goods_store: SQLiteFinishedGoodsStore | None = None
_dashboard_store: SQLiteDashboardStore | None = None


async def get_inventory_store() -> SQLiteInventoryStore:
    """Get singleton inventory store instance."""
    global _inventory_store
    if _inventory_store is None:
        _inventory_store = SQLiteInventoryStore()
    return _inventory_store


async def get_recipe_store() -> SQLiteRecipeStore:
    """Get singleton recipe store instance."""
    global _recipe_store
    if _recipe_store is None:
        _recipe_store = SQLiteRecipeStore()
    return _recipe_store


async def get_order_store() -> SQLiteOrderStore:
    """Get singleton order store instance."""
    global _order_store
    if _order_store is None:
        _order_store = SQLiteOrderStore()
    return _order_store


async def get_finished_goods_store() -> SQLiteFinishedGoodsStore:
    """Get singleton finished-goods store instance."""
    global _finished_goods_store
    if _finished_goods_store is None:
        _finished_goods_store = SQLiteFinishedGoodsStore()
    return _finished_goods_store


async def get_dashboard_store() -> SQLiteDashboardStore:
    """Get singleton dashboard store instance."""
    global _dashboard_store
    if _dashboard_store is None:
        _dashboard_store = SQLiteDashboardStore()
    return _dashboard_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteInventoryStore",
    "SQLiteRecipeStore",
    "SQLiteOrderStore",
    "SQLiteFinishedGoodsStore",
    "SQLiteDashboardStore",
    # Factory functions
    "get_inventory_store",
    "get_recipe_store",
    "get_order_store",
    "get_finished_goods_store",
    "get_dashboard_store",
]
