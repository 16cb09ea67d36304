"""Storage infrastructure implementations."""

from kitchenops.infrastructure.storage.sqlite import (
    SQLiteDashboardStore,
    SQLiteFinishedGoodsStore,
    SQLiteInventoryStore,
    SQLiteOrderStore,
    SQLiteRecipeStore,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLiteInventoryStore",
    "SQLiteRecipeStore",
    "SQLiteOrderStore",
    "SQLiteFinishedGoodsStore",
    "SQLiteDashboardStore",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
