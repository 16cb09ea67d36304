"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from kitchenops.core.entities import (
    Customer,
    FinishedGoods,
    IngredientRequirement,
    InventoryItem,
    Order,
    OrderItem,
    OrderStatus,
    Recipe,
    RecipeIngredient,
    StatusHistoryEntry,
    UnitOfMeasurement,
)
from kitchenops.infrastructure.storage.sqlite import connection as conn_module
from kitchenops.infrastructure.storage.sqlite.connection import close_pool
from kitchenops.infrastructure.storage.sqlite.migrations.migrator import run_migrations


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "kitchenops.db"


@pytest.fixture
def mock_settings(temp_db_path: Path):
    """Mock settings with temp database path."""
    mock = MagicMock()
    mock.storage.db_path = temp_db_path
    mock.storage.pool_size = 2
    mock.storage.busy_timeout = 5000
    return mock


@pytest.fixture
async def migrated_db(temp_db_path: Path, mock_settings) -> AsyncGenerator[Path, None]:
    """Migrated database with the process-wide pool pointed at it."""
    await run_migrations(temp_db_path, backup=False)
    conn_module._pool = None
    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        try:
            yield temp_db_path
        finally:
            await close_pool()


@pytest.fixture
def sample_item() -> InventoryItem:
    return InventoryItem(
        name="Flour",
        unit=UnitOfMeasurement.KG,
        current_stock=10.0,
        threshold_value=2.0,
        opening_stock=10.0,
        updated_by="admin-1",
    )


@pytest.fixture
def sample_recipe() -> Recipe:
    return Recipe(
        name="Margherita",
        description="Tomato, mozzarella, basil",
        ingredients=[
            RecipeIngredient(inventory_item_id=1, quantity=0.35, unit="Kg"),
            RecipeIngredient(inventory_item_id=2, quantity=0.2, unit="Kg"),
        ],
        standard_unit="Piece",
        unit_price=250.0,
        created_by="admin-1",
    )


@pytest.fixture
def sample_order() -> Order:
    return Order(
        order_number="ORD-1760000000000-ABC123",
        customer=Customer(name="Asha Rao", phone_number="9876543210", email="asha@example.com"),
        items=[
            OrderItem(recipe_id=10, recipe_name="Margherita", quantity=2, unit_price=250.0),
            OrderItem(recipe_id=11, recipe_name="Garlic Bread", quantity=1, unit_price=90.0),
        ],
        total_ingredients=[
            IngredientRequirement(inventory_item_id=1, quantity=0.8, unit="Kg"),
            IngredientRequirement(inventory_item_id=2, quantity=0.4, unit="Kg"),
        ],
        status=OrderStatus.DRAFT,
        status_history=[StatusHistoryEntry(status=OrderStatus.DRAFT, updated_by="staff-1")],
        notes="No onions",
        created_by="staff-1",
        items_total=590.0,
    )


@pytest.fixture
def sample_finished_goods() -> FinishedGoods:
    return FinishedGoods(name="Margherita (boxed)", recipe_id=10, unit="Piece")
