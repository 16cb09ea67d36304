"""Pytest configuration and shared fixtures."""

from collections.abc import Generator

import pytest

from kitchenops.config import clear_request_context, reset_settings
from kitchenops.core.entities import (
    Actor,
    Customer,
    InventoryItem,
    Recipe,
    RecipeIngredient,
    UnitOfMeasurement,
    UserRole,
)
from kitchenops.infrastructure.notifications import reset_event_broadcaster


@pytest.fixture(autouse=True)
def fresh_singletons() -> Generator[None, None, None]:
    """Settings, the event broadcaster and log context are process-wide."""
    reset_settings()
    reset_event_broadcaster()
    yield
    reset_settings()
    reset_event_broadcaster()
    clear_request_context()


@pytest.fixture
def staff() -> Actor:
    return Actor(user_id="staff-1", role=UserRole.STAFF)


@pytest.fixture
def admin() -> Actor:
    return Actor(user_id="admin-1", role=UserRole.ADMIN)


@pytest.fixture
def customer() -> Customer:
    return Customer(name="Asha Rao", phone_number="9876543210", address="12 Hill Rd")


@pytest.fixture
def flour() -> InventoryItem:
    return InventoryItem(
        id=1,
        name="Flour",
        unit=UnitOfMeasurement.KG,
        current_stock=1.0,
        threshold_value=0.2,
        updated_by="admin-1",
    )


@pytest.fixture
def margherita() -> Recipe:
    return Recipe(
        id=10,
        name="Margherita",
        ingredients=[RecipeIngredient(inventory_item_id=1, quantity=0.35, unit="Kg")],
        standard_unit="Piece",
        standard_quantity=1,
        unit_price=250.0,
        created_by="admin-1",
    )
