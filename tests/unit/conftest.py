"""
In-memory store fakes for service and use-case tests.

They honour the same contracts as the SQLite stores, notably the
conditional stock adjust that refuses to go below zero.
"""

from types import SimpleNamespace

import pytest

from kitchenops.core.entities import (
    DomainEvent,
    FinishedGoods,
    InventoryItem,
    Order,
    OrderStatus,
    Recipe,
    StockHistoryEntry,
    TransactionType,
)
from kitchenops.core.exceptions import DuplicateNameError, InvalidStateError
from kitchenops.core.interfaces import (
    IEventPublisher,
    IFinishedGoodsStore,
    IInventoryStore,
    IOrderStore,
    IRecipeStore,
)


class FakeInventoryStore(IInventoryStore):
    def __init__(self, *items: InventoryItem):
        self.items: dict[int, InventoryItem] = {}
        self.adjust_calls: list[tuple[int, float]] = []
        self.fail_adjust_for: set[int] = set()
        for item in items:
            self.items[item.id] = item.model_copy(deep=True)

    async def create_item(self, item):
        if any(i.name == item.name for i in self.items.values()):
            raise DuplicateNameError("Inventory item", item.name)
        item.id = max(self.items, default=0) + 1
        self.items[item.id] = item.model_copy(deep=True)
        return item

    async def get_item(self, item_id, include_history=False):
        item = self.items.get(item_id)
        return item.model_copy(deep=True) if item else None

    async def get_item_by_name(self, name):
        return next((i.model_copy() for i in self.items.values() if i.name == name), None)

    async def list_items(self, low_stock_only=False):
        items = sorted(self.items.values(), key=lambda i: i.name)
        return [i.model_copy() for i in items if not low_stock_only or i.is_low_stock]

    async def update_item(self, item):
        self.items[item.id] = item.model_copy(deep=True)
        return item

    async def delete_item(self, item_id):
        return self.items.pop(item_id, None) is not None

    async def adjust_stock(self, item_id, delta, updated_by):
        self.adjust_calls.append((item_id, delta))
        item = self.items.get(item_id)
        if item is None or item_id in self.fail_adjust_for:
            return False
        if item.current_stock + delta < 0:
            return False
        item.current_stock += delta
        item.updated_by = updated_by
        return True

    async def record_purchase(self, entry):
        item = self.items[entry.inventory_item_id]
        item.current_stock += entry.quantity
        entry.id = len(item.purchase_history) + 1
        item.purchase_history.append(entry)
        return entry


class FakeRecipeStore(IRecipeStore):
    def __init__(self, *recipes: Recipe):
        self.recipes = {r.id: r for r in recipes}
        self.get_calls = 0

    async def create_recipe(self, recipe):
        recipe.id = max(self.recipes, default=0) + 1
        self.recipes[recipe.id] = recipe
        return recipe

    async def get_recipe(self, recipe_id):
        self.get_calls += 1
        return self.recipes.get(recipe_id)

    async def get_recipe_by_name(self, name):
        return next((r for r in self.recipes.values() if r.name == name), None)

    async def list_recipes(self):
        return sorted(self.recipes.values(), key=lambda r: r.name)

    async def update_recipe(self, recipe):
        self.recipes[recipe.id] = recipe
        return recipe

    async def delete_recipe(self, recipe_id):
        return self.recipes.pop(recipe_id, None) is not None


class FakeOrderStore(IOrderStore):
    def __init__(self):
        self.orders: dict[int, Order] = {}
        self.claims: list[tuple[OrderStatus, OrderStatus]] = []

    async def create_order(self, order):
        order.id = len(self.orders) + 1
        self.orders[order.id] = order.model_copy(deep=True)
        return order

    async def get_order(self, order_id):
        order = self.orders.get(order_id)
        return order.model_copy(deep=True) if order else None

    async def list_orders(self, status=None, start_date=None, end_date=None):
        orders = [o for o in self.orders.values() if status is None or o.status == status]
        return sorted(orders, key=lambda o: o.order_date, reverse=True)

    async def update_order(self, order):
        if self.orders[order.id].status != OrderStatus.DRAFT:
            raise InvalidStateError("Only orders in Draft status can be updated")
        self.orders[order.id] = order.model_copy(deep=True)
        return order

    async def claim_status(self, order_id, expected, status):
        self.claims.append((expected, status))
        stored = self.orders[order_id]
        if stored.status != expected:
            return False
        stored.status = status
        return True

    async def append_status(self, order_id, entry):
        stored = self.orders[order_id]
        stored.status = entry.status
        stored.status_history.append(entry)

    async def delete_order(self, order_id):
        return self.orders.pop(order_id, None) is not None


class FakeFinishedGoodsStore(IFinishedGoodsStore):
    def __init__(self, *items: FinishedGoods):
        self.items = {i.id: i.model_copy(deep=True) for i in items}

    async def create_item(self, item):
        item.id = max(self.items, default=0) + 1
        self.items[item.id] = item.model_copy(deep=True)
        return item

    async def get_item(self, item_id, include_history=False):
        item = self.items.get(item_id)
        return item.model_copy(deep=True) if item else None

    async def get_item_by_name(self, name):
        return next((i.model_copy() for i in self.items.values() if i.name == name), None)

    async def get_item_by_recipe(self, recipe_id):
        matches = sorted(
            (i for i in self.items.values() if i.recipe_id == recipe_id), key=lambda i: i.id
        )
        return matches[0].model_copy() if matches else None

    async def list_items(self):
        return [i.model_copy() for i in self.items.values()]

    async def update_item(self, item):
        self.items[item.id] = item.model_copy(deep=True)
        return item

    async def delete_item(self, item_id):
        return self.items.pop(item_id, None) is not None

    async def apply_transaction(self, entry: StockHistoryEntry, delta: float) -> bool:
        item = self.items.get(entry.finished_goods_id)
        if item is None or item.current_stock + delta < 0:
            return False
        item.current_stock += delta
        if entry.transaction_type == TransactionType.PRODUCED:
            item.last_produced_date = entry.date
        entry.id = len(item.stock_history) + 1
        item.stock_history.append(entry)
        return True


class RecordingPublisher(IEventPublisher):
    def __init__(self):
        self.events: list[DomainEvent] = []

    async def publish(self, event):
        self.events.append(event)

    def types(self) -> list[str]:
        return [e.type.value for e in self.events]


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def order_store() -> FakeOrderStore:
    return FakeOrderStore()


@pytest.fixture
def fakes() -> SimpleNamespace:
    """Fake store classes, for tests that seed their own data."""
    return SimpleNamespace(
        Inventory=FakeInventoryStore,
        Recipes=FakeRecipeStore,
        Orders=FakeOrderStore,
        FinishedGoods=FakeFinishedGoodsStore,
    )
