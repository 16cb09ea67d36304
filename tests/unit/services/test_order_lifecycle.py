"""Tests for OrderLifecycleService."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from kitchenops.core.entities import (
    Customer,
    FinishedGoods,
    InventoryItem,
    OrderItem,
    OrderStatus,
    Recipe,
    RecipeIngredient,
    TransactionType,
    UnitOfMeasurement,
)
from kitchenops.core.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    InvalidStateError,
    InvalidStatusError,
    OrderNotFoundError,
    RecipeNotFoundError,
    ValidationError,
)
from kitchenops.core.services import OrderLifecycleService

FLOUR = 1
CHEESE = 2
MARGHERITA = 10
GARLIC_BREAD = 11


@pytest.fixture
def env(fakes, publisher):
    inventory = fakes.Inventory(
        InventoryItem(
            id=FLOUR,
            name="Flour",
            unit=UnitOfMeasurement.KG,
            current_stock=1.0,
            threshold_value=0.5,
            updated_by="admin",
        ),
        InventoryItem(
            id=CHEESE,
            name="Mozzarella",
            unit=UnitOfMeasurement.KG,
            current_stock=2.0,
            threshold_value=0.1,
            updated_by="admin",
        ),
    )
    recipes = fakes.Recipes(
        Recipe(
            id=MARGHERITA,
            name="Margherita",
            ingredients=[
                RecipeIngredient(inventory_item_id=FLOUR, quantity=0.35, unit="Kg"),
                RecipeIngredient(inventory_item_id=CHEESE, quantity=0.2, unit="Kg"),
            ],
            standard_unit="Piece",
            unit_price=250.0,
            created_by="admin",
        ),
        Recipe(
            id=GARLIC_BREAD,
            name="Garlic Bread",
            ingredients=[RecipeIngredient(inventory_item_id=FLOUR, quantity=0.1, unit="Kg")],
            standard_unit="Piece",
            unit_price=90.0,
            created_by="admin",
        ),
    )
    finished_goods = fakes.FinishedGoods(
        FinishedGoods(id=100, name="Margherita (boxed)", recipe_id=MARGHERITA, unit="Piece")
    )
    orders = fakes.Orders()
    service = OrderLifecycleService(
        order_store=orders,
        recipe_store=recipes,
        inventory_store=inventory,
        finished_goods_store=finished_goods,
        publisher=publisher,
        enforce_transitions=False,
    )
    return SimpleNamespace(
        inventory=inventory,
        recipes=recipes,
        finished_goods=finished_goods,
        orders=orders,
        publisher=publisher,
        service=service,
    )


async def _create(env, customer, staff, quantity=2, recipe_id=MARGHERITA):
    return await env.service.create_order(
        customer, [OrderItem(recipe_id=recipe_id, quantity=quantity)], staff
    )


def _stock(env, item_id):
    return env.inventory.items[item_id].current_stock


class TestCreateOrder:
    async def test_creates_draft_with_snapshot_and_prices(self, env, customer, staff):
        order = await _create(env, customer, staff, quantity=2)

        assert order.id is not None
        assert order.status == OrderStatus.DRAFT
        assert order.order_number.startswith("ORD-")
        assert [h.status for h in order.status_history] == [OrderStatus.DRAFT]
        assert order.status_history[0].updated_by == "staff-1"
        assert order.items[0].recipe_name == "Margherita"
        assert order.items[0].line_total == 500.0
        assert order.items_total == 500.0
        totals = {t.inventory_item_id: t.quantity for t in order.total_ingredients}
        assert totals[FLOUR] == pytest.approx(0.7)
        assert totals[CHEESE] == pytest.approx(0.4)

    async def test_draft_does_not_touch_stock(self, env, customer, staff):
        await _create(env, customer, staff)
        assert _stock(env, FLOUR) == 1.0
        assert env.inventory.adjust_calls == []

    async def test_publishes_order_update(self, env, customer, staff):
        await _create(env, customer, staff)
        assert env.publisher.types() == ["order-update"]
        assert env.publisher.events[0].data["action"] == "created"

    async def test_insufficient_stock_persists_nothing(self, env, customer, staff):
        with pytest.raises(InsufficientStockError) as exc:
            await _create(env, customer, staff, quantity=3)

        assert exc.value.details["item_name"] == "Flour"
        assert exc.value.details["available"] == 1.0
        assert env.orders.orders == {}
        assert env.publisher.events == []

    async def test_zero_quantity_rejected(self, env, customer, staff):
        with pytest.raises(InvalidQuantityError):
            await _create(env, customer, staff, quantity=0)

    async def test_no_items_rejected(self, env, customer, staff):
        with pytest.raises(ValidationError):
            await env.service.create_order(customer, [], staff)

    async def test_customer_name_required(self, env, staff):
        with pytest.raises(ValidationError):
            await env.service.create_order(
                Customer(name="  ", phone_number="1"),
                [OrderItem(recipe_id=MARGHERITA, quantity=1)],
                staff,
            )

    async def test_unknown_recipe(self, env, customer, staff):
        with pytest.raises(RecipeNotFoundError):
            await _create(env, customer, staff, recipe_id=999)


class TestAllocation:
    async def test_allocation_deducts_once(self, env, customer, staff):
        order = await _create(env, customer, staff, quantity=2)

        await env.service.update_order_status(order.id, "Ingredients Allocated", staff)
        assert _stock(env, FLOUR) == pytest.approx(0.3)
        assert _stock(env, CHEESE) == pytest.approx(1.6)

        # Re-submitting the same status applies no second deduction
        await env.service.update_order_status(order.id, "Ingredients Allocated", staff)
        assert _stock(env, FLOUR) == pytest.approx(0.3)

    async def test_margherita_scenario(self, env, customer, staff):
        first = await _create(env, customer, staff, quantity=2)
        second = await _create(env, customer, staff, quantity=2)

        await env.service.update_order_status(first.id, OrderStatus.INGREDIENTS_ALLOCATED, staff)
        assert _stock(env, FLOUR) == pytest.approx(0.3)

        with pytest.raises(InsufficientStockError) as exc:
            await env.service.update_order_status(
                second.id, OrderStatus.INGREDIENTS_ALLOCATED, staff
            )
        assert exc.value.details["required"] == pytest.approx(0.7)
        assert exc.value.details["available"] == pytest.approx(0.3)

        assert _stock(env, FLOUR) == pytest.approx(0.3)
        assert (await env.orders.get_order(second.id)).status == OrderStatus.DRAFT

    async def test_failed_deduction_is_compensated(self, env, customer, staff):
        order = await _create(env, customer, staff, quantity=2)
        env.inventory.fail_adjust_for.add(CHEESE)

        with pytest.raises(InsufficientStockError):
            await env.service.update_order_status(
                order.id, OrderStatus.INGREDIENTS_ALLOCATED, staff
            )

        assert _stock(env, FLOUR) == pytest.approx(1.0)
        assert env.inventory.adjust_calls == [
            (FLOUR, pytest.approx(-0.7)),
            (CHEESE, pytest.approx(-0.4)),
            (FLOUR, pytest.approx(0.7)),
        ]
        assert (await env.orders.get_order(order.id)).status == OrderStatus.DRAFT
        assert env.orders.claims == [
            (OrderStatus.DRAFT, OrderStatus.INGREDIENTS_ALLOCATED),
            (OrderStatus.INGREDIENTS_ALLOCATED, OrderStatus.DRAFT),
        ]

    async def test_lost_status_claim_applies_nothing(self, env, customer, staff):
        order = await _create(env, customer, staff, quantity=2)
        stale = await env.orders.get_order(order.id)
        # Another request allocated the order after this one read it
        env.orders.orders[order.id].status = OrderStatus.INGREDIENTS_ALLOCATED
        env.orders.get_order = AsyncMock(return_value=stale)

        with pytest.raises(InvalidStateError):
            await env.service.update_order_status(
                order.id, OrderStatus.INGREDIENTS_ALLOCATED, staff
            )

        assert env.inventory.adjust_calls == []
        assert _stock(env, FLOUR) == pytest.approx(1.0)

    async def test_low_stock_alert_after_allocation(self, env, customer, staff):
        order = await _create(env, customer, staff, quantity=2)
        env.publisher.events.clear()

        await env.service.update_order_status(order.id, OrderStatus.INGREDIENTS_ALLOCATED, staff)

        assert "inventory-update" in env.publisher.types()
        alerts = [e for e in env.publisher.events if e.type.value == "low-stock-alert"]
        assert [a.data["item_id"] for a in alerts] == [FLOUR]


class TestCancellation:
    async def test_cancel_after_allocation_restores_stock(self, env, customer, staff):
        order = await _create(env, customer, staff, quantity=2)
        await env.service.update_order_status(order.id, OrderStatus.INGREDIENTS_ALLOCATED, staff)

        await env.service.update_order_status(order.id, OrderStatus.CANCELLED, staff)

        assert _stock(env, FLOUR) == pytest.approx(1.0)
        assert _stock(env, CHEESE) == pytest.approx(2.0)

    async def test_cancel_draft_leaves_stock(self, env, customer, staff):
        order = await _create(env, customer, staff)
        await env.service.update_order_status(order.id, OrderStatus.CANCELLED, staff)
        assert env.inventory.adjust_calls == []


class TestFinishedGoodsEffects:
    async def test_ready_for_dispatch_produces(self, env, customer, staff):
        order = await _create(env, customer, staff, quantity=2)

        await env.service.update_order_status(order.id, OrderStatus.READY_FOR_DISPATCH, staff)

        goods = env.finished_goods.items[100]
        assert goods.current_stock == 2
        assert goods.last_produced_date is not None
        entry = goods.stock_history[-1]
        assert entry.transaction_type == TransactionType.PRODUCED
        assert entry.order_id == order.id
        assert entry.notes == f"Produced for order {order.order_number}"

    async def test_lines_without_finished_goods_are_skipped(self, env, customer, staff):
        order = await _create(env, customer, staff, recipe_id=GARLIC_BREAD)
        result = await env.service.update_order_status(
            order.id, OrderStatus.READY_FOR_DISPATCH, staff
        )
        assert result.order.status == OrderStatus.READY_FOR_DISPATCH
        assert env.finished_goods.items[100].current_stock == 0

    async def test_delivered_consumes(self, env, customer, staff):
        env.finished_goods.items[100].current_stock = 5
        order = await _create(env, customer, staff, quantity=2)

        result = await env.service.update_order_status(order.id, OrderStatus.DELIVERED, staff)

        assert result.warnings == []
        goods = env.finished_goods.items[100]
        assert goods.current_stock == 3
        entry = goods.stock_history[-1]
        assert entry.transaction_type == TransactionType.SOLD
        assert entry.quantity == -2
        assert entry.notes == f"Sold via order {order.order_number}"

    async def test_delivered_short_returns_warning(self, env, customer, staff):
        env.finished_goods.items[100].current_stock = 1
        order = await _create(env, customer, staff, quantity=2)

        result = await env.service.update_order_status(order.id, OrderStatus.DELIVERED, staff)

        assert result.order.status == OrderStatus.DELIVERED
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.finished_goods_id == 100
        assert warning.required == 2
        assert warning.available == 1
        assert "Margherita (boxed)" in warning.message
        assert env.finished_goods.items[100].current_stock == 1

    async def test_ready_for_dispatch_twice_produces_once(self, env, customer, staff):
        order = await _create(env, customer, staff, quantity=2)

        await env.service.update_order_status(order.id, OrderStatus.READY_FOR_DISPATCH, staff)
        await env.service.update_order_status(order.id, "ReadyForDispatch", staff)

        goods = env.finished_goods.items[100]
        assert goods.current_stock == 2
        produced = [
            e for e in goods.stock_history if e.transaction_type == TransactionType.PRODUCED
        ]
        assert len(produced) == 1

    async def test_delivered_twice_consumes_once(self, env, customer, staff):
        env.finished_goods.items[100].current_stock = 5
        order = await _create(env, customer, staff, quantity=2)

        await env.service.update_order_status(order.id, OrderStatus.DELIVERED, staff)
        result = await env.service.update_order_status(order.id, OrderStatus.DELIVERED, staff)

        assert result.warnings == []
        goods = env.finished_goods.items[100]
        assert goods.current_stock == 3
        sold = [e for e in goods.stock_history if e.transaction_type == TransactionType.SOLD]
        assert len(sold) == 1


class TestTransitions:
    async def test_unknown_status(self, env, customer, staff):
        order = await _create(env, customer, staff)
        with pytest.raises(InvalidStatusError):
            await env.service.update_order_status(order.id, "Shipped", staff)

    async def test_missing_order(self, env, staff):
        with pytest.raises(OrderNotFoundError):
            await env.service.update_order_status(404, OrderStatus.DELIVERED, staff)

    async def test_permissive_by_default(self, env, customer, staff):
        order = await _create(env, customer, staff)
        await env.service.update_order_status(order.id, OrderStatus.DISPATCHED, staff)
        result = await env.service.update_order_status(order.id, OrderStatus.DRAFT, staff)
        assert result.order.status == OrderStatus.DRAFT
        assert result.previous_status == OrderStatus.DISPATCHED

    async def test_enforced_rejects_backwards_move(self, env, customer, staff):
        service = OrderLifecycleService(
            order_store=env.orders,
            recipe_store=env.recipes,
            inventory_store=env.inventory,
            finished_goods_store=env.finished_goods,
            enforce_transitions=True,
        )
        order = await _create(env, customer, staff)
        env.orders.orders[order.id].status = OrderStatus.DELIVERED

        with pytest.raises(InvalidStateError):
            await service.update_order_status(order.id, OrderStatus.DRAFT, staff)

    async def test_enforced_rejects_skipping(self, env, customer, staff):
        service = OrderLifecycleService(
            order_store=env.orders,
            recipe_store=env.recipes,
            inventory_store=env.inventory,
            finished_goods_store=env.finished_goods,
            enforce_transitions=True,
        )
        order = await _create(env, customer, staff)

        with pytest.raises(InvalidStateError):
            await service.update_order_status(order.id, OrderStatus.IN_PRODUCTION, staff)

    async def test_history_is_append_only(self, env, customer, staff):
        order = await _create(env, customer, staff)
        for status in ("Ingredients Allocated", "In Production", "Ready for Dispatch"):
            await env.service.update_order_status(order.id, status, staff, notes=status)

        stored = await env.orders.get_order(order.id)
        assert [h.status.value for h in stored.status_history] == [
            "Draft",
            "Ingredients Allocated",
            "In Production",
            "Ready for Dispatch",
        ]
        assert stored.status_history[2].notes == "In Production"


class TestEditAndDelete:
    async def test_update_items_reaggregates(self, env, customer, staff):
        order = await _create(env, customer, staff, quantity=1)

        updated = await env.service.update_order(
            order.id, staff, items=[OrderItem(recipe_id=GARLIC_BREAD, quantity=3)]
        )

        assert updated.items_total == 270.0
        assert [(t.inventory_item_id, t.quantity) for t in updated.total_ingredients] == [
            (FLOUR, pytest.approx(0.3))
        ]

    async def test_update_can_clear_notes(self, env, customer, staff):
        order = await env.service.create_order(
            customer, [OrderItem(recipe_id=MARGHERITA, quantity=1)], staff, notes="ring bell"
        )
        updated = await env.service.update_order(order.id, staff, notes=None)
        assert updated.notes is None

    async def test_update_requires_draft(self, env, customer, staff):
        order = await _create(env, customer, staff)
        await env.service.update_order_status(order.id, OrderStatus.INGREDIENTS_ALLOCATED, staff)

        with pytest.raises(InvalidStateError):
            await env.service.update_order(order.id, staff, notes="late")

    async def test_delete_draft(self, env, customer, staff):
        order = await _create(env, customer, staff)
        await env.service.delete_order(order.id)
        assert env.orders.orders == {}

    async def test_delete_in_production_rejected(self, env, customer, staff):
        order = await _create(env, customer, staff)
        await env.service.update_order_status(order.id, OrderStatus.IN_PRODUCTION, staff)

        with pytest.raises(InvalidStateError):
            await env.service.delete_order(order.id)

    async def test_list_orders_parses_status(self, env, customer, staff):
        order = await _create(env, customer, staff)
        await _create(env, customer, staff, quantity=1)
        await env.service.update_order_status(order.id, OrderStatus.CANCELLED, staff)

        cancelled = await env.service.list_orders(status="cancelled")
        assert [o.id for o in cancelled] == [order.id]

        with pytest.raises(InvalidStatusError):
            await env.service.list_orders(status="bogus")
