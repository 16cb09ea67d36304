"""Unit tests for SQLiteOrderStore."""

from datetime import UTC, datetime, timedelta

import pytest

from kitchenops.core.entities import OrderItem, OrderStatus, StatusHistoryEntry
from kitchenops.core.exceptions import InvalidStateError, OrderNotFoundError
from kitchenops.infrastructure.storage.sqlite.order_store import SQLiteOrderStore


@pytest.fixture
def store(migrated_db) -> SQLiteOrderStore:
    return SQLiteOrderStore()


class TestOrderStore:
    async def test_create_and_get_round_trip(self, store, sample_order):
        created = await store.create_order(sample_order)
        fetched = await store.get_order(created.id)

        assert fetched.order_number == "ORD-1760000000000-ABC123"
        assert fetched.customer.email == "asha@example.com"
        assert [i.recipe_name for i in fetched.items] == ["Margherita", "Garlic Bread"]
        assert fetched.items[0].line_total == 500.0
        assert fetched.items_total == 590.0
        assert [r.quantity for r in fetched.total_ingredients] == [0.8, 0.4]
        assert [h.status for h in fetched.status_history] == [OrderStatus.DRAFT]
        assert fetched.notes == "No onions"

    async def test_append_status(self, store, sample_order):
        created = await store.create_order(sample_order)

        await store.append_status(
            created.id,
            StatusHistoryEntry(
                status=OrderStatus.INGREDIENTS_ALLOCATED, updated_by="staff-2", notes="ok"
            ),
        )
        fetched = await store.get_order(created.id)

        assert fetched.status == OrderStatus.INGREDIENTS_ALLOCATED
        assert [h.status for h in fetched.status_history] == [
            OrderStatus.DRAFT,
            OrderStatus.INGREDIENTS_ALLOCATED,
        ]
        assert fetched.status_history[-1].notes == "ok"

    async def test_append_status_missing_order(self, store):
        with pytest.raises(OrderNotFoundError):
            await store.append_status(
                9, StatusHistoryEntry(status=OrderStatus.CANCELLED, updated_by="u")
            )

    async def test_update_replaces_lines(self, store, sample_order):
        created = await store.create_order(sample_order)
        created.items = [
            OrderItem(recipe_id=10, recipe_name="Margherita", quantity=1, unit_price=250.0)
        ]
        created.items_total = 250.0
        created.delivery_date = None
        created.notes = None

        await store.update_order(created)
        fetched = await store.get_order(created.id)

        assert len(fetched.items) == 1
        assert fetched.items_total == 250.0
        assert fetched.notes is None
        assert fetched.status == OrderStatus.DRAFT

    async def test_update_rejected_once_allocated(self, store, sample_order):
        created = await store.create_order(sample_order)
        await store.claim_status(
            created.id, OrderStatus.DRAFT, OrderStatus.INGREDIENTS_ALLOCATED
        )
        created.notes = "late edit"

        with pytest.raises(InvalidStateError):
            await store.update_order(created)

        fetched = await store.get_order(created.id)
        assert fetched.notes == "No onions"
        assert len(fetched.items) == 2

    async def test_claim_status_compare_and_set(self, store, sample_order):
        created = await store.create_order(sample_order)

        first = await store.claim_status(
            created.id, OrderStatus.DRAFT, OrderStatus.INGREDIENTS_ALLOCATED
        )
        second = await store.claim_status(
            created.id, OrderStatus.DRAFT, OrderStatus.INGREDIENTS_ALLOCATED
        )

        assert first is True
        assert second is False
        fetched = await store.get_order(created.id)
        assert fetched.status == OrderStatus.INGREDIENTS_ALLOCATED
        # Claims do not write history
        assert [h.status for h in fetched.status_history] == [OrderStatus.DRAFT]

    async def test_claim_status_missing_order(self, store):
        with pytest.raises(OrderNotFoundError):
            await store.claim_status(9, OrderStatus.DRAFT, OrderStatus.CANCELLED)

    async def test_list_filters(self, store, sample_order):
        old = sample_order.model_copy(
            deep=True,
            update={
                "order_number": "ORD-OLD",
                "order_date": datetime.now(UTC) - timedelta(days=10),
                "status": OrderStatus.DELIVERED,
            },
        )
        await store.create_order(old)
        await store.create_order(sample_order)

        assert [o.order_number for o in await store.list_orders()] == [
            "ORD-1760000000000-ABC123",
            "ORD-OLD",
        ]
        delivered = await store.list_orders(status=OrderStatus.DELIVERED)
        assert [o.order_number for o in delivered] == ["ORD-OLD"]
        recent = await store.list_orders(start_date=datetime.now(UTC) - timedelta(days=1))
        assert [o.order_number for o in recent] == ["ORD-1760000000000-ABC123"]

    async def test_delete_cascades(self, store, sample_order):
        created = await store.create_order(sample_order)
        assert await store.delete_order(created.id) is True
        assert await store.get_order(created.id) is None
        assert await store.delete_order(created.id) is False
