"""Seeded in-memory stores shared by the use-case tests."""

from types import SimpleNamespace

import pytest

from kitchenops.core.entities import FinishedGoods


@pytest.fixture
def stores(fakes, publisher, flour, margherita):
    """One flour item, a Margherita recipe and its boxed finished good."""
    return SimpleNamespace(
        inventory=fakes.Inventory(flour),
        recipes=fakes.Recipes(margherita),
        orders=fakes.Orders(),
        finished_goods=fakes.FinishedGoods(
            FinishedGoods(
                id=100,
                name="Margherita (boxed)",
                recipe_id=margherita.id,
                unit="Piece",
                current_stock=3,
            )
        ),
        publisher=publisher,
    )


@pytest.fixture
def wire(stores):
    """Build a use case bound to the seeded stores."""

    def build(use_case_cls):
        return use_case_cls(
            inventory_store=stores.inventory,
            recipe_store=stores.recipes,
            order_store=stores.orders,
            finished_goods_store=stores.finished_goods,
            publisher=stores.publisher,
        )

    return build
