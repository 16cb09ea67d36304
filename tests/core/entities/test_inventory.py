"""Tests for inventory, recipe and finished-goods entities."""

from kitchenops.core.entities.finished_goods import FinishedGoods, TransactionType
from kitchenops.core.entities.inventory import InventoryItem, UnitOfMeasurement
from kitchenops.core.entities.recipe import Recipe


class TestInventoryItem:
    def test_defaults(self):
        item = InventoryItem(name="Salt", unit=UnitOfMeasurement.KG, updated_by="u")
        assert item.id is None
        assert item.current_stock == 0.0
        assert item.purchase_history == []

    def test_low_stock_at_threshold(self):
        item = InventoryItem(
            name="Salt",
            unit=UnitOfMeasurement.KG,
            current_stock=2.0,
            threshold_value=2.0,
            updated_by="u",
        )
        assert item.is_low_stock

    def test_not_low_stock_above_threshold(self):
        item = InventoryItem(
            name="Salt",
            unit=UnitOfMeasurement.KG,
            current_stock=2.5,
            threshold_value=2.0,
            updated_by="u",
        )
        assert not item.is_low_stock

    def test_unit_values(self):
        assert UnitOfMeasurement("Liter") == UnitOfMeasurement.LITER
        assert UnitOfMeasurement.ML.value == "ML"


class TestRecipe:
    def test_yield_divisor(self):
        recipe = Recipe(name="Cake", standard_unit="Piece", standard_quantity=2, created_by="u")
        assert recipe.yield_divisor == 2

    def test_non_positive_standard_quantity_treated_as_one(self):
        for value in (0, -3):
            recipe = Recipe(
                name="Cake", standard_unit="Piece", standard_quantity=value, created_by="u"
            )
            assert recipe.yield_divisor == 1.0


class TestFinishedGoods:
    def test_decrease_types(self):
        assert TransactionType.SOLD.is_decrease
        assert TransactionType.WASTED.is_decrease
        assert not TransactionType.PRODUCED.is_decrease
        assert not TransactionType.ADJUSTED.is_decrease

    def test_defaults(self):
        goods = FinishedGoods(name="Margherita", recipe_id=1, unit="Piece")
        assert goods.current_stock == 0.0
        assert goods.last_produced_date is None
