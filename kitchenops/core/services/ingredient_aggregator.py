"""
Ingredient aggregation.

Scales each recipe's bill of materials by the ordered quantity and sums the
result per inventory item across all order lines.
"""

from collections.abc import Iterable
from typing import Protocol

from kitchenops.config import get_logger
from kitchenops.core.entities.order import IngredientRequirement
from kitchenops.core.entities.recipe import Recipe
from kitchenops.core.exceptions import RecipeNotFoundError
from kitchenops.core.interfaces.recipe_store import IRecipeStore

logger = get_logger(__name__)


class OrderLine(Protocol):
    """Anything carrying a recipe reference and an ordered quantity."""

    recipe_id: int
    quantity: int


class IngredientAggregator:
    """Compute the total raw-material demand of a set of order lines."""

    def __init__(self, recipe_store: IRecipeStore):
        self._recipe_store = recipe_store

    async def compute_total_ingredients(
        self, items: Iterable[OrderLine]
    ) -> list[IngredientRequirement]:
        """
        Aggregate ingredient demand for the given lines.

        Each line contributes ingredient.quantity / standard_quantity * line
        quantity. Results keep the order in which each inventory item first
        appears; the unit comes from that first occurrence.

        Raises:
            RecipeNotFoundError: If a line references an unknown recipe.
        """
        recipes: dict[int, Recipe] = {}
        totals: dict[int, IngredientRequirement] = {}

        for line in items:
            recipe = recipes.get(line.recipe_id)
            if recipe is None:
                recipe = await self._recipe_store.get_recipe(line.recipe_id)
                if recipe is None:
                    raise RecipeNotFoundError(line.recipe_id)
                recipes[line.recipe_id] = recipe

            divisor = recipe.yield_divisor
            for ingredient in recipe.ingredients:
                amount = ingredient.quantity / divisor * line.quantity
                current = totals.get(ingredient.inventory_item_id)
                if current is None:
                    totals[ingredient.inventory_item_id] = IngredientRequirement(
                        inventory_item_id=ingredient.inventory_item_id,
                        quantity=amount,
                        unit=ingredient.unit,
                    )
                else:
                    current.quantity += amount

        logger.debug(
            "ingredients_aggregated",
            recipes=len(recipes),
            ingredients=len(totals),
        )
        return list(totals.values())
