"""Recipe catalog use cases."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from kitchenops.application.dto.requests import (
    CreateRecipeRequest,
    RecipeIngredientRequest,
    UpdateRecipeRequest,
)
from kitchenops.application.dto.responses import (
    MessageResponse,
    RecipeListResponse,
    RecipeResponse,
)
from kitchenops.application.use_cases.base import StoreBackedUseCase
from kitchenops.application.use_cases.views import recipe_to_response, resolve_item_names
from kitchenops.config import get_logger
from kitchenops.core.entities.actor import Actor
from kitchenops.core.entities.recipe import Recipe, RecipeIngredient
from kitchenops.core.exceptions import (
    DuplicateNameError,
    InventoryItemNotFoundError,
    RecipeNotFoundError,
    ValidationError,
)

logger = get_logger(__name__)


@dataclass
class RecipeResult:
    recipe: Recipe
    item_names: dict[int, str] = field(default_factory=dict)


@dataclass
class RecipeListResult:
    recipes: list[Recipe]
    item_names: dict[int, str] = field(default_factory=dict)


class _RecipeUseCase(StoreBackedUseCase):
    async def _build_ingredients(
        self, lines: list[RecipeIngredientRequest]
    ) -> list[RecipeIngredient]:
        """Check that every referenced inventory item exists."""
        if not lines:
            raise ValidationError("ingredients", "At least one ingredient is required")
        store = await self._get_inventory_store()
        for line in lines:
            if await store.get_item(line.inventory_item_id) is None:
                raise InventoryItemNotFoundError(line.inventory_item_id)
        return [
            RecipeIngredient(
                inventory_item_id=line.inventory_item_id,
                quantity=line.quantity,
                unit=line.unit,
            )
            for line in lines
        ]

    async def _result(self, recipe: Recipe) -> RecipeResult:
        names = await resolve_item_names(
            await self._get_inventory_store(),
            (i.inventory_item_id for i in recipe.ingredients),
        )
        return RecipeResult(recipe=recipe, item_names=names)

    def to_response(self, result: RecipeResult) -> RecipeResponse:
        return recipe_to_response(result.recipe, result.item_names)


class CreateRecipeUseCase(_RecipeUseCase):
    """Create a recipe with a non-empty bill of materials."""

    async def execute(self, request: CreateRecipeRequest, actor: Actor) -> RecipeResult:
        name = request.name.strip()
        if not name:
            raise ValidationError("name", "Name is required", request.name)

        store = await self._get_recipe_store()
        if await store.get_recipe_by_name(name) is not None:
            raise DuplicateNameError("Recipe", name)

        recipe = Recipe(
            name=name,
            description=request.description,
            ingredients=await self._build_ingredients(request.ingredients),
            standard_unit=request.standard_unit,
            standard_quantity=request.standard_quantity,
            unit_price=request.unit_price,
            created_by=actor.user_id,
        )
        recipe = await store.create_recipe(recipe)
        return await self._result(recipe)


class UpdateRecipeUseCase(_RecipeUseCase):
    """Update any subset of a recipe's fields."""

    async def execute(
        self, recipe_id: int, request: UpdateRecipeRequest, actor: Actor
    ) -> RecipeResult:
        store = await self._get_recipe_store()
        recipe = await store.get_recipe(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)

        if request.name is not None:
            name = request.name.strip()
            if not name:
                raise ValidationError("name", "Name cannot be blank", request.name)
            if name != recipe.name:
                existing = await store.get_recipe_by_name(name)
                if existing is not None and existing.id != recipe_id:
                    raise DuplicateNameError("Recipe", name)
            recipe.name = name
        if "description" in request.model_fields_set:
            recipe.description = request.description
        if request.ingredients is not None:
            recipe.ingredients = await self._build_ingredients(request.ingredients)
        if request.standard_unit is not None:
            recipe.standard_unit = request.standard_unit
        if request.standard_quantity is not None:
            recipe.standard_quantity = request.standard_quantity
        if request.unit_price is not None:
            recipe.unit_price = request.unit_price

        recipe.updated_at = datetime.now(UTC)
        recipe = await store.update_recipe(recipe)
        logger.info("recipe_update_complete", recipe_id=recipe_id, user_id=actor.user_id)
        return await self._result(recipe)


class DeleteRecipeUseCase(StoreBackedUseCase):
    """Delete a recipe. Existing orders keep their snapshot."""

    async def execute(self, recipe_id: int) -> MessageResponse:
        store = await self._get_recipe_store()
        if not await store.delete_recipe(recipe_id):
            raise RecipeNotFoundError(recipe_id)
        return MessageResponse(message="Recipe deleted successfully")


class GetRecipeUseCase(_RecipeUseCase):
    async def execute(self, recipe_id: int) -> RecipeResult:
        store = await self._get_recipe_store()
        recipe = await store.get_recipe(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return await self._result(recipe)


class ListRecipesUseCase(StoreBackedUseCase):
    async def execute(self) -> RecipeListResult:
        recipes = await (await self._get_recipe_store()).list_recipes()
        names = await resolve_item_names(
            await self._get_inventory_store(),
            (i.inventory_item_id for r in recipes for i in r.ingredients),
        )
        return RecipeListResult(recipes=recipes, item_names=names)

    def to_response(self, result: RecipeListResult) -> RecipeListResponse:
        return RecipeListResponse(
            recipes=[recipe_to_response(r, result.item_names) for r in result.recipes],
            count=len(result.recipes),
        )
