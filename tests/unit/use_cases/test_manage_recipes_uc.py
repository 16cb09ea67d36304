"""Tests for the recipe catalog use cases."""

import pytest

from kitchenops.application.dto.requests import CreateRecipeRequest, UpdateRecipeRequest
from kitchenops.application.use_cases import (
    CreateRecipeUseCase,
    DeleteRecipeUseCase,
    GetRecipeUseCase,
    ListRecipesUseCase,
    UpdateRecipeUseCase,
)
from kitchenops.core.exceptions import (
    DuplicateNameError,
    InventoryItemNotFoundError,
    RecipeNotFoundError,
)


def _create_request(name: str = "Focaccia", item_id: int = 1) -> CreateRecipeRequest:
    return CreateRecipeRequest(
        name=name,
        ingredients=[{"inventory_item_id": item_id, "quantity": 0.5, "unit": "Kg"}],
        standard_unit="Tray",
        standard_quantity=2,
        unit_price=180,
    )


class TestCreateRecipe:
    async def test_creates_with_resolved_names(self, wire, stores, admin):
        use_case = wire(CreateRecipeUseCase)
        result = await use_case.execute(_create_request(), admin)

        assert result.recipe.id is not None
        assert result.recipe.created_by == "admin-1"
        response = use_case.to_response(result)
        assert response.ingredients[0].item_name == "Flour"
        assert response.standard_quantity == 2
        assert stores.recipes.recipes[result.recipe.id].name == "Focaccia"

    async def test_unknown_inventory_item(self, wire, stores, admin):
        with pytest.raises(InventoryItemNotFoundError):
            await wire(CreateRecipeUseCase).execute(_create_request(item_id=77), admin)
        assert len(stores.recipes.recipes) == 1

    async def test_duplicate_name(self, wire, admin):
        with pytest.raises(DuplicateNameError):
            await wire(CreateRecipeUseCase).execute(_create_request(name="Margherita"), admin)


class TestUpdateRecipe:
    async def test_price_change_only(self, wire, stores, admin):
        result = await wire(UpdateRecipeUseCase).execute(
            10, UpdateRecipeRequest(unit_price=275), admin
        )

        assert result.recipe.unit_price == 275
        assert result.recipe.name == "Margherita"
        assert len(result.recipe.ingredients) == 1

    async def test_description_cleared_by_null(self, wire, admin):
        await wire(UpdateRecipeUseCase).execute(
            10, UpdateRecipeRequest(description="Classic"), admin
        )
        result = await wire(UpdateRecipeUseCase).execute(
            10, UpdateRecipeRequest.model_validate({"description": None}), admin
        )
        assert result.recipe.description is None

    async def test_missing(self, wire, admin):
        with pytest.raises(RecipeNotFoundError):
            await wire(UpdateRecipeUseCase).execute(5, UpdateRecipeRequest(unit_price=1), admin)


class TestQueryAndDelete:
    async def test_get_and_list(self, wire):
        result = await wire(GetRecipeUseCase).execute(10)
        assert result.item_names == {1: "Flour"}

        listing = wire(ListRecipesUseCase)
        response = listing.to_response(await listing.execute())
        assert response.count == 1
        assert response.recipes[0].ingredients[0].item_name == "Flour"

    async def test_delete(self, wire, stores):
        await wire(DeleteRecipeUseCase).execute(10)
        assert stores.recipes.recipes == {}

        with pytest.raises(RecipeNotFoundError):
            await wire(DeleteRecipeUseCase).execute(10)
