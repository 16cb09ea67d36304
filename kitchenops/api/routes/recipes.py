"""Recipe catalog endpoints."""

from fastapi import APIRouter, Depends, status

from kitchenops.api.dependencies import (
    get_create_recipe_use_case,
    get_delete_recipe_use_case,
    get_get_recipe_use_case,
    get_list_recipes_use_case,
    get_update_recipe_use_case,
)
from kitchenops.api.security import AdminOnly, CurrentActor, Editor
from kitchenops.application.dto.requests import CreateRecipeRequest, UpdateRecipeRequest
from kitchenops.application.dto.responses import (
    ErrorResponse,
    MessageResponse,
    RecipeListResponse,
    RecipeResponse,
)
from kitchenops.application.use_cases import (
    CreateRecipeUseCase,
    DeleteRecipeUseCase,
    GetRecipeUseCase,
    ListRecipesUseCase,
    UpdateRecipeUseCase,
)

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("", response_model=RecipeListResponse)
async def list_recipes(
    actor: CurrentActor,
    use_case: ListRecipesUseCase = Depends(get_list_recipes_use_case),
) -> RecipeListResponse:
    result = await use_case.execute()
    return use_case.to_response(result)


@router.post(
    "",
    response_model=RecipeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def create_recipe(
    request: CreateRecipeRequest,
    actor: Editor,
    use_case: CreateRecipeUseCase = Depends(get_create_recipe_use_case),
) -> RecipeResponse:
    """Create a recipe; every ingredient must reference an existing inventory item."""
    result = await use_case.execute(request, actor)
    return use_case.to_response(result)


@router.get(
    "/{recipe_id}",
    response_model=RecipeResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_recipe(
    recipe_id: int,
    actor: CurrentActor,
    use_case: GetRecipeUseCase = Depends(get_get_recipe_use_case),
) -> RecipeResponse:
    result = await use_case.execute(recipe_id)
    return use_case.to_response(result)


@router.put(
    "/{recipe_id}",
    response_model=RecipeResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_recipe(
    recipe_id: int,
    request: UpdateRecipeRequest,
    actor: Editor,
    use_case: UpdateRecipeUseCase = Depends(get_update_recipe_use_case),
) -> RecipeResponse:
    result = await use_case.execute(recipe_id, request, actor)
    return use_case.to_response(result)


@router.delete(
    "/{recipe_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_recipe(
    recipe_id: int,
    actor: AdminOnly,
    use_case: DeleteRecipeUseCase = Depends(get_delete_recipe_use_case),
) -> MessageResponse:
    return await use_case.execute(recipe_id)
