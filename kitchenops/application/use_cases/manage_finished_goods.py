"""Finished-goods CRUD use cases."""

from dataclasses import dataclass
from datetime import UTC, datetime

from kitchenops.application.dto.requests import (
    CreateFinishedGoodsRequest,
    UpdateFinishedGoodsRequest,
)
from kitchenops.application.dto.responses import (
    FinishedGoodsListResponse,
    FinishedGoodsResponse,
    MessageResponse,
)
from kitchenops.application.use_cases.base import StoreBackedUseCase
from kitchenops.application.use_cases.views import (
    finished_goods_to_response,
    resolve_recipe_names,
)
from kitchenops.core.entities.actor import Actor
from kitchenops.core.entities.event import EventType
from kitchenops.core.entities.finished_goods import (
    FinishedGoods,
    StockHistoryEntry,
    TransactionType,
)
from kitchenops.core.exceptions import (
    DuplicateNameError,
    FinishedGoodsNotFoundError,
    RecipeNotFoundError,
    ValidationError,
)


@dataclass
class FinishedGoodsResult:
    item: FinishedGoods
    recipe_name: str | None = None


class _FinishedGoodsUseCase(StoreBackedUseCase):
    async def _require_recipe(self, recipe_id: int) -> str:
        recipe = await (await self._get_recipe_store()).get_recipe(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe.name

    async def _check_name(self, name: str, exclude_id: int | None = None) -> str:
        name = name.strip()
        if not name:
            raise ValidationError("name", "Name is required", name)
        existing = await (await self._get_finished_goods_store()).get_item_by_name(name)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateNameError("Finished goods", name)
        return name

    def to_response(self, result: FinishedGoodsResult) -> FinishedGoodsResponse:
        return finished_goods_to_response(result.item, result.recipe_name)


class CreateFinishedGoodsUseCase(_FinishedGoodsUseCase):
    """Create a finished-goods record; initial stock is logged as Produced."""

    async def execute(
        self, request: CreateFinishedGoodsRequest, actor: Actor
    ) -> FinishedGoodsResult:
        name = await self._check_name(request.name)
        recipe_name = await self._require_recipe(request.recipe_id)

        history = []
        if request.current_stock > 0:
            history.append(
                StockHistoryEntry(
                    transaction_type=TransactionType.PRODUCED,
                    quantity=request.current_stock,
                    updated_by=actor.user_id,
                )
            )

        item = FinishedGoods(
            name=name,
            recipe_id=request.recipe_id,
            unit=request.unit,
            current_stock=request.current_stock,
            stock_history=history,
        )
        item = await (await self._get_finished_goods_store()).create_item(item)

        await self._publish(
            EventType.FINISHED_GOODS_UPDATE, action="created", finished_goods_ids=[item.id]
        )
        return FinishedGoodsResult(item=item, recipe_name=recipe_name)


class UpdateFinishedGoodsUseCase(_FinishedGoodsUseCase):
    """Update name, recipe and unit. Stock moves only through transactions."""

    async def execute(
        self, item_id: int, request: UpdateFinishedGoodsRequest, actor: Actor
    ) -> FinishedGoodsResult:
        store = await self._get_finished_goods_store()
        item = await store.get_item(item_id, include_history=True)
        if item is None:
            raise FinishedGoodsNotFoundError(item_id)

        if request.name is not None:
            item.name = await self._check_name(request.name, exclude_id=item_id)
        if request.recipe_id is not None:
            await self._require_recipe(request.recipe_id)
            item.recipe_id = request.recipe_id
        if request.unit is not None:
            item.unit = request.unit

        item.updated_at = datetime.now(UTC)
        item = await store.update_item(item)

        await self._publish(
            EventType.FINISHED_GOODS_UPDATE, action="updated", finished_goods_ids=[item_id]
        )
        names = await resolve_recipe_names(await self._get_recipe_store(), [item.recipe_id])
        return FinishedGoodsResult(item=item, recipe_name=names.get(item.recipe_id))


class DeleteFinishedGoodsUseCase(StoreBackedUseCase):
    async def execute(self, item_id: int) -> MessageResponse:
        store = await self._get_finished_goods_store()
        if not await store.delete_item(item_id):
            raise FinishedGoodsNotFoundError(item_id)

        await self._publish(
            EventType.FINISHED_GOODS_UPDATE, action="deleted", finished_goods_ids=[item_id]
        )
        return MessageResponse(message="Finished goods item deleted successfully")


class GetFinishedGoodsUseCase(_FinishedGoodsUseCase):
    async def execute(self, item_id: int) -> FinishedGoodsResult:
        item = await (await self._get_finished_goods_store()).get_item(
            item_id, include_history=True
        )
        if item is None:
            raise FinishedGoodsNotFoundError(item_id)
        names = await resolve_recipe_names(await self._get_recipe_store(), [item.recipe_id])
        return FinishedGoodsResult(item=item, recipe_name=names.get(item.recipe_id))


class ListFinishedGoodsUseCase(StoreBackedUseCase):
    async def execute(self) -> list[FinishedGoodsResult]:
        items = await (await self._get_finished_goods_store()).list_items()
        names = await resolve_recipe_names(
            await self._get_recipe_store(), (i.recipe_id for i in items)
        )
        return [FinishedGoodsResult(item=i, recipe_name=names.get(i.recipe_id)) for i in items]

    def to_response(self, results: list[FinishedGoodsResult]) -> FinishedGoodsListResponse:
        return FinishedGoodsListResponse(
            items=[finished_goods_to_response(r.item, r.recipe_name) for r in results],
            count=len(results),
        )
