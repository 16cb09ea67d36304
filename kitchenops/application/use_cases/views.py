"""
Entity to response conversion shared across use cases.

Cross-aggregate references (inventory items inside recipes and orders,
recipes behind finished goods) are resolved up front into name maps, so the
converters themselves stay synchronous.
"""

from collections.abc import Iterable

from kitchenops.application.dto.responses import (
    CustomerResponse,
    FinishedGoodsResponse,
    IngredientRequirementResponse,
    InventoryItemResponse,
    OrderItemResponse,
    OrderResponse,
    PurchaseEntryResponse,
    RecipeIngredientResponse,
    RecipeResponse,
    StatusHistoryResponse,
    StockHistoryResponse,
)
from kitchenops.core.entities.finished_goods import FinishedGoods
from kitchenops.core.entities.inventory import InventoryItem
from kitchenops.core.entities.order import Order
from kitchenops.core.entities.recipe import Recipe
from kitchenops.core.interfaces.inventory_store import IInventoryStore
from kitchenops.core.interfaces.recipe_store import IRecipeStore


async def resolve_item_names(
    store: IInventoryStore, item_ids: Iterable[int]
) -> dict[int, str]:
    """Map inventory item ids to names, skipping ids that no longer exist."""
    names: dict[int, str] = {}
    for item_id in dict.fromkeys(item_ids):
        item = await store.get_item(item_id)
        if item is not None:
            names[item_id] = item.name
    return names


async def resolve_recipe_names(
    store: IRecipeStore, recipe_ids: Iterable[int]
) -> dict[int, str]:
    """Map recipe ids to names, skipping ids that no longer exist."""
    names: dict[int, str] = {}
    for recipe_id in dict.fromkeys(recipe_ids):
        recipe = await store.get_recipe(recipe_id)
        if recipe is not None:
            names[recipe_id] = recipe.name
    return names


def inventory_item_to_response(item: InventoryItem) -> InventoryItemResponse:
    return InventoryItemResponse(
        id=item.id,  # type: ignore[arg-type]
        name=item.name,
        unit=item.unit.value,
        current_stock=item.current_stock,
        threshold_value=item.threshold_value,
        is_low_stock=item.is_low_stock,
        opening_stock=item.opening_stock,
        opening_stock_date=item.opening_stock_date,
        last_updated=item.last_updated,
        updated_by=item.updated_by,
        created_at=item.created_at,
        updated_at=item.updated_at,
        purchase_history=[
            PurchaseEntryResponse(
                id=p.id,  # type: ignore[arg-type]
                quantity=p.quantity,
                cost=p.cost,
                vendor=p.vendor,
                date=p.date,
                updated_by=p.updated_by,
            )
            for p in item.purchase_history
        ],
    )


def recipe_to_response(recipe: Recipe, item_names: dict[int, str]) -> RecipeResponse:
    return RecipeResponse(
        id=recipe.id,  # type: ignore[arg-type]
        name=recipe.name,
        description=recipe.description,
        ingredients=[
            RecipeIngredientResponse(
                inventory_item_id=ing.inventory_item_id,
                item_name=item_names.get(ing.inventory_item_id),
                quantity=ing.quantity,
                unit=ing.unit,
            )
            for ing in recipe.ingredients
        ],
        standard_unit=recipe.standard_unit,
        standard_quantity=recipe.standard_quantity,
        unit_price=recipe.unit_price,
        created_by=recipe.created_by,
        created_at=recipe.created_at,
        updated_at=recipe.updated_at,
    )


def order_to_response(order: Order, item_names: dict[int, str]) -> OrderResponse:
    return OrderResponse(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.order_number,
        customer=CustomerResponse(**order.customer.model_dump()),
        items=[
            OrderItemResponse(
                recipe_id=i.recipe_id,
                recipe_name=i.recipe_name,
                quantity=i.quantity,
                unit_price=i.unit_price,
                line_total=i.line_total,
            )
            for i in order.items
        ],
        total_ingredients=[
            IngredientRequirementResponse(
                inventory_item_id=r.inventory_item_id,
                item_name=item_names.get(r.inventory_item_id),
                quantity=r.quantity,
                unit=r.unit,
            )
            for r in order.total_ingredients
        ],
        status=order.status.value,
        status_history=[
            StatusHistoryResponse(
                status=h.status.value,
                timestamp=h.timestamp,
                updated_by=h.updated_by,
                notes=h.notes,
            )
            for h in order.status_history
        ],
        order_date=order.order_date,
        delivery_date=order.delivery_date,
        notes=order.notes,
        created_by=order.created_by,
        items_total=order.items_total,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def finished_goods_to_response(
    item: FinishedGoods, recipe_name: str | None
) -> FinishedGoodsResponse:
    return FinishedGoodsResponse(
        id=item.id,  # type: ignore[arg-type]
        name=item.name,
        recipe_id=item.recipe_id,
        recipe_name=recipe_name,
        unit=item.unit,
        current_stock=item.current_stock,
        last_produced_date=item.last_produced_date,
        created_at=item.created_at,
        updated_at=item.updated_at,
        stock_history=[
            StockHistoryResponse(
                id=e.id,  # type: ignore[arg-type]
                transaction_type=e.transaction_type.value,
                quantity=e.quantity,
                date=e.date,
                order_id=e.order_id,
                notes=e.notes,
                updated_by=e.updated_by,
            )
            for e in item.stock_history
        ],
    )
