"""Inventory management endpoints."""

from fastapi import APIRouter, Depends, status

from kitchenops.api.dependencies import (
    get_create_inventory_item_use_case,
    get_delete_inventory_item_use_case,
    get_get_inventory_item_use_case,
    get_list_inventory_items_use_case,
    get_record_purchase_use_case,
    get_update_inventory_item_use_case,
)
from kitchenops.api.security import AdminOnly, CurrentActor, Editor
from kitchenops.application.dto.requests import (
    CreateInventoryItemRequest,
    RecordPurchaseRequest,
    UpdateInventoryItemRequest,
)
from kitchenops.application.dto.responses import (
    ErrorResponse,
    InventoryItemResponse,
    InventoryListResponse,
    MessageResponse,
)
from kitchenops.application.use_cases import (
    CreateInventoryItemUseCase,
    DeleteInventoryItemUseCase,
    GetInventoryItemUseCase,
    ListInventoryItemsUseCase,
    RecordPurchaseUseCase,
    UpdateInventoryItemUseCase,
)

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.get("", response_model=InventoryListResponse)
async def list_items(
    actor: CurrentActor,
    low_stock: bool = False,
    use_case: ListInventoryItemsUseCase = Depends(get_list_inventory_items_use_case),
) -> InventoryListResponse:
    """List inventory items; low_stock=true keeps only items at or under threshold."""
    items = await use_case.execute(low_stock_only=low_stock)
    return use_case.to_response(items)


@router.post(
    "",
    response_model=InventoryItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_item(
    request: CreateInventoryItemRequest,
    actor: Editor,
    use_case: CreateInventoryItemUseCase = Depends(get_create_inventory_item_use_case),
) -> InventoryItemResponse:
    item = await use_case.execute(request, actor)
    return use_case.to_response(item)


@router.get(
    "/{item_id}",
    response_model=InventoryItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_item(
    item_id: int,
    actor: CurrentActor,
    use_case: GetInventoryItemUseCase = Depends(get_get_inventory_item_use_case),
) -> InventoryItemResponse:
    """Get an item with its purchase history."""
    item = await use_case.execute(item_id)
    return use_case.to_response(item)


@router.put(
    "/{item_id}",
    response_model=InventoryItemResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_item(
    item_id: int,
    request: UpdateInventoryItemRequest,
    actor: Editor,
    use_case: UpdateInventoryItemUseCase = Depends(get_update_inventory_item_use_case),
) -> InventoryItemResponse:
    item = await use_case.execute(item_id, request, actor)
    return use_case.to_response(item)


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_item(
    item_id: int,
    actor: AdminOnly,
    use_case: DeleteInventoryItemUseCase = Depends(get_delete_inventory_item_use_case),
) -> MessageResponse:
    return await use_case.execute(item_id)


@router.post(
    "/{item_id}/purchase",
    response_model=InventoryItemResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def record_purchase(
    item_id: int,
    request: RecordPurchaseRequest,
    actor: Editor,
    use_case: RecordPurchaseUseCase = Depends(get_record_purchase_use_case),
) -> InventoryItemResponse:
    """Record a purchase and add its quantity to stock."""
    item = await use_case.execute(item_id, request, actor)
    return use_case.to_response(item)
