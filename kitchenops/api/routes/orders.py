"""Order endpoints."""

from datetime import datetime

from fastapi import APIRouter, Depends, status

from kitchenops.api.dependencies import (
    get_create_order_use_case,
    get_delete_order_use_case,
    get_get_order_use_case,
    get_list_orders_use_case,
    get_update_order_status_use_case,
    get_update_order_use_case,
)
from kitchenops.api.security import AdminOnly, CurrentActor, Editor
from kitchenops.application.dto.requests import (
    CreateOrderRequest,
    UpdateOrderRequest,
    UpdateOrderStatusRequest,
)
from kitchenops.application.dto.responses import (
    ErrorResponse,
    MessageResponse,
    OrderListResponse,
    OrderResponse,
    OrderStatusResponse,
)
from kitchenops.application.use_cases import (
    CreateOrderUseCase,
    DeleteOrderUseCase,
    GetOrderUseCase,
    ListOrdersUseCase,
    UpdateOrderStatusUseCase,
    UpdateOrderUseCase,
)

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def create_order(
    request: CreateOrderRequest,
    actor: Editor,
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case),
) -> OrderResponse:
    """Create a Draft order after checking ingredient availability."""
    result = await use_case.execute(request, actor)
    return use_case.to_response(result)


@router.get("", response_model=OrderListResponse)
async def list_orders(
    actor: CurrentActor,
    status: str | None = None,
    start_date: datetime | None = None,
    end_date: datetime | None = None,
    use_case: ListOrdersUseCase = Depends(get_list_orders_use_case),
) -> OrderListResponse:
    """List orders, newest first, optionally filtered by status and date range."""
    result = await use_case.execute(status=status, start_date=start_date, end_date=end_date)
    return use_case.to_response(result)


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_order(
    order_id: int,
    actor: CurrentActor,
    use_case: GetOrderUseCase = Depends(get_get_order_use_case),
) -> OrderResponse:
    result = await use_case.execute(order_id)
    return use_case.to_response(result)


@router.put(
    "/{order_id}",
    response_model=OrderResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_order(
    order_id: int,
    request: UpdateOrderRequest,
    actor: Editor,
    use_case: UpdateOrderUseCase = Depends(get_update_order_use_case),
) -> OrderResponse:
    """Edit a Draft order. Changing items recomputes the ingredient snapshot."""
    result = await use_case.execute(order_id, request, actor)
    return use_case.to_response(result)


@router.delete(
    "/{order_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_order(
    order_id: int,
    actor: AdminOnly,
    use_case: DeleteOrderUseCase = Depends(get_delete_order_use_case),
) -> MessageResponse:
    """Delete a Draft or Cancelled order."""
    return await use_case.execute(order_id)


@router.post(
    "/{order_id}/status",
    response_model=OrderStatusResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_order_status(
    order_id: int,
    request: UpdateOrderStatusRequest,
    actor: Editor,
    use_case: UpdateOrderStatusUseCase = Depends(get_update_order_status_use_case),
) -> OrderStatusResponse:
    """Move an order to a new status and apply its stock effects."""
    result = await use_case.execute(order_id, request, actor)
    return use_case.to_response(result)
