"""Finished-goods endpoints."""

from fastapi import APIRouter, Depends, status

from kitchenops.api.dependencies import (
    get_create_finished_goods_use_case,
    get_delete_finished_goods_use_case,
    get_get_finished_goods_use_case,
    get_list_finished_goods_use_case,
    get_record_finished_goods_transaction_use_case,
    get_update_finished_goods_use_case,
)
from kitchenops.api.security import AdminOnly, CurrentActor, Editor
from kitchenops.application.dto.requests import (
    CreateFinishedGoodsRequest,
    FinishedGoodsTransactionRequest,
    UpdateFinishedGoodsRequest,
)
from kitchenops.application.dto.responses import (
    ErrorResponse,
    FinishedGoodsListResponse,
    FinishedGoodsResponse,
    MessageResponse,
)
from kitchenops.application.use_cases import (
    CreateFinishedGoodsUseCase,
    DeleteFinishedGoodsUseCase,
    GetFinishedGoodsUseCase,
    ListFinishedGoodsUseCase,
    RecordFinishedGoodsTransactionUseCase,
    UpdateFinishedGoodsUseCase,
)

router = APIRouter(prefix="/api/finished-goods", tags=["finished-goods"])


@router.get("", response_model=FinishedGoodsListResponse)
async def list_finished_goods(
    actor: CurrentActor,
    use_case: ListFinishedGoodsUseCase = Depends(get_list_finished_goods_use_case),
) -> FinishedGoodsListResponse:
    results = await use_case.execute()
    return use_case.to_response(results)


@router.post(
    "",
    response_model=FinishedGoodsResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_finished_goods(
    request: CreateFinishedGoodsRequest,
    actor: Editor,
    use_case: CreateFinishedGoodsUseCase = Depends(get_create_finished_goods_use_case),
) -> FinishedGoodsResponse:
    result = await use_case.execute(request, actor)
    return use_case.to_response(result)


@router.get(
    "/{item_id}",
    response_model=FinishedGoodsResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_finished_goods(
    item_id: int,
    actor: CurrentActor,
    use_case: GetFinishedGoodsUseCase = Depends(get_get_finished_goods_use_case),
) -> FinishedGoodsResponse:
    """Get a record with its stock history."""
    result = await use_case.execute(item_id)
    return use_case.to_response(result)


@router.put(
    "/{item_id}",
    response_model=FinishedGoodsResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_finished_goods(
    item_id: int,
    request: UpdateFinishedGoodsRequest,
    actor: Editor,
    use_case: UpdateFinishedGoodsUseCase = Depends(get_update_finished_goods_use_case),
) -> FinishedGoodsResponse:
    result = await use_case.execute(item_id, request, actor)
    return use_case.to_response(result)


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_finished_goods(
    item_id: int,
    actor: AdminOnly,
    use_case: DeleteFinishedGoodsUseCase = Depends(get_delete_finished_goods_use_case),
) -> MessageResponse:
    return await use_case.execute(item_id)


@router.post(
    "/{item_id}/transaction",
    response_model=FinishedGoodsResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def record_transaction(
    item_id: int,
    request: FinishedGoodsTransactionRequest,
    actor: Editor,
    use_case: RecordFinishedGoodsTransactionUseCase = Depends(
        get_record_finished_goods_transaction_use_case
    ),
) -> FinishedGoodsResponse:
    """Record a Produced, Sold, Adjusted or Wasted movement."""
    result = await use_case.execute(item_id, request, actor)
    return use_case.to_response(result)
