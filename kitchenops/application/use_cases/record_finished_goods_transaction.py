"""Record Finished Goods Transaction Use Case - manual stock movement."""

from kitchenops.application.dto.requests import FinishedGoodsTransactionRequest
from kitchenops.application.dto.responses import FinishedGoodsResponse
from kitchenops.application.use_cases.base import StoreBackedUseCase
from kitchenops.application.use_cases.manage_finished_goods import FinishedGoodsResult
from kitchenops.application.use_cases.views import (
    finished_goods_to_response,
    resolve_recipe_names,
)
from kitchenops.config import get_logger
from kitchenops.core.entities.actor import Actor
from kitchenops.core.entities.event import EventType
from kitchenops.core.entities.finished_goods import StockHistoryEntry, TransactionType
from kitchenops.core.exceptions import (
    FinishedGoodsNotFoundError,
    InsufficientStockError,
    InvalidQuantityError,
)

logger = get_logger(__name__)


class RecordFinishedGoodsTransactionUseCase(StoreBackedUseCase):
    """
    Apply a Produced, Sold, Adjusted or Wasted transaction.

    Produced and Adjusted add stock; Sold and Wasted remove it. The entry is
    logged with the submitted (positive) quantity.
    """

    async def execute(
        self,
        item_id: int,
        request: FinishedGoodsTransactionRequest,
        actor: Actor,
    ) -> FinishedGoodsResult:
        """
        Execute record transaction use case.

        Raises:
            InvalidQuantityError: Non-positive quantity or unknown type.
            FinishedGoodsNotFoundError: No such record.
            InsufficientStockError: A decrease larger than current stock.
        """
        try:
            transaction_type = TransactionType(request.transaction_type)
        except ValueError:
            raise InvalidQuantityError(
                "transaction_type",
                f"Unknown transaction type. Allowed: {', '.join(t.value for t in TransactionType)}",
                request.transaction_type,
            ) from None
        if request.quantity <= 0:
            raise InvalidQuantityError(
                "quantity", "Quantity must be greater than zero", request.quantity
            )

        store = await self._get_finished_goods_store()
        item = await store.get_item(item_id)
        if item is None:
            raise FinishedGoodsNotFoundError(item_id)

        delta = -request.quantity if transaction_type.is_decrease else request.quantity
        entry = StockHistoryEntry(
            finished_goods_id=item_id,
            transaction_type=transaction_type,
            quantity=request.quantity,
            order_id=request.order_id,
            notes=request.notes,
            updated_by=actor.user_id,
        )
        if not await store.apply_transaction(entry, delta):
            latest = await store.get_item(item_id)
            raise InsufficientStockError(
                item_name=item.name,
                required=request.quantity,
                available=latest.current_stock if latest else 0.0,
                unit=item.unit,
            )

        item = await store.get_item(item_id, include_history=True)
        if item is None:
            raise FinishedGoodsNotFoundError(item_id)

        logger.info(
            "finished_goods_transaction_recorded",
            finished_goods_id=item_id,
            type=transaction_type.value,
            quantity=request.quantity,
            current_stock=item.current_stock,
        )
        await self._publish(
            EventType.FINISHED_GOODS_UPDATE,
            action=transaction_type.value.lower(),
            finished_goods_ids=[item_id],
        )

        names = await resolve_recipe_names(await self._get_recipe_store(), [item.recipe_id])
        return FinishedGoodsResult(item=item, recipe_name=names.get(item.recipe_id))

    def to_response(self, result: FinishedGoodsResult) -> FinishedGoodsResponse:
        """Convert result to API response."""
        return finished_goods_to_response(result.item, result.recipe_name)
