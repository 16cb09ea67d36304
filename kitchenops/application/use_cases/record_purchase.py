"""Record Purchase Use Case - append to the purchase log and add stock."""

from datetime import UTC, datetime

from kitchenops.application.dto.requests import RecordPurchaseRequest
from kitchenops.application.dto.responses import InventoryItemResponse
from kitchenops.application.use_cases.base import StoreBackedUseCase
from kitchenops.application.use_cases.views import inventory_item_to_response
from kitchenops.config import get_logger
from kitchenops.core.entities.actor import Actor
from kitchenops.core.entities.inventory import InventoryItem, PurchaseEntry
from kitchenops.core.exceptions import InvalidQuantityError, InventoryItemNotFoundError

logger = get_logger(__name__)


class RecordPurchaseUseCase(StoreBackedUseCase):
    """Record a raw-material purchase against an inventory item."""

    async def execute(
        self,
        item_id: int,
        request: RecordPurchaseRequest,
        actor: Actor,
    ) -> InventoryItem:
        """
        Execute record purchase use case.

        Raises:
            InvalidQuantityError: Quantity is not positive.
            InventoryItemNotFoundError: No such item.
        """
        if request.quantity <= 0:
            raise InvalidQuantityError(
                "quantity", "Purchase quantity must be greater than zero", request.quantity
            )

        store = await self._get_inventory_store()
        if await store.get_item(item_id) is None:
            raise InventoryItemNotFoundError(item_id)

        logger.info(
            "record_purchase_started",
            item_id=item_id,
            quantity=request.quantity,
            cost=request.cost,
        )
        await store.record_purchase(
            PurchaseEntry(
                inventory_item_id=item_id,
                quantity=request.quantity,
                cost=request.cost,
                vendor=request.vendor,
                date=request.date or datetime.now(UTC),
                updated_by=actor.user_id,
            )
        )

        item = await store.get_item(item_id, include_history=True)
        if item is None:
            raise InventoryItemNotFoundError(item_id)

        logger.info(
            "record_purchase_complete",
            item_id=item_id,
            current_stock=item.current_stock,
        )
        await self._publish_stock_change(item, action="purchased")
        return item

    def to_response(self, item: InventoryItem) -> InventoryItemResponse:
        """Convert result to API response."""
        return inventory_item_to_response(item)
