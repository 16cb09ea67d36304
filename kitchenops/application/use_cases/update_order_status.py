"""Update Order Status Use Case - drive the lifecycle state machine."""

from dataclasses import dataclass, field

from kitchenops.application.dto.requests import UpdateOrderStatusRequest
from kitchenops.application.dto.responses import (
    FulfillmentWarningResponse,
    OrderStatusResponse,
)
from kitchenops.application.use_cases.base import StoreBackedUseCase
from kitchenops.application.use_cases.views import order_to_response, resolve_item_names
from kitchenops.config import get_logger
from kitchenops.core.entities.actor import Actor
from kitchenops.core.services.order_lifecycle import StatusUpdateResult

logger = get_logger(__name__)


@dataclass
class OrderStatusResult:
    """Status change outcome with resolved ingredient names."""

    update: StatusUpdateResult
    item_names: dict[int, str] = field(default_factory=dict)


class UpdateOrderStatusUseCase(StoreBackedUseCase):
    """Change an order's status and apply its stock side effects."""

    async def execute(
        self,
        order_id: int,
        request: UpdateOrderStatusRequest,
        actor: Actor,
    ) -> OrderStatusResult:
        """Execute update order status use case."""
        logger.info(
            "update_order_status_started",
            order_id=order_id,
            status=request.status,
            user_id=actor.user_id,
        )

        lifecycle = await self._get_lifecycle()
        update = await lifecycle.update_order_status(
            order_id, request.status, actor, notes=request.notes
        )

        names = await resolve_item_names(
            await self._get_inventory_store(),
            (r.inventory_item_id for r in update.order.total_ingredients),
        )
        return OrderStatusResult(update=update, item_names=names)

    def to_response(self, result: OrderStatusResult) -> OrderStatusResponse:
        """Convert result to API response."""
        update = result.update
        return OrderStatusResponse(
            order=order_to_response(update.order, result.item_names),
            previous_status=update.previous_status.value,
            warnings=[
                FulfillmentWarningResponse(
                    recipe_id=w.recipe_id,
                    finished_goods_id=w.finished_goods_id,
                    name=w.name,
                    required=w.required,
                    available=w.available,
                    message=w.message,
                )
                for w in update.warnings
            ],
        )
