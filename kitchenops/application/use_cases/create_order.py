"""Create Order Use Case - availability-checked Draft order."""

from dataclasses import dataclass, field

from kitchenops.application.dto.requests import CreateOrderRequest
from kitchenops.application.dto.responses import OrderResponse
from kitchenops.application.use_cases.base import StoreBackedUseCase
from kitchenops.application.use_cases.views import order_to_response, resolve_item_names
from kitchenops.config import get_logger
from kitchenops.core.entities.actor import Actor
from kitchenops.core.entities.order import Customer, Order, OrderItem

logger = get_logger(__name__)


@dataclass
class OrderResult:
    """An order plus the inventory names its ingredient snapshot refers to."""

    order: Order
    item_names: dict[int, str] = field(default_factory=dict)


class CreateOrderUseCase(StoreBackedUseCase):
    """Aggregate ingredient demand, check stock, and persist a Draft order."""

    async def execute(self, request: CreateOrderRequest, actor: Actor) -> OrderResult:
        """Execute create order use case."""
        logger.info(
            "create_order_started",
            lines=len(request.items),
            user_id=actor.user_id,
        )

        lifecycle = await self._get_lifecycle()
        order = await lifecycle.create_order(
            customer=Customer(**request.customer.model_dump()),
            items=[
                OrderItem(recipe_id=line.recipe_id, quantity=line.quantity)
                for line in request.items
            ],
            actor=actor,
            delivery_date=request.delivery_date,
            notes=request.notes,
        )

        names = await resolve_item_names(
            await self._get_inventory_store(),
            (r.inventory_item_id for r in order.total_ingredients),
        )
        return OrderResult(order=order, item_names=names)

    def to_response(self, result: OrderResult) -> OrderResponse:
        """Convert result to API response."""
        return order_to_response(result.order, result.item_names)
