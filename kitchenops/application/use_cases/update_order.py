"""Update Order Use Case - edit a Draft order."""

from typing import Any

from kitchenops.application.dto.requests import UpdateOrderRequest
from kitchenops.application.dto.responses import OrderResponse
from kitchenops.application.use_cases.base import StoreBackedUseCase
from kitchenops.application.use_cases.create_order import OrderResult
from kitchenops.application.use_cases.views import order_to_response, resolve_item_names
from kitchenops.core.entities.actor import Actor
from kitchenops.core.entities.order import Customer, OrderItem


class UpdateOrderUseCase(StoreBackedUseCase):
    """Apply the fields present in the request to a Draft order."""

    async def execute(
        self, order_id: int, request: UpdateOrderRequest, actor: Actor
    ) -> OrderResult:
        """Execute update order use case."""
        provided = request.model_fields_set
        changes: dict[str, Any] = {}

        if "customer" in provided and request.customer is not None:
            changes["customer"] = Customer(**request.customer.model_dump())
        if "items" in provided and request.items is not None:
            changes["items"] = [
                OrderItem(recipe_id=line.recipe_id, quantity=line.quantity)
                for line in request.items
            ]
        # Explicit nulls clear these two
        if "delivery_date" in provided:
            changes["delivery_date"] = request.delivery_date
        if "notes" in provided:
            changes["notes"] = request.notes

        lifecycle = await self._get_lifecycle()
        order = await lifecycle.update_order(order_id, actor, **changes)

        names = await resolve_item_names(
            await self._get_inventory_store(),
            (r.inventory_item_id for r in order.total_ingredients),
        )
        return OrderResult(order=order, item_names=names)

    def to_response(self, result: OrderResult) -> OrderResponse:
        """Convert result to API response."""
        return order_to_response(result.order, result.item_names)
