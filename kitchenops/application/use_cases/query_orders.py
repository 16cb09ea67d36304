"""Order query and delete use cases."""

from dataclasses import dataclass, field
from datetime import datetime

from kitchenops.application.dto.responses import (
    MessageResponse,
    OrderListResponse,
    OrderResponse,
)
from kitchenops.application.use_cases.base import StoreBackedUseCase
from kitchenops.application.use_cases.create_order import OrderResult
from kitchenops.application.use_cases.views import order_to_response, resolve_item_names
from kitchenops.core.entities.order import Order


@dataclass
class OrderListResult:
    orders: list[Order]
    item_names: dict[int, str] = field(default_factory=dict)


class GetOrderUseCase(StoreBackedUseCase):
    """Fetch one order with its details resolved."""

    async def execute(self, order_id: int) -> OrderResult:
        lifecycle = await self._get_lifecycle()
        order = await lifecycle.get_order(order_id)
        names = await resolve_item_names(
            await self._get_inventory_store(),
            (r.inventory_item_id for r in order.total_ingredients),
        )
        return OrderResult(order=order, item_names=names)

    def to_response(self, result: OrderResult) -> OrderResponse:
        return order_to_response(result.order, result.item_names)


class ListOrdersUseCase(StoreBackedUseCase):
    """List orders newest first with optional status and date filters."""

    async def execute(
        self,
        status: str | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> OrderListResult:
        lifecycle = await self._get_lifecycle()
        orders = await lifecycle.list_orders(
            status=status, start_date=start_date, end_date=end_date
        )
        names = await resolve_item_names(
            await self._get_inventory_store(),
            (r.inventory_item_id for o in orders for r in o.total_ingredients),
        )
        return OrderListResult(orders=orders, item_names=names)

    def to_response(self, result: OrderListResult) -> OrderListResponse:
        return OrderListResponse(
            orders=[order_to_response(o, result.item_names) for o in result.orders],
            count=len(result.orders),
        )


class DeleteOrderUseCase(StoreBackedUseCase):
    """Delete a Draft or Cancelled order."""

    async def execute(self, order_id: int) -> MessageResponse:
        lifecycle = await self._get_lifecycle()
        await lifecycle.delete_order(order_id)
        return MessageResponse(message="Order deleted successfully")
