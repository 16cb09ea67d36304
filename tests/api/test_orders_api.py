"""API tests for order endpoints."""

from unittest.mock import AsyncMock

import pytest

from kitchenops.api.dependencies import (
    get_create_order_use_case,
    get_delete_order_use_case,
    get_list_orders_use_case,
    get_update_order_status_use_case,
)
from kitchenops.application.dto.responses import MessageResponse
from kitchenops.application.use_cases import (
    CreateOrderUseCase,
    DeleteOrderUseCase,
    ListOrdersUseCase,
    OrderResult,
    OrderStatusResult,
    UpdateOrderStatusUseCase,
)
from kitchenops.application.use_cases.query_orders import OrderListResult
from kitchenops.core.entities import (
    Customer,
    IngredientRequirement,
    Order,
    OrderItem,
    OrderStatus,
    StatusHistoryEntry,
)
from kitchenops.core.services.order_lifecycle import FulfillmentWarning, StatusUpdateResult

ORDER_BODY = {
    "customer": {"name": "Asha Rao", "phone_number": "9876543210"},
    "items": [{"recipe_id": 10, "quantity": 2}],
}


@pytest.fixture
def order() -> Order:
    return Order(
        id=1,
        order_number="ORD-1760000000000-ABC123",
        customer=Customer(name="Asha Rao", phone_number="9876543210"),
        items=[OrderItem(recipe_id=10, recipe_name="Margherita", quantity=2, unit_price=250.0)],
        total_ingredients=[IngredientRequirement(inventory_item_id=1, quantity=0.7, unit="Kg")],
        status_history=[StatusHistoryEntry(status=OrderStatus.DRAFT, updated_by="staff-1")],
        created_by="staff-1",
    )


@pytest.fixture
def create_uc(order):
    uc = AsyncMock(spec=CreateOrderUseCase)
    result = OrderResult(order=order, item_names={1: "Flour"})
    uc.execute.return_value = result
    uc.to_response.return_value = CreateOrderUseCase().to_response(result)
    return uc


class TestCreateOrder:
    async def test_created(self, client, overrides, create_uc, staff_headers):
        overrides[get_create_order_use_case] = lambda: create_uc

        response = await client.post("/api/orders", json=ORDER_BODY, headers=staff_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "Draft"
        assert data["items_total"] == 500.0
        assert data["total_ingredients"][0]["item_name"] == "Flour"

        request, actor = create_uc.execute.call_args.args
        assert request.items[0].recipe_id == 10
        assert actor.user_id == "staff-1"

    async def test_viewer_forbidden(self, client, overrides, create_uc, viewer_headers):
        overrides[get_create_order_use_case] = lambda: create_uc

        response = await client.post("/api/orders", json=ORDER_BODY, headers=viewer_headers)

        assert response.status_code == 403
        assert response.json()["error_code"] == "PERMISSION_DENIED"
        create_uc.execute.assert_not_called()

    async def test_role_header_is_case_insensitive(
        self, client, overrides, create_uc
    ):
        overrides[get_create_order_use_case] = lambda: create_uc

        response = await client.post(
            "/api/orders",
            json=ORDER_BODY,
            headers={"X-User-Id": "a-1", "X-User-Role": "admin"},
        )
        assert response.status_code == 201


class TestListOrders:
    async def test_viewer_can_list_with_filters(self, client, overrides, order, viewer_headers):
        uc = AsyncMock(spec=ListOrdersUseCase)
        result = OrderListResult(orders=[order])
        uc.execute.return_value = result
        uc.to_response.return_value = ListOrdersUseCase().to_response(result)
        overrides[get_list_orders_use_case] = lambda: uc

        response = await client.get(
            "/api/orders",
            params={"status": "Draft", "start_date": "2026-10-01T00:00:00Z"},
            headers=viewer_headers,
        )

        assert response.status_code == 200
        assert response.json()["count"] == 1
        kwargs = uc.execute.call_args.kwargs
        assert kwargs["status"] == "Draft"
        assert kwargs["start_date"].year == 2026
        assert kwargs["end_date"] is None


class TestUpdateStatus:
    async def test_returns_previous_status_and_warnings(
        self, client, overrides, order, staff_headers
    ):
        order.status = OrderStatus.DELIVERED
        update = StatusUpdateResult(
            order=order,
            previous_status=OrderStatus.DISPATCHED,
            warnings=[
                FulfillmentWarning(
                    recipe_id=10,
                    finished_goods_id=100,
                    name="Margherita (boxed)",
                    required=2,
                    available=1,
                )
            ],
        )
        uc = AsyncMock(spec=UpdateOrderStatusUseCase)
        result = OrderStatusResult(update=update)
        uc.execute.return_value = result
        uc.to_response.return_value = UpdateOrderStatusUseCase().to_response(result)
        overrides[get_update_order_status_use_case] = lambda: uc

        response = await client.post(
            "/api/orders/1/status", json={"status": "Delivered"}, headers=staff_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["previous_status"] == "Dispatched"
        assert data["order"]["status"] == "Delivered"
        assert data["warnings"][0]["available"] == 1
        assert "Margherita (boxed)" in data["warnings"][0]["message"]


class TestDeleteOrder:
    @pytest.fixture
    def delete_uc(self):
        uc = AsyncMock(spec=DeleteOrderUseCase)
        uc.execute.return_value = MessageResponse(message="Order deleted successfully")
        return uc

    async def test_admin_can_delete(self, client, overrides, delete_uc, admin_headers):
        overrides[get_delete_order_use_case] = lambda: delete_uc

        response = await client.delete("/api/orders/1", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Order deleted successfully"
        delete_uc.execute.assert_awaited_once_with(1)

    async def test_staff_cannot_delete(self, client, overrides, delete_uc, staff_headers):
        overrides[get_delete_order_use_case] = lambda: delete_uc

        response = await client.delete("/api/orders/1", headers=staff_headers)

        assert response.status_code == 403
        assert response.json()["details"]["allowed"] == ["Admin"]
