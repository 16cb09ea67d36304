"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.
"""

from kitchenops.application.dto.requests import (
    CreateFinishedGoodsRequest,
    CreateInventoryItemRequest,
    CreateOrderRequest,
    CreateRecipeRequest,
    CustomerRequest,
    FinishedGoodsTransactionRequest,
    OrderItemRequest,
    RecipeIngredientRequest,
    RecordPurchaseRequest,
    UpdateFinishedGoodsRequest,
    UpdateInventoryItemRequest,
    UpdateOrderRequest,
    UpdateOrderStatusRequest,
    UpdateRecipeRequest,
)
from kitchenops.application.dto.responses import (
    DashboardStatsResponse,
    ErrorResponse,
    FinishedGoodsListResponse,
    FinishedGoodsResponse,
    HealthResponse,
    InventoryItemResponse,
    InventoryListResponse,
    MessageResponse,
    OrderListResponse,
    OrderResponse,
    OrderStatusResponse,
    RecipeListResponse,
    RecipeResponse,
)

__all__ = [
    # Requests
    "CreateInventoryItemRequest",
    "UpdateInventoryItemRequest",
    "RecordPurchaseRequest",
    "CreateRecipeRequest",
    "UpdateRecipeRequest",
    "RecipeIngredientRequest",
    "CreateOrderRequest",
    "UpdateOrderRequest",
    "UpdateOrderStatusRequest",
    "CustomerRequest",
    "OrderItemRequest",
    "CreateFinishedGoodsRequest",
    "UpdateFinishedGoodsRequest",
    "FinishedGoodsTransactionRequest",
    # Responses
    "ErrorResponse",
    "MessageResponse",
    "HealthResponse",
    "InventoryItemResponse",
    "InventoryListResponse",
    "RecipeResponse",
    "RecipeListResponse",
    "OrderResponse",
    "OrderListResponse",
    "OrderStatusResponse",
    "FinishedGoodsResponse",
    "FinishedGoodsListResponse",
    "DashboardStatsResponse",
]
