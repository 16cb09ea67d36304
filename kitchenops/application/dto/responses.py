"""Response DTOs for API endpoints."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field

# --- Common ---


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. ORDER_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    details: dict[str, Any] = Field(
        default_factory=dict, description="Structured error context"
    )
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: str


# --- Inventory ---


class PurchaseEntryResponse(BaseModel):
    """One purchase log entry."""

    id: int
    quantity: float
    cost: float
    vendor: str | None = None
    date: datetime
    updated_by: str


class InventoryItemResponse(BaseModel):
    """Inventory item with derived low-stock flag."""

    id: int
    name: str
    unit: str
    current_stock: float
    threshold_value: float
    is_low_stock: bool
    opening_stock: float
    opening_stock_date: datetime
    last_updated: datetime
    updated_by: str
    created_at: datetime
    updated_at: datetime
    purchase_history: list[PurchaseEntryResponse] = Field(default_factory=list)


class InventoryListResponse(BaseModel):
    """List of inventory items."""

    items: list[InventoryItemResponse]
    count: int


# --- Recipes ---


class RecipeIngredientResponse(BaseModel):
    """Ingredient line with the referenced item resolved."""

    inventory_item_id: int
    item_name: str | None = Field(
        default=None, description="None when the inventory item no longer exists"
    )
    quantity: float
    unit: str


class RecipeResponse(BaseModel):
    """Recipe with resolved ingredient names."""

    id: int
    name: str
    description: str | None = None
    ingredients: list[RecipeIngredientResponse]
    standard_unit: str
    standard_quantity: float
    unit_price: float
    created_by: str
    created_at: datetime
    updated_at: datetime


class RecipeListResponse(BaseModel):
    """List of recipes."""

    recipes: list[RecipeResponse]
    count: int


# --- Orders ---


class CustomerResponse(BaseModel):
    name: str
    phone_number: str
    address: str | None = None
    email: str | None = None


class OrderItemResponse(BaseModel):
    recipe_id: int
    recipe_name: str | None = None
    quantity: int
    unit_price: float
    line_total: float


class IngredientRequirementResponse(BaseModel):
    inventory_item_id: int
    item_name: str | None = None
    quantity: float
    unit: str


class StatusHistoryResponse(BaseModel):
    status: str
    timestamp: datetime
    updated_by: str
    notes: str | None = None


class OrderResponse(BaseModel):
    """Order with resolved recipe and ingredient names."""

    id: int
    order_number: str
    customer: CustomerResponse
    items: list[OrderItemResponse]
    total_ingredients: list[IngredientRequirementResponse]
    status: str
    status_history: list[StatusHistoryResponse]
    order_date: datetime
    delivery_date: datetime | None = None
    notes: str | None = None
    created_by: str
    items_total: float
    created_at: datetime
    updated_at: datetime


class OrderListResponse(BaseModel):
    """List of orders, newest first."""

    orders: list[OrderResponse]
    count: int


class FulfillmentWarningResponse(BaseModel):
    """A delivered line that finished-goods stock could not cover."""

    recipe_id: int
    finished_goods_id: int
    name: str
    required: float
    available: float
    message: str


class OrderStatusResponse(BaseModel):
    """Order after a status change, plus any fulfillment warnings."""

    order: OrderResponse
    previous_status: str
    warnings: list[FulfillmentWarningResponse] = Field(default_factory=list)


# --- Finished goods ---


class StockHistoryResponse(BaseModel):
    id: int
    transaction_type: str
    quantity: float
    date: datetime
    order_id: int | None = None
    notes: str | None = None
    updated_by: str


class FinishedGoodsResponse(BaseModel):
    """Finished-goods record with its recipe resolved."""

    id: int
    name: str
    recipe_id: int
    recipe_name: str | None = None
    unit: str
    current_stock: float
    last_produced_date: datetime | None = None
    created_at: datetime
    updated_at: datetime
    stock_history: list[StockHistoryResponse] = Field(default_factory=list)


class FinishedGoodsListResponse(BaseModel):
    items: list[FinishedGoodsResponse]
    count: int


# --- Dashboard ---


class DailyPurchaseTotal(BaseModel):
    date: str
    quantity: float
    cost: float


class DailyOrderCount(BaseModel):
    date: str
    count: int


class RecipeQuantity(BaseModel):
    recipe_id: int
    recipe_name: str | None = None
    quantity: float


class DailySales(BaseModel):
    date: str
    count: int
    revenue: float


class TopRecipe(BaseModel):
    recipe_id: int
    recipe_name: str | None = None
    quantity: float
    revenue: float


class OrderSummaryResponse(BaseModel):
    id: int
    order_number: str
    customer_name: str
    status: str
    order_date: datetime
    items_total: float


class FinishedGoodsStock(BaseModel):
    id: int
    name: str
    unit: str
    current_stock: float


class InventoryStats(BaseModel):
    total_items: int
    low_stock_count: int
    low_stock_items: list[InventoryItemResponse]
    daily_purchases: list[DailyPurchaseTotal]


class OrderStats(BaseModel):
    total_orders: int
    by_status: dict[str, int]
    orders_in_period: int
    delivered_in_period: int
    recent_orders: list[OrderSummaryResponse]
    daily_orders: list[DailyOrderCount]
    by_recipe: list[RecipeQuantity]


class FinishedGoodsStats(BaseModel):
    total_items: int
    stock: list[FinishedGoodsStock]


class TrendStats(BaseModel):
    daily_sales: list[DailySales]
    top_recipes: list[TopRecipe]


class DashboardStatsResponse(BaseModel):
    """Aggregated dashboard read model."""

    period: str
    period_start: datetime
    generated_at: datetime
    inventory: InventoryStats
    orders: OrderStats
    finished_goods: FinishedGoodsStats
    trends: TrendStats
