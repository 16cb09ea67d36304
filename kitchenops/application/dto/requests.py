"""
Request DTOs for API endpoints.

Quantities whose rejection has its own error code (purchase and transaction
quantities, order line quantities) are left unconstrained here so that the
use cases can raise InvalidQuantityError for them.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from kitchenops.core.entities.inventory import UnitOfMeasurement

# --- Inventory ---


class CreateInventoryItemRequest(BaseModel):
    """Request to create a raw-material inventory item."""

    name: str = Field(..., min_length=1, description="Unique item name")
    unit: UnitOfMeasurement = Field(..., description="Unit of measurement")
    threshold_value: float = Field(..., ge=0, description="Low-stock threshold")
    current_stock: float | None = Field(
        default=None,
        ge=0,
        description="Current stock (defaults to opening stock)",
    )
    opening_stock: float | None = Field(
        default=None,
        ge=0,
        description="Opening stock (defaults to current stock)",
    )
    opening_stock_date: datetime | None = Field(
        default=None,
        description="When the opening stock was counted (defaults to now)",
    )


class UpdateInventoryItemRequest(BaseModel):
    """Request to update an inventory item. Omitted fields are unchanged."""

    name: str | None = Field(default=None, min_length=1, description="Item name")
    unit: UnitOfMeasurement | None = Field(default=None, description="Unit")
    current_stock: float | None = Field(default=None, ge=0, description="Stock count")
    threshold_value: float | None = Field(
        default=None, ge=0, description="Low-stock threshold"
    )


class RecordPurchaseRequest(BaseModel):
    """Request to record a raw-material purchase."""

    quantity: float = Field(..., description="Purchased quantity (must be > 0)")
    cost: float = Field(..., ge=0, description="Total cost of the purchase")
    vendor: str | None = Field(default=None, description="Vendor name")
    date: datetime | None = Field(default=None, description="Purchase date (defaults to now)")


# --- Recipes ---


class RecipeIngredientRequest(BaseModel):
    """One bill-of-materials line."""

    inventory_item_id: int = Field(..., description="Inventory item ID")
    quantity: float = Field(..., ge=0, description="Quantity per standard yield")
    unit: str = Field(..., min_length=1, description="Unit of the quantity")


class CreateRecipeRequest(BaseModel):
    """Request to create a recipe."""

    name: str = Field(..., min_length=1, description="Unique recipe name")
    description: str | None = Field(default=None, description="Description")
    ingredients: list[RecipeIngredientRequest] = Field(
        ..., min_length=1, description="Bill of materials"
    )
    standard_unit: str = Field(..., min_length=1, description="Unit of output")
    standard_quantity: float = Field(
        default=1, ge=1, description="Output quantity the ingredients yield"
    )
    unit_price: float = Field(..., ge=0, description="Selling price per unit")


class UpdateRecipeRequest(BaseModel):
    """Request to update a recipe. Omitted fields are unchanged."""

    name: str | None = Field(default=None, min_length=1, description="Recipe name")
    description: str | None = Field(default=None, description="Description")
    ingredients: list[RecipeIngredientRequest] | None = Field(
        default=None, min_length=1, description="Replacement bill of materials"
    )
    standard_unit: str | None = Field(default=None, min_length=1, description="Unit")
    standard_quantity: float | None = Field(default=None, ge=1, description="Yield")
    unit_price: float | None = Field(default=None, ge=0, description="Unit price")


# --- Orders ---


class CustomerRequest(BaseModel):
    """Customer details."""

    name: str = Field(..., description="Customer name")
    phone_number: str = Field(..., description="Contact phone number")
    address: str | None = Field(default=None, description="Delivery address")
    email: str | None = Field(default=None, description="Email address")


class OrderItemRequest(BaseModel):
    """One order line."""

    recipe_id: int = Field(..., description="Recipe ID")
    quantity: int = Field(..., description="Units ordered (must be >= 1)")


class CreateOrderRequest(BaseModel):
    """Request to create a Draft order."""

    customer: CustomerRequest = Field(..., description="Customer details")
    items: list[OrderItemRequest] = Field(..., description="Order lines")
    delivery_date: datetime | None = Field(default=None, description="Requested delivery")
    notes: str | None = Field(default=None, description="Order notes")


class UpdateOrderRequest(BaseModel):
    """
    Request to edit a Draft order.

    Only fields present in the body are applied; an explicit null
    delivery_date or notes clears the value.
    """

    customer: CustomerRequest | None = Field(default=None, description="Customer")
    items: list[OrderItemRequest] | None = Field(default=None, description="Order lines")
    delivery_date: datetime | None = Field(default=None, description="Delivery date")
    notes: str | None = Field(default=None, description="Order notes")


class UpdateOrderStatusRequest(BaseModel):
    """Request to move an order to a new status."""

    status: str = Field(
        ...,
        description="Target status, e.g. 'Ingredients Allocated' or 'ReadyForDispatch'",
    )
    notes: str | None = Field(default=None, description="Note stored in the history")


# --- Finished goods ---


class CreateFinishedGoodsRequest(BaseModel):
    """Request to create a finished-goods record."""

    name: str = Field(..., min_length=1, description="Unique product name")
    recipe_id: int = Field(..., description="Recipe the product is made from")
    unit: str = Field(..., min_length=1, description="Unit of stock")
    current_stock: float = Field(default=0, ge=0, description="Initial stock")


class UpdateFinishedGoodsRequest(BaseModel):
    """Request to update a finished-goods record. Stock is not editable here."""

    name: str | None = Field(default=None, min_length=1, description="Product name")
    recipe_id: int | None = Field(default=None, description="Recipe ID")
    unit: str | None = Field(default=None, min_length=1, description="Unit")


class FinishedGoodsTransactionRequest(BaseModel):
    """Request to record a manual stock transaction."""

    transaction_type: str = Field(
        ..., description="One of Produced, Sold, Adjusted, Wasted"
    )
    quantity: float = Field(..., description="Positive quantity")
    order_id: int | None = Field(default=None, description="Related order")
    notes: str | None = Field(default=None, description="Notes")
