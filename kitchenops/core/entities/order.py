"""
Order domain entities.

The status enum values are the wire literals the API has always exposed
("Ingredients Allocated", "Ready for Dispatch", ...). Member names are the
state-machine labels used in code.
"""

import re
import secrets
import string
import time
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


class OrderStatus(str, Enum):
    """Order lifecycle states."""

    DRAFT = "Draft"
    INGREDIENTS_ALLOCATED = "Ingredients Allocated"
    IN_PRODUCTION = "In Production"
    READY_FOR_DISPATCH = "Ready for Dispatch"
    DISPATCHED = "Dispatched"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, value: str | None) -> "OrderStatus | None":
        """
        Resolve a status from its wire literal or member name.

        Matching ignores case, spaces and underscores, so "ready for dispatch",
        "READY_FOR_DISPATCH" and "ReadyForDispatch" all resolve.
        """
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        key = _status_key(str(value))
        if not key:
            return None
        for member in cls:
            if key in (_status_key(member.value), _status_key(member.name)):
                return member
        return None

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


def _status_key(value: str) -> str:
    return re.sub(r"[\s_]+", "", value).lower()


TERMINAL_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})

# Forward chain; Cancelled is added for every non-terminal state below
_FORWARD: dict[OrderStatus, OrderStatus] = {
    OrderStatus.DRAFT: OrderStatus.INGREDIENTS_ALLOCATED,
    OrderStatus.INGREDIENTS_ALLOCATED: OrderStatus.IN_PRODUCTION,
    OrderStatus.IN_PRODUCTION: OrderStatus.READY_FOR_DISPATCH,
    OrderStatus.READY_FOR_DISPATCH: OrderStatus.DISPATCHED,
    OrderStatus.DISPATCHED: OrderStatus.DELIVERED,
}

ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    status: frozenset(
        {status}
        | ({_FORWARD[status]} if status in _FORWARD else set())
        | ({OrderStatus.CANCELLED} if status not in TERMINAL_STATUSES else set())
    )
    for status in OrderStatus
}


def generate_order_number(prefix: str = "ORD") -> str:
    """Build a unique-ish order number: <prefix>-<epoch ms>-<6 upper alnum>."""
    alphabet = string.ascii_uppercase + string.digits
    random_part = "".join(secrets.choice(alphabet) for _ in range(6))
    return f"{prefix}-{int(time.time() * 1000)}-{random_part}"


class Customer(BaseModel):
    """Customer details embedded in an order."""

    name: str
    phone_number: str
    address: str | None = None
    email: str | None = None

    @field_validator("name", "phone_number", "address", mode="before")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        return v.strip().lower() if isinstance(v, str) else v


class OrderItem(BaseModel):
    """A priced order line: a recipe and how many units of it."""

    recipe_id: int
    recipe_name: str | None = None
    quantity: int
    unit_price: float = 0.0
    line_total: float = 0.0

    @model_validator(mode="after")
    def compute_line_total(self) -> "OrderItem":
        self.line_total = self.unit_price * self.quantity
        return self


class IngredientRequirement(BaseModel):
    """Aggregated demand for one inventory item across an order."""

    inventory_item_id: int
    quantity: float
    unit: str


class StatusHistoryEntry(BaseModel):
    """One entry of an order's append-only status audit trail."""

    status: OrderStatus
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_by: str
    notes: str | None = None


class Order(BaseModel):
    """A customer order and the ingredient snapshot it was allocated against."""

    id: int | None = None
    order_number: str = ""
    customer: Customer
    items: list[OrderItem] = Field(default_factory=list)
    total_ingredients: list[IngredientRequirement] = Field(default_factory=list)
    status: OrderStatus = OrderStatus.DRAFT
    status_history: list[StatusHistoryEntry] = Field(default_factory=list)
    order_date: datetime = Field(default_factory=lambda: datetime.now(UTC))
    delivery_date: datetime | None = None
    notes: str | None = None
    created_by: str
    items_total: float = 0.0
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @model_validator(mode="after")
    def compute_items_total(self) -> "Order":
        """Compute items_total from priced lines."""
        if self.items:
            self.items_total = sum(i.line_total for i in self.items)
        return self

    @property
    def is_editable(self) -> bool:
        return self.status == OrderStatus.DRAFT

    @property
    def is_deletable(self) -> bool:
        return self.status in (OrderStatus.DRAFT, OrderStatus.CANCELLED)
