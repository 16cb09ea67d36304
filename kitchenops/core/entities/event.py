"""Domain events pushed to live-update subscribers."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class EventType(str, Enum):
    """Event names understood by dashboard clients."""

    INVENTORY_UPDATE = "inventory-update"
    LOW_STOCK_ALERT = "low-stock-alert"
    ORDER_UPDATE = "order-update"
    FINISHED_GOODS_UPDATE = "finished-goods-update"


class DomainEvent(BaseModel):
    """A change notification with a JSON-serializable payload."""

    type: EventType
    data: dict[str, Any] = Field(default_factory=dict)
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
