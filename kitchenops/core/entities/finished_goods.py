"""Finished-goods domain entities."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field


class TransactionType(str, Enum):
    """Kinds of finished-goods stock transactions."""

    PRODUCED = "Produced"
    SOLD = "Sold"
    ADJUSTED = "Adjusted"
    WASTED = "Wasted"

    @property
    def is_decrease(self) -> bool:
        return self in (TransactionType.SOLD, TransactionType.WASTED)


class StockHistoryEntry(BaseModel):
    """One entry of a product's append-only stock log."""

    id: int | None = None
    finished_goods_id: int | None = None
    transaction_type: TransactionType
    quantity: float
    date: datetime = Field(default_factory=lambda: datetime.now(UTC))
    order_id: int | None = None
    notes: str | None = None
    updated_by: str


class FinishedGoods(BaseModel):
    """Sellable units of a recipe held in stock."""

    id: int | None = None
    name: str
    recipe_id: int
    unit: str
    current_stock: float = 0.0
    stock_history: list[StockHistoryEntry] = Field(default_factory=list)
    last_produced_date: datetime | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
