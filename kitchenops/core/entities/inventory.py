"""Raw-material inventory domain entities."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field


class UnitOfMeasurement(str, Enum):
    """Units an inventory item can be stocked in."""

    KG = "Kg"
    LITER = "Liter"
    NUMBER = "Number"
    PACKET = "Packet"
    GRAM = "Gram"
    ML = "ML"
    PIECE = "Piece"


class PurchaseEntry(BaseModel):
    """A single purchase appended to an item's purchase log."""

    id: int | None = None
    inventory_item_id: int | None = None
    quantity: float
    cost: float
    vendor: str | None = None
    date: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_by: str


class InventoryItem(BaseModel):
    """A named raw material with current stock and a reorder threshold."""

    id: int | None = None
    name: str
    unit: UnitOfMeasurement
    current_stock: float = 0.0
    threshold_value: float = 0.0
    opening_stock: float = 0.0
    opening_stock_date: datetime = Field(default_factory=lambda: datetime.now(UTC))
    purchase_history: list[PurchaseEntry] = Field(default_factory=list)
    last_updated: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_by: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_low_stock(self) -> bool:
        """Low stock means at or below the threshold."""
        return self.current_stock <= self.threshold_value
