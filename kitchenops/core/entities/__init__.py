"""Core domain entities."""

from kitchenops.core.entities.actor import SYSTEM_ACTOR, Actor, UserRole
from kitchenops.core.entities.event import DomainEvent, EventType
from kitchenops.core.entities.finished_goods import (
    FinishedGoods,
    StockHistoryEntry,
    TransactionType,
)
from kitchenops.core.entities.inventory import (
    InventoryItem,
    PurchaseEntry,
    UnitOfMeasurement,
)
from kitchenops.core.entities.order import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    Customer,
    IngredientRequirement,
    Order,
    OrderItem,
    OrderStatus,
    StatusHistoryEntry,
    generate_order_number,
)
from kitchenops.core.entities.recipe import Recipe, RecipeIngredient

__all__ = [
    # Actor
    "Actor",
    "UserRole",
    "SYSTEM_ACTOR",
    # Events
    "DomainEvent",
    "EventType",
    # Inventory
    "InventoryItem",
    "PurchaseEntry",
    "UnitOfMeasurement",
    # Recipe
    "Recipe",
    "RecipeIngredient",
    # Order
    "Order",
    "OrderItem",
    "OrderStatus",
    "Customer",
    "IngredientRequirement",
    "StatusHistoryEntry",
    "ALLOWED_TRANSITIONS",
    "TERMINAL_STATUSES",
    "generate_order_number",
    # Finished goods
    "FinishedGoods",
    "StockHistoryEntry",
    "TransactionType",
]
