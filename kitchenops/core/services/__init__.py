"""Core domain services."""

from kitchenops.core.services.ingredient_aggregator import IngredientAggregator
from kitchenops.core.services.order_lifecycle import (
    UNSET,
    FulfillmentWarning,
    OrderLifecycleService,
    StatusUpdateResult,
)

__all__ = [
    "IngredientAggregator",
    "OrderLifecycleService",
    "StatusUpdateResult",
    "FulfillmentWarning",
    "UNSET",
]
