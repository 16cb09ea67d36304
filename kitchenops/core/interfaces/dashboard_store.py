"""
Abstract interface for dashboard aggregate queries.

Read-only; returns plain rows so the use case can shape the response.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any


class IDashboardStore(ABC):
    """Aggregate queries over inventory, orders and finished goods."""

    @abstractmethod
    async def count_inventory_items(self) -> int:
        """Total number of inventory items."""
        pass

    @abstractmethod
    async def daily_purchase_totals(self, since: datetime) -> list[dict[str, Any]]:
        """Rows of {date, quantity, cost} for purchases on or after since."""
        pass

    @abstractmethod
    async def count_orders(
        self,
        since: datetime | None = None,
        status: str | None = None,
    ) -> int:
        """Count orders, optionally from a date and/or with a status."""
        pass

    @abstractmethod
    async def order_counts_by_status(self) -> dict[str, int]:
        """Map of status wire value to order count."""
        pass

    @abstractmethod
    async def daily_order_counts(self, since: datetime) -> list[dict[str, Any]]:
        """Rows of {date, count} for orders on or after since."""
        pass

    @abstractmethod
    async def quantity_by_recipe(self) -> list[dict[str, Any]]:
        """Rows of {recipe_id, recipe_name, quantity} across all orders."""
        pass

    @abstractmethod
    async def daily_sales(
        self, since: datetime, statuses: list[str]
    ) -> list[dict[str, Any]]:
        """Rows of {date, count, revenue} for orders in the given statuses."""
        pass

    @abstractmethod
    async def top_recipes(
        self, statuses: list[str], limit: int = 10
    ) -> list[dict[str, Any]]:
        """Rows of {recipe_id, recipe_name, quantity, revenue}, best sellers first."""
        pass

    @abstractmethod
    async def count_finished_goods(self) -> int:
        """Total number of finished-goods records."""
        pass
