"""SQLite aggregate queries backing the dashboard."""

from datetime import datetime
from typing import Any

from kitchenops.core.interfaces.dashboard_store import IDashboardStore
from kitchenops.infrastructure.storage.sqlite.connection import get_connection
from kitchenops.infrastructure.storage.sqlite.timestamps import to_db


class SQLiteDashboardStore(IDashboardStore):
    """Read-only GROUP BY queries; dates are bucketed on the stored UTC day."""

    async def count_inventory_items(self) -> int:
        return await self._scalar("SELECT COUNT(*) FROM inventory_items")

    async def daily_purchase_totals(self, since: datetime) -> list[dict[str, Any]]:
        return await self._rows(
            """
            SELECT substr(date, 1, 10) AS date,
                   SUM(quantity) AS quantity,
                   SUM(cost) AS cost
            FROM purchase_entries
            WHERE date >= ?
            GROUP BY substr(date, 1, 10)
            ORDER BY date
            """,
            (to_db(since),),
        )

    async def count_orders(
        self,
        since: datetime | None = None,
        status: str | None = None,
    ) -> int:
        clauses: list[str] = []
        params: list = []
        if since is not None:
            clauses.append("order_date >= ?")
            params.append(to_db(since))
        if status is not None:
            clauses.append("status = ?")
            params.append(status)

        query = "SELECT COUNT(*) FROM orders"
        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        return await self._scalar(query, tuple(params))

    async def order_counts_by_status(self) -> dict[str, int]:
        rows = await self._rows(
            "SELECT status, COUNT(*) AS count FROM orders GROUP BY status"
        )
        return {row["status"]: row["count"] for row in rows}

    async def daily_order_counts(self, since: datetime) -> list[dict[str, Any]]:
        return await self._rows(
            """
            SELECT substr(order_date, 1, 10) AS date, COUNT(*) AS count
            FROM orders
            WHERE order_date >= ?
            GROUP BY substr(order_date, 1, 10)
            ORDER BY date
            """,
            (to_db(since),),
        )

    async def quantity_by_recipe(self) -> list[dict[str, Any]]:
        return await self._rows(
            """
            SELECT oi.recipe_id AS recipe_id,
                   COALESCE(r.name, MAX(oi.recipe_name)) AS recipe_name,
                   SUM(oi.quantity) AS quantity
            FROM order_items oi
            LEFT JOIN recipes r ON r.id = oi.recipe_id
            GROUP BY oi.recipe_id
            ORDER BY quantity DESC
            """
        )

    async def daily_sales(
        self, since: datetime, statuses: list[str]
    ) -> list[dict[str, Any]]:
        placeholders = ", ".join("?" for _ in statuses)
        return await self._rows(
            f"""
            SELECT substr(order_date, 1, 10) AS date,
                   COUNT(*) AS count,
                   SUM(items_total) AS revenue
            FROM orders
            WHERE order_date >= ? AND status IN ({placeholders})
            GROUP BY substr(order_date, 1, 10)
            ORDER BY date
            """,
            (to_db(since), *statuses),
        )

    async def top_recipes(
        self, statuses: list[str], limit: int = 10
    ) -> list[dict[str, Any]]:
        placeholders = ", ".join("?" for _ in statuses)
        return await self._rows(
            f"""
            SELECT oi.recipe_id AS recipe_id,
                   COALESCE(r.name, MAX(oi.recipe_name)) AS recipe_name,
                   SUM(oi.quantity) AS quantity,
                   SUM(oi.line_total) AS revenue
            FROM order_items oi
            JOIN orders o ON o.id = oi.order_id
            LEFT JOIN recipes r ON r.id = oi.recipe_id
            WHERE o.status IN ({placeholders})
            GROUP BY oi.recipe_id
            ORDER BY quantity DESC
            LIMIT ?
            """,
            (*statuses, limit),
        )

    async def count_finished_goods(self) -> int:
        return await self._scalar("SELECT COUNT(*) FROM finished_goods")

    @staticmethod
    async def _scalar(query: str, params: tuple = ()) -> int:
        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            row = await cursor.fetchone()
            return int(row[0]) if row and row[0] is not None else 0

    @staticmethod
    async def _rows(query: str, params: tuple = ()) -> list[dict[str, Any]]:
        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            return [dict(row) for row in await cursor.fetchall()]
