"""SQLite implementation of order storage."""

from datetime import datetime

import aiosqlite

from kitchenops.config import get_logger
from kitchenops.core.entities.order import (
    Customer,
    IngredientRequirement,
    Order,
    OrderItem,
    OrderStatus,
    StatusHistoryEntry,
)
from kitchenops.core.exceptions import InvalidStateError, OrderNotFoundError
from kitchenops.core.interfaces.order_store import IOrderStore
from kitchenops.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
)
from kitchenops.infrastructure.storage.sqlite.timestamps import from_db, to_db

logger = get_logger(__name__)


class SQLiteOrderStore(IOrderStore):
    """SQLite implementation of orders, lines, ingredient snapshots and history."""

    async def create_order(self, order: Order) -> Order:
        """Create an order with all its child rows."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO orders (
                    order_number, customer_name, customer_phone,
                    customer_address, customer_email, status,
                    order_date, delivery_date, notes, created_by,
                    items_total, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    order.order_number,
                    order.customer.name,
                    order.customer.phone_number,
                    order.customer.address,
                    order.customer.email,
                    order.status.value,
                    to_db(order.order_date),
                    to_db(order.delivery_date),
                    order.notes,
                    order.created_by,
                    order.items_total,
                    to_db(order.created_at),
                    to_db(order.updated_at),
                ),
            )
            order.id = cursor.lastrowid

            await self._insert_lines(conn, order)
            await conn.executemany(
                """
                INSERT INTO order_status_history (
                    order_id, status, timestamp, updated_by, notes
                ) VALUES (?, ?, ?, ?, ?)
                """,
                [
                    (order.id, e.status.value, to_db(e.timestamp), e.updated_by, e.notes)
                    for e in order.status_history
                ],
            )

        logger.info(
            "order_stored",
            order_id=order.id,
            order_number=order.order_number,
            items=len(order.items),
        )
        return order

    async def get_order(self, order_id: int) -> Order | None:
        """Get order by ID with children loaded."""
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM orders WHERE id = ?", (order_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return await self._load(conn, row)

    async def list_orders(
        self,
        status: OrderStatus | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[Order]:
        """List orders newest first."""
        clauses: list[str] = []
        params: list = []
        if status is not None:
            clauses.append("status = ?")
            params.append(status.value)
        if start_date is not None:
            clauses.append("order_date >= ?")
            params.append(to_db(start_date))
        if end_date is not None:
            clauses.append("order_date <= ?")
            params.append(to_db(end_date))

        query = "SELECT * FROM orders"
        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        query += " ORDER BY order_date DESC, id DESC"

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return [await self._load(conn, row) for row in rows]

    async def update_order(self, order: Order) -> Order:
        """Rewrite the header and replace lines and ingredients of a Draft order."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE orders SET
                    customer_name = ?,
                    customer_phone = ?,
                    customer_address = ?,
                    customer_email = ?,
                    delivery_date = ?,
                    notes = ?,
                    items_total = ?,
                    updated_at = ?
                WHERE id = ? AND status = ?
                """,
                (
                    order.customer.name,
                    order.customer.phone_number,
                    order.customer.address,
                    order.customer.email,
                    to_db(order.delivery_date),
                    order.notes,
                    order.items_total,
                    to_db(order.updated_at),
                    order.id,
                    OrderStatus.DRAFT.value,
                ),
            )
            if cursor.rowcount == 0:
                current = await self._current_status(conn, order.id)  # type: ignore[arg-type]
                raise InvalidStateError(
                    "Only orders in Draft status can be updated",
                    current_status=current.value,
                )

            await conn.execute("DELETE FROM order_items WHERE order_id = ?", (order.id,))
            await conn.execute(
                "DELETE FROM order_ingredients WHERE order_id = ?", (order.id,)
            )
            await self._insert_lines(conn, order)

        logger.info("order_stored", order_id=order.id, items=len(order.items))
        return order

    async def claim_status(
        self, order_id: int, expected: OrderStatus, status: OrderStatus
    ) -> bool:
        """Compare-and-set the order status."""
        async with get_transaction(immediate=True) as conn:
            cursor = await conn.execute(
                "UPDATE orders SET status = ? WHERE id = ? AND status = ?",
                (status.value, order_id, expected.value),
            )
            if cursor.rowcount == 1:
                return True
            current = await self._current_status(conn, order_id)

        logger.warning(
            "order_status_claim_lost",
            order_id=order_id,
            expected=expected.value,
            current=current.value,
        )
        return False

    async def append_status(self, order_id: int, entry: StatusHistoryEntry) -> None:
        """Append a history row and set the current status."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "UPDATE orders SET status = ?, updated_at = ? WHERE id = ?",
                (entry.status.value, to_db(entry.timestamp), order_id),
            )
            if cursor.rowcount == 0:
                raise OrderNotFoundError(order_id)

            await conn.execute(
                """
                INSERT INTO order_status_history (
                    order_id, status, timestamp, updated_by, notes
                ) VALUES (?, ?, ?, ?, ?)
                """,
                (
                    order_id,
                    entry.status.value,
                    to_db(entry.timestamp),
                    entry.updated_by,
                    entry.notes,
                ),
            )

        logger.info("order_status_stored", order_id=order_id, status=entry.status.value)

    async def delete_order(self, order_id: int) -> bool:
        """Delete an order; child rows cascade."""
        async with get_transaction() as conn:
            cursor = await conn.execute("DELETE FROM orders WHERE id = ?", (order_id,))
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("order_removed", order_id=order_id)
        return deleted

    @staticmethod
    async def _current_status(conn: aiosqlite.Connection, order_id: int) -> OrderStatus:
        cursor = await conn.execute("SELECT status FROM orders WHERE id = ?", (order_id,))
        row = await cursor.fetchone()
        if row is None:
            raise OrderNotFoundError(order_id)
        return OrderStatus(row["status"])

    @staticmethod
    async def _insert_lines(conn: aiosqlite.Connection, order: Order) -> None:
        await conn.executemany(
            """
            INSERT INTO order_items (
                order_id, position, recipe_id, recipe_name,
                quantity, unit_price, line_total
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    order.id,
                    position,
                    item.recipe_id,
                    item.recipe_name,
                    item.quantity,
                    item.unit_price,
                    item.line_total,
                )
                for position, item in enumerate(order.items)
            ],
        )
        await conn.executemany(
            """
            INSERT INTO order_ingredients (
                order_id, position, inventory_item_id, quantity, unit
            ) VALUES (?, ?, ?, ?, ?)
            """,
            [
                (order.id, position, req.inventory_item_id, req.quantity, req.unit)
                for position, req in enumerate(order.total_ingredients)
            ],
        )

    async def _load(self, conn: aiosqlite.Connection, row: aiosqlite.Row) -> Order:
        order_id = row["id"]

        cursor = await conn.execute(
            "SELECT * FROM order_items WHERE order_id = ? ORDER BY position",
            (order_id,),
        )
        items = [
            OrderItem(
                recipe_id=r["recipe_id"],
                recipe_name=r["recipe_name"],
                quantity=r["quantity"],
                unit_price=float(r["unit_price"]),
            )
            for r in await cursor.fetchall()
        ]

        cursor = await conn.execute(
            "SELECT * FROM order_ingredients WHERE order_id = ? ORDER BY position",
            (order_id,),
        )
        ingredients = [
            IngredientRequirement(
                inventory_item_id=r["inventory_item_id"],
                quantity=float(r["quantity"]),
                unit=r["unit"],
            )
            for r in await cursor.fetchall()
        ]

        cursor = await conn.execute(
            "SELECT * FROM order_status_history WHERE order_id = ? ORDER BY id",
            (order_id,),
        )
        history = [self._row_to_history(r) for r in await cursor.fetchall()]

        return self._row_to_order(row, items, ingredients, history)

    @staticmethod
    def _row_to_history(row: aiosqlite.Row) -> StatusHistoryEntry:
        fields = {
            "status": OrderStatus(row["status"]),
            "updated_by": row["updated_by"],
            "notes": row["notes"],
        }
        timestamp = from_db(row["timestamp"])
        if timestamp is not None:
            fields["timestamp"] = timestamp
        return StatusHistoryEntry(**fields)

    @staticmethod
    def _row_to_order(
        row: aiosqlite.Row,
        items: list[OrderItem],
        ingredients: list[IngredientRequirement],
        history: list[StatusHistoryEntry],
    ) -> Order:
        """Convert a database row and its children to an Order entity."""
        fields = {
            "id": row["id"],
            "order_number": row["order_number"],
            "customer": Customer(
                name=row["customer_name"],
                phone_number=row["customer_phone"],
                address=row["customer_address"],
                email=row["customer_email"],
            ),
            "items": items,
            "total_ingredients": ingredients,
            "status": OrderStatus(row["status"]),
            "status_history": history,
            "delivery_date": from_db(row["delivery_date"]),
            "notes": row["notes"],
            "created_by": row["created_by"],
            "items_total": float(row["items_total"]),
        }
        for column in ("order_date", "created_at", "updated_at"):
            value = from_db(row[column])
            if value is not None:
                fields[column] = value
        return Order(**fields)
