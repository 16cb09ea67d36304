"""SQLite implementation of finished-goods storage."""

import aiosqlite

from kitchenops.config import get_logger
from kitchenops.core.entities.finished_goods import (
    FinishedGoods,
    StockHistoryEntry,
    TransactionType,
)
from kitchenops.core.exceptions import DuplicateNameError, FinishedGoodsNotFoundError
from kitchenops.core.interfaces.finished_goods_store import IFinishedGoodsStore
from kitchenops.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
)
from kitchenops.infrastructure.storage.sqlite.timestamps import from_db, now_db, to_db

logger = get_logger(__name__)


class SQLiteFinishedGoodsStore(IFinishedGoodsStore):
    """SQLite implementation of finished goods and their stock history."""

    async def create_item(self, item: FinishedGoods) -> FinishedGoods:
        """Create a record and any seeded history entries."""
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    INSERT INTO finished_goods (
                        name, recipe_id, unit, current_stock,
                        last_produced_date, created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        item.name,
                        item.recipe_id,
                        item.unit,
                        item.current_stock,
                        to_db(item.last_produced_date),
                        to_db(item.created_at),
                        to_db(item.updated_at),
                    ),
                )
                item.id = cursor.lastrowid
                for entry in item.stock_history:
                    entry.finished_goods_id = item.id
                    entry.id = await self._insert_entry(conn, entry)
        except aiosqlite.IntegrityError as e:
            if "UNIQUE" in str(e):
                raise DuplicateNameError("Finished goods", item.name) from e
            raise

        logger.info("finished_goods_created", finished_goods_id=item.id, name=item.name)
        return item

    async def get_item(
        self, item_id: int, include_history: bool = False
    ) -> FinishedGoods | None:
        """Get finished goods by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM finished_goods WHERE id = ?", (item_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            item = self._row_to_item(row)

            if include_history:
                cursor = await conn.execute(
                    """
                    SELECT * FROM finished_goods_history
                    WHERE finished_goods_id = ?
                    ORDER BY id
                    """,
                    (item_id,),
                )
                item.stock_history = [
                    self._row_to_entry(r) for r in await cursor.fetchall()
                ]
            return item

    async def get_item_by_name(self, name: str) -> FinishedGoods | None:
        """Get finished goods by name."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM finished_goods WHERE name = ?", (name.strip(),)
            )
            row = await cursor.fetchone()
            return self._row_to_item(row) if row else None

    async def get_item_by_recipe(self, recipe_id: int) -> FinishedGoods | None:
        """Get the oldest finished-goods record for a recipe."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM finished_goods WHERE recipe_id = ? ORDER BY id LIMIT 1",
                (recipe_id,),
            )
            row = await cursor.fetchone()
            return self._row_to_item(row) if row else None

    async def list_items(self) -> list[FinishedGoods]:
        """List finished goods ordered by name."""
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM finished_goods ORDER BY name")
            return [self._row_to_item(row) for row in await cursor.fetchall()]

    async def update_item(self, item: FinishedGoods) -> FinishedGoods:
        """Update name, recipe and unit."""
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    UPDATE finished_goods SET
                        name = ?, recipe_id = ?, unit = ?, updated_at = ?
                    WHERE id = ?
                    """,
                    (item.name, item.recipe_id, item.unit, to_db(item.updated_at), item.id),
                )
                if cursor.rowcount == 0:
                    raise FinishedGoodsNotFoundError(item.id)  # type: ignore[arg-type]
        except aiosqlite.IntegrityError as e:
            if "UNIQUE" in str(e):
                raise DuplicateNameError("Finished goods", item.name) from e
            raise

        logger.info("finished_goods_updated", finished_goods_id=item.id)
        return item

    async def delete_item(self, item_id: int) -> bool:
        """Delete a record; its history cascades."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM finished_goods WHERE id = ?", (item_id,)
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("finished_goods_deleted", finished_goods_id=item_id)
        return deleted

    async def apply_transaction(self, entry: StockHistoryEntry, delta: float) -> bool:
        """Conditionally move stock by delta and log the entry."""
        now = now_db()
        produced = entry.transaction_type == TransactionType.PRODUCED
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE finished_goods SET
                    current_stock = current_stock + ?,
                    last_produced_date = CASE WHEN ? THEN ? ELSE last_produced_date END,
                    updated_at = ?
                WHERE id = ? AND current_stock + ? >= 0
                """,
                (
                    delta,
                    produced,
                    to_db(entry.date),
                    now,
                    entry.finished_goods_id,
                    delta,
                ),
            )
            if cursor.rowcount != 1:
                logger.info(
                    "finished_goods_transaction_rejected",
                    finished_goods_id=entry.finished_goods_id,
                    delta=delta,
                )
                return False
            entry.id = await self._insert_entry(conn, entry)

        logger.info(
            "finished_goods_transaction_applied",
            finished_goods_id=entry.finished_goods_id,
            type=entry.transaction_type.value,
            delta=delta,
        )
        return True

    @staticmethod
    async def _insert_entry(conn: aiosqlite.Connection, entry: StockHistoryEntry) -> int:
        cursor = await conn.execute(
            """
            INSERT INTO finished_goods_history (
                finished_goods_id, transaction_type, quantity,
                date, order_id, notes, updated_by
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                entry.finished_goods_id,
                entry.transaction_type.value,
                entry.quantity,
                to_db(entry.date),
                entry.order_id,
                entry.notes,
                entry.updated_by,
            ),
        )
        return cursor.lastrowid  # type: ignore[return-value]

    @staticmethod
    def _row_to_item(row: aiosqlite.Row) -> FinishedGoods:
        """Convert a database row to a FinishedGoods entity."""
        fields = {
            "id": row["id"],
            "name": row["name"],
            "recipe_id": row["recipe_id"],
            "unit": row["unit"],
            "current_stock": float(row["current_stock"]),
            "last_produced_date": from_db(row["last_produced_date"]),
        }
        for column in ("created_at", "updated_at"):
            value = from_db(row[column])
            if value is not None:
                fields[column] = value
        return FinishedGoods(**fields)

    @staticmethod
    def _row_to_entry(row: aiosqlite.Row) -> StockHistoryEntry:
        """Convert a database row to a StockHistoryEntry entity."""
        fields = {
            "id": row["id"],
            "finished_goods_id": row["finished_goods_id"],
            "transaction_type": TransactionType(row["transaction_type"]),
            "quantity": float(row["quantity"]),
            "order_id": row["order_id"],
            "notes": row["notes"],
            "updated_by": row["updated_by"],
        }
        date = from_db(row["date"])
        if date is not None:
            fields["date"] = date
        return StockHistoryEntry(**fields)
