"""SQLite implementation of raw-material inventory storage."""

import aiosqlite

from kitchenops.config import get_logger
from kitchenops.core.entities.inventory import (
    InventoryItem,
    PurchaseEntry,
    UnitOfMeasurement,
)
from kitchenops.core.exceptions import DuplicateNameError, InventoryItemNotFoundError
from kitchenops.core.interfaces.inventory_store import IInventoryStore
from kitchenops.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
)
from kitchenops.infrastructure.storage.sqlite.timestamps import from_db, now_db, to_db

logger = get_logger(__name__)


class SQLiteInventoryStore(IInventoryStore):
    """SQLite implementation of inventory items and their purchase log."""

    async def create_item(self, item: InventoryItem) -> InventoryItem:
        """Create a new inventory item."""
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    INSERT INTO inventory_items (
                        name, unit, current_stock, threshold_value,
                        opening_stock, opening_stock_date,
                        last_updated, updated_by, created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        item.name,
                        item.unit.value,
                        item.current_stock,
                        item.threshold_value,
                        item.opening_stock,
                        to_db(item.opening_stock_date),
                        to_db(item.last_updated),
                        item.updated_by,
                        to_db(item.created_at),
                        to_db(item.updated_at),
                    ),
                )
                item.id = cursor.lastrowid
        except aiosqlite.IntegrityError as e:
            if "UNIQUE" in str(e):
                raise DuplicateNameError("Inventory item", item.name) from e
            raise

        logger.info("inventory_item_created", item_id=item.id, name=item.name)
        return item

    async def get_item(
        self, item_id: int, include_history: bool = False
    ) -> InventoryItem | None:
        """Get inventory item by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM inventory_items WHERE id = ?", (item_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            item = self._row_to_item(row)

            if include_history:
                cursor = await conn.execute(
                    """
                    SELECT * FROM purchase_entries
                    WHERE inventory_item_id = ?
                    ORDER BY date, id
                    """,
                    (item_id,),
                )
                item.purchase_history = [
                    self._row_to_purchase(r) for r in await cursor.fetchall()
                ]
            return item

    async def get_item_by_name(self, name: str) -> InventoryItem | None:
        """Get inventory item by name."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM inventory_items WHERE name = ?", (name.strip(),)
            )
            row = await cursor.fetchone()
            return self._row_to_item(row) if row else None

    async def list_items(self, low_stock_only: bool = False) -> list[InventoryItem]:
        """List items ordered by name."""
        query = "SELECT * FROM inventory_items"
        if low_stock_only:
            query += " WHERE current_stock <= threshold_value"
        query += " ORDER BY name"

        async with get_connection() as conn:
            cursor = await conn.execute(query)
            return [self._row_to_item(row) for row in await cursor.fetchall()]

    async def update_item(self, item: InventoryItem) -> InventoryItem:
        """Update name, unit, stock and threshold."""
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    UPDATE inventory_items SET
                        name = ?,
                        unit = ?,
                        current_stock = ?,
                        threshold_value = ?,
                        last_updated = ?,
                        updated_by = ?,
                        updated_at = ?
                    WHERE id = ?
                    """,
                    (
                        item.name,
                        item.unit.value,
                        item.current_stock,
                        item.threshold_value,
                        to_db(item.last_updated),
                        item.updated_by,
                        to_db(item.updated_at),
                        item.id,
                    ),
                )
                if cursor.rowcount == 0:
                    raise InventoryItemNotFoundError(item.id)  # type: ignore[arg-type]
        except aiosqlite.IntegrityError as e:
            if "UNIQUE" in str(e):
                raise DuplicateNameError("Inventory item", item.name) from e
            raise

        logger.info("inventory_item_updated", item_id=item.id)
        return item

    async def delete_item(self, item_id: int) -> bool:
        """Delete an item; its purchase log cascades."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM inventory_items WHERE id = ?", (item_id,)
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("inventory_item_deleted", item_id=item_id)
        return deleted

    async def adjust_stock(
        self, item_id: int, delta: float, updated_by: str
    ) -> bool:
        """Add delta to stock unless the result would be negative."""
        now = now_db()
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE inventory_items SET
                    current_stock = current_stock + ?,
                    last_updated = ?,
                    updated_by = ?,
                    updated_at = ?
                WHERE id = ? AND current_stock + ? >= 0
                """,
                (delta, now, updated_by, now, item_id, delta),
            )
            applied = cursor.rowcount == 1

        logger.info(
            "inventory_stock_adjusted" if applied else "inventory_stock_adjust_rejected",
            item_id=item_id,
            delta=delta,
        )
        return applied

    async def record_purchase(self, entry: PurchaseEntry) -> PurchaseEntry:
        """Insert the purchase and add its quantity to stock in one transaction."""
        now = now_db()
        async with get_transaction(immediate=True) as conn:
            cursor = await conn.execute(
                """
                UPDATE inventory_items SET
                    current_stock = current_stock + ?,
                    last_updated = ?,
                    updated_by = ?,
                    updated_at = ?
                WHERE id = ?
                """,
                (entry.quantity, now, entry.updated_by, now, entry.inventory_item_id),
            )
            if cursor.rowcount == 0:
                raise InventoryItemNotFoundError(entry.inventory_item_id)  # type: ignore[arg-type]

            cursor = await conn.execute(
                """
                INSERT INTO purchase_entries (
                    inventory_item_id, quantity, cost, vendor, date, updated_by
                ) VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    entry.inventory_item_id,
                    entry.quantity,
                    entry.cost,
                    entry.vendor,
                    to_db(entry.date),
                    entry.updated_by,
                ),
            )
            entry.id = cursor.lastrowid

        logger.info(
            "inventory_purchase_recorded",
            item_id=entry.inventory_item_id,
            purchase_id=entry.id,
            quantity=entry.quantity,
        )
        return entry

    @staticmethod
    def _row_to_item(row: aiosqlite.Row) -> InventoryItem:
        """Convert a database row to an InventoryItem entity."""
        fields = {
            "id": row["id"],
            "name": row["name"],
            "unit": UnitOfMeasurement(row["unit"]),
            "current_stock": float(row["current_stock"]),
            "threshold_value": float(row["threshold_value"]),
            "opening_stock": float(row["opening_stock"]),
            "updated_by": row["updated_by"],
        }
        for column in ("opening_stock_date", "last_updated", "created_at", "updated_at"):
            value = from_db(row[column])
            if value is not None:
                fields[column] = value
        return InventoryItem(**fields)

    @staticmethod
    def _row_to_purchase(row: aiosqlite.Row) -> PurchaseEntry:
        """Convert a database row to a PurchaseEntry entity."""
        fields = {
            "id": row["id"],
            "inventory_item_id": row["inventory_item_id"],
            "quantity": float(row["quantity"]),
            "cost": float(row["cost"]),
            "vendor": row["vendor"],
            "updated_by": row["updated_by"],
        }
        date = from_db(row["date"])
        if date is not None:
            fields["date"] = date
        return PurchaseEntry(**fields)
