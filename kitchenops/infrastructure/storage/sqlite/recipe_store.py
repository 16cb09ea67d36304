"""SQLite implementation of recipe storage."""

import aiosqlite

from kitchenops.config import get_logger
from kitchenops.core.entities.recipe import Recipe, RecipeIngredient
from kitchenops.core.exceptions import DuplicateNameError, RecipeNotFoundError
from kitchenops.core.interfaces.recipe_store import IRecipeStore
from kitchenops.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
)
from kitchenops.infrastructure.storage.sqlite.timestamps import from_db, to_db

logger = get_logger(__name__)


class SQLiteRecipeStore(IRecipeStore):
    """SQLite implementation of recipes and their ingredient lists."""

    async def create_recipe(self, recipe: Recipe) -> Recipe:
        """Create a recipe with its ingredients."""
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    INSERT INTO recipes (
                        name, description, standard_unit, standard_quantity,
                        unit_price, created_by, created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        recipe.name,
                        recipe.description,
                        recipe.standard_unit,
                        recipe.standard_quantity,
                        recipe.unit_price,
                        recipe.created_by,
                        to_db(recipe.created_at),
                        to_db(recipe.updated_at),
                    ),
                )
                recipe.id = cursor.lastrowid
                await self._insert_ingredients(conn, recipe)
        except aiosqlite.IntegrityError as e:
            if "UNIQUE" in str(e):
                raise DuplicateNameError("Recipe", recipe.name) from e
            raise

        logger.info(
            "recipe_created",
            recipe_id=recipe.id,
            name=recipe.name,
            ingredients=len(recipe.ingredients),
        )
        return recipe

    async def get_recipe(self, recipe_id: int) -> Recipe | None:
        """Get recipe by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM recipes WHERE id = ?", (recipe_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return await self._load(conn, row)

    async def get_recipe_by_name(self, name: str) -> Recipe | None:
        """Get recipe by name."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM recipes WHERE name = ?", (name.strip(),)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return await self._load(conn, row)

    async def list_recipes(self) -> list[Recipe]:
        """List recipes ordered by name."""
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM recipes ORDER BY name")
            rows = await cursor.fetchall()
            return [await self._load(conn, row) for row in rows]

    async def update_recipe(self, recipe: Recipe) -> Recipe:
        """Update a recipe and replace its ingredient list."""
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    UPDATE recipes SET
                        name = ?,
                        description = ?,
                        standard_unit = ?,
                        standard_quantity = ?,
                        unit_price = ?,
                        updated_at = ?
                    WHERE id = ?
                    """,
                    (
                        recipe.name,
                        recipe.description,
                        recipe.standard_unit,
                        recipe.standard_quantity,
                        recipe.unit_price,
                        to_db(recipe.updated_at),
                        recipe.id,
                    ),
                )
                if cursor.rowcount == 0:
                    raise RecipeNotFoundError(recipe.id)  # type: ignore[arg-type]

                await conn.execute(
                    "DELETE FROM recipe_ingredients WHERE recipe_id = ?", (recipe.id,)
                )
                await self._insert_ingredients(conn, recipe)
        except aiosqlite.IntegrityError as e:
            if "UNIQUE" in str(e):
                raise DuplicateNameError("Recipe", recipe.name) from e
            raise

        logger.info("recipe_updated", recipe_id=recipe.id)
        return recipe

    async def delete_recipe(self, recipe_id: int) -> bool:
        """Delete a recipe; its ingredients cascade."""
        async with get_transaction() as conn:
            cursor = await conn.execute("DELETE FROM recipes WHERE id = ?", (recipe_id,))
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("recipe_deleted", recipe_id=recipe_id)
        return deleted

    @staticmethod
    async def _insert_ingredients(conn: aiosqlite.Connection, recipe: Recipe) -> None:
        await conn.executemany(
            """
            INSERT INTO recipe_ingredients (
                recipe_id, position, inventory_item_id, quantity, unit
            ) VALUES (?, ?, ?, ?, ?)
            """,
            [
                (recipe.id, position, ing.inventory_item_id, ing.quantity, ing.unit)
                for position, ing in enumerate(recipe.ingredients)
            ],
        )

    async def _load(self, conn: aiosqlite.Connection, row: aiosqlite.Row) -> Recipe:
        cursor = await conn.execute(
            """
            SELECT inventory_item_id, quantity, unit FROM recipe_ingredients
            WHERE recipe_id = ?
            ORDER BY position
            """,
            (row["id"],),
        )
        ingredients = [
            RecipeIngredient(
                inventory_item_id=r["inventory_item_id"],
                quantity=float(r["quantity"]),
                unit=r["unit"],
            )
            for r in await cursor.fetchall()
        ]
        return self._row_to_recipe(row, ingredients)

    @staticmethod
    def _row_to_recipe(
        row: aiosqlite.Row, ingredients: list[RecipeIngredient]
    ) -> Recipe:
        """Convert a database row to a Recipe entity."""
        fields = {
            "id": row["id"],
            "name": row["name"],
            "description": row["description"],
            "ingredients": ingredients,
            "standard_unit": row["standard_unit"],
            "standard_quantity": float(row["standard_quantity"]),
            "unit_price": float(row["unit_price"]),
            "created_by": row["created_by"],
        }
        for column in ("created_at", "updated_at"):
            value = from_db(row[column])
            if value is not None:
                fields[column] = value
        return Recipe(**fields)
