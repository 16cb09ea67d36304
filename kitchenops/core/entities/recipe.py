"""Recipe (bill of materials) domain entities."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field


class RecipeIngredient(BaseModel):
    """Quantity of one inventory item needed for the recipe's standard yield."""

    inventory_item_id: int
    quantity: float
    unit: str


class Recipe(BaseModel):
    """
    A finished product and its bill of materials.

    Ingredient quantities are expressed for `standard_quantity` units of
    output, e.g. 10 mangoes make 2 cakes.
    """

    id: int | None = None
    name: str
    description: str | None = None
    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    standard_unit: str
    standard_quantity: float = 1.0
    unit_price: float = 0.0
    created_by: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def yield_divisor(self) -> float:
        """Standard quantity, treating unset or non-positive values as 1."""
        if not self.standard_quantity or self.standard_quantity <= 0:
            return 1.0
        return self.standard_quantity
