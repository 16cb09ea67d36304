"""Abstract interface for recipe storage."""

from abc import ABC, abstractmethod

from kitchenops.core.entities.recipe import Recipe


class IRecipeStore(ABC):
    """Interface for recipe persistence."""

    @abstractmethod
    async def create_recipe(self, recipe: Recipe) -> Recipe:
        """Create a recipe with its ordered ingredient list."""
        pass

    @abstractmethod
    async def get_recipe(self, recipe_id: int) -> Recipe | None:
        """Get recipe by ID."""
        pass

    @abstractmethod
    async def get_recipe_by_name(self, name: str) -> Recipe | None:
        """Get recipe by exact name."""
        pass

    @abstractmethod
    async def list_recipes(self) -> list[Recipe]:
        """List recipes ordered by name."""
        pass

    @abstractmethod
    async def update_recipe(self, recipe: Recipe) -> Recipe:
        """Update a recipe, replacing its ingredient list."""
        pass

    @abstractmethod
    async def delete_recipe(self, recipe_id: int) -> bool:
        """Delete a recipe. Returns False if missing."""
        pass
