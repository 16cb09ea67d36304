"""KitchenOps: restaurant inventory, recipe, order and finished-goods service."""

__version__ = "1.0.0"
