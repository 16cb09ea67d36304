"""Infrastructure layer implementations."""

from kitchenops.infrastructure import notifications, storage

__all__ = ["storage", "notifications"]
