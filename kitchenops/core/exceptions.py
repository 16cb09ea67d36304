"""
Domain exceptions for the KitchenOps application.

Each exception carries a machine-readable code and structured details so the
API layer can translate it without inspecting messages.
"""

from typing import Any


class KitchenOpsError(Exception):
    """Base exception for all KitchenOps errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class ValidationError(KitchenOpsError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class InvalidQuantityError(ValidationError):
    """Quantity is zero, negative, or paired with an unknown transaction type."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(field=field, message=message, value=value)
        self.code = "INVALID_QUANTITY"


class InvalidStatusError(ValidationError):
    """Order status is not a recognized value."""

    def __init__(self, status: Any, allowed: list[str]):
        super().__init__(
            field="status",
            message=f"Unknown order status. Allowed: {', '.join(allowed)}",
            value=status,
        )
        self.code = "INVALID_STATUS"
        self.details["allowed"] = allowed


# Not-found Exceptions
class NotFoundError(KitchenOpsError):
    """Referenced entity does not exist."""

    pass


class OrderNotFoundError(NotFoundError):
    """Order not found."""

    def __init__(self, order_id: int):
        super().__init__(
            f"Order not found: {order_id}",
            code="ORDER_NOT_FOUND",
            details={"order_id": order_id},
        )


class InventoryItemNotFoundError(NotFoundError):
    """Inventory item not found."""

    def __init__(self, item_id: int):
        super().__init__(
            f"Inventory item not found: {item_id}",
            code="INVENTORY_ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


class RecipeNotFoundError(NotFoundError):
    """Recipe not found."""

    def __init__(self, recipe_id: int):
        super().__init__(
            f"Recipe not found: {recipe_id}",
            code="RECIPE_NOT_FOUND",
            details={"recipe_id": recipe_id},
        )


class FinishedGoodsNotFoundError(NotFoundError):
    """Finished goods record not found."""

    def __init__(self, finished_goods_id: int):
        super().__init__(
            f"Finished goods item not found: {finished_goods_id}",
            code="FINISHED_GOODS_NOT_FOUND",
            details={"finished_goods_id": finished_goods_id},
        )


# Conflict Exceptions
class ConflictError(KitchenOpsError):
    """Request conflicts with existing state."""

    pass


class DuplicateNameError(ConflictError):
    """An entity with the same unique name already exists."""

    def __init__(self, entity: str, name: str):
        super().__init__(
            f"{entity} with name '{name}' already exists",
            code="DUPLICATE_NAME",
            details={"entity": entity, "name": name},
        )


# Stock and lifecycle Exceptions
class InsufficientStockError(KitchenOpsError):
    """Requested quantity exceeds available stock."""

    def __init__(
        self,
        item_name: str,
        required: float,
        available: float,
        unit: str | None = None,
    ):
        unit_suffix = f" {unit}" if unit else ""
        super().__init__(
            f"Insufficient stock for {item_name}. "
            f"Required: {required:g}{unit_suffix}, Available: {available:g}{unit_suffix}",
            code="INSUFFICIENT_STOCK",
            details={
                "item_name": item_name,
                "required": required,
                "available": available,
                "unit": unit,
            },
        )


class InvalidStateError(KitchenOpsError):
    """Mutation is not permitted in the entity's current status."""

    def __init__(self, message: str, current_status: str | None = None):
        super().__init__(
            message,
            code="INVALID_STATE",
            details={"current_status": current_status},
        )


# Storage Exceptions
class StorageError(KitchenOpsError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Access Exceptions
class AuthenticationError(KitchenOpsError):
    """Caller identity is missing or malformed."""

    def __init__(self, reason: str = "Authentication required"):
        super().__init__(reason, code="AUTHENTICATION_REQUIRED")


class PermissionDeniedError(KitchenOpsError):
    """Caller role is not allowed to perform the operation."""

    def __init__(self, role: str, allowed: list[str]):
        super().__init__(
            "Insufficient permissions",
            code="PERMISSION_DENIED",
            details={"role": role, "allowed": allowed},
        )


class ConfigurationError(KitchenOpsError):
    """Configuration error."""

    pass
