"""API middleware."""

from kitchenops.api.middleware.error_handler import ErrorHandlerMiddleware
from kitchenops.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
