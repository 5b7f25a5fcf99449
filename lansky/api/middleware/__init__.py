"""API middleware."""

from lansky.api.middleware.error_handler import ErrorHandlerMiddleware
from lansky.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
