"""
Domain exceptions for the Lansky ledger.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class LedgerError(Exception):
    """Base exception for all ledger errors."""

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


# Storage Exceptions
class StorageError(LedgerError):
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


class InventoryItemNotFoundError(StorageError):
    """Inventory item not found in the ledger."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Inventory item not found: {item_id}",
            code="INVENTORY_ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


# LLM Exceptions
class LLMError(LedgerError):
    """Base exception for generative model operations."""

    pass


class LLMUnavailableError(LLMError):
    """Model provider is not available."""

    def __init__(self, provider: str, reason: str | None = None):
        super().__init__(
            f"LLM provider unavailable: {provider}" + (f" - {reason}" if reason else ""),
            code="LLM_UNAVAILABLE",
            details={"provider": provider, "reason": reason},
        )


class LLMTimeoutError(LLMError):
    """Model request timed out."""

    def __init__(self, timeout: int, operation: str = "generation"):
        super().__init__(
            f"LLM {operation} timed out after {timeout} seconds",
            code="LLM_TIMEOUT",
            details={"timeout": timeout, "operation": operation},
        )


class LLMResponseError(LLMError):
    """Model returned an invalid response."""

    def __init__(self, reason: str, response: str | None = None):
        super().__init__(
            f"Invalid LLM response: {reason}",
            code="LLM_RESPONSE_ERROR",
            details={"reason": reason, "response_preview": (response or "")[:200]},
        )


class ModelNotFoundError(LLMError):
    """Requested model not found."""

    def __init__(self, model: str, provider: str):
        super().__init__(
            f"Model '{model}' not found on {provider}",
            code="MODEL_NOT_FOUND",
            details={"model": model, "provider": provider},
        )


class CircuitBreakerOpenError(LLMError):
    """Circuit breaker is open due to repeated failures."""

    def __init__(self, provider: str, cooldown_remaining: int):
        super().__init__(
            f"Circuit breaker open for {provider}, retry in {cooldown_remaining}s",
            code="CIRCUIT_BREAKER_OPEN",
            details={"provider": provider, "cooldown_remaining": cooldown_remaining},
        )


class RequestInFlightError(LedgerError):
    """A request of the same kind is still pending."""

    def __init__(self, operation: str):
        super().__init__(
            f"A {operation} request is already in progress",
            code="REQUEST_IN_FLIGHT",
            details={"operation": operation},
        )


# Validation Exceptions
class ValidationError(LedgerError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


class InvalidImportError(ValidationError):
    """Raw state payload could not be imported."""

    def __init__(self, reason: str, key: str | None = None):
        super().__init__(field=key or "payload", message=reason)
        self.code = "INVALID_IMPORT"
        self.details["key"] = key


class ConfirmationRequiredError(ValidationError):
    """Destructive operation attempted without confirmation."""

    def __init__(self, operation: str):
        super().__init__(
            field="confirm",
            message=f"'{operation}' deletes data permanently and must be confirmed",
        )
        self.code = "CONFIRMATION_REQUIRED"
        self.details["operation"] = operation


class FileTooLargeError(ValidationError):
    """Uploaded file exceeds size limit."""

    def __init__(self, filename: str, size: int, max_size: int):
        super().__init__(
            field="file",
            message=f"File '{filename}' is too large ({size} bytes, max {max_size})",
        )
        self.details.update(
            {
                "filename": filename,
                "size": size,
                "max_size": max_size,
            }
        )


class UnsupportedFileTypeError(ValidationError):
    """File type is not supported."""

    def __init__(self, filename: str, content_type: str, allowed: list[str]):
        super().__init__(
            field="file",
            message=f"Unsupported file type '{content_type}'. Allowed: {', '.join(allowed)}",
        )
        self.details.update(
            {
                "filename": filename,
                "content_type": content_type,
                "allowed": allowed,
            }
        )


class AdminAccessDeniedError(LedgerError):
    """Admin console access refused."""

    def __init__(self, reason: str):
        super().__init__(
            f"Admin access denied: {reason}",
            code="ADMIN_ACCESS_DENIED",
            details={"reason": reason},
        )


class ConfigurationError(LedgerError):
    """Configuration error."""

    pass
