"""
Error handling middleware.

Every API error is answered with an ErrorResponse carrying a
machine-readable error_code, a message, and a hint for recovery.
"""

import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from lansky.application.dto.responses import ErrorResponse
from lansky.config import get_logger
from lansky.core.exceptions import (
    AdminAccessDeniedError,
    ConfigurationError,
    FileTooLargeError,
    InventoryItemNotFoundError,
    LedgerError,
    LLMError,
    RequestInFlightError,
    StorageError,
    UnsupportedFileTypeError,
    ValidationError,
)

logger = get_logger(__name__)


# Checked in order; subclasses come before their bases
EXCEPTION_STATUS_MAP: dict[type[Exception], int] = {
    InventoryItemNotFoundError: status.HTTP_404_NOT_FOUND,
    FileTooLargeError: 413,
    UnsupportedFileTypeError: 415,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    RequestInFlightError: status.HTTP_409_CONFLICT,
    AdminAccessDeniedError: status.HTTP_403_FORBIDDEN,
    LLMError: status.HTTP_503_SERVICE_UNAVAILABLE,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ValueError: status.HTTP_400_BAD_REQUEST,
}

HINT_MAP: dict[str, str] = {
    "INVENTORY_ITEM_NOT_FOUND": "Check the item ID and try GET /api/inventory to list stock.",
    "INVALID_IMPORT": "Send a JSON object whose 'sales', 'expenses' and 'inventory' match the export shape.",
    "CONFIRMATION_REQUIRED": "Export the ledger first, then repeat the request with confirm=true.",
    "REQUEST_IN_FLIGHT": "Wait for the pending request to finish before sending another.",
    "ADMIN_ACCESS_DENIED": "Send the configured ADMIN_TOKEN in the X-Admin-Token header.",
    "LLM_UNAVAILABLE": "The AI service is unreachable or AI_API_KEY is not set. Retry later.",
    "LLM_TIMEOUT": "The AI request timed out. Retry later or raise AI_TIMEOUT.",
    "CIRCUIT_BREAKER_OPEN": "Too many AI failures. Wait for the cooldown before retrying.",
    "MODEL_NOT_FOUND": "Check AI_MODEL_NAME / AI_IMAGE_MODEL.",
    "VALIDATION_ERROR": "Check the request body against the API schema.",
    "DATABASE_ERROR": "A database operation failed. Check server logs.",
    "ValueError": "A parameter value is invalid. Check the request.",
}

STATUS_HINTS: dict[int, str] = {
    400: "Check the request parameters and body.",
    413: "The upload is too large.",
    415: "Upload a PNG, JPEG, WebP or GIF image.",
    403: "This endpoint requires admin access.",
    404: "The requested resource was not found. Verify the ID.",
    409: "The resource is busy. Retry shortly.",
    422: "The request could not be processed. Check the input format.",
    500: "An internal error occurred. Check server logs.",
    503: "The service is temporarily unavailable. Retry later.",
}


def _get_hint(error_code: str, status_code: int) -> str:
    return HINT_MAP.get(error_code) or STATUS_HINTS.get(status_code, "")


def _status_for(exc: Exception) -> int:
    for exc_type, code in EXCEPTION_STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(request: Request, exc: Exception) -> JSONResponse:
    """Convert an exception to the standard JSON error response."""
    status_code = _status_for(exc)
    error_code = exc.code if isinstance(exc, LedgerError) else exc.__class__.__name__
    message = exc.message if isinstance(exc, LedgerError) else str(exc)

    log = logger.error if status_code >= 500 else logger.warning
    log(
        "request_error",
        request_id=getattr(request.state, "request_id", None),
        path=request.url.path,
        error_code=error_code,
        error=message,
        traceback=traceback.format_exc() if status_code >= 500 else None,
    )

    detail = None
    if isinstance(exc, LedgerError) and exc.details:
        detail = "; ".join(f"{k}={v}" for k, v in exc.details.items() if v is not None) or None

    body = ErrorResponse(
        error_code=error_code,
        message=message,
        hint=_get_hint(error_code, status_code),
        detail=detail,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Last-resort conversion of exceptions that escaped the handlers."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            return error_response(request, e)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register handlers for domain, validation and HTTP errors."""
    from fastapi.exceptions import RequestValidationError
    from starlette.exceptions import HTTPException

    @app.exception_handler(LedgerError)
    async def ledger_exception_handler(request: Request, exc: LedgerError) -> JSONResponse:
        return error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        errors = []
        for error in exc.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")

        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error_code="VALIDATION_ERROR",
                message="Request validation failed",
                hint=HINT_MAP["VALIDATION_ERROR"],
                detail="; ".join(errors),
                path=request.url.path,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        error_code = {
            403: "FORBIDDEN",
            404: "NOT_FOUND",
            405: "METHOD_NOT_ALLOWED",
        }.get(exc.status_code, "HTTP_ERROR")

        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error_code=error_code,
                message=str(exc.detail) if exc.detail else "An error occurred",
                hint=_get_hint(error_code, exc.status_code),
                path=request.url.path,
            ).model_dump(mode="json"),
        )
