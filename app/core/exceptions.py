"""Application-wide exception classes and handlers.

Every error raised while computing a report derives from ``AppError`` and
is rendered by the handlers below into the error envelope::

    {"success": false, "message": "...", "error": {"code": "...", "details": ...}}
"""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.schemas import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base exception for application errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ValidationError(AppError):
    """Validation error (400)."""

    def __init__(
        self,
        message: str = "Validation failed",
        error_code: str = "VALIDATION_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=error_code,
            details=details,
        )


class MissingFieldError(ValidationError):
    """A required request field is absent or empty."""

    def __init__(self, *fields: str):
        super().__init__(
            message=f"{' or '.join(fields)} is required",
            error_code="MISSING_FIELD",
            details={"fields": list(fields)},
        )


class InvalidDateFormatError(ValidationError):
    """Date string does not split into day, month and year."""

    def __init__(self, value: str):
        super().__init__(
            message="Invalid date format. Use DD-MM-YYYY or YYYY-MM-DD",
            error_code="INVALID_DATE_FORMAT",
            details={"value": value},
        )


class InvalidDateValueError(ValidationError):
    """Date parts are not numeric or do not form a calendar date."""

    def __init__(self, value: str):
        super().__init__(
            message="Invalid date values",
            error_code="INVALID_DATE_VALUE",
            details={"value": value},
        )


class InvalidGameTypeError(ValidationError):
    """gameType is not one of the recognized modes."""

    def __init__(self, game_type: str, allowed: Sequence[str]):
        super().__init__(
            message=f"Invalid gameType. Allowed types: {', '.join(allowed)}",
            error_code="INVALID_GAME_TYPE",
            details={"game_type": game_type, "allowed": list(allowed)},
        )


class StoreUnavailableError(AppError):
    """Event store unreachable or query failed (503)."""

    def __init__(self, message: str = "Event store unavailable"):
        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error_code="STORE_UNAVAILABLE",
        )


def error_envelope(
    message: str, code: str, details: dict[str, Any] | None = None
) -> dict[str, Any]:
    return ErrorResponse(
        message=message, error=ErrorDetail(code=code, details=details)
    ).model_dump()


async def app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle AppError and return consistent JSON response."""
    logger.error(
        "AppError: %s (code=%s, status=%d)",
        exc.message,
        exc.error_code,
        exc.status_code,
        extra={"details": exc.details},
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.message, exc.error_code, exc.details or None),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed request bodies in the same envelope as AppError."""
    logger.warning("Request validation failed: %s", request.url.path)

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_envelope(
            "Invalid request body",
            "REQUEST_VALIDATION_ERROR",
            {"errors": jsonable_encoder(exc.errors())},
        ),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions with a generic error response."""
    logger.exception("Unhandled exception: %s", str(exc))

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope("Internal Server Error", "INTERNAL_ERROR"),
    )


def register_exception_handlers(app: FastAPI, *, debug: bool = False) -> None:
    """Register exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
        debug: If True, unhandled exceptions propagate with stack traces.
    """
    app.add_exception_handler(AppError, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError,
        request_validation_handler,  # type: ignore[arg-type]
    )
    if not debug:
        app.add_exception_handler(Exception, unhandled_exception_handler)
