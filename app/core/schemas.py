"""Core schema definitions for standardized API responses."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Standard success envelope.

    Example:
        {
            "status": "success",
            "message": "Daily installs for 2023-01-01",
            "data": { "no_installs": 42 }
        }

    Failures use the error envelope produced in ``app.core.exceptions``.
    """

    status: str = "success"
    message: str = "Success"
    data: T | None = None


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str = Field(..., description="Error code for programmatic handling")
    details: dict[str, Any] | None = Field(None, description="Additional error context")


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = False
    message: str
    error: ErrorDetail


ReportResponse = ApiResponse[dict[str, Any]]


def success_response(data: T, message: str = "Success") -> ApiResponse[T]:
    """Create a successful API response.

    Args:
        data: The response data.
        message: Human-readable summary of what was computed.

    Returns:
        ApiResponse with status="success".
    """
    return ApiResponse(status="success", message=message, data=data)
