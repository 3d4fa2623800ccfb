"""
Response envelopes shared by the JSON routes.

JSON endpoints wrap their payloads as:
- Success: { "success": true, "data": <payload>, "meta": {...} }
- Error: { "success": false, "error": { "code": "...", "message": "...", "details": {...} } }
"""
from typing import Any, Generic, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """Body of the `error` key in a failed response."""
    code: str = Field(..., description="Error code (e.g., 'notfound', 'invalidargument')")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Additional error context")


class StandardErrorResponse(BaseModel):
    """Envelope returned with 4xx/5xx statuses."""
    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")


class StandardSuccessResponse(BaseModel, Generic[T]):
    """Envelope returned by /options routes; `data` holds the option payload."""
    success: bool = Field(True, description="Always true for success")
    data: T = Field(..., description="Response payload")
    meta: dict[str, Any] | None = Field(default=None, description="Optional metadata")


def success_response(data: Any, meta: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Create a standardized success response.

    Args:
        data: The response payload
        meta: Optional metadata (counts, timestamps, etc.)

    Returns:
        dict: { "success": true, "data": <data>, "meta": <meta> }
    """
    response = {"success": True, "data": data}
    if meta:
        response["meta"] = meta
    return response


def error_response(code: str, message: str, details: Any = None) -> dict[str, Any]:
    """
    Create a standardized error envelope.

    Returns:
        dict: { "success": false, "error": { "code", "message", "details" } }
    """
    return {
        "success": False,
        "error": {
            "code": code,
            "message": message,
            "details": details,
        },
    }
