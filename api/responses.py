"""
Standardized API response models and utilities.
Provides consistent response formatting across all endpoints.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field
from datetime import datetime, timezone


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[dict] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Error timestamp",
    )


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")


def success_response(message: str, **extra: Any) -> dict:
    """Confirmation envelope for mutating routes: ``{success, message, ...}``"""
    return {"success": True, "message": message, **extra}


def error_response(code: str, message: str, details: dict = None) -> dict:
    """Create a standardized, JSON-ready error response"""
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return error_envelope(error)


def error_envelope(error: dict) -> dict:
    """Wrap an error payload (code, message, details) in the failure envelope"""
    return {
        "success": False,
        "error": error,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# OpenAPI documentation for the failure envelope
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid argument"},
    401: {"model": ErrorResponse, "description": "Missing or invalid credential"},
    403: {"model": ErrorResponse, "description": "Subject does not match the caller"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
}
