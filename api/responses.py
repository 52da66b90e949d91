"""
Standardized API response models and utilities.
Provides consistent response formatting across all endpoints.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: Any = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")


def error_response(code: str, message: Any, details: Any = None) -> dict:
    """Create a standardized, JSON-ready error envelope"""
    payload = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details)
    )
    return payload.model_dump(mode="json", exclude_none=True)
