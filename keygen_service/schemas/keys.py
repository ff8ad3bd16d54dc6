"""
Request/response models for the key API.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field


class PingResponse(BaseModel):
    """Liveness probe response"""
    ack: str = Field("pong", description="Fixed acknowledgement")


class GenerateKeyResponse(BaseModel):
    """Generated key"""
    key: str = Field(..., description="Fixed-width base62 key")

    class Config:
        json_schema_extra = {
            "example": {"key": "0000pnfq"}
        }


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    generator: Optional[str] = None


class ErrorDetail(BaseModel):
    code: str
    message: str
    details: Any = None


class ErrorResponse(BaseModel):
    """Standard error response format."""
    success: bool = False
    error: ErrorDetail
