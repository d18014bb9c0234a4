"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class CreateLinkRequest(BaseModel):
    """Request to shorten a URL."""

    original_url: str = Field(..., description="The URL to shorten")
    custom_code: Optional[str] = Field(
        None,
        description="Optional custom short code (1-50 letters, digits, '-' or '_')",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "original_url": "https://example.com/very/long/path/to/resource",
                    "custom_code": None
                },
                {
                    "original_url": "https://github.com/user/repo",
                    "custom_code": "myrepo"
                }
            ]
        }
    }


class LinkResponse(BaseModel):
    """A link with its click statistics."""

    short_code: str
    original_url: str
    clicks: int
    last_clicked: Optional[datetime] = None
    created_at: datetime


class CreateLinkResponse(BaseModel):
    """Response after shortening a URL."""

    short_code: str = Field(..., description="The short code")
    original_url: str = Field(..., description="The original long URL")
    short_url: str = Field(..., description="The complete short URL")
    clicks: int = Field(0, description="Clicks recorded so far")
    created_at: datetime = Field(..., description="Creation timestamp")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "short_code": "abc123",
                    "original_url": "https://example.com/very/long/path",
                    "short_url": "http://localhost:3000/abc123",
                    "clicks": 0,
                    "created_at": "2024-01-01T12:00:00Z"
                }
            ]
        }
    }


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    ok: bool = Field(..., description="Whether the active store answers")
    version: str = Field(..., description="Service version")
    timestamp: datetime = Field(..., description="Check timestamp")
    database: str = Field(..., description="'connected' or 'disconnected'")
    backend: str = Field(..., description="Active store backend")


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str = Field(..., description="Error message")
