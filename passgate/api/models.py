"""
API request and response models.

Pydantic models for FastAPI endpoint parsing and OpenAPI schema generation.

Registration fields are deliberately loose: shape rules live in the
domain validator, so a missing or malformed field produces a 400 with
the failing field rather than a generic 422.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request model for account registration."""

    username: str | None = Field(default=None, description="Username (3-24 characters)")
    email: str | None = Field(default=None, description="Email address")
    role: str | None = Field(default=None, description="Account role: 'user' or 'admin'")
    password: str | None = Field(
        default=None,
        description="Password (5-24 characters, upper and lower case, one special character)",
    )


class LoginRequest(BaseModel):
    """Request model for login."""

    username: str
    password: str


class MessageResponse(BaseModel):
    """Response model for successful operations."""

    message: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str


class InvalidFieldDetail(BaseModel):
    """Names the registration field that failed validation."""

    message: str
    field: str
    reason: str


class InvalidFieldResponse(BaseModel):
    """Error response for registration input that failed validation."""

    detail: InvalidFieldDetail
