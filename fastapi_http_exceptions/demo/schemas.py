"""
Pydantic schemas for the demo API.

These schemas define the API contract of the demo routes.
No business logic belongs here.
"""

from pydantic import BaseModel, Field

USER_NAME_MIN_LEN = 1
USER_NAME_MAX_LEN = 100
USER_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserSchema(BaseModel):
    """A user as returned by the demo API."""

    id: str
    name: str


class CreateUserRequest(BaseModel):
    """Request schema for creating a user.

    Attributes:
        name: Display name (1-100 chars).
        email: Contact address.
    """

    name: str = Field(..., min_length=USER_NAME_MIN_LEN, max_length=USER_NAME_MAX_LEN)
    email: str = Field(..., pattern=USER_EMAIL_PATTERN)


class ReportSchema(BaseModel):
    """Usage report; ``count`` must be a non-negative integer."""

    id: str
    count: int = Field(..., ge=0)


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Error body shared by every error status."""

    error: str
