"""Request/response schemas for registration and login endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """
    Registration payload. Values are passed through untyped and unknown keys
    are kept; the credential policy reports missing, wrong-typed, out-of-policy
    and unexpected fields in a fixed order.
    """

    model_config = ConfigDict(extra="allow")

    username: Any | None = Field(default=None, description="Username (3-24 chars)")
    email: Any | None = Field(default=None, description="Email address")
    role: Any | None = Field(default=None, description="'user' or 'admin'")
    password: Any | None = Field(default=None, description="Password (5-24 chars)")


class LoginRequest(BaseModel):
    """Credentials for login. Missing fields fail like any wrong credential."""

    username: str = Field(default="", description="Username")
    password: str = Field(default="", description="Password")


class MessageResponse(BaseModel):
    """Success body for register and login."""

    message: str


class ErrorResponse(BaseModel):
    """Error body for every non-2xx response."""

    error: str
