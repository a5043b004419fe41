"""Pydantic request/response schemas."""

from app.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
)
from app.schemas.health import HealthResponse, RootResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "RootResponse",
]
