"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    accounts: int = Field(ge=0, description="Number of registered accounts in the volatile store")


class RootResponse(BaseModel):
    """Minimal discovery payload for GET /."""

    success: str
