"""Core app configuration, security helpers and dependencies."""

from app.core.config import get_settings, settings
from app.core.dependencies import get_app_settings, get_credential_service, get_credential_store

__all__ = [
    "get_app_settings",
    "get_credential_service",
    "get_credential_store",
    "get_settings",
    "settings",
]
