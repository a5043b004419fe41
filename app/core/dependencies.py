"""FastAPI dependencies exposing the per-application credential objects."""

from fastapi import Request

from app.core.config import Settings
from app.services.credential_service import CredentialService
from app.services.credential_store import CredentialStore


def get_credential_store(request: Request) -> CredentialStore:
    """Dependency that returns the store created by create_app()."""
    return request.app.state.credential_store


def get_credential_service(request: Request) -> CredentialService:
    """Dependency that returns the service created by create_app()."""
    return request.app.state.credential_service


def get_app_settings(request: Request) -> Settings:
    """Dependency that returns the settings the application was built with."""
    return request.app.state.settings
