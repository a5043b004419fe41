"""Health check endpoint reporting environment and store size."""

from fastapi import APIRouter, Depends

from app.core.config import Settings
from app.core.dependencies import get_app_settings, get_credential_store
from app.schemas.health import HealthResponse
from app.services.credential_store import CredentialStore

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    settings: Settings = Depends(get_app_settings),
    store: CredentialStore = Depends(get_credential_store),
) -> HealthResponse:
    """
    Return service health status and the number of registered accounts.
    Used by load balancers and monitoring.
    """
    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        accounts=len(store),
    )
