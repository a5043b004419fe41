"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.v1 import router as v1_router
from app.core.config import Settings, get_settings
from app.schemas.health import RootResponse
from app.services.credential_service import CredentialService
from app.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once per process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as {"error": <message>}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies are client errors: 400 with the first problem found."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    else:
        message = "Invalid request body"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application with its own credential store and service.

    Each call gets a fresh, empty store; the store lives exactly as long as
    the returned app.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Credential API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    store = CredentialStore()
    app.state.settings = settings
    app.state.credential_store = store
    app.state.credential_service = CredentialService(store, bcrypt_rounds=settings.BCRYPT_ROUNDS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    app.include_router(v1_router)

    @app.get("/", response_model=RootResponse)
    def root() -> RootResponse:
        """Root route; minimal payload for discovery."""
        return RootResponse(success="Backend is running")

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn on HOST:PORT."""
    settings = get_settings()
    logger.info("Server running at http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
