"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# bcrypt accepts cost factors 4..31 (log2 of the number of rounds).
BCRYPT_MIN_ROUNDS = 4
BCRYPT_MAX_ROUNDS = 31


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Server binding for `python -m app.main`
    HOST: str = "127.0.0.1"
    PORT: int = 3000

    # Browser origins allowed to call the API with credentials (JSON list in env)
    CORS_ALLOWED_ORIGINS: list[str] = ["http://localhost:4200"]

    # Password hashing work factor
    BCRYPT_ROUNDS: int = 10

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("HOST")
    @classmethod
    def validate_host(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("HOST must be set and non-empty")
        return v.strip()

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("CORS_ALLOWED_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        origins = []
        for origin in v:
            s = origin.strip().rstrip("/")
            if not (s.lower().startswith("http://") or s.lower().startswith("https://")):
                raise ValueError(
                    "CORS_ALLOWED_ORIGINS entries must use http or https (e.g. http://localhost:4200)"
                )
            origins.append(s)
        return origins

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < BCRYPT_MIN_ROUNDS or v > BCRYPT_MAX_ROUNDS:
            raise ValueError(
                f"BCRYPT_ROUNDS must be between {BCRYPT_MIN_ROUNDS} and {BCRYPT_MAX_ROUNDS}"
            )
        return v


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
