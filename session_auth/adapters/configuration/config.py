# session_auth/adapters/configuration/config.py

from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from typing import Optional, List
from logging import getLevelName
from pydantic import Field, PostgresDsn, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from session_auth.domain.exceptions import SigningError

SUPPORTED_ALGORITHMS = ("HS256", "HS384", "HS512")

# Session lifetime is fixed; the cookie max-age mirrors it
SESSION_TOKEN_LIFETIME = timedelta(hours=1)


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"

    # Debug flag
    DEBUG: bool = False

    # Database
    DB_DRIVER: str = "asyncpg"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "session_auth"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)

    # Revocation store
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_SOCKET_TIMEOUT: float = 5.0

    # Auth
    SECRET_KEY: str = ""
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "token"
    BCRYPT_ROUNDS: int = 10

    # CORS, comma separated
    CORS_ORIGINS: str = "http://localhost:5173,http://127.0.0.1:5173"

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value, info):
        if value:
            return value

        data = info.data
        return str(PostgresDsn.build(
            scheme=f"postgresql+{data.get('DB_DRIVER', 'asyncpg')}",
            username=data["POSTGRES_USER"],
            password=data["POSTGRES_PASSWORD"],
            host=data["POSTGRES_HOST"],
            port=data["POSTGRES_PORT"],
            path=data["POSTGRES_DB"],
        ))

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Ensure the value is a valid logging level"""
        lvl = v.upper()
        if not isinstance(getLevelName(lvl), int):
            raise ValueError(f"Invalid LOG_LEVEL: {v!r}")
        return lvl

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@dataclass(frozen=True)
class AuthConfig:
    """
    Signing and cookie configuration, built once at startup and injected
    into the token service and the session cookie.
    """
    secret_key: str
    algorithm: str
    token_lifetime: timedelta
    secure_cookies: bool
    cookie_name: str = "token"
    bcrypt_rounds: int = 10

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthConfig":
        """
        Raises:
            SigningError: If the secret is missing or the algorithm unsupported
        """
        if not settings.SECRET_KEY or not settings.SECRET_KEY.strip():
            raise SigningError(detail="SECRET_KEY is not configured")
        if settings.ALGORITHM not in SUPPORTED_ALGORITHMS:
            raise SigningError(detail=f"Unsupported signing algorithm: {settings.ALGORITHM}")

        return cls(
            secret_key=settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
            token_lifetime=SESSION_TOKEN_LIFETIME,
            secure_cookies=settings.is_production,
            cookie_name=settings.SESSION_COOKIE_NAME,
            bcrypt_rounds=settings.BCRYPT_ROUNDS,
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Return the process-wide Settings instance.
    Built on first call, cached afterwards.
    """
    return Settings()
