from datetime import timedelta

import pytest
from pydantic import ValidationError as PydanticValidationError

from session_auth.adapters.configuration.config import AuthConfig, Settings
from session_auth.adapters.inbound.api.cookies import SessionCookie
from session_auth.domain.exceptions import SigningError
from session_auth.main import create_app

from tests.conftest import TEST_SECRET


def test_database_url_is_assembled_from_parts():
    settings = Settings(
        SECRET_KEY=TEST_SECRET,
        POSTGRES_USER="svc",
        POSTGRES_PASSWORD="pw",
        POSTGRES_HOST="db",
        POSTGRES_PORT=5433,
        POSTGRES_DB="sessions",
        _env_file=None,
    )
    assert settings.DATABASE_URL == "postgresql+asyncpg://svc:pw@db:5433/sessions"


def test_explicit_database_url_wins():
    settings = Settings(SECRET_KEY=TEST_SECRET, DATABASE_URL="postgresql+asyncpg://x@y/z", _env_file=None)
    assert settings.DATABASE_URL == "postgresql+asyncpg://x@y/z"


def test_invalid_log_level():
    with pytest.raises(PydanticValidationError):
        Settings(LOG_LEVEL="chatty", _env_file=None)


def test_cors_origins_are_split():
    settings = Settings(CORS_ORIGINS="https://a.example, https://b.example,", _env_file=None)
    assert settings.cors_origin_list == ["https://a.example", "https://b.example"]


def test_token_lifetime_is_fixed_at_one_hour(monkeypatch):
    monkeypatch.setenv("SESSION_TOKEN_EXPIRE_MINUTES", "5")

    config = AuthConfig.from_settings(Settings(SECRET_KEY=TEST_SECRET, _env_file=None))

    assert config.token_lifetime == timedelta(hours=1)
    assert SessionCookie(config).max_age == 3600


def test_app_refuses_to_start_without_secret(revocation_store):
    with pytest.raises(SigningError):
        create_app(Settings(SECRET_KEY="", _env_file=None), revocation_store=revocation_store, with_database=False)
