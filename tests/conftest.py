"""Pytest configuration and fixtures.

The revocation store and the user store are replaced by in-memory fakes,
so no Redis or PostgreSQL instance is needed.
"""

import os
import time
import uuid
from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from typing import Any, Optional

# Set test environment variables before importing app modules
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing-only-do-not-use-in-production")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from session_auth.adapters.configuration.config import AuthConfig, Settings  # noqa: E402
from session_auth.adapters.inbound.api.deps import get_user_repository  # noqa: E402
from session_auth.adapters.outbound.security.password_hasher import PasswordHasher  # noqa: E402
from session_auth.adapters.outbound.security.session_token_manager import SessionTokenManager  # noqa: E402
from session_auth.application.ports.outbound import IRevocationStore, IUserRepository  # noqa: E402
from session_auth.application.use_cases.auth_use_cases import AsyncAuthService  # noqa: E402
from session_auth.application.use_cases.session_use_cases import RevocationLedger, SessionValidator  # noqa: E402
from session_auth.domain.exceptions import (  # noqa: E402
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
    RevocationStoreError,
)
from session_auth.domain.models.user_domain_model import Role, User  # noqa: E402

TEST_SECRET = "test-secret-key-for-testing-only-do-not-use-in-production"
STRONG_PASSWORD = "Str0ng!Passw0rd"


class InMemoryRevocationStore(IRevocationStore):
    """Fake time-bounded store honoring absolute expiries."""

    def __init__(self):
        self.entries: dict[str, tuple[str, int]] = {}
        self.available = True
        self.writes = 0

    def _check(self) -> None:
        if not self.available:
            raise RevocationStoreError()

    async def set_until(self, key: str, value: str, expires_at: int) -> None:
        self._check()
        self.writes += 1
        self.entries[key] = (value, int(expires_at))

    async def exists(self, key: str) -> bool:
        self._check()
        entry = self.entries.get(key)
        if entry is None:
            return False
        if entry[1] <= time.time():
            del self.entries[key]
            return False
        return True

    def expiry_of(self, key: str) -> Optional[int]:
        entry = self.entries.get(key)
        return entry[1] if entry else None


class InMemoryUserRepository(IUserRepository):
    """Fake user record store."""

    def __init__(self):
        self.users: dict[Any, User] = {}

    async def find_by_id(self, user_id: Any) -> Optional[User]:
        return self.users.get(user_id)

    async def find_by_email(self, email_id: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email_id == email_id), None)

    async def create(self, first_name: str, email_id: str, password_hash: str, role: Role) -> User:
        if await self.find_by_email(email_id):
            raise ResourceAlreadyExistsException(detail="User with this email already exists")
        user = User(
            id=uuid.uuid4(),
            first_name=first_name,
            email_id=email_id,
            password=password_hash,
            role=Role(role),
            created_at=datetime.now(timezone.utc),
        )
        self.users[user.id] = user
        return user

    async def delete(self, user_id: Any) -> None:
        if user_id not in self.users:
            raise ResourceNotFoundException(detail="User not found", resource_id=user_id)
        del self.users[user_id]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        SECRET_KEY=TEST_SECRET,
        ENVIRONMENT="testing",
        BCRYPT_ROUNDS=4,
        _env_file=None,
    )


@pytest.fixture
def auth_config(settings) -> AuthConfig:
    return AuthConfig.from_settings(settings)


@pytest.fixture
def token_service(auth_config) -> SessionTokenManager:
    return SessionTokenManager(auth_config)


@pytest.fixture
def password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def revocation_store() -> InMemoryRevocationStore:
    return InMemoryRevocationStore()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def ledger(revocation_store, token_service, auth_config) -> RevocationLedger:
    return RevocationLedger(revocation_store, token_service, auth_config.token_lifetime)


@pytest.fixture
def validator(token_service, ledger, user_repository) -> SessionValidator:
    return SessionValidator(token_service, ledger, user_repository)


@pytest.fixture
def auth_service(user_repository, password_hasher, token_service) -> AsyncAuthService:
    return AsyncAuthService(user_repository, password_hasher, token_service)


@pytest.fixture
def app(settings, revocation_store, user_repository):
    from session_auth.main import create_app

    application = create_app(settings, revocation_store=revocation_store, with_database=False)
    application.dependency_overrides[get_user_repository] = lambda: user_repository
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async test client; https so Secure cookies would also round-trip."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="https://test") as client:
        yield client


@pytest_asyncio.fixture
async def admin_user(user_repository, password_hasher) -> User:
    return await user_repository.create(
        first_name="Admin",
        email_id="admin@example.com",
        password_hash=password_hasher.hash(STRONG_PASSWORD),
        role=Role.ADMIN,
    )
