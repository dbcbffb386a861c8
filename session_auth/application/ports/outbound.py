# session_auth/application/ports/outbound.py

from abc import ABC, abstractmethod
from typing import Optional, Any

from session_auth.domain.models.user_domain_model import User, Role
from session_auth.domain.models.session_domain_model import SessionClaims


class IUserRepository(ABC):
    """User record store interface."""

    @abstractmethod
    async def find_by_id(self, user_id: Any) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email_id: str) -> Optional[User]:
        """Get user by email."""
        pass

    @abstractmethod
    async def create(self, first_name: str, email_id: str, password_hash: str, role: Role) -> User:
        """Persist a new user whose password is already hashed."""
        pass

    @abstractmethod
    async def delete(self, user_id: Any) -> None:
        """Delete a user by ID."""
        pass


class ITokenService(ABC):
    """Session token handling interface."""

    @abstractmethod
    def issue(self, subject_id: str, email_id: str, role: Role) -> str:
        """Create a signed session token."""
        pass

    @abstractmethod
    def verify(self, token: str) -> SessionClaims:
        """Verify signature and expiry, and decode the claims."""
        pass

    @abstractmethod
    def decode_unverified(self, token: Optional[str]) -> Optional[SessionClaims]:
        """Decode the claims without checking the signature."""
        pass


class IRevocationStore(ABC):
    """Time-bounded key-value store backing the revocation ledger."""

    @abstractmethod
    async def set_until(self, key: str, value: str, expires_at: int) -> None:
        """Atomically set a key that expires at an absolute unix timestamp."""
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check whether a key is present."""
        pass


class IPasswordHasher(ABC):
    """Password hashing interface."""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, plain_password: str, hashed_password: str) -> bool:
        pass
