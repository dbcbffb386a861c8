# session_auth/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import Optional, Any

from session_auth.application.dtos.user_dto import UserRegister, AdminUserRegister, UserLogin, SessionOutput
from session_auth.domain.models.user_domain_model import User
from session_auth.domain.models.session_domain_model import SessionValidation


class IAuthUseCase(ABC):
    """Interface for authentication use cases."""

    @abstractmethod
    async def register_user(self, user_input: UserRegister) -> SessionOutput:
        """Register a new user and open a session for them."""
        pass

    @abstractmethod
    async def register_admin(self, user_input: AdminUserRegister) -> SessionOutput:
        """Register a user with an explicit role."""
        pass

    @abstractmethod
    async def login_user(self, user_input: UserLogin) -> SessionOutput:
        """Authenticate a user and open a session."""
        pass

    @abstractmethod
    async def delete_profile(self, user_id: Any) -> None:
        """Delete the user's record."""
        pass


class ISessionUseCase(ABC):
    """Interface consumed by the authorization dependency."""

    @abstractmethod
    async def validate(self, token: Optional[str]) -> SessionValidation:
        """Signature and expiry check, and not revoked."""
        pass

    @abstractmethod
    async def current_user(self, token: Optional[str]) -> User:
        """Resolve the user behind a valid session token."""
        pass
