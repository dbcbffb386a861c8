# session_auth/application/use_cases/auth_use_cases.py

"""
Service for user authentication.

This module implements registration, login and profile deletion.
Every successful registration or login opens a new session: a brand-new
signed token, never an update of an earlier one.
"""

import logging
from typing import Any

from session_auth.application.dtos.user_dto import (
    UserRegister,
    AdminUserRegister,
    UserLogin,
    UserOutput,
    SessionOutput,
)
from session_auth.application.ports.inbound import IAuthUseCase
from session_auth.application.ports.outbound import IUserRepository, IPasswordHasher, ITokenService
from session_auth.domain.exceptions import (
    InvalidCredentialsException,
    ResourceAlreadyExistsException,
    ValidationError,
)
from session_auth.domain.models.user_domain_model import Role, User
from session_auth.shared.utils.input_validation import InputValidator

logger = logging.getLogger(__name__)


class AsyncAuthService(IAuthUseCase):
    """
    Service for user authentication.

    Collaborators are injected so the service runs against any user store,
    hasher and token service.
    """

    def __init__(
            self,
            user_repository: IUserRepository,
            password_hasher: IPasswordHasher,
            token_service: ITokenService,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def register_user(self, user_input: UserRegister) -> SessionOutput:
        """
        Register a new user and open a session for them.

        Args:
            user_input: User data to register

        Returns:
            Session token and the safe user projection

        Raises:
            ValidationError: If a field is missing or malformed
            ResourceAlreadyExistsException: If the email is already in use
        """
        user = await self._create_user(user_input, Role.USER)
        return self._open_session(user)

    async def register_admin(self, user_input: AdminUserRegister) -> SessionOutput:
        """
        Register a user with the role chosen by an admin caller.

        Raises:
            ValidationError: If a field is missing or malformed
            ResourceAlreadyExistsException: If the email is already in use
        """
        user = await self._create_user(user_input, user_input.role)
        return self._open_session(user)

    async def login_user(self, user_input: UserLogin) -> SessionOutput:
        """
        Authenticate a user and open a session.

        Raises:
            InvalidCredentialsException: Same error whether the email is
                unknown or the password is wrong
        """
        if not user_input.email_id or not user_input.password:
            raise InvalidCredentialsException()

        user = await self.user_repository.find_by_email(user_input.email_id)
        if not user:
            logger.warning("Login attempt with unknown email")
            raise InvalidCredentialsException()

        if not self.password_hasher.verify(user_input.password, user.password):
            logger.warning(f"Login attempt with incorrect password for user {user.id}")
            raise InvalidCredentialsException()

        return self._open_session(user)

    async def delete_profile(self, user_id: Any) -> None:
        """
        Raises:
            ResourceNotFoundException: If the user does not exist
        """
        await self.user_repository.delete(user_id)
        logger.info(f"User {user_id} deleted")

    async def _create_user(self, user_input: UserRegister, role: Role) -> User:
        errors = InputValidator.validate_registration(
            user_input.first_name,
            user_input.email_id,
            user_input.password,
        )
        if errors:
            raise ValidationError(detail="Invalid registration data", fields=errors)

        if await self.user_repository.find_by_email(user_input.email_id):
            logger.warning("Attempt to register an existing email")
            raise ResourceAlreadyExistsException(detail="User with this email already exists")

        return await self.user_repository.create(
            first_name=user_input.first_name.strip(),
            email_id=user_input.email_id,
            password_hash=self.password_hasher.hash(user_input.password),
            role=role,
        )

    def _open_session(self, user: User) -> SessionOutput:
        token = self.token_service.issue(str(user.id), user.email_id, user.role)
        return SessionOutput(token=token, user=UserOutput.from_domain(user))
