# session_auth/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for authentication, authorization, and database access.
Long-lived collaborators (auth configuration, revocation store) are created
once with the application and read from ``app.state``.
"""

import logging
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from session_auth.adapters.configuration.config import AuthConfig
from session_auth.adapters.inbound.api.cookies import SessionCookie
from session_auth.adapters.outbound.persistence.database import get_db
from session_auth.adapters.outbound.persistence.repositories.user_repository import AsyncUserRepository
from session_auth.adapters.outbound.security.password_hasher import PasswordHasher
from session_auth.adapters.outbound.security.session_token_manager import SessionTokenManager
from session_auth.application.ports.outbound import IRevocationStore, IUserRepository, ITokenService
from session_auth.application.use_cases.auth_use_cases import AsyncAuthService
from session_auth.application.use_cases.session_use_cases import RevocationLedger, SessionValidator
from session_auth.domain.exceptions import PermissionDeniedException
from session_auth.domain.models.user_domain_model import User, Role

# Configure logger
logger = logging.getLogger(__name__)

########################################################################
# Application-scoped collaborators
########################################################################

# Aliases for get_db
get_session = get_db


def get_auth_config(request: Request) -> AuthConfig:
    return request.app.state.auth_config


def get_revocation_store(request: Request) -> IRevocationStore:
    return request.app.state.revocation_store


def get_session_cookie(config: AuthConfig = Depends(get_auth_config)) -> SessionCookie:
    return SessionCookie(config)


def get_token_service(config: AuthConfig = Depends(get_auth_config)) -> ITokenService:
    return SessionTokenManager(config)


def get_password_hasher(config: AuthConfig = Depends(get_auth_config)) -> PasswordHasher:
    return PasswordHasher(rounds=config.bcrypt_rounds)


########################################################################
# Request-scoped services
########################################################################

async def get_user_repository(db: AsyncSession = Depends(get_session)) -> IUserRepository:
    return AsyncUserRepository(db)


def get_revocation_ledger(
        store: IRevocationStore = Depends(get_revocation_store),
        token_service: ITokenService = Depends(get_token_service),
        config: AuthConfig = Depends(get_auth_config),
) -> RevocationLedger:
    # No database session: logout only touches the revocation store
    return RevocationLedger(store, token_service, config.token_lifetime)


def get_session_validator(
        token_service: ITokenService = Depends(get_token_service),
        ledger: RevocationLedger = Depends(get_revocation_ledger),
        user_repository: IUserRepository = Depends(get_user_repository),
) -> SessionValidator:
    return SessionValidator(token_service, ledger, user_repository)


def get_auth_service(
        user_repository: IUserRepository = Depends(get_user_repository),
        password_hasher: PasswordHasher = Depends(get_password_hasher),
        token_service: ITokenService = Depends(get_token_service),
) -> AsyncAuthService:
    return AsyncAuthService(user_repository, password_hasher, token_service)


########################################################################
# User Session Authentication
########################################################################

async def get_current_user(
        request: Request,
        cookie: SessionCookie = Depends(get_session_cookie),
        validator: SessionValidator = Depends(get_session_validator),
) -> User:
    """
    Get the current user from the session token.

    Raises:
        InvalidTokenException: If the token is missing, invalid, expired or revoked
        RevocationStoreError: If the revocation store cannot be consulted
    """
    return await validator.current_user(cookie.read(request))


async def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    """
    Raises:
        PermissionDeniedException: If the current user is not an admin
    """
    if not current_user.is_admin:
        logger.warning(f"User {current_user.id} attempted an admin-only operation")
        raise PermissionDeniedException(role=Role.ADMIN.value)
    return current_user
