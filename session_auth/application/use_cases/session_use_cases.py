# session_auth/application/use_cases/session_use_cases.py

"""
Session revocation and validation.

RevocationLedger keeps logged-out tokens in a time-bounded store until the
moment they would have expired anyway. SessionValidator combines the
signature and expiry check with a ledger lookup; it is what the
authorization dependency consults on every authenticated request.
"""

import logging
from datetime import timedelta
from typing import Any, Optional
from uuid import UUID

from session_auth.application.ports.inbound import ISessionUseCase
from session_auth.application.ports.outbound import IRevocationStore, ITokenService, IUserRepository
from session_auth.domain.exceptions import InvalidTokenException
from session_auth.domain.models.session_domain_model import SessionValidation
from session_auth.domain.models.user_domain_model import User
from session_auth.domain.services.auth_service import AuthService

logger = logging.getLogger(__name__)

REVOKED_KEY_PREFIX = "token:"
REVOKED_MARKER = "blocked"


class RevocationLedger:
    """
    Denylist of session tokens invalidated before their natural expiry.

    ``max_lifetime`` is the lifetime the issuer gives its tokens; entries are
    never kept longer than that.
    """

    def __init__(self, store: IRevocationStore, token_service: ITokenService, max_lifetime: timedelta):
        self.store = store
        self.token_service = token_service
        self.max_lifetime = max_lifetime

    @staticmethod
    def _key(token: str) -> str:
        return f"{REVOKED_KEY_PREFIX}{token}"

    async def revoke(self, token: Optional[str]) -> None:
        """
        Block a token until its own expiry, at most ``max_lifetime`` from now.

        The signature is not verified: the token presented at logout is the
        caller's own. An absent or malformed token is a no-op, and so is a
        token that has already expired.

        Raises:
            RevocationStoreError: If the store cannot be reached
        """
        claims = self.token_service.decode_unverified(token)
        if claims is None:
            logger.debug("Logout without a decodable session token; nothing to revoke")
            return

        deadline = AuthService.revocation_deadline(claims, self.max_lifetime)
        if deadline is None:
            logger.debug(f"Session of {claims.subject_id} already expired; nothing to revoke")
            return

        await self.store.set_until(self._key(token), REVOKED_MARKER, deadline)
        logger.info(f"Session revoked for subject {claims.subject_id} until {deadline}")

    async def is_revoked(self, token: str) -> bool:
        """
        Raises:
            RevocationStoreError: If the store cannot be reached
        """
        if not token:
            return False
        return await self.store.exists(self._key(token))


class SessionValidator(ISessionUseCase):
    """
    Decides whether a presented token may be trusted.
    """

    def __init__(
            self,
            token_service: ITokenService,
            ledger: RevocationLedger,
            user_repository: Optional[IUserRepository] = None,
    ):
        self.token_service = token_service
        self.ledger = ledger
        self.user_repository = user_repository

    async def validate(self, token: Optional[str]) -> SessionValidation:
        """
        Signature and expiry check, and not revoked.

        A store failure during the revocation lookup propagates as
        RevocationStoreError: an unverifiable session is never accepted.
        """
        try:
            claims = self.token_service.verify(token)
        except InvalidTokenException:
            return SessionValidation(valid=False)

        if await self.ledger.is_revoked(token):
            logger.info(f"Rejected revoked session token for subject {claims.subject_id}")
            return SessionValidation(valid=False)

        return SessionValidation(valid=True, claims=claims)

    async def current_user(self, token: Optional[str]) -> User:
        """
        Resolve the user behind a valid session token.

        Raises:
            InvalidTokenException: If the session is invalid or the user no longer exists
        """
        result = await self.validate(token)
        if not result.valid:
            raise InvalidTokenException()

        user_id = _parse_user_id(result.claims.subject_id)
        user = await self.user_repository.find_by_id(user_id) if user_id else None
        if not user:
            logger.warning(f"Session subject {result.claims.subject_id} not found")
            raise InvalidTokenException(detail="User not found")
        return user


def _parse_user_id(value: str) -> Optional[Any]:
    try:
        return UUID(value)
    except (ValueError, TypeError):
        return None
