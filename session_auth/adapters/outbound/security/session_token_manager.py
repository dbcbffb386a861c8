# session_auth/adapters/outbound/security/session_token_manager.py

import logging
from datetime import datetime, timezone
from typing import Optional

from jose import jwt, JWTError

from session_auth.adapters.configuration.config import AuthConfig
from session_auth.application.ports.outbound import ITokenService
from session_auth.domain.exceptions import InvalidTokenException, SigningError
from session_auth.domain.models.session_domain_model import SessionClaims
from session_auth.domain.models.user_domain_model import Role
from session_auth.domain.services.auth_service import AuthService

logger = logging.getLogger(__name__)

# Claims every session token must carry
REQUIRED_CLAIMS = {
    "require_exp": True,
    "require_iat": True,
    "require_sub": True,
}


class SessionTokenManager(ITokenService):
    """
    JWT session token manager.

    Issues signed, time-limited tokens and decodes them, with or without
    signature verification.
    """

    def __init__(self, config: AuthConfig):
        self.config = config

    def issue(self, subject_id: str, email_id: str, role: Role, now: Optional[datetime] = None) -> str:
        """
        Create a signed session token for a verified identity.

        - subject_id: the persisted user's id.
        - email_id: carried as-is for display.
        - role: "user" or "admin".

        Raises:
            SigningError: If the token cannot be signed with the configured secret
        """
        claims = AuthService.build_session_claims(
            subject_id=subject_id,
            email_id=email_id,
            role=role,
            lifetime=self.config.token_lifetime,
            now=now,
        )
        try:
            return jwt.encode(claims.to_payload(), self.config.secret_key, algorithm=self.config.algorithm)
        except (JWTError, TypeError, ValueError) as e:
            logger.error(f"Unable to sign session token: {type(e).__name__}")
            raise SigningError(detail="Unable to sign session token") from e

    def verify(self, token: str) -> SessionClaims:
        """
        Verify signature and expiry and return the claims.

        Raises:
            InvalidTokenException: If the token is malformed, tampered with or expired
        """
        if not token:
            raise InvalidTokenException(detail="Missing session token")
        try:
            payload = jwt.decode(
                token,
                self.config.secret_key,
                algorithms=[self.config.algorithm],
                options=REQUIRED_CLAIMS,
            )
            claims = SessionClaims.from_payload(payload)
        except JWTError as e:
            logger.debug(f"Session token rejected: {e}")
            raise InvalidTokenException()
        except ValueError as e:
            logger.debug(f"Session token has invalid claims: {e}")
            raise InvalidTokenException()

        # jose still accepts a token during the second of its exp claim
        if claims.is_expired(datetime.now(timezone.utc)):
            raise InvalidTokenException()
        return claims

    def decode_unverified(self, token: Optional[str]) -> Optional[SessionClaims]:
        """
        Decode the claims of a token without checking its signature.

        Returns:
            The claims, or None when the token is absent or malformed
        """
        if not token:
            return None
        try:
            return SessionClaims.from_payload(jwt.get_unverified_claims(token))
        except (JWTError, ValueError, TypeError, AttributeError):
            return None
