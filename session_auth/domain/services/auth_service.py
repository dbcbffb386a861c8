# session_auth/domain/services/auth_service.py

from datetime import datetime, timedelta, timezone
from typing import Optional

from session_auth.domain.exceptions import InvalidInputException
from session_auth.domain.models.session_domain_model import SessionClaims
from session_auth.domain.models.user_domain_model import Role


class AuthService:
    """
    Domain service for session-related business rules.
    """

    @staticmethod
    def build_session_claims(
            subject_id: str,
            email_id: str,
            role: Role,
            lifetime: timedelta,
            now: Optional[datetime] = None,
    ) -> SessionClaims:
        """
        Create the claims of a brand-new session token.

        Args:
            subject_id: Identifier of a persisted user
            email_id: User's email, carried as-is
            role: One of the fixed roles
            lifetime: How long the token stays valid
            now: Issuance instant (defaults to the current UTC time)

        Returns:
            SessionClaims with issued-at and expiry set

        Raises:
            InvalidInputException: If the subject is empty or the role is unknown
        """
        if not subject_id or not str(subject_id).strip():
            raise InvalidInputException(detail="Session subject must not be empty")

        try:
            role = Role(role)
        except ValueError:
            raise InvalidInputException(detail=f"Unknown role '{role}'")

        # JWT timestamps have second resolution
        issued_at = (now or datetime.now(timezone.utc)).replace(microsecond=0)
        return SessionClaims(
            subject_id=str(subject_id),
            email_id=email_id,
            role=role,
            issued_at=issued_at,
            expires_at=issued_at + lifetime,
        )

    @staticmethod
    def revocation_deadline(
            claims: SessionClaims,
            max_lifetime: timedelta,
            now: Optional[datetime] = None,
    ) -> Optional[int]:
        """
        Absolute unix timestamp until which a revocation entry must be kept.

        The deadline is the token's own expiry, capped at ``now + max_lifetime``.
        No token signed by this service outlives that cap, so every genuine
        token stays blocked for its whole remaining validity, while an unsigned
        claim of a far-future expiry cannot pin an entry in the store.

        Returns:
            The deadline, or None when the token has no expiry or has already
            expired and needs no entry.
        """
        now = now or datetime.now(timezone.utc)
        if claims.expires_at is None or claims.is_expired(now):
            return None
        return min(int(claims.expires_at.timestamp()), int((now + max_lifetime).timestamp()))
