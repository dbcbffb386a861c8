# session_auth/domain/models/session_domain_model.py

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from session_auth.domain.models.user_domain_model import Role


@dataclass(frozen=True)
class SessionClaims:
    """Claims carried inside a session token."""
    subject_id: str
    email_id: str
    role: Role
    issued_at: Optional[datetime]
    expires_at: Optional[datetime]

    def to_payload(self) -> Dict[str, Any]:
        """Return the JWT payload for these claims."""
        return {
            "sub": self.subject_id,
            "email_id": self.email_id,
            "role": self.role.value,
            "iat": int(self.issued_at.timestamp()),
            "exp": int(self.expires_at.timestamp()),
        }

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "SessionClaims":
        """
        Build claims from a decoded JWT payload.

        Raises:
            ValueError: If a required claim is missing or has the wrong type
        """
        subject_id = payload.get("sub")
        if not subject_id:
            raise ValueError("Missing 'sub' claim")

        exp = payload.get("exp")
        iat = payload.get("iat")
        return cls(
            subject_id=str(subject_id),
            email_id=str(payload.get("email_id", "")),
            role=Role(payload.get("role", Role.USER.value)),
            issued_at=_from_timestamp(iat) if iat is not None else None,
            expires_at=_from_timestamp(exp) if exp is not None else None,
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        # A token is no longer acceptable at the instant of its exp claim
        if self.expires_at is None:
            return True
        now = now or datetime.now(timezone.utc)
        return self.expires_at <= now


@dataclass(frozen=True)
class SessionValidation:
    """Outcome of validating a presented session token."""
    valid: bool
    claims: Optional[SessionClaims] = None


def _from_timestamp(value: Any) -> datetime:
    try:
        return datetime.fromtimestamp(int(value), tz=timezone.utc)
    except (OverflowError, OSError) as e:
        raise ValueError(f"Timestamp out of range: {value!r}") from e
