# session_auth/domain/models/user_domain_model.py

from enum import Enum
from uuid import UUID
from dataclasses import dataclass
from typing import Optional
from datetime import datetime


class Role(str, Enum):
    """Roles a session token may carry."""
    USER = "user"
    ADMIN = "admin"


@dataclass
class User:
    """Domain model for a user entity."""
    id: UUID
    first_name: str
    email_id: str
    password: str  # This would be hashed already
    role: Role = Role.USER
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        # Accept raw strings coming from the persistence layer
        if not isinstance(self.role, Role):
            self.role = Role(self.role)

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN
