# session_auth/adapters/outbound/persistence/models/user_model.py

"""
User model.

The user record is the identity behind a session token. Only the id,
email and role end up inside the token.
"""

from sqlalchemy import (
    Column,
    String,
    DateTime,
    func,
)
from sqlalchemy.dialects.postgresql import UUID
import uuid
from session_auth.adapters.outbound.persistence.models.base_model import Base


class User(Base):
    """
    System user.

    Attributes:
        id: Unique user identifier (UUID)
        first_name: User's first name
        email_id: User's email (used for login)
        password: bcrypt hash of the user's password
        role: "user" or "admin"
        created_at: Creation date and time
        updated_at: Date and time of the last update
    """
    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    first_name = Column(String(20), nullable=False)
    email_id = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)
    role = Column(String(10), nullable=False, default="user", server_default="user")
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    def __repr__(self) -> str:
        """String representation of the User object."""
        return f"<User(email_id={self.email_id}, role={self.role})>"
