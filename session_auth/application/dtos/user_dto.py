# session_auth/application/dtos/user_dto.py

"""
Schemas for user data.

This module defines the Pydantic DTOs used to read registration and login
input and to serialize the safe user projection returned by the API.
Field rules for registration are enforced by the auth use cases, so a
malformed value surfaces as a ValidationError instead of a schema error.
"""

from uuid import UUID
from typing import Optional
from pydantic import Field

from session_auth.application.dtos.base_dto import CustomBaseModel
from session_auth.domain.models.user_domain_model import Role, User


class UserRegister(CustomBaseModel):
    """
    Schema for self-registration.

    The role is never taken from the request; new accounts are plain users.
    """
    first_name: Optional[str] = Field(None, description="User's first name, 3 to 20 characters.")
    email_id: Optional[str] = Field(None, description="User's email. Must be valid and unique.")
    password: Optional[str] = Field(None, description="Strong password.")


class AdminUserRegister(UserRegister):
    """
    Schema for registration performed by an admin.

    Extends UserRegister with the role to assign.
    """
    role: Role = Field(Role.USER, description="Role of the new account.")


class UserLogin(CustomBaseModel):
    """Schema for login credentials."""
    email_id: Optional[str] = Field(None, description="Login email.")
    password: Optional[str] = Field(None, description="Password.")


class UserOutput(CustomBaseModel):
    """
    Schema for returning user data.

    Safe projection: never exposes the password hash.
    """
    id: UUID = Field(..., description="Unique user identifier.")
    first_name: str = Field(..., description="User's first name.")
    email_id: str = Field(..., description="User's email.")
    role: Role = Field(..., description="User's role.")

    @classmethod
    def from_domain(cls, user: User) -> "UserOutput":
        return cls(id=user.id, first_name=user.first_name, email_id=user.email_id, role=user.role)


class AuthResponse(CustomBaseModel):
    """Body returned after a session is opened."""
    user: UserOutput
    message: str


class MessageResponse(CustomBaseModel):
    """Simple message body."""
    message: str = Field(..., description="Response message")


class SessionOutput(CustomBaseModel):
    """
    Result of a use case that opened a session.

    The token is handed to the transport layer, which delivers it in a cookie.
    """
    token: str
    user: UserOutput
