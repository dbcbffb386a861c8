# session_auth/domain/__init__.py

"""
Main module for the application's domain components.

This module exports the domain exceptions and models.
"""

# Export all exceptions for easier importing
from session_auth.domain.exceptions import (
    DomainException,               # Pure domain base exception
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    PermissionDeniedException,
    InvalidCredentialsException,
    InvalidTokenException,
    InvalidInputException,
    ValidationError,
    DatabaseOperationException,
    SigningError,
    RevocationStoreError,
)
from session_auth.domain.models.user_domain_model import Role, User
from session_auth.domain.models.session_domain_model import SessionClaims, SessionValidation
