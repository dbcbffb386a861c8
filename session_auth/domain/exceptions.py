# session_auth/domain/exceptions.py

"""
Custom exceptions for the application.

This module defines the domain exceptions raised by use cases and adapters.
Each one carries an ``internal_code`` that the exception middleware maps to
an HTTP status code.
"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Base exception for all application exceptions.
    Independent of the HTTP layer; the middleware translates it.
    """

    internal_code: str = "DOMAIN_ERROR"

    def __init__(
            self,
            detail: Any = None,
            internal_code: Optional[str] = None,
            details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(detail)
        self.detail = detail
        if internal_code is not None:
            self.internal_code = internal_code
        self.details = details or {}

    def __str__(self) -> str:
        return str(self.detail)


class ResourceNotFoundException(DomainException):
    """Resource not found."""

    internal_code = "RESOURCE_NOT_FOUND"

    def __init__(self, detail: str = "Resource not found", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(detail=f"{detail}{resource_info}")


class ResourceAlreadyExistsException(DomainException):
    """Resource already exists."""

    internal_code = "RESOURCE_ALREADY_EXISTS"

    def __init__(self, detail: str = "Resource already exists", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(detail=f"{detail}{resource_info}")


class PermissionDeniedException(DomainException):
    """Permission denied."""

    internal_code = "PERMISSION_DENIED"

    def __init__(self, detail: str = "Permission denied", role: Optional[str] = None):
        role_info = f" (Required role: {role})" if role else ""
        super().__init__(detail=f"{detail}{role_info}")


class InvalidCredentialsException(DomainException):
    """
    Invalid credentials.

    The message is the same whether the email is unknown or the password
    is wrong, so callers cannot enumerate accounts.
    """

    internal_code = "INVALID_CREDENTIALS"

    def __init__(self, detail: str = "Invalid Credentials"):
        super().__init__(detail=detail)


class InvalidTokenException(DomainException):
    """Session token missing, malformed, tampered with, expired or revoked."""

    internal_code = "INVALID_TOKEN"

    def __init__(self, detail: str = "Invalid or expired session"):
        super().__init__(detail=detail)


class InvalidInputException(DomainException):
    """Invalid input data."""

    internal_code = "INVALID_INPUT"

    def __init__(self, detail: str = "Invalid input data", fields: Optional[Dict[str, str]] = None):
        field_errors = ""
        if fields:
            field_errors = ": " + ", ".join([f"{field}: {error}" for field, error in fields.items()])

        super().__init__(detail=f"{detail}{field_errors}", details=fields)


# Registration input errors are reported under this name by the auth use cases
ValidationError = InvalidInputException


class DatabaseOperationException(DomainException):
    """Error in a database operation."""

    internal_code = "DATABASE_OPERATION_ERROR"

    def __init__(self, detail: str = "Error executing database operation",
                 original_error: Optional[Exception] = None):
        error_info = f": {str(original_error)}" if original_error else ""
        super().__init__(detail=f"{detail}{error_info}")


class SigningError(DomainException):
    """
    The signing secret or algorithm is absent or misconfigured.

    Raised while building the auth configuration at startup; a running
    process never expects it per request.
    """

    internal_code = "SIGNING_ERROR"

    def __init__(self, detail: str = "Session signing is misconfigured"):
        super().__init__(detail=detail)


class RevocationStoreError(DomainException):
    """The revocation store could not be reached. Clients should retry later."""

    internal_code = "REVOCATION_STORE_UNAVAILABLE"

    def __init__(self, detail: str = "Session store unavailable, please retry later",
                 original_error: Optional[Exception] = None):
        super().__init__(detail=detail)
        self.original_error = original_error
