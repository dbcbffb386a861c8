# session_auth/application/use_cases/__init__.py

"""
Application service module.

This package contains the application services that implement the business logic
of the application, organized according to functional domains.
"""

# Export service classes for easier imports
from session_auth.application.use_cases.session_use_cases import RevocationLedger, SessionValidator
from session_auth.application.use_cases.auth_use_cases import AsyncAuthService

# Export all services
__all__ = [
    "RevocationLedger",
    "SessionValidator",
    "AsyncAuthService",
]
