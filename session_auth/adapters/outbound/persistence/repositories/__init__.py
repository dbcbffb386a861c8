# session_auth/adapters/outbound/persistence/repositories/__init__.py (async version)

"""
Repository module.

This module exports the repositories of the system entities,
implementing the Repository pattern.
"""

from session_auth.adapters.outbound.persistence.repositories.user_repository import AsyncUserRepository

# Export all classes
__all__ = [
    "AsyncUserRepository",
]
