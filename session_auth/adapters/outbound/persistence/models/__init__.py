# session_auth/adapters/outbound/persistence/models/__init__.py

"""
Data models module.

This module exports the SQLAlchemy models of the system.
"""

# Import Base
from session_auth.adapters.outbound.persistence.models.base_model import Base

# Import models
from session_auth.adapters.outbound.persistence.models.user_model import User

# Export all models
__all__ = [
    "Base",
    "User",
]
