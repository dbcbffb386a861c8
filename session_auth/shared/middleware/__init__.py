# session_auth/shared/middleware/__init__.py (async version)

from session_auth.shared.middleware.exception_middleware import (
    AsyncExceptionMiddleware,
    request_validation_exception_handler,
)
from session_auth.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

# Export all for easy imports
__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
    "request_validation_exception_handler",
]
