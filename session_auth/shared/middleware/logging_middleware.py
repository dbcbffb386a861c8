# session_auth/shared/middleware/logging_middleware.py (async version)

"""
Middleware for HTTP request logging.

This module implements a middleware that logs information
about received requests and sent responses.
"""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

# Configure logger
logger = logging.getLogger(__name__)


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request logging.
    Logs information about each received request.
    Cookies and headers are never logged; they carry session tokens. Only
    where the session credential came from is recorded (cookie, bearer or none).
    """

    def __init__(self, app, is_production: bool = False, cookie_name: str = "token"):
        super().__init__(app)
        self.is_production = is_production
        self.cookie_name = cookie_name

    def session_source(self, request: Request) -> str:
        if request.cookies.get(self.cookie_name):
            return "cookie"
        if request.headers.get("authorization", "").lower().startswith("bearer "):
            return "bearer"
        return "none"

    async def dispatch(self, request: Request, call_next):
        session = self.session_source(request)

        # Log the request - with limited information in production
        if self.is_production:
            logger.info(f"Request: {request.method} {request.url.path} | Session: {session}")
        else:
            query_params = dict(request.query_params)
            logger.info(
                f"Request: {request.method} {request.url.path} | "
                f"Query: {query_params if query_params else 'N/A'} | "
                f"Session: {session} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )

        # Process the request
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        # Log the response
        if self.is_production:
            logger.info(f"Response: {response.status_code} for {request.method} {request.url.path}")
        else:
            logger.info(
                f"Response: {response.status_code} for {request.method} {request.url.path} | "
                f"Time: {process_time:.4f}s"
            )

        return response
