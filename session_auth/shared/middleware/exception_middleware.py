# session_auth/shared/middleware/exception_middleware.py (async version)

"""
Middleware for centralized exception handling.

This module defines middleware that intercepts exceptions and formats
appropriate error responses for the client.
"""

import time
import logging
from typing import Callable

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from session_auth.domain.exceptions import DomainException

# Configure logger
logger = logging.getLogger(__name__)

# Mapping from 'internal_code' to HTTP status code
STATUS_BY_CODE = {
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "PERMISSION_DENIED": status.HTTP_403_FORBIDDEN,
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "RESOURCE_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "SIGNING_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "DATABASE_OPERATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "REVOCATION_STORE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def domain_exception_response(exc: DomainException, is_production: bool = False) -> JSONResponse:
    status_code = STATUS_BY_CODE.get(exc.internal_code, status.HTTP_400_BAD_REQUEST)

    detail = str(exc)
    if is_production and status_code >= 500 and status_code != status.HTTP_503_SERVICE_UNAVAILABLE:
        detail = "Internal server error"

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    elif status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
        headers = {"Retry-After": "5"}

    return JSONResponse(
        status_code=status_code,
        content={
            "detail": detail,
            "code": exc.internal_code,
            "errors": exc.details,
        },
        headers=headers,
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are input errors, reported as 400."""
    logger.warning(f"Validation error | Path: {request.url.path} | Errors: {len(exc.errors())}")
    fields = {
        ".".join(str(part) for part in error.get("loc", ()) if part != "body"): error.get("msg", "")
        for error in exc.errors()
    }
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Invalid input data",
            "code": "INVALID_INPUT",
            "errors": fields,
        },
    )


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.
    """

    def __init__(self, app, is_production: bool = False):
        super().__init__(app)
        self.is_production = is_production

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except DomainException as exc:
            # Domain exceptions: mapping from pure exception to HTTP code based on 'internal_code'
            log = logger.error if exc.internal_code in ("SIGNING_ERROR", "REVOCATION_STORE_UNAVAILABLE") else logger.warning
            log(
                f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                f"Path: {request.url.path}"
            )
            return domain_exception_response(exc, self.is_production)

        except SQLAlchemyError as exc:
            logger.error(
                f"Database error: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": "Internal database error" if self.is_production else str(exc),
                    "code": "DATABASE_ERROR"
                }
            )

        except Exception as exc:
            # Unhandled exceptions
            logger.exception(
                f"Unhandled exception: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": "Internal server error" if self.is_production else str(exc),
                    "code": "INTERNAL_SERVER_ERROR"
                }
            )
