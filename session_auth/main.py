# session_auth/main.py (async version)

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from session_auth.adapters.configuration.config import AuthConfig, Settings, get_settings
from session_auth.adapters.outbound.cache.redis_revocation_store import RedisRevocationStore
from session_auth.adapters.outbound.persistence.database import build_engine, create_tables
from session_auth.application.ports.outbound import IRevocationStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    # ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────
    level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager to handle startup and shutdown events.
    """
    # Startup
    logger.info("Application starting up...")

    if app.state.engine is not None:
        await create_tables(app.state.engine)

    store = app.state.revocation_store
    if isinstance(store, RedisRevocationStore) and not await store.ping():
        # Logout answers 503 until the store comes back
        logger.error("Revocation store is unreachable at startup")

    yield

    # Shutdown
    logger.info("Application shutting down...")
    if isinstance(store, RedisRevocationStore):
        await store.close()
    if app.state.engine is not None:
        await app.state.engine.dispose()


def create_app(
        settings: Optional[Settings] = None,
        revocation_store: Optional[IRevocationStore] = None,
        with_database: bool = True,
) -> FastAPI:
    """
    Build the application.

    The auth configuration is validated here, so a missing or unusable
    signing secret stops the process before it serves any request.

    Raises:
        SigningError: If the signing configuration is invalid
    """
    settings = settings or get_settings()
    configure_logging(settings)
    auth_config = AuthConfig.from_settings(settings)

    app = FastAPI(
        title="Session Auth",
        description="Session token issuance and revocation",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.auth_config = auth_config
    app.state.revocation_store = revocation_store or RedisRevocationStore.from_url(
        settings.REDIS_URL, socket_timeout=settings.REDIS_SOCKET_TIMEOUT
    )
    app.state.engine = None
    app.state.session_factory = None
    if with_database:
        app.state.engine, app.state.session_factory = build_engine(settings.DATABASE_URL)

    # Middlewares
    from session_auth.shared.middleware import (
        AsyncExceptionMiddleware,
        AsyncRequestLoggingMiddleware,
        request_validation_exception_handler,
    )

    app.add_middleware(
        AsyncRequestLoggingMiddleware,
        is_production=settings.is_production,
        cookie_name=auth_config.cookie_name,
    )
    app.add_middleware(AsyncExceptionMiddleware, is_production=settings.is_production)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    # Routers
    from session_auth.adapters.inbound.api.v1.router import api_router as api_v1_router

    app.include_router(api_v1_router, prefix="/api/v1")

    @app.get("/", include_in_schema=False)
    async def redirect_to_docs():
        return RedirectResponse(url="/docs")

    logger.info(f"Application configured for environment '{settings.ENVIRONMENT}'")
    return app


# Run with: uvicorn session_auth.main:create_app --factory
