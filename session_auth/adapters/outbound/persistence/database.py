# session_auth/adapters/outbound/persistence/database.py (async version)

import logging
from typing import AsyncGenerator, Tuple
from contextlib import asynccontextmanager
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.exc import SQLAlchemyError

from session_auth.adapters.outbound.persistence.models.base_model import Base

# Configure logger
logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Tuple[AsyncEngine, async_sessionmaker]:
    """
    Create the async engine and its session factory.

    Args:
        database_url: SQLAlchemy URL (async driver)

    Returns:
        Tuple (engine, session factory)
    """
    # Async driver even if the URL was written for psycopg2
    database_url = str(database_url).replace("postgresql+psycopg2", "postgresql+asyncpg")
    logger.info(f"Connecting to database: {database_url.split('@')[-1]}")

    try:
        engine = create_async_engine(
            database_url,
            echo=False,
            pool_size=20,
            max_overflow=10,
            pool_timeout=30,
            pool_recycle=1800,
            pool_pre_ping=True
        )

        session_factory = async_sessionmaker(
            autoflush=False,
            bind=engine,
            expire_on_commit=False,
        )

        logger.info("Async database connection configured successfully")
        return engine, session_factory

    except SQLAlchemyError as e:
        logger.error(f"Error connecting to database: {str(e)}")
        raise


async def create_tables(engine: AsyncEngine) -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def get_db_context(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """
    Provides an async context for database operations,
    ensuring the session is closed at the end.

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    session = session_factory()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency injection for use with FastAPI.

    The session factory is created with the application and kept in
    ``app.state``.

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    async with get_db_context(request.app.state.session_factory) as session:
        yield session
