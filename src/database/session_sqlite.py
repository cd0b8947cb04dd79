from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncSession,
    async_sessionmaker
)
from sqlalchemy.pool import NullPool

from config.settings import get_settings
from database.models.base import Base

settings = get_settings()

Path(settings.PATH_TO_DB).parent.mkdir(parents=True, exist_ok=True)

SQLITE_DATABASE_URL = f"sqlite+aiosqlite:///{settings.PATH_TO_DB}"
sqlite_engine = create_async_engine(
    SQLITE_DATABASE_URL,
    echo=False,
    poolclass=NullPool
)
AsyncSQLiteSessionLocal = async_sessionmaker(
    sqlite_engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_sqlite_db() -> AsyncGenerator[AsyncSession, None]:
    """Get an async SQLite database session.

    This function provides a dependency injection function for FastAPI to
    get database sessions. It uses async context management to ensure
    proper session cleanup.

    Yields:
        AsyncSession: An async database session for SQLite operations.
    """
    async with AsyncSQLiteSessionLocal() as session:
        yield session


@asynccontextmanager
async def get_sqlite_db_contextmanager() -> AsyncGenerator[AsyncSession, None]:
    """
    Async context manager that yields an async SQLite database session.

    Used by test fixtures and the startup seeding, where no FastAPI
    dependency resolution is available.

    Yields:
        AsyncSession: An async database session for SQLite operations.
    """
    async with AsyncSQLiteSessionLocal() as session:
        yield session


async def init_sqlite_database() -> None:
    """Create every table that does not exist yet."""
    async with sqlite_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def reset_sqlite_database() -> None:
    """
    Drops and recreates all tables in the SQLite database.

    This function is used by the test suite to reset the database schema
    to its initial state before each test.

    Returns:
        None
    """
    async with sqlite_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
