"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Schema is managed by Alembic migrations (see alembic.ini). The engine and
session factory live on a Database handle that the application lifespan
creates once before serving requests and disposes on shutdown; request
handlers reach it through the get_db / get_db_transactional dependencies.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from app.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def _engine_options(settings: Settings) -> dict[str, Any]:
    """Pool and driver options for the configured backend."""
    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite":
        # In-memory SQLite is per-connection; share one connection across sessions.
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    connect_args: dict[str, Any] = {}
    if url.get_driver_name() == "asyncpg":
        connect_args["command_timeout"] = settings.db_command_timeout
    return {
        "pool_pre_ping": True,
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_recycle": 3600,
        "connect_args": connect_args,
    }


class Database:
    """Process-scoped engine and session factory.

    Construct once at startup, pass to whatever needs sessions, and call
    dispose() on shutdown.
    """

    def __init__(self, settings: Settings) -> None:
        self.engine: AsyncEngine = create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
            **_engine_options(settings),
        )
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session for read operations. Does not commit."""
        async with self.session_factory() as session:
            yield session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """Yield a session inside a transaction: commit on success, roll back on exception."""
        async with self.session_factory() as session:
            async with session.begin():
                yield session

    async def ping(self) -> None:
        """Run SELECT 1; raises the driver error when the database is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_all(self) -> None:
        """Create every mapped table (tests and local SQLite only; use Alembic elsewhere)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
        logger.info("Database engine disposed")
