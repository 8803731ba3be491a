"""
Database connection management.

Provides an explicit Database object owning the async engine (connection
pool) and session factory, plus the FastAPI dependency that hands out one
scoped session per request.

Dependencies: sqlalchemy, backend.configs
System role: Database connection lifecycle management
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from backend.boundary.db.base import Base
from backend.configs.database import DatabaseSettings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on FK enforcement for every new SQLite connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_for_url(
    url: str,
    echo: bool = False,
    pool_size: int = 10,
    max_overflow: int = 20,
    pool_timeout: int = 30,
) -> AsyncEngine:
    """
    Create async SQLAlchemy engine with connection pooling and health checks.

    SQLite URLs get a StaticPool (single shared connection, required for
    in-memory databases) and foreign key enforcement. Server databases use
    the default async queue pool with pre-ping to detect stale connections.

    Args:
        url: Async SQLAlchemy URL
        echo: Echo SQL statements to logs
        pool_size: Connection pool size (server databases only)
        max_overflow: Overflow connections (server databases only)
        pool_timeout: Seconds to wait for a pooled connection

    Returns:
        AsyncEngine: Configured async engine
    """
    if url.startswith("sqlite"):
        engine = create_async_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(
        url,
        echo=echo,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,  # Verify connections before using
    )


class Database:
    """
    Connection pool and session factory for one relational store.

    Built once at application startup and injected where needed; there is
    no module-level engine.

    Attributes:
        engine: Async engine owning the connection pool
        session_factory: Factory producing AsyncSession objects bound to engine
    """

    def __init__(self, url: str, echo: bool = False, **pool_options) -> None:
        """
        Initialize engine and session factory.

        Args:
            url: Async SQLAlchemy URL
            echo: Echo SQL statements to logs
            **pool_options: pool_size, max_overflow, pool_timeout
        """
        self.url = url
        self.engine = create_engine_for_url(url, echo=echo, **pool_options)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: DatabaseSettings) -> "Database":
        """
        Build a Database from DatabaseSettings.

        Args:
            settings: Database configuration

        Returns:
            Database: Ready-to-use database handle
        """
        return cls(
            settings.async_database_url,
            echo=settings.echo_sql,
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_timeout=settings.pool_timeout,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Acquire a session for one unit of work and release it afterwards.

        Uncommitted work is rolled back when the session closes.

        Yields:
            AsyncSession: Session scoped to the caller
        """
        async with self.session_factory() as session:
            yield session

    async def create_all(self) -> None:
        """Create every table registered on Base.metadata (idempotent)."""
        # Import models so they register with the metadata
        from backend.boundary.db import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def drop_all(self) -> None:
        """Drop every registered table. Development and tests only."""
        from backend.boundary.db import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def ping(self) -> bool:
        """
        Check that the database answers a trivial query.

        Returns:
            bool: True when SELECT 1 succeeds
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning("Database ping failed", extra={"error": str(e)})
            return False

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """
    FastAPI dependency returning the Database built during app startup.

    Args:
        request: Incoming request (carries app.state)

    Returns:
        Database: Application database handle
    """
    return request.app.state.database


async def get_async_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Creates a new async database session for each request and ensures it's closed
    after the route completes, even if exceptions occur.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)

    Usage:
        from fastapi import Depends

        @app.get("/courses/{id}")
        async def get_course(id: int, db: AsyncSession = Depends(get_async_db)):
            return await course_crud.get_by_id(db, id)
    """
    database = get_database(request)
    async with database.session() as session:
        yield session
