"""
Database Session Factory
Creates async SQLAlchemy sessions with proper configuration
"""
from __future__ import annotations

from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class DatabaseSessionFactory:
    """
    Factory for creating async database sessions.

    Manages the async engine and session maker.
    Pool sizing only applies to server databases; SQLite (used in dev and
    tests) runs with SQLAlchemy's default pool for the driver.
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 10,
        **engine_kwargs: Any,
    ) -> None:
        """
        Initialize session factory with database connection.

        Args:
            database_url: Async connection string (postgresql+asyncpg / sqlite+aiosqlite)
            echo: Whether to log SQL statements (debug mode)
            pool_size: Connection pool size (ignored for SQLite)
            max_overflow: Max overflow connections beyond pool_size (ignored for SQLite)
            **engine_kwargs: Passed through to ``create_async_engine``
        """
        self.database_url = database_url
        self.echo = echo

        if not database_url.startswith("sqlite"):
            engine_kwargs.setdefault("pool_size", pool_size)
            engine_kwargs.setdefault("max_overflow", max_overflow)
            engine_kwargs.setdefault("pool_recycle", 3600)

        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,
            **engine_kwargs,
        )

        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Don't expire objects after commit
            autoflush=False,  # Manual flushing for better control
        )

        logger.info(
            "Database session factory initialized",
            dialect=self.engine.dialect.name,
        )

    def create_session(self) -> AsyncSession:
        """
        Create a new async session.

        Returns:
            New AsyncSession instance
        """
        return self.session_factory()

    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Async generator for sessions (for dependency injection).

        Yields:
            AsyncSession instance
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logger.error("Session error, rolled back", error=str(e))
                raise

    async def dispose(self) -> None:
        """Close all connections and dispose of the engine."""
        await self.engine.dispose()
        logger.info("Database engine disposed")
