"""
SQLAlchemy Implementation of Unit of Work
Manages database transactions with async SQLAlchemy sessions
"""
from __future__ import annotations

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class SQLAlchemyUnitOfWork:
    """
    SQLAlchemy-based Unit of Work implementation.

    Opens one session per context, manages its transaction and coordinates
    repository operations. Everything done inside the context is atomic
    (all succeed or all fail).

    Attributes:
        session: Async SQLAlchemy session (only valid inside the context)
        _committed: Flag tracking if transaction was committed
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialize UoW with a session factory.

        Args:
            session_factory: Factory producing a fresh AsyncSession per context
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None
        self._committed = False

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork used outside of 'async with'")
        return self._session

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        """
        Enter async context manager.

        Opens a session and begins a new transaction.

        Returns:
            Self (the UoW instance)
        """
        self._session = self._session_factory()
        self._committed = False
        if not self._session.in_transaction():
            await self._session.begin()

        logger.debug("UnitOfWork transaction started")
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """
        Exit async context manager.

        Automatically rolls back if exception occurred or not committed,
        then closes the session.
        """
        try:
            if exc_type is not None:
                await self.rollback()
                logger.warning(
                    "UnitOfWork rolled back due to exception",
                    exception=str(exc_val),
                )
            elif not self._committed:
                await self.rollback()
                logger.debug("UnitOfWork rolled back (not committed)")
        finally:
            await self.session.close()
            self._session = None
            self._on_close()

    def _on_close(self) -> None:
        """Hook for subclasses to drop per-session state (e.g. cached repositories)."""

    async def commit(self) -> None:
        """
        Commit the current transaction.

        Persists all changes made within this UoW context.

        Raises:
            Exception: If commit fails (the transaction is rolled back first)
        """
        try:
            await self.session.commit()
            self._committed = True
            logger.debug("UnitOfWork transaction committed")
        except Exception as e:
            await self.rollback()
            logger.error("UnitOfWork commit failed", error=str(e))
            raise

    async def rollback(self) -> None:
        """
        Rollback the current transaction.

        Discards all changes made within this UoW context.
        """
        await self.session.rollback()
        self._committed = False
        logger.debug("UnitOfWork transaction rolled back")
