# src/dependencies.py
from __future__ import annotations

from functools import lru_cache
from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import get_settings
from src.shared.infrastructure.database.session import DatabaseSessionFactory


# --- DB engine / session factory ---
@lru_cache()
def get_session_factory() -> DatabaseSessionFactory:
    """Process-wide engine + sessionmaker built from settings."""
    settings = get_settings()
    return DatabaseSessionFactory(
        settings.effective_database_url,
        echo=settings.SQLALCHEMY_ECHO,
    )


async def get_db_session(
    factory: DatabaseSessionFactory = Depends(get_session_factory),
) -> AsyncGenerator[AsyncSession, None]:
    """Plain request-scoped session for endpoints that don't need a unit of work."""
    async for session in factory.get_session():
        yield session
