"""
Family Unit of Work
Coordinates family and student repositories within a transaction
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.shared.infrastructure.database.sqlalchemy_unit_of_work import SQLAlchemyUnitOfWork
from src.families.infrastructure.persistence.repositories.family_repository import (
    FamilyRepository,
)
from src.families.infrastructure.persistence.repositories.student_repository import (
    StudentRepository,
)


class FamilyUnitOfWork(SQLAlchemyUnitOfWork):
    """
    Unit of Work for the families module.

    Repositories are created lazily on first access and bound to the
    session of the current context.

    Usage:
        async with uow:
            family = await uow.families.get_for_update(family_id)
            await uow.families.append_child(family.id, slot, child)
            await uow.commit()
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory)
        self._families: Optional[FamilyRepository] = None
        self._students: Optional[StudentRepository] = None

    async def __aenter__(self) -> FamilyUnitOfWork:
        await super().__aenter__()
        return self

    @property
    def families(self) -> FamilyRepository:
        if self._families is None:
            self._families = FamilyRepository(self.session)
        return self._families

    @property
    def students(self) -> StudentRepository:
        if self._students is None:
            self._students = StudentRepository(self.session)
        return self._students

    def _on_close(self) -> None:
        self._families = None
        self._students = None
