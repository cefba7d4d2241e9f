"""
Family Unit of Work Protocol (Interface)
"""
from __future__ import annotations

from typing import Protocol

from src.shared.infrastructure.database.unit_of_work import IUnitOfWork
from src.families.domain.protocols.family_repository_protocol import IFamilyRepository
from src.families.domain.protocols.student_repository_protocol import IStudentRepository


class IFamilyUnitOfWork(IUnitOfWork, Protocol):
    """Transaction scope exposing the family and student repositories"""

    async def __aenter__(self) -> IFamilyUnitOfWork:
        ...

    @property
    def families(self) -> IFamilyRepository:
        ...

    @property
    def students(self) -> IStudentRepository:
        ...
