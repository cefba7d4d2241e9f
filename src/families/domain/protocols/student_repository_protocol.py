"""
Student Repository Protocol (Interface)
"""
from __future__ import annotations

from typing import Optional, Protocol, Sequence
from uuid import UUID

from src.families.domain.entities.student import Student


class IStudentRepository(Protocol):
    """Student repository interface (read-only)"""

    async def get_by_id(self, student_id: UUID) -> Optional[Student]:
        """Get student by ID"""
        ...

    async def list_active_in_batch(self, batch: str) -> Sequence[Student]:
        """Active students of one batch in stable order"""
        ...

    async def list_batches(self) -> Sequence[str]:
        """Distinct non-empty batches of active students, sorted"""
        ...
