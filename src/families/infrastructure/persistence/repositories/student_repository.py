"""
Student Repository Implementation
"""
from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository
from src.families.domain.entities.student import Student
from src.families.domain.value_objects.address import Address
from src.families.domain.value_objects.enums import Gender
from src.families.infrastructure.persistence.models.student_model import StudentModel


def student_from_model(model: StudentModel) -> Student:
    """Map a student row to the domain entity (shared with the family repository)."""
    return Student(
        id=model.id,
        first_name=model.first_name,
        last_name=model.last_name,
        gender=Gender(model.gender),
        batch=model.batch,
        address=Address(
            region=model.region,
            zone=model.zone,
            wereda=model.wereda,
            kebele=model.kebele,
        ),
        date_of_birth=model.date_of_birth,
        student_code=model.student_code,
        is_active=model.is_active,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class StudentRepository(SQLAlchemyRepository[Student, StudentModel]):
    """
    Student repository implementation.

    Read-only access for the assignment engine.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session=session,
            model_class=StudentModel,
            entity_class=Student,
        )

    def _to_entity(self, model: StudentModel) -> Student:
        return student_from_model(model)

    async def list_active_in_batch(self, batch: str) -> Sequence[Student]:
        """
        Active students of a batch, oldest record first.

        Order is stable across calls so allocation ties resolve the same way.
        """
        stmt = (
            select(StudentModel)
            .where(StudentModel.batch == batch, StudentModel.is_active.is_(True))
            .order_by(StudentModel.created_at, StudentModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def list_batches(self) -> Sequence[str]:
        stmt = (
            select(StudentModel.batch)
            .where(
                StudentModel.is_active.is_(True),
                StudentModel.batch.is_not(None),
                StudentModel.batch != "",
            )
            .distinct()
            .order_by(StudentModel.batch)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
