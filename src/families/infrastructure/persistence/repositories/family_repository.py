"""
Family Repository Implementation
Hydrates the family tree and appends children
"""
from __future__ import annotations

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository
from src.shared.infrastructure.observability.logger import get_logger
from src.families.domain.entities.family import (
    ChildEntry,
    Family,
    GrandParentGroup,
    ParentPair,
)
from src.families.domain.exceptions import (
    FamilyNotFoundError,
    FamilySlotNotFoundError,
    StudentNotFoundError,
)
from src.families.domain.value_objects.enums import FamilyStatus, Relationship
from src.families.domain.value_objects.slot_key import SlotKey
from src.families.infrastructure.persistence.models.family_model import (
    FamilyChildModel,
    FamilyGrandParentModel,
    FamilyModel,
    FamilyParentPairModel,
)
from src.families.infrastructure.persistence.models.student_model import (
    StudentModel,
)
from src.families.infrastructure.persistence.repositories.student_repository import (
    student_from_model,
)

logger = get_logger(__name__)


class FamilyRepository(SQLAlchemyRepository[Family, FamilyModel]):
    """
    Family repository implementation.

    Grandparent groups, parent pairs, children and the parent/child student
    rows are eager-loaded (selectin) so the returned aggregate is complete.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session=session,
            model_class=FamilyModel,
            entity_class=Family,
        )

    def _select(self) -> Select:
        # Re-reads must see rows appended earlier in the same transaction
        return select(FamilyModel).execution_options(populate_existing=True)

    def _to_entity(self, model: FamilyModel) -> Family:
        """Convert ORM model tree to the family aggregate"""
        grandparents = [
            GrandParentGroup(
                id=gp.id,
                title=gp.title,
                grandfather_id=gp.grandfather_id,
                grandmother_id=gp.grandmother_id,
                parent_pairs=[
                    ParentPair(
                        id=pair.id,
                        father=student_from_model(pair.father) if pair.father else None,
                        mother=student_from_model(pair.mother) if pair.mother else None,
                        children=[
                            ChildEntry(
                                student_id=child.student_id,
                                relationship=Relationship(child.relation),
                                birth_order=child.birth_order,
                                added_at=child.added_at,
                                student=student_from_model(child.student) if child.student else None,
                            )
                            for child in pair.children
                        ],
                    )
                    for pair in gp.parent_pairs
                ],
            )
            for gp in model.grandparents
        ]

        return Family(
            id=model.id,
            title=model.title,
            batch=model.batch,
            allow_other_batches=model.allow_other_batches,
            status=FamilyStatus(model.status),
            leader_id=model.leader_id,
            co_leader_id=model.co_leader_id,
            secretary_id=model.secretary_id,
            grandparents=grandparents,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def list_assignable(self, status: str = FamilyStatus.CURRENT.value) -> Sequence[Family]:
        """
        Families in ``status`` with at least one parent pair, in creation order.
        """
        with_pairs = (
            select(FamilyGrandParentModel.family_id)
            .join(FamilyParentPairModel, FamilyParentPairModel.grandparent_id == FamilyGrandParentModel.id)
        )
        stmt = (
            self._select()
            .where(FamilyModel.status == status, FamilyModel.id.in_(with_pairs))
            .order_by(FamilyModel.created_at, FamilyModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def get_for_update(self, family_id: UUID) -> Optional[Family]:
        """
        Re-read a family inside the current transaction.

        The family row is locked with SELECT ... FOR UPDATE where the backend
        supports it (SQLite ignores the clause and serializes writers itself).
        """
        stmt = self._select().where(FamilyModel.id == family_id).with_for_update()
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def append_child(self, family_id: UUID, slot: SlotKey, child: ChildEntry) -> None:
        """
        Append a child row under the parent pair at ``slot`` and flush.

        Raises:
            FamilyNotFoundError: If the family is gone
            FamilySlotNotFoundError: If the slot indices are out of range
            StudentNotFoundError: If the student row is gone
        """
        result = await self.session.execute(
            self._select().where(FamilyModel.id == family_id)
        )
        family = result.scalar_one_or_none()
        if family is None:
            raise FamilyNotFoundError(family_id)

        pair = self._pair_at(family, slot)
        if pair is None:
            raise FamilySlotNotFoundError(
                family.title, slot.grandparent_index, slot.parent_pair_index
            )

        student = await self.session.get(StudentModel, child.student_id)
        if student is None:
            raise StudentNotFoundError(child.student_id)

        next_position = max((c.position for c in pair.children), default=-1) + 1
        pair.children.append(
            FamilyChildModel(
                position=next_position,
                student_id=child.student_id,
                student=student,
                relation=child.relationship.value,
                birth_order=child.birth_order,
                added_at=child.added_at,
            )
        )
        await self.session.flush()

        logger.debug(
            "Child appended",
            family_id=str(family_id),
            slot=str(slot),
            student_id=str(child.student_id),
        )

    @staticmethod
    def _pair_at(family: FamilyModel, slot: SlotKey) -> Optional[FamilyParentPairModel]:
        if slot.grandparent_index >= len(family.grandparents):
            return None
        pairs = family.grandparents[slot.grandparent_index].parent_pairs
        if slot.parent_pair_index >= len(pairs):
            return None
        return pairs[slot.parent_pair_index]
