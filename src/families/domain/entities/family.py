"""
Family Aggregate
Family tree: grandparent groups → parent pairs → children
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, Optional
from uuid import UUID

from src.shared.domain.base_entity import BaseEntity, utcnow
from src.families.domain.entities.student import Student
from src.families.domain.exceptions import (
    FamilySlotNotFoundError,
    StudentAlreadyInFamilyError,
)
from src.families.domain.value_objects.enums import FamilyStatus, Relationship
from src.families.domain.value_objects.slot_key import SlotKey


@dataclass
class ChildEntry:
    """A child placed under a parent pair."""

    student_id: UUID
    relationship: Relationship
    birth_order: int
    added_at: datetime = field(default_factory=utcnow)
    student: Optional[Student] = None

    def __post_init__(self) -> None:
        if self.birth_order < 1:
            raise ValueError("birth_order must be >= 1")


@dataclass
class ParentPair:
    """
    One father/mother unit and its children.

    Father and mother are hydrated Student records; either is None when the
    referenced student no longer resolves.
    """

    father: Optional[Student]
    mother: Optional[Student]
    children: list[ChildEntry] = field(default_factory=list)
    id: Optional[UUID] = None

    @property
    def is_complete(self) -> bool:
        return self.father is not None and self.mother is not None

    @property
    def sons(self) -> int:
        return sum(1 for c in self.children if c.relationship is Relationship.SON)

    @property
    def daughters(self) -> int:
        return sum(1 for c in self.children if c.relationship is Relationship.DAUGHTER)


@dataclass
class GrandParentGroup:
    title: str
    grandfather_id: Optional[UUID] = None
    grandmother_id: Optional[UUID] = None
    parent_pairs: list[ParentPair] = field(default_factory=list)
    id: Optional[UUID] = None


class Family(BaseEntity):
    """
    Family aggregate root.

    Invariant: a student appears at most once anywhere in the family
    (leadership, grandparents, parents and children are mutually exclusive).
    """

    def __init__(
        self,
        id: UUID,
        title: str,
        batch: str,
        allow_other_batches: bool = False,
        status: FamilyStatus = FamilyStatus.CURRENT,
        leader_id: Optional[UUID] = None,
        co_leader_id: Optional[UUID] = None,
        secretary_id: Optional[UUID] = None,
        grandparents: Optional[list[GrandParentGroup]] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self.title = title
        self.batch = batch
        self.allow_other_batches = allow_other_batches
        self.status = FamilyStatus(status)
        self.leader_id = leader_id
        self.co_leader_id = co_leader_id
        self.secretary_id = secretary_id
        self.grandparents: list[GrandParentGroup] = grandparents or []

    def member_ids(self) -> set[UUID]:
        """Every student id referenced anywhere in the family document."""
        ids = {self.leader_id, self.co_leader_id, self.secretary_id}
        for group in self.grandparents:
            ids.update((group.grandfather_id, group.grandmother_id))
            for pair in group.parent_pairs:
                if pair.father is not None:
                    ids.add(pair.father.id)
                if pair.mother is not None:
                    ids.add(pair.mother.id)
                ids.update(child.student_id for child in pair.children)
        ids.discard(None)
        return ids  # type: ignore[return-value]

    def contains_student(self, student_id: UUID) -> bool:
        return student_id in self.member_ids()

    def iter_slots(self) -> Iterator[tuple[SlotKey, ParentPair]]:
        """Parent pairs in document order with their slot keys."""
        for gp_index, group in enumerate(self.grandparents):
            for pair_index, pair in enumerate(group.parent_pairs):
                yield SlotKey(gp_index, pair_index), pair

    @property
    def has_parent_pairs(self) -> bool:
        return any(group.parent_pairs for group in self.grandparents)

    def parent_pair_at(self, slot: SlotKey) -> Optional[ParentPair]:
        if slot.grandparent_index >= len(self.grandparents):
            return None
        pairs = self.grandparents[slot.grandparent_index].parent_pairs
        if slot.parent_pair_index >= len(pairs):
            return None
        return pairs[slot.parent_pair_index]

    def add_child(
        self,
        slot: SlotKey,
        student: Student,
        relationship: Relationship,
        birth_order: int,
        added_at: Optional[datetime] = None,
    ) -> ChildEntry:
        """
        Append a child under the parent pair at ``slot``.

        Raises:
            FamilySlotNotFoundError: If the slot indices are out of range
            StudentAlreadyInFamilyError: If the student is already a member
        """
        pair = self.parent_pair_at(slot)
        if pair is None:
            raise FamilySlotNotFoundError(
                self.title, slot.grandparent_index, slot.parent_pair_index
            )
        if self.contains_student(student.id):
            raise StudentAlreadyInFamilyError(student.full_name, self.title, student.id)

        child = ChildEntry(
            student_id=student.id,
            relationship=Relationship(relationship),
            birth_order=birth_order,
            added_at=added_at or utcnow(),
            student=student,
        )
        pair.children.append(child)
        self.mark_updated()
        return child
