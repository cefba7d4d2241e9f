"""
Eligibility Scanner
Turns a family snapshot into the parent-pair slots that can take children
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional
from uuid import UUID

from src.shared.infrastructure.observability.logger import get_logger
from src.families.domain.entities.family import Family, ParentPair
from src.families.domain.entities.student import Student
from src.families.domain.value_objects.address_level import AddressLevel
from src.families.domain.value_objects.assignment_criteria import AssignmentCriteria
from src.families.domain.value_objects.enums import Gender
from src.families.domain.value_objects.slot_key import SlotKey

logger = get_logger(__name__)


@dataclass
class EligibleSlot:
    """
    A parent pair that can receive children in this run.

    ``sons`` and ``daughters`` are running counts: the allocator bumps them
    as it places children so later scoring in the same slot sees them.
    """

    family: Family
    key: SlotKey
    father: Student
    mother: Student
    existing_children: int
    capacity: int
    sons: int
    daughters: int
    common_level: Optional[AddressLevel]
    common_value: Optional[str]
    member_ids: frozenset[UUID]

    @property
    def family_id(self) -> UUID:
        return self.family.id

    @property
    def family_title(self) -> str:
        return self.family.title

    @property
    def imbalance(self) -> int:
        return abs(self.sons - self.daughters)

    def preferred_gender(self, consider_gender_balance: bool) -> Optional[Gender]:
        """Gender the slot lacks, or None when balanced or balance is ignored."""
        if not consider_gender_balance:
            return None
        if self.sons > self.daughters:
            return Gender.FEMALE
        if self.daughters > self.sons:
            return Gender.MALE
        return None

    def record_child(self, gender: Gender) -> None:
        if gender is Gender.MALE:
            self.sons += 1
        else:
            self.daughters += 1


class EligibilityScanner:
    """
    Produces eligible slots for one run.

    A slot qualifies when both parents resolve, batch rules allow it, it has
    room under the cap and, in homogeneous mode, the parents share at least
    a region.
    """

    def __init__(self, criteria: AssignmentCriteria) -> None:
        self.criteria = criteria

    def scan(self, families: Iterable[Family]) -> list[EligibleSlot]:
        slots: list[EligibleSlot] = []
        for family in families:
            member_ids = frozenset(family.member_ids())
            for key, pair in family.iter_slots():
                slot = self._evaluate(family, key, pair, member_ids)
                if slot is not None:
                    slots.append(slot)

        logger.info(
            "Eligibility scan complete",
            target_batch=self.criteria.target_batch,
            mode=self.criteria.mode.value,
            eligible_slots=len(slots),
        )
        return slots

    def _evaluate(
        self,
        family: Family,
        key: SlotKey,
        pair: ParentPair,
        member_ids: frozenset[UUID],
    ) -> Optional[EligibleSlot]:
        if not pair.is_complete:
            return None
        father, mother = pair.father, pair.mother

        target = self.criteria.target_batch
        if not family.allow_other_batches and not (
            father.batch == target and mother.batch == target
        ):
            return None

        existing = len(pair.children)
        capacity = self.criteria.max_children_per_family - existing
        if capacity <= 0:
            return None

        common_level, common_value = father.address.common_with(mother.address)
        if self.criteria.is_homogeneous and common_level is None:
            return None

        return EligibleSlot(
            family=family,
            key=key,
            father=father,
            mother=mother,
            existing_children=existing,
            capacity=capacity,
            sons=pair.sons,
            daughters=pair.daughters,
            common_level=common_level,
            common_value=common_value,
            member_ids=member_ids,
        )
