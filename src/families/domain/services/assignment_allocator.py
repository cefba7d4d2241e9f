"""
Greedy Assignment Allocator
Fills eligible slots one by one with the best remaining candidate
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional, Sequence
from uuid import UUID

from src.shared.infrastructure.observability.logger import get_logger
from src.families.domain.entities.student import Student
from src.families.domain.services.eligibility_scanner import EligibleSlot
from src.families.domain.services.scoring_engine import ScoreResult, score_candidate
from src.families.domain.value_objects.assignment_criteria import AssignmentCriteria
from src.families.domain.value_objects.enums import Relationship
from src.families.domain.value_objects.slot_key import SlotKey

logger = get_logger(__name__)

NO_CANDIDATE_REASON = "No suitable students available matching criteria"


@dataclass(frozen=True)
class Assignment:
    """A proposed placement of one student into one slot."""

    family_id: UUID
    family_title: str
    slot: SlotKey
    student: Student
    relationship: Relationship
    birth_order: int
    score: float
    address_match: Optional[str] = None
    diversity_score: Optional[int] = None


@dataclass(frozen=True)
class AllocationFailure:
    family_id: UUID
    family_title: str
    slot: SlotKey
    reason: str = NO_CANDIDATE_REASON


@dataclass
class AllocationResult:
    assignments: list[Assignment] = field(default_factory=list)
    failures: list[AllocationFailure] = field(default_factory=list)


def prioritize(slots: Sequence[EligibleSlot]) -> list[EligibleSlot]:
    """Emptiest slots first, then the most gender-imbalanced; stable."""
    return sorted(slots, key=lambda s: (s.existing_children, -s.imbalance))


class AssignmentAllocator:
    """
    Greedy allocator.

    Slot order is fixed once up front. Within a slot, every pool member is
    scored and the strictly highest wins; on exact ties the earlier pool
    member wins. A claimed student is never offered to another slot in the
    same run.
    """

    def __init__(self, criteria: AssignmentCriteria, today: date) -> None:
        self.criteria = criteria
        self.today = today

    def allocate(
        self,
        slots: Sequence[EligibleSlot],
        candidates: Sequence[Student],
    ) -> AllocationResult:
        result = AllocationResult()
        claimed: set[UUID] = set()

        for original in prioritize(slots):
            slot = replace(original)
            pool = [
                s for s in candidates
                if s.id not in slot.member_ids and s.id not in claimed
            ]
            filled = 0

            while filled < slot.capacity and pool:
                best_index, best = self._best_candidate(pool, slot)
                if best is None:
                    result.failures.append(
                        AllocationFailure(
                            family_id=slot.family_id,
                            family_title=slot.family_title,
                            slot=slot.key,
                        )
                    )
                    logger.debug(
                        "No candidate for slot",
                        family_title=slot.family_title,
                        slot=str(slot.key),
                        filled=filled,
                    )
                    break

                student = pool.pop(best_index)
                result.assignments.append(
                    Assignment(
                        family_id=slot.family_id,
                        family_title=slot.family_title,
                        slot=slot.key,
                        student=student,
                        relationship=Relationship.for_gender(student.gender),
                        birth_order=slot.existing_children + filled + 1,
                        score=best.score,
                        address_match=best.address_match,
                        diversity_score=best.diversity_score,
                    )
                )
                claimed.add(student.id)
                slot.record_child(student.gender)
                filled += 1

        logger.info(
            "Allocation complete",
            slots=len(slots),
            candidates=len(candidates),
            assigned=len(result.assignments),
            failed_slots=len(result.failures),
        )
        return result

    def _best_candidate(
        self,
        pool: Sequence[Student],
        slot: EligibleSlot,
    ) -> tuple[int, Optional[ScoreResult]]:
        best_index = -1
        best: Optional[ScoreResult] = None
        for index, candidate in enumerate(pool):
            scored = score_candidate(candidate, slot, self.criteria, self.today)
            if scored is None:
                continue
            if best is None or scored.score > best.score:
                best_index, best = index, scored
        return best_index, best
