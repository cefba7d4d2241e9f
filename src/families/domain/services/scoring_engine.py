"""
Scoring Engine
Rates one (candidate, slot) pair; pure and side-effect free
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from src.families.domain.entities.student import Student
from src.families.domain.services.eligibility_scanner import EligibleSlot
from src.families.domain.value_objects.address_level import (
    ADDRESS_CHAIN,
    FALLBACK_ORDER,
    AddressLevel,
)
from src.families.domain.value_objects.assignment_criteria import AssignmentCriteria

EXACT_MATCH_SCORE = 100
FALLBACK_BASE_SCORE = 50
FALLBACK_STEP = 10
AGE_MARGIN_YEARS = 5
AGE_PIVOT = 30
AGE_WEIGHT = 0.1
BALANCE_WEIGHT = 0.05

# Heterogeneous points per level, coarsest first
DIVERSITY_POINTS = {
    AddressLevel.REGION: 4,
    AddressLevel.ZONE: 3,
    AddressLevel.WEREDA: 2,
    AddressLevel.KEBELE: 1,
}


@dataclass(frozen=True)
class ScoreResult:
    """
    Attributes:
        score: Rank score (mode score + tie-break addend)
        mode_score: Score from the address rules alone
        address_match: Homogeneous match description
        diversity_score: Heterogeneous diversity points (1-4)
    """

    score: float
    mode_score: int
    address_match: Optional[str] = None
    diversity_score: Optional[int] = None


def is_age_appropriate(
    candidate: Student,
    slot: EligibleSlot,
    criteria: AssignmentCriteria,
    today: date,
) -> bool:
    if not criteria.consider_age:
        return True
    child_age = candidate.age_on(today)
    father_age = slot.father.age_on(today)
    mother_age = slot.mother.age_on(today)
    if child_age is None or father_age is None or mother_age is None:
        return True
    return child_age <= max(father_age, mother_age) + AGE_MARGIN_YEARS


def homogeneous_score(candidate: Student, slot: EligibleSlot) -> Optional[tuple[int, str]]:
    """
    Exact match at the slot's common level scores 100. Otherwise the coarser
    levels are compared with the father's address; the first match at
    position j of (kebele, wereda, zone, region) scores 50 - 10*j.
    """
    level = slot.common_level
    if level is None:
        return None

    if candidate.address.value_at(level) == slot.common_value:
        return EXACT_MATCH_SCORE, f"Matched {level.value}: {slot.common_value}"

    start = FALLBACK_ORDER.index(level) + 1
    for j in range(start, len(FALLBACK_ORDER)):
        coarser = FALLBACK_ORDER[j]
        mine = candidate.address.value_at(coarser)
        if mine is not None and mine == slot.father.address.value_at(coarser):
            return FALLBACK_BASE_SCORE - FALLBACK_STEP * j, f"Matched {coarser.value}: {mine}"
    return None


def diversity_score(candidate: Student, slot: EligibleSlot) -> int:
    """
    Points for the coarsest level where the candidate differs from both
    parents. An unknown region differs from any recorded one; below the
    region an unknown candidate value never counts as different.
    """
    for level in ADDRESS_CHAIN:
        mine = candidate.address.value_at(level)
        if mine is None and level is not AddressLevel.REGION:
            continue
        if (
            mine != slot.father.address.value_at(level)
            and mine != slot.mother.address.value_at(level)
        ):
            return DIVERSITY_POINTS[level]
    return 0


def tie_break(
    candidate: Student,
    slot: EligibleSlot,
    criteria: AssignmentCriteria,
    today: date,
) -> float:
    addend = 0.0
    age = candidate.age_on(today)
    if age is not None:
        addend += (AGE_PIVOT - age) * AGE_WEIGHT
    preferred = slot.preferred_gender(criteria.consider_gender_balance)
    if preferred is not None and candidate.gender is preferred:
        addend += slot.imbalance * BALANCE_WEIGHT
    return addend


def score_candidate(
    candidate: Student,
    slot: EligibleSlot,
    criteria: AssignmentCriteria,
    today: date,
) -> Optional[ScoreResult]:
    """
    Score ``candidate`` for ``slot``.

    Returns:
        ScoreResult, or None when a hard filter rejects the candidate or the
        address rules give nothing
    """
    if not slot.family.allow_other_batches and candidate.batch != criteria.target_batch:
        return None

    if not is_age_appropriate(candidate, slot, criteria, today):
        return None

    preferred = slot.preferred_gender(criteria.consider_gender_balance)
    if preferred is not None and candidate.gender is not preferred:
        return None

    if criteria.is_homogeneous:
        matched = homogeneous_score(candidate, slot)
        if matched is None:
            return None
        points, description = matched
        return ScoreResult(
            score=points + tie_break(candidate, slot, criteria, today),
            mode_score=points,
            address_match=description,
        )

    points = diversity_score(candidate, slot)
    if points == 0:
        return None
    return ScoreResult(
        score=points + tie_break(candidate, slot, criteria, today),
        mode_score=points,
        diversity_score=points,
    )
