from src.families.domain.services.assignment_allocator import (
    NO_CANDIDATE_REASON,
    AllocationFailure,
    AllocationResult,
    Assignment,
    AssignmentAllocator,
    prioritize,
)
from src.families.domain.services.eligibility_scanner import EligibilityScanner, EligibleSlot
from src.families.domain.services.scoring_engine import ScoreResult, score_candidate

__all__ = [
    "AllocationFailure",
    "AllocationResult",
    "Assignment",
    "AssignmentAllocator",
    "EligibilityScanner",
    "EligibleSlot",
    "NO_CANDIDATE_REASON",
    "ScoreResult",
    "prioritize",
    "score_candidate",
]
