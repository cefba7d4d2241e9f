"""
Commit DTOs
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from src.families.domain.value_objects.enums import Relationship


@dataclass(frozen=True)
class ApprovedAssignment:
    """One operator-approved placement to persist."""
    family_id: UUID
    grandparent_index: int
    parent_pair_index: int
    student_id: UUID
    relationship: Relationship
    birth_order: int
    address_match: Optional[str] = None
    diversity_score: Optional[int] = None


@dataclass(frozen=True)
class CommittedAssignmentDTO:
    family_title: str
    student_id: str
    student_name: str
    relationship: str
    birth_order: int
    address_match: Optional[str] = None
    diversity_score: Optional[int] = None


@dataclass(frozen=True)
class CommitResultDTO:
    assignments: list[CommittedAssignmentDTO]
    message: str
