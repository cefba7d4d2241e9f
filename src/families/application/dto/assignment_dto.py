"""
Auto-Assignment DTOs
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional, Sequence

from src.families.domain.entities.student import Student
from src.families.domain.services.assignment_allocator import AllocationFailure, Assignment
from src.families.domain.value_objects.assignment_criteria import AssignmentCriteria
from src.families.domain.value_objects.enums import AssignmentMode, Relationship


@dataclass(frozen=True)
class StudentSummaryDTO:
    """Student fields shown next to a proposed assignment."""
    id: str
    first_name: str
    last_name: str
    gender: str
    batch: str
    student_code: Optional[str] = None
    region: Optional[str] = None
    zone: Optional[str] = None
    wereda: Optional[str] = None
    kebele: Optional[str] = None
    date_of_birth: Optional[date] = None

    @classmethod
    def from_student(cls, student: Student) -> StudentSummaryDTO:
        return cls(
            id=str(student.id),
            first_name=student.first_name,
            last_name=student.last_name,
            gender=student.gender.value,
            batch=student.batch,
            student_code=student.student_code,
            date_of_birth=student.date_of_birth,
            **student.address.to_dict(),
        )


@dataclass(frozen=True)
class AssignmentDTO:
    family_id: str
    family_title: str
    grandparent_index: int
    parent_pair_index: int
    student_id: str
    student: StudentSummaryDTO
    relationship: str
    birth_order: int
    score: float
    address_match: Optional[str] = None
    diversity_score: Optional[int] = None

    @classmethod
    def from_assignment(cls, assignment: Assignment) -> AssignmentDTO:
        return cls(
            family_id=str(assignment.family_id),
            family_title=assignment.family_title,
            grandparent_index=assignment.slot.grandparent_index,
            parent_pair_index=assignment.slot.parent_pair_index,
            student_id=str(assignment.student.id),
            student=StudentSummaryDTO.from_student(assignment.student),
            relationship=assignment.relationship.value,
            birth_order=assignment.birth_order,
            score=round(assignment.score, 4),
            address_match=assignment.address_match,
            diversity_score=assignment.diversity_score,
        )


@dataclass(frozen=True)
class FailedAssignmentDTO:
    family_id: str
    family_title: str
    grandparent_index: int
    parent_pair_index: int
    reason: str

    @classmethod
    def from_failure(cls, failure: AllocationFailure) -> FailedAssignmentDTO:
        return cls(
            family_id=str(failure.family_id),
            family_title=failure.family_title,
            grandparent_index=failure.slot.grandparent_index,
            parent_pair_index=failure.slot.parent_pair_index,
            reason=failure.reason,
        )


@dataclass(frozen=True)
class GenderDistributionDTO:
    sons: int
    daughters: int
    balance: int


def quality_level(match_quality: float) -> str:
    if match_quality >= 0.8:
        return "Excellent"
    if match_quality >= 0.5:
        return "Good"
    return "Poor"


def diversity_level(average: float) -> str:
    if average >= 3:
        return "High"
    if average >= 2:
        return "Medium"
    return "Low"


@dataclass(frozen=True)
class AssignmentStatisticsDTO:
    """
    Run statistics.

    Homogeneous runs fill ``address_match_quality``/``quality_level``;
    heterogeneous runs fill ``average_diversity_score``/``diversity_level``.
    """
    total_assigned: int
    total_families_affected: int
    unique_students_assigned: int
    gender_distribution: GenderDistributionDTO
    address_match_quality: Optional[float] = None
    quality_level: Optional[str] = None
    average_diversity_score: Optional[float] = None
    diversity_level: Optional[str] = None

    @classmethod
    def from_assignments(
        cls,
        mode: AssignmentMode,
        assignments: Sequence[Assignment],
    ) -> AssignmentStatisticsDTO:
        total = len(assignments)
        sons = sum(1 for a in assignments if a.relationship is Relationship.SON)
        daughters = total - sons
        common: dict[str, Any] = dict(
            total_assigned=total,
            total_families_affected=len({a.family_id for a in assignments}),
            unique_students_assigned=len({a.student.id for a in assignments}),
            gender_distribution=GenderDistributionDTO(
                sons=sons, daughters=daughters, balance=abs(sons - daughters)
            ),
        )

        if mode is AssignmentMode.HOMOGENEOUS:
            matched = sum(1 for a in assignments if a.address_match)
            quality = matched / total if total else 0.0
            return cls(
                **common,
                address_match_quality=quality,
                quality_level=quality_level(quality),
            )

        average = sum(a.diversity_score or 0 for a in assignments) / total if total else 0.0
        return cls(
            **common,
            average_diversity_score=average,
            diversity_level=diversity_level(average),
        )


@dataclass(frozen=True)
class AssignmentConfigurationDTO:
    mode: str
    target_batch: str
    max_children_per_family: int
    consider_gender_balance: bool
    consider_age: bool
    address_level: str

    @classmethod
    def from_criteria(cls, criteria: AssignmentCriteria) -> AssignmentConfigurationDTO:
        return cls(
            mode=criteria.mode.value,
            target_batch=criteria.target_batch,
            max_children_per_family=criteria.max_children_per_family,
            consider_gender_balance=criteria.consider_gender_balance,
            consider_age=criteria.consider_age,
            address_level=criteria.address_level.value,
        )


@dataclass(frozen=True)
class PreviewResultDTO:
    assignments: list[AssignmentDTO]
    statistics: AssignmentStatisticsDTO
    configuration: AssignmentConfigurationDTO
    failed_assignments: list[FailedAssignmentDTO] = field(default_factory=list)
    preview: bool = True
