"""
Family Auto-Assignment API Schemas
JSON is camelCase on the wire; snake_case names are accepted too
"""
from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from src.shared.api.response_models import CamelModel
from src.families.domain.value_objects.enums import Relationship


class AutoAssignRequest(CamelModel):
    """Preview request schema"""
    model_config = ConfigDict(str_strip_whitespace=True)

    mode: Optional[str] = Field(None, description='"homogeneous" or "heterogeneous"')
    target_batch: Optional[str] = Field(None, description="Cohort to place as children")
    max_children_per_family: Optional[int] = Field(
        None, description="Child cap per parent pair (server default when omitted)"
    )
    consider_gender_balance: bool = Field(True, description="Prefer the gender a slot lacks")
    consider_age: bool = Field(True, description="Reject children much older than the parents")
    address_level: str = Field("kebele", description="Requested homogeneous granularity")

    @field_validator("target_batch", mode="before")
    @classmethod
    def _batch_as_text(cls, value):
        # accept 2024 as well as "2024"
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class ApprovedAssignmentRequest(CamelModel):
    """
    One approved placement.

    Preview assignments can be posted back unchanged; fields that only
    describe the proposal (family title, student summary, score) are ignored.
    """
    model_config = ConfigDict(extra="ignore")

    family_id: UUID
    grandparent_index: int = Field(..., ge=0)
    parent_pair_index: int = Field(..., ge=0)
    student_id: UUID
    relationship: Relationship
    birth_order: int = Field(..., ge=1)
    address_match: Optional[str] = None
    diversity_score: Optional[int] = None


class ExecuteAutoAssignRequest(CamelModel):
    """Commit request schema"""
    assignments: list[ApprovedAssignmentRequest] = Field(default_factory=list)


class StudentSummaryResponse(CamelModel):
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


class AssignmentResponse(CamelModel):
    family_id: str
    family_title: str
    grandparent_index: int
    parent_pair_index: int
    student_id: str
    student: StudentSummaryResponse
    relationship: str
    birth_order: int
    score: float
    address_match: Optional[str] = None
    diversity_score: Optional[int] = None


class FailedAssignmentResponse(CamelModel):
    family_id: str
    family_title: str
    grandparent_index: int
    parent_pair_index: int
    reason: str


class GenderDistributionResponse(CamelModel):
    sons: int
    daughters: int
    balance: int


class StatisticsResponse(CamelModel):
    total_assigned: int
    total_families_affected: int
    unique_students_assigned: int
    gender_distribution: GenderDistributionResponse
    address_match_quality: Optional[float] = None
    quality_level: Optional[str] = None
    average_diversity_score: Optional[float] = None
    diversity_level: Optional[str] = None


class ConfigurationResponse(CamelModel):
    mode: str
    target_batch: str
    max_children_per_family: int
    consider_gender_balance: bool
    consider_age: bool
    address_level: str


class PreviewResponse(CamelModel):
    """Preview response schema (None-valued fields are omitted)"""
    preview: bool = True
    assignments: list[AssignmentResponse]
    statistics: StatisticsResponse
    configuration: ConfigurationResponse
    failed_assignments: Optional[list[FailedAssignmentResponse]] = None


class CommittedAssignmentResponse(CamelModel):
    family_title: str
    student_id: str
    student_name: str
    relationship: str
    birth_order: int
    address_match: Optional[str] = None
    diversity_score: Optional[int] = None


class ExecuteAutoAssignResponse(CamelModel):
    assignments: list[CommittedAssignmentResponse]
    message: str


class BatchesResponse(CamelModel):
    batches: list[str]
