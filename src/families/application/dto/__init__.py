from src.families.application.dto.assignment_dto import (
    AssignmentConfigurationDTO,
    AssignmentDTO,
    AssignmentStatisticsDTO,
    FailedAssignmentDTO,
    GenderDistributionDTO,
    PreviewResultDTO,
    StudentSummaryDTO,
)
from src.families.application.dto.commit_dto import (
    ApprovedAssignment,
    CommitResultDTO,
    CommittedAssignmentDTO,
)

__all__ = [
    "ApprovedAssignment",
    "AssignmentConfigurationDTO",
    "AssignmentDTO",
    "AssignmentStatisticsDTO",
    "CommitResultDTO",
    "CommittedAssignmentDTO",
    "FailedAssignmentDTO",
    "GenderDistributionDTO",
    "PreviewResultDTO",
    "StudentSummaryDTO",
]
