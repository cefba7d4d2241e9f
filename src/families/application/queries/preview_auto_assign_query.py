"""
Preview Auto-Assign Query
Computes proposed child placements without touching storage
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from src.shared.application.base_query import BaseQuery
from src.shared.application.query_handler import QueryHandler
from src.shared.exceptions import ValidationError
from src.shared.infrastructure.observability.logger import get_logger

from src.families.application.dto.assignment_dto import (
    AssignmentConfigurationDTO,
    AssignmentDTO,
    AssignmentStatisticsDTO,
    FailedAssignmentDTO,
    PreviewResultDTO,
)
from src.families.domain.protocols.unit_of_work_protocol import IFamilyUnitOfWork
from src.families.domain.services.assignment_allocator import AssignmentAllocator
from src.families.domain.services.eligibility_scanner import EligibilityScanner
from src.families.domain.value_objects.assignment_criteria import (
    DEFAULT_MAX_CHILDREN_PER_FAMILY,
    AssignmentCriteria,
)
from src.families.domain.value_objects.enums import FamilyStatus

logger = get_logger(__name__)


@dataclass(frozen=True)
class PreviewAutoAssignQuery(BaseQuery):
    """
    Query to preview an auto-assignment run.

    Attributes:
        mode: "homogeneous" or "heterogeneous"
        target_batch: Cohort to place
        max_children_per_family: Child cap per parent pair
        consider_gender_balance: Prefer the gender a slot lacks
        consider_age: Apply the parent-age ceiling
        address_level: Requested homogeneous granularity (echoed back)
    """
    mode: Optional[str]
    target_batch: Optional[str]
    max_children_per_family: int = DEFAULT_MAX_CHILDREN_PER_FAMILY
    consider_gender_balance: bool = True
    consider_age: bool = True
    address_level: str = "kebele"


class PreviewAutoAssignQueryHandler(QueryHandler[PreviewAutoAssignQuery, PreviewResultDTO]):
    """
    Handler for PreviewAutoAssignQuery.

    Reads a fresh snapshot, scans slots and runs the greedy allocator.
    """

    def __init__(
        self,
        uow: IFamilyUnitOfWork,
        today: Callable[[], date] = date.today,
        family_status: str = FamilyStatus.CURRENT.value,
    ) -> None:
        self.uow = uow
        self._today = today
        self.family_status = family_status

    async def handle(self, query: PreviewAutoAssignQuery) -> PreviewResultDTO:
        """
        Raises:
            ValidationError: On bad criteria, no eligible families, an empty
                batch or no slot passing the scan
        """
        criteria = AssignmentCriteria.create(
            mode=query.mode,
            target_batch=query.target_batch,
            max_children_per_family=query.max_children_per_family,
            consider_gender_balance=query.consider_gender_balance,
            consider_age=query.consider_age,
            address_level=query.address_level,
        )

        async with self.uow:
            families = await self.uow.families.list_assignable(self.family_status)
            if not families:
                raise ValidationError("No eligible families found (families with both parents)")

            students = await self.uow.students.list_active_in_batch(criteria.target_batch)
            if not students:
                raise ValidationError(f"No students found in batch {criteria.target_batch}")

        logger.info(
            "Auto-assign snapshot loaded",
            target_batch=criteria.target_batch,
            families=len(families),
            students=len(students),
        )

        slots = EligibilityScanner(criteria).scan(families)
        if not slots:
            raise ValidationError("No families available for assignment with current criteria")

        allocation = AssignmentAllocator(criteria, self._today()).allocate(slots, students)

        for failure in allocation.failures:
            logger.info(
                "Slot left unfilled",
                family_title=failure.family_title,
                slot=str(failure.slot),
                reason=failure.reason,
            )

        return PreviewResultDTO(
            assignments=[AssignmentDTO.from_assignment(a) for a in allocation.assignments],
            statistics=AssignmentStatisticsDTO.from_assignments(
                criteria.mode, allocation.assignments
            ),
            configuration=AssignmentConfigurationDTO.from_criteria(criteria),
            failed_assignments=[
                FailedAssignmentDTO.from_failure(f) for f in allocation.failures
            ],
        )
