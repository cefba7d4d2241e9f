"""
Auto-Assign Service
Orchestrates preview, commit and batch lookup for the API layer
"""
from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Sequence
from uuid import UUID

from src.shared.infrastructure.observability.logger import get_logger

from src.families.application.commands.execute_auto_assign_command import (
    ExecuteAutoAssignCommand,
    ExecuteAutoAssignCommandHandler,
)
from src.families.application.dto.assignment_dto import PreviewResultDTO
from src.families.application.dto.commit_dto import ApprovedAssignment, CommitResultDTO
from src.families.application.queries.list_batches_query import (
    ListBatchesQuery,
    ListBatchesQueryHandler,
)
from src.families.application.queries.preview_auto_assign_query import (
    PreviewAutoAssignQuery,
    PreviewAutoAssignQueryHandler,
)
from src.families.domain.protocols.unit_of_work_protocol import IFamilyUnitOfWork
from src.families.domain.value_objects.assignment_criteria import DEFAULT_MAX_CHILDREN_PER_FAMILY
from src.families.domain.value_objects.enums import FamilyStatus

logger = get_logger(__name__)


class AutoAssignService:
    """
    Family child auto-assignment operations.

    Preview is side-effect free; execute applies an approved subset
    atomically.
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

    async def preview(
        self,
        mode: Optional[str],
        target_batch: Optional[str],
        max_children_per_family: int = DEFAULT_MAX_CHILDREN_PER_FAMILY,
        consider_gender_balance: bool = True,
        consider_age: bool = True,
        address_level: str = "kebele",
        requested_by: Optional[UUID] = None,
    ) -> PreviewResultDTO:
        query = PreviewAutoAssignQuery(
            mode=mode,
            target_batch=target_batch,
            max_children_per_family=max_children_per_family,
            consider_gender_balance=consider_gender_balance,
            consider_age=consider_age,
            address_level=address_level,
            requested_by=requested_by,
        )
        handler = PreviewAutoAssignQueryHandler(
            self.uow, today=self._today, family_status=self.family_status
        )
        return await handler(query)

    async def execute(
        self,
        assignments: Sequence[ApprovedAssignment],
        issued_by: Optional[UUID] = None,
    ) -> CommitResultDTO:
        command = ExecuteAutoAssignCommand(
            assignments=tuple(assignments),
            issued_by=issued_by,
        )
        handler = ExecuteAutoAssignCommandHandler(self.uow)
        return await handler(command)

    async def list_batches(self) -> list[str]:
        handler = ListBatchesQueryHandler(self.uow)
        return await handler(ListBatchesQuery())
