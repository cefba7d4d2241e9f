"""
Execute Auto-Assign Command
Persists operator-approved placements in one transaction
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from src.shared.application.base_command import BaseCommand
from src.shared.application.command_handler import CommandHandler
from src.shared.domain.base_entity import utcnow
from src.shared.exceptions import ValidationError
from src.shared.infrastructure.observability.logger import get_logger

from src.families.application.dto.commit_dto import (
    ApprovedAssignment,
    CommitResultDTO,
    CommittedAssignmentDTO,
)
from src.families.domain.exceptions import (
    FamilyNotFoundError,
    FamilySlotNotFoundError,
    StudentNotFoundError,
)
from src.families.domain.protocols.unit_of_work_protocol import IFamilyUnitOfWork
from src.families.domain.value_objects.slot_key import SlotKey

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExecuteAutoAssignCommand(BaseCommand):
    """
    Command to commit approved assignments.

    Attributes:
        assignments: Placements in the order they are applied
    """
    assignments: tuple[ApprovedAssignment, ...]


class ExecuteAutoAssignCommandHandler(CommandHandler[ExecuteAutoAssignCommand, CommitResultDTO]):
    """
    Handler for ExecuteAutoAssignCommand.

    Every family is re-read inside the transaction before its child is
    appended, so placements made since the preview are detected. The first
    failure aborts the whole batch.
    """

    def __init__(
        self,
        uow: IFamilyUnitOfWork,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.uow = uow
        self._clock = clock

    async def handle(self, command: ExecuteAutoAssignCommand) -> CommitResultDTO:
        """
        Raises:
            ValidationError: If no assignments are given
            NotFoundError: If a family, slot or student no longer exists
            ConflictError: If a student is already in the target family
        """
        if not command.assignments:
            raise ValidationError("No assignments to execute")

        results: list[CommittedAssignmentDTO] = []

        async with self.uow:
            for item in command.assignments:
                family = await self.uow.families.get_for_update(item.family_id)
                if family is None:
                    raise FamilyNotFoundError(item.family_id)

                slot = SlotKey(item.grandparent_index, item.parent_pair_index)
                if family.parent_pair_at(slot) is None:
                    raise FamilySlotNotFoundError(
                        family.title, item.grandparent_index, item.parent_pair_index
                    )

                student = await self.uow.students.get_by_id(item.student_id)
                if student is None:
                    raise StudentNotFoundError(item.student_id)

                child = family.add_child(
                    slot,
                    student,
                    relationship=item.relationship,
                    birth_order=item.birth_order,
                    added_at=self._clock(),
                )
                await self.uow.families.append_child(family.id, slot, child)

                results.append(
                    CommittedAssignmentDTO(
                        family_title=family.title,
                        student_id=student.student_code or "N/A",
                        student_name=student.full_name,
                        relationship=child.relationship.value,
                        birth_order=child.birth_order,
                        address_match=item.address_match,
                        diversity_score=item.diversity_score,
                    )
                )

            await self.uow.commit()

        logger.info(
            "Auto-assignments committed",
            assigned=len(results),
            families=len({item.family_id for item in command.assignments}),
        )

        return CommitResultDTO(
            assignments=results,
            message=f"Successfully assigned {len(results)} children",
        )
