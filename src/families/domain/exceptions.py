"""
Families Domain Exceptions
Specific error codes on top of the shared DomainError hierarchy
"""
from __future__ import annotations

from uuid import UUID

from src.shared.exceptions import ConflictError, NotFoundError


class FamilyNotFoundError(NotFoundError):
    code = "family_not_found"

    def __init__(self, family_id: UUID) -> None:
        super().__init__(
            f"Family {family_id} not found",
            details={"family_id": str(family_id)},
        )


class FamilySlotNotFoundError(NotFoundError):
    code = "family_slot_not_found"

    def __init__(self, family_title: str, grandparent_index: int, parent_pair_index: int) -> None:
        super().__init__(
            f"Family {family_title} has no parent pair at "
            f"grandparent {grandparent_index}, pair {parent_pair_index}",
            details={
                "grandparent_index": grandparent_index,
                "parent_pair_index": parent_pair_index,
            },
        )


class StudentNotFoundError(NotFoundError):
    code = "student_not_found"

    def __init__(self, student_id: UUID) -> None:
        super().__init__(
            f"Student {student_id} not found",
            details={"student_id": str(student_id)},
        )


class StudentAlreadyInFamilyError(ConflictError):
    code = "student_already_in_family"

    def __init__(self, student_label: str, family_title: str, student_id: UUID) -> None:
        super().__init__(
            f"Student {student_label} is already in family {family_title}",
            details={"student_id": str(student_id), "family_title": family_title},
        )
