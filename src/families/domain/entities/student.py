"""
Student Entity
Read-only to the assignment engine; maintained by the student registry
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from src.shared.domain.base_entity import BaseEntity
from src.families.domain.value_objects.address import Address
from src.families.domain.value_objects.enums import Gender


class Student(BaseEntity):
    """
    Student record as seen by the families context.

    Attributes:
        first_name / last_name: Display name parts
        student_code: Institutional student number (may be missing)
        gender: male or female
        batch: Cohort label
        address: Nested residential address
        date_of_birth: Optional birth date
        is_active: Inactive students are never candidates
    """

    def __init__(
        self,
        id: UUID,
        first_name: str,
        last_name: str,
        gender: Gender,
        batch: str,
        address: Optional[Address] = None,
        date_of_birth: Optional[date] = None,
        student_code: Optional[str] = None,
        is_active: bool = True,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self.first_name = first_name
        self.last_name = last_name
        self.gender = Gender(gender)
        self.batch = batch
        self.address = address or Address()
        self.date_of_birth = date_of_birth
        self.student_code = student_code
        self.is_active = is_active

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def age_on(self, today: date) -> Optional[int]:
        """Age as a calendar-year difference, or None when the birth date is unknown."""
        if self.date_of_birth is None:
            return None
        return today.year - self.date_of_birth.year
