"""
Assignment Criteria Value Object
Run configuration shared by the scanner, scoring engine and allocator
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from src.shared.exceptions import ValidationError
from src.families.domain.value_objects.address_level import AddressLevel
from src.families.domain.value_objects.enums import AssignmentMode

DEFAULT_MAX_CHILDREN_PER_FAMILY = 4


@dataclass(frozen=True)
class AssignmentCriteria:
    """
    Attributes:
        mode: Homogeneous or heterogeneous placement
        target_batch: Cohort whose students are placed
        max_children_per_family: Child cap per parent pair, counting existing children
        consider_gender_balance: Restrict candidates to the gender a slot lacks
        consider_age: Reject candidates more than five years older than the older parent
        address_level: Requested homogeneous granularity, echoed back only
    """

    mode: AssignmentMode
    target_batch: str
    max_children_per_family: int = DEFAULT_MAX_CHILDREN_PER_FAMILY
    consider_gender_balance: bool = True
    consider_age: bool = True
    address_level: AddressLevel = AddressLevel.KEBELE

    @classmethod
    def create(
        cls,
        mode: Optional[str],
        target_batch: Optional[str],
        max_children_per_family: int = DEFAULT_MAX_CHILDREN_PER_FAMILY,
        consider_gender_balance: bool = True,
        consider_age: bool = True,
        address_level: Any = AddressLevel.KEBELE,
    ) -> AssignmentCriteria:
        """
        Validate raw request values.

        Raises:
            ValidationError: On a missing mode/batch, an unknown mode, a
                non-positive cap or an unknown address level
        """
        if not mode or not target_batch or not str(target_batch).strip():
            raise ValidationError("Mode and target batch are required")
        try:
            parsed_mode = AssignmentMode(mode)
        except ValueError:
            raise ValidationError(
                'Mode must be either "homogeneous" or "heterogeneous"'
            ) from None
        if max_children_per_family < 1:
            raise ValidationError(
                "maxChildrenPerFamily must be at least 1",
                details={"max_children_per_family": max_children_per_family},
            )
        try:
            level = AddressLevel(address_level or AddressLevel.KEBELE)
        except ValueError:
            raise ValidationError(
                "addressLevel must be one of region, zone, wereda, kebele",
                details={"address_level": address_level},
            ) from None

        return cls(
            mode=parsed_mode,
            target_batch=str(target_batch).strip(),
            max_children_per_family=max_children_per_family,
            consider_gender_balance=consider_gender_balance,
            consider_age=consider_age,
            address_level=level,
        )

    @property
    def is_homogeneous(self) -> bool:
        return self.mode is AssignmentMode.HOMOGENEOUS
