from src.families.domain.value_objects.address import Address
from src.families.domain.value_objects.address_level import (
    ADDRESS_CHAIN,
    FALLBACK_ORDER,
    AddressLevel,
)
from src.families.domain.value_objects.assignment_criteria import (
    DEFAULT_MAX_CHILDREN_PER_FAMILY,
    AssignmentCriteria,
)
from src.families.domain.value_objects.enums import (
    AssignmentMode,
    FamilyStatus,
    Gender,
    Relationship,
)
from src.families.domain.value_objects.slot_key import SlotKey

__all__ = [
    "Address",
    "AddressLevel",
    "ADDRESS_CHAIN",
    "FALLBACK_ORDER",
    "AssignmentCriteria",
    "AssignmentMode",
    "DEFAULT_MAX_CHILDREN_PER_FAMILY",
    "FamilyStatus",
    "Gender",
    "Relationship",
    "SlotKey",
]
