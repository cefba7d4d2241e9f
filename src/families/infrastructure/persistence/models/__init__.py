from src.families.infrastructure.persistence.models.family_model import (
    FamilyChildModel,
    FamilyGrandParentModel,
    FamilyModel,
    FamilyParentPairModel,
)
from src.families.infrastructure.persistence.models.student_model import StudentModel

__all__ = [
    "FamilyChildModel",
    "FamilyGrandParentModel",
    "FamilyModel",
    "FamilyParentPairModel",
    "StudentModel",
]
