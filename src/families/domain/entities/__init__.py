from src.families.domain.entities.family import (
    ChildEntry,
    Family,
    GrandParentGroup,
    ParentPair,
)
from src.families.domain.entities.student import Student

__all__ = ["ChildEntry", "Family", "GrandParentGroup", "ParentPair", "Student"]
