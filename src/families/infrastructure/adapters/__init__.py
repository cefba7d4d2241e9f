from src.families.infrastructure.adapters.family_unit_of_work import FamilyUnitOfWork

__all__ = ["FamilyUnitOfWork"]
