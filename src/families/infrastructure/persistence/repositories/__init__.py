from src.families.infrastructure.persistence.repositories.family_repository import FamilyRepository
from src.families.infrastructure.persistence.repositories.student_repository import StudentRepository

__all__ = ["FamilyRepository", "StudentRepository"]
