from src.families.domain.protocols.family_repository_protocol import IFamilyRepository
from src.families.domain.protocols.student_repository_protocol import IStudentRepository
from src.families.domain.protocols.unit_of_work_protocol import IFamilyUnitOfWork

__all__ = ["IFamilyRepository", "IFamilyUnitOfWork", "IStudentRepository"]
