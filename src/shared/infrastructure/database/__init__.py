"""
Shared Database Infrastructure
Declarative base, session management, repository base and Unit of Work
"""
from src.shared.infrastructure.database.base_model import Base
from src.shared.infrastructure.database.session import DatabaseSessionFactory
from src.shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository
from src.shared.infrastructure.database.sqlalchemy_unit_of_work import SQLAlchemyUnitOfWork
from src.shared.infrastructure.database.unit_of_work import IUnitOfWork

__all__ = [
    "Base",
    "DatabaseSessionFactory",
    "IUnitOfWork",
    "SQLAlchemyRepository",
    "SQLAlchemyUnitOfWork",
]
