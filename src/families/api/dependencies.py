"""
Families API Dependencies
"""
from __future__ import annotations

from fastapi import Depends

from src.config import Settings, get_settings
from src.dependencies import get_session_factory
from src.shared.infrastructure.database.session import DatabaseSessionFactory
from src.families.application.services.auto_assign_service import AutoAssignService
from src.families.infrastructure.adapters.family_unit_of_work import FamilyUnitOfWork


def get_family_uow(
    factory: DatabaseSessionFactory = Depends(get_session_factory),
) -> FamilyUnitOfWork:
    """Fresh unit of work per request."""
    return FamilyUnitOfWork(factory.session_factory)


def get_auto_assign_service(
    uow: FamilyUnitOfWork = Depends(get_family_uow),
    settings: Settings = Depends(get_settings),
) -> AutoAssignService:
    return AutoAssignService(uow, family_status=settings.FAMILY_ACTIVE_STATUS)
