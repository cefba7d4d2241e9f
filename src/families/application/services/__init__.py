from src.families.application.services.auto_assign_service import AutoAssignService

__all__ = ["AutoAssignService"]
