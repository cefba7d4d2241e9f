"""
Shared API Layer
FastAPI router factory, response models and middleware
"""
from src.shared.api.base_router import ERROR_RESPONSES, create_api_router
from src.shared.api.middleware import CorrelationIdMiddleware
from src.shared.api.response_models import CamelModel, ErrorResponse

__all__ = [
    "create_api_router",
    "ERROR_RESPONSES",
    "CamelModel",
    "ErrorResponse",
    "CorrelationIdMiddleware",
]
