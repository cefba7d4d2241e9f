"""
Shared API Middleware
"""
from src.shared.api.middleware.correlation_id_middleware import CorrelationIdMiddleware

__all__ = ["CorrelationIdMiddleware"]
