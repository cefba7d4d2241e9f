"""
Base FastAPI Router
Common router setup and utilities
"""
from __future__ import annotations

from typing import Sequence

from fastapi import APIRouter

from src.shared.api.response_models import ErrorResponse
from src.shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

# Documented error shapes shared by every bounded-context router
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation failed"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    409: {"model": ErrorResponse, "description": "State conflict"},
    422: {"model": ErrorResponse, "description": "Malformed request body"},
}


def create_api_router(
    prefix: str,
    tags: Sequence[str],
    include_in_schema: bool = True,
) -> APIRouter:
    """
    Create a configured FastAPI router.

    Args:
        prefix: Route prefix (e.g., "/families")
        tags: OpenAPI tags for grouping
        include_in_schema: Whether to include in OpenAPI schema

    Returns:
        Configured APIRouter instance with the shared error responses documented
    """
    router = APIRouter(
        prefix=prefix,
        tags=list(tags),
        include_in_schema=include_in_schema,
        responses=ERROR_RESPONSES,
    )

    logger.debug("Created API router", prefix=prefix, tags=list(tags))

    return router
