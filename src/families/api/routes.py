"""
Family Auto-Assignment Routes
"""
from __future__ import annotations

from dataclasses import asdict
from typing import Annotated

from fastapi import Depends, status

from src.config import Settings, get_settings
from src.shared.api.base_router import create_api_router
from src.shared.infrastructure.observability.logger import get_logger
from src.families.api.dependencies import get_auto_assign_service
from src.families.api.schemas import (
    AutoAssignRequest,
    BatchesResponse,
    ExecuteAutoAssignRequest,
    ExecuteAutoAssignResponse,
    PreviewResponse,
)
from src.families.application.dto.commit_dto import ApprovedAssignment
from src.families.application.services.auto_assign_service import AutoAssignService

logger = get_logger(__name__)

router = create_api_router(prefix="/families", tags=["Families"])


@router.post(
    "/auto-assign-children",
    response_model=PreviewResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Preview Auto-Assignment",
    description="Propose child placements for a batch without saving anything",
)
async def auto_assign_children(
    body: AutoAssignRequest,
    service: Annotated[AutoAssignService, Depends(get_auto_assign_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> PreviewResponse:
    max_children = body.max_children_per_family
    if max_children is None:
        max_children = settings.AUTO_ASSIGN_DEFAULT_MAX_CHILDREN

    result = await service.preview(
        mode=body.mode,
        target_batch=body.target_batch,
        max_children_per_family=max_children,
        consider_gender_balance=body.consider_gender_balance,
        consider_age=body.consider_age,
        address_level=body.address_level,
    )

    payload = asdict(result)
    if not payload["failed_assignments"]:
        payload["failed_assignments"] = None
    return PreviewResponse.model_validate(payload)


@router.post(
    "/execute-auto-assign",
    response_model=ExecuteAutoAssignResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Commit Auto-Assignment",
    description="Persist approved placements atomically",
)
async def execute_auto_assign(
    body: ExecuteAutoAssignRequest,
    service: Annotated[AutoAssignService, Depends(get_auto_assign_service)],
) -> ExecuteAutoAssignResponse:
    approved = [
        ApprovedAssignment(
            family_id=item.family_id,
            grandparent_index=item.grandparent_index,
            parent_pair_index=item.parent_pair_index,
            student_id=item.student_id,
            relationship=item.relationship,
            birth_order=item.birth_order,
            address_match=item.address_match,
            diversity_score=item.diversity_score,
        )
        for item in body.assignments
    ]
    result = await service.execute(approved)
    return ExecuteAutoAssignResponse.model_validate(asdict(result))


@router.get(
    "/batches",
    response_model=BatchesResponse,
    summary="List Batches",
    description="Distinct batches of active students",
)
async def list_batches(
    service: Annotated[AutoAssignService, Depends(get_auto_assign_service)],
) -> BatchesResponse:
    return BatchesResponse(batches=await service.list_batches())
