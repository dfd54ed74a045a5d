# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Module progress API endpoints.

- GET / - List the current user's progress records
- POST / - Create or overwrite progress on a module
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from creative_hustle.api.dependencies import get_current_user, get_curriculum_service
from creative_hustle.domains.access import AccessDeniedError
from creative_hustle.domains.curriculum import CurriculumService
from creative_hustle.models.curriculum import ProgressUpdateRequest, UserProgress
from creative_hustle.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[UserProgress],
    summary="List progress",
    description="List the current user's module progress records.",
)
async def list_progress(
    current_user: User = Depends(get_current_user),
    service: CurriculumService = Depends(get_curriculum_service),
) -> list[UserProgress]:
    return await service.list_progress(current_user)


@router.post(
    "",
    response_model=UserProgress,
    summary="Record progress",
    description=(
        "Create or overwrite the current user's progress on a module. "
        "There is at most one record per module."
    ),
)
async def record_progress(
    data: ProgressUpdateRequest,
    current_user: User = Depends(get_current_user),
    service: CurriculumService = Depends(get_curriculum_service),
) -> UserProgress:
    """Upsert progress on a module.

    Raises:
        HTTPException: 403 if the module is locked for the current user.
    """
    try:
        return await service.record_progress(current_user, data)
    except AccessDeniedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )
