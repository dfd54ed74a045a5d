# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""7-day challenge API endpoints.

- GET / - List the current user's challenge records
- GET /summary - Completed days, current day and its task
- POST / - Mark a day complete or incomplete
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from creative_hustle.api.dependencies import get_challenge_service, get_current_user
from creative_hustle.domains.challenge import ChallengeService, InvalidChallengeDayError
from creative_hustle.models.challenge import (
    ChallengeProgress,
    ChallengeSummary,
    ChallengeUpdateRequest,
)
from creative_hustle.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[ChallengeProgress],
    summary="List challenge progress",
)
async def list_challenge_progress(
    current_user: User = Depends(get_current_user),
    service: ChallengeService = Depends(get_challenge_service),
) -> list[ChallengeProgress]:
    return await service.list_progress(current_user.id)


@router.get(
    "/summary",
    response_model=ChallengeSummary,
    summary="Get challenge summary",
)
async def get_challenge_summary(
    current_user: User = Depends(get_current_user),
    service: ChallengeService = Depends(get_challenge_service),
) -> ChallengeSummary:
    return await service.get_summary(current_user.id)


@router.post(
    "",
    response_model=ChallengeProgress,
    summary="Update challenge day",
    description="Create or overwrite the record for one challenge day.",
)
async def update_challenge_day(
    data: ChallengeUpdateRequest,
    current_user: User = Depends(get_current_user),
    service: ChallengeService = Depends(get_challenge_service),
) -> ChallengeProgress:
    try:
        return await service.mark_day(current_user.id, data.day, data.completed)
    except InvalidChallengeDayError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )
