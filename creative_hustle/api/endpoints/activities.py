# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Activity tracker API endpoints.

- GET /activities - List the current user's activities, newest first
- POST /activities - Log an activity
- GET /stats - Aggregated tracker statistics
"""

import logging

from fastapi import APIRouter, Depends, status

from creative_hustle.api.dependencies import get_current_user, get_tracker_service
from creative_hustle.domains.tracker import TrackerService
from creative_hustle.models.activity import Activity, ActivityCreate, UserStats
from creative_hustle.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/activities",
    response_model=list[Activity],
    summary="List activities",
)
async def list_activities(
    current_user: User = Depends(get_current_user),
    service: TrackerService = Depends(get_tracker_service),
) -> list[Activity]:
    return await service.list_activities(current_user.id)


@router.post(
    "/activities",
    response_model=Activity,
    status_code=status.HTTP_201_CREATED,
    summary="Log activity",
    description="Log time spent and income earned. Hours must be between 0.1 and 24.",
)
async def log_activity(
    data: ActivityCreate,
    current_user: User = Depends(get_current_user),
    service: TrackerService = Depends(get_tracker_service),
) -> Activity:
    return await service.log_activity(current_user.id, data)


@router.get(
    "/stats",
    response_model=UserStats,
    summary="Get stats",
    description=(
        "Total hours (rounded), total income, income this calendar month "
        "and number of modules in progress."
    ),
)
async def get_stats(
    current_user: User = Depends(get_current_user),
    service: TrackerService = Depends(get_tracker_service),
) -> UserStats:
    return await service.get_stats(current_user.id)
