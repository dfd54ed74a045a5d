# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""User account API endpoints.

This module provides endpoints for:
- GET /user - Get the current user
- GET /users - List users (admin)
- POST /users - Create a user (admin)
- POST /upgrade - Change the current user's tier
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from creative_hustle.api.dependencies import (
    get_account_service,
    get_current_user,
    require_admin,
)
from creative_hustle.domains.account import (
    AccountService,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from creative_hustle.models.user import UpgradeRequest, User, UserCreate, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/user",
    response_model=UserResponse,
    summary="Get current user",
    description="Get the account of the user bound to this request.",
)
async def get_user(
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    return UserResponse.model_validate(current_user)


@router.get(
    "/users",
    response_model=list[UserResponse],
    summary="List users",
    description="List all user accounts. Requires admin access.",
)
async def list_users(
    current_user: User = Depends(require_admin),
    service: AccountService = Depends(get_account_service),
) -> list[UserResponse]:
    return [UserResponse.model_validate(user) for user in await service.list_users()]


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description="Create a user account. Requires admin access.",
)
async def create_user(
    data: UserCreate,
    current_user: User = Depends(require_admin),
    service: AccountService = Depends(get_account_service),
) -> UserResponse:
    """Create a user account.

    Raises:
        HTTPException: 409 if the username or email is taken.
    """
    try:
        user = await service.create_user(data)
    except UserAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    return UserResponse.model_validate(user)


@router.post(
    "/upgrade",
    response_model=UserResponse,
    summary="Change tier",
    description="Set the current user's subscription tier.",
)
async def upgrade(
    data: UpgradeRequest,
    current_user: User = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
) -> UserResponse:
    """Set the current user's tier.

    Payment is confirmed client-side with the billing provider before this
    is called; the tier change itself is not verified against it.
    """
    try:
        user = await service.upgrade(current_user.id, data.tier)
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return UserResponse.model_validate(user)
