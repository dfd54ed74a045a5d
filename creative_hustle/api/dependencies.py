# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI dependency injection definitions.

This module provides dependency functions for FastAPI endpoints.
Dependencies are used to:
- Get the storage and billing provider held on app.state
- Get the current user and enforce admin access
- Get service instances

Example:
    @router.get("/modules")
    async def list_modules(
        current_user: User = Depends(get_current_user),
        service: CurriculumService = Depends(get_curriculum_service),
    ):
        ...
"""

import logging

from fastapi import Depends, HTTPException, Request, status

from creative_hustle.api.middleware.identity import get_request_user_id
from creative_hustle.core.config import Settings
from creative_hustle.domains.account import AccountService
from creative_hustle.domains.billing import BillingProvider
from creative_hustle.domains.challenge import ChallengeService
from creative_hustle.domains.curriculum import CurriculumService
from creative_hustle.domains.templates import TemplateService
from creative_hustle.domains.tracker import TrackerService
from creative_hustle.infrastructure.storage import Storage
from creative_hustle.models.user import User

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    """Get the application's entity store."""
    return request.app.state.storage


def get_billing(request: Request) -> BillingProvider:
    """Get the application's billing provider."""
    return request.app.state.billing


# =========================================================================
# Current user
# =========================================================================


async def get_current_user(
    request: Request,
    storage: Storage = Depends(get_storage),
) -> User:
    """Load the user bound to this request.

    Args:
        request: HTTP request with a resolved user id.
        storage: Entity store.

    Returns:
        The current user.

    Raises:
        HTTPException: 401 if no user id is bound, 404 if the user is absent.
    """
    user_id = get_request_user_id(request)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    user = await storage.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user


def is_admin(user: User, settings: Settings) -> bool:
    """Check whether a user may call administrative endpoints."""
    return user.id in settings.auth.admin_user_ids


async def require_admin(
    current_user: User = Depends(get_current_user),
    settings: Settings = Depends(get_app_settings),
) -> User:
    """Require an admin user.

    Raises:
        HTTPException: If the current user is not an admin.
    """
    if not is_admin(current_user, settings):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


# =========================================================================
# Services
# =========================================================================


def get_account_service(
    storage: Storage = Depends(get_storage),
    billing: BillingProvider = Depends(get_billing),
    settings: Settings = Depends(get_app_settings),
) -> AccountService:
    return AccountService(
        storage=storage,
        billing=billing,
        price_id=settings.billing.price_id,
    )


def get_curriculum_service(storage: Storage = Depends(get_storage)) -> CurriculumService:
    return CurriculumService(storage=storage)


def get_template_service(storage: Storage = Depends(get_storage)) -> TemplateService:
    return TemplateService(storage=storage)


def get_tracker_service(storage: Storage = Depends(get_storage)) -> TrackerService:
    return TrackerService(storage=storage)


def get_challenge_service(storage: Storage = Depends(get_storage)) -> ChallengeService:
    return ChallengeService(storage=storage)
