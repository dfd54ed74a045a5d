# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Curriculum module API endpoints.

This module provides endpoints for:
- GET / - List modules in display order
- GET /{module_id} - Get module details
- POST / - Create a module (admin)
- PATCH /{module_id} - Update a module (admin)
- DELETE /{module_id} - Delete a module (admin)

Premium modules are listed for every user, but their content is only
returned to premium and lifetime users. Drafts are only shown to admins.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from creative_hustle.api.dependencies import (
    get_app_settings,
    get_current_user,
    get_curriculum_service,
    is_admin,
    require_admin,
)
from creative_hustle.core.config import Settings
from creative_hustle.domains.access import AccessDeniedError
from creative_hustle.domains.curriculum import (
    CurriculumModuleNotFoundError,
    CurriculumService,
)
from creative_hustle.models.curriculum import (
    Module,
    ModuleCreate,
    ModuleResponse,
    ModuleUpdate,
)
from creative_hustle.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[ModuleResponse],
    summary="List modules",
    description="List modules ordered by their order index. Locked modules have no content.",
)
async def list_modules(
    current_user: User = Depends(get_current_user),
    settings: Settings = Depends(get_app_settings),
    service: CurriculumService = Depends(get_curriculum_service),
) -> list[ModuleResponse]:
    return await service.list_modules(
        current_user,
        include_drafts=is_admin(current_user, settings),
    )


@router.get(
    "/{module_id}",
    response_model=ModuleResponse,
    summary="Get module",
    description="Get a module with its content. Premium modules require a paid tier.",
)
async def get_module(
    module_id: int,
    current_user: User = Depends(get_current_user),
    settings: Settings = Depends(get_app_settings),
    service: CurriculumService = Depends(get_curriculum_service),
) -> ModuleResponse:
    """Get a single module.

    Raises:
        HTTPException: 404 if the module does not exist, 403 if it is locked.
    """
    try:
        return await service.get_module(
            current_user,
            module_id,
            include_drafts=is_admin(current_user, settings),
        )
    except CurriculumModuleNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except AccessDeniedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )


@router.post(
    "",
    response_model=Module,
    status_code=status.HTTP_201_CREATED,
    summary="Create module",
    description="Create a curriculum module. Requires admin access.",
)
async def create_module(
    data: ModuleCreate,
    current_user: User = Depends(require_admin),
    service: CurriculumService = Depends(get_curriculum_service),
) -> Module:
    return await service.create_module(data)


@router.patch(
    "/{module_id}",
    response_model=Module,
    summary="Update module",
    description="Update fields of a curriculum module. Requires admin access.",
)
async def update_module(
    module_id: int,
    data: ModuleUpdate,
    current_user: User = Depends(require_admin),
    service: CurriculumService = Depends(get_curriculum_service),
) -> Module:
    try:
        return await service.update_module(module_id, data)
    except CurriculumModuleNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.delete(
    "/{module_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete module",
    description="Delete a curriculum module. Requires admin access.",
)
async def delete_module(
    module_id: int,
    current_user: User = Depends(require_admin),
    service: CurriculumService = Depends(get_curriculum_service),
) -> Response:
    try:
        await service.delete_module(module_id)
    except CurriculumModuleNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
