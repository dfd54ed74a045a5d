# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Template library API endpoints.

This module provides endpoints for:
- GET / - List templates, optionally filtered by category or text
- GET /{template_id} - Get template details
- GET /{template_id}/download - Get the download reference
- POST / - Create a template (admin)
- PATCH /{template_id} - Update a template (admin)
- DELETE /{template_id} - Delete a template (admin)
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from creative_hustle.api.dependencies import (
    get_current_user,
    get_template_service,
    require_admin,
)
from creative_hustle.domains.access import AccessDeniedError
from creative_hustle.domains.templates import (
    TemplateFileMissingError,
    TemplateNotFoundError,
    TemplateService,
)
from creative_hustle.models.template import (
    Template,
    TemplateCreate,
    TemplateDownloadResponse,
    TemplateResponse,
    TemplateUpdate,
)
from creative_hustle.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[TemplateResponse],
    summary="List templates",
    description="List templates. Locked templates have no download URL.",
)
async def list_templates(
    category: Annotated[
        str | None, Query(description="Only templates in this category")
    ] = None,
    search: Annotated[
        str | None, Query(description="Text to look for in title or description")
    ] = None,
    current_user: User = Depends(get_current_user),
    service: TemplateService = Depends(get_template_service),
) -> list[TemplateResponse]:
    return await service.list_templates(current_user, category=category, search=search)


@router.get(
    "/{template_id}",
    response_model=TemplateResponse,
    summary="Get template",
)
async def get_template(
    template_id: int,
    current_user: User = Depends(get_current_user),
    service: TemplateService = Depends(get_template_service),
) -> TemplateResponse:
    try:
        return await service.get_template(current_user, template_id)
    except TemplateNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.get(
    "/{template_id}/download",
    response_model=TemplateDownloadResponse,
    summary="Download template",
    description="Get the download URL of a template. Premium templates require a paid tier.",
)
async def download_template(
    template_id: int,
    current_user: User = Depends(get_current_user),
    service: TemplateService = Depends(get_template_service),
) -> TemplateDownloadResponse:
    """Get a template's download reference.

    Raises:
        HTTPException: 404 if the template or its file is missing, 403 if locked.
    """
    try:
        return await service.get_download(current_user, template_id)
    except (TemplateNotFoundError, TemplateFileMissingError) as e:
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
    response_model=Template,
    status_code=status.HTTP_201_CREATED,
    summary="Create template",
    description="Add a template to the library. Requires admin access.",
)
async def create_template(
    data: TemplateCreate,
    current_user: User = Depends(require_admin),
    service: TemplateService = Depends(get_template_service),
) -> Template:
    return await service.create_template(data)


@router.patch(
    "/{template_id}",
    response_model=Template,
    summary="Update template",
    description="Update fields of a template. Requires admin access.",
)
async def update_template(
    template_id: int,
    data: TemplateUpdate,
    current_user: User = Depends(require_admin),
    service: TemplateService = Depends(get_template_service),
) -> Template:
    try:
        return await service.update_template(template_id, data)
    except TemplateNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.delete(
    "/{template_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete template",
    description="Remove a template from the library. Requires admin access.",
)
async def delete_template(
    template_id: int,
    current_user: User = Depends(require_admin),
    service: TemplateService = Depends(get_template_service),
) -> Response:
    try:
        await service.delete_template(template_id)
    except TemplateNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
