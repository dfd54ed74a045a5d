# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Template library service.

This module provides the TemplateService class for:
- Template listing with category and text search filters
- Tier-gated detail and download references
- Administrative template CRUD
"""

from __future__ import annotations

import logging

from creative_hustle.domains.access import ensure_accessible, is_accessible
from creative_hustle.infrastructure.storage import RecordNotFoundError, Storage
from creative_hustle.models.template import (
    Template,
    TemplateCreate,
    TemplateDownloadResponse,
    TemplateResponse,
    TemplateUpdate,
)
from creative_hustle.models.user import User

logger = logging.getLogger(__name__)


class TemplateServiceError(Exception):
    """Base exception for template service errors."""

    pass


class TemplateNotFoundError(TemplateServiceError):
    """Raised when a template is not found."""

    def __init__(self, template_id: int) -> None:
        self.template_id = template_id
        super().__init__("Template not found")


class TemplateFileMissingError(TemplateServiceError):
    """Raised when an accessible template has no download URL."""

    def __init__(self, template_id: int) -> None:
        self.template_id = template_id
        super().__init__("Template file not found")


class TemplateService:
    """Service for the downloadable template library.

    Attributes:
        storage: Entity store.
    """

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    async def list_templates(
        self,
        user: User,
        category: str | None = None,
        search: str | None = None,
    ) -> list[TemplateResponse]:
        """List templates as seen by ``user``.

        Args:
            user: Requesting user.
            category: Only templates in this category (case-insensitive).
            search: Only templates whose title or description contains this
                text (case-insensitive).

        Returns:
            Templates in creation order; locked ones have no download URL.
        """
        templates = await self.storage.list_templates()

        if category:
            wanted = category.casefold()
            templates = [t for t in templates if t.category.casefold() == wanted]

        if search:
            needle = search.casefold()
            templates = [
                t
                for t in templates
                if needle in t.title.casefold() or needle in t.description.casefold()
            ]

        return [self._to_response(t, user) for t in templates]

    async def get_template(self, user: User, template_id: int) -> TemplateResponse:
        """Get a template, redacted if locked.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        return self._to_response(await self._get(template_id), user)

    async def get_download(self, user: User, template_id: int) -> TemplateDownloadResponse:
        """Get the download reference of a template.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            AccessDeniedError: If the template is locked for the user.
            TemplateFileMissingError: If the template has no file attached.
        """
        template = await self._get(template_id)
        ensure_accessible(template.tier, user.tier)
        if not template.download_url:
            raise TemplateFileMissingError(template_id)

        logger.debug("Template download: user=%s, template=%s", user.id, template.id)
        return TemplateDownloadResponse(
            id=template.id,
            download_url=template.download_url,
            file_type=template.file_type,
        )

    # =========================================================================
    # Administration
    # =========================================================================

    async def create_template(self, data: TemplateCreate) -> Template:
        template = await self.storage.create_template(data)
        logger.info("Created template: %s (%s)", template.title, template.id)
        return template

    async def update_template(self, template_id: int, data: TemplateUpdate) -> Template:
        try:
            template = await self.storage.update_template(template_id, data)
        except RecordNotFoundError as e:
            raise TemplateNotFoundError(template_id) from e

        logger.info("Updated template: %s (%s)", template.title, template.id)
        return template

    async def delete_template(self, template_id: int) -> None:
        if not await self.storage.delete_template(template_id):
            raise TemplateNotFoundError(template_id)
        logger.info("Deleted template: %s", template_id)

    async def _get(self, template_id: int) -> Template:
        template = await self.storage.get_template(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        return template

    @staticmethod
    def _to_response(template: Template, user: User) -> TemplateResponse:
        locked = not is_accessible(template.tier, user.tier)
        data = template.model_dump()
        if locked:
            data["download_url"] = None
        return TemplateResponse(**data, locked=locked)
