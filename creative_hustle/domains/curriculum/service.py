# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Curriculum service for modules and learner progress.

This module provides the CurriculumService class for:
- Module listing and detail with tier gating
- Per-user progress listing and upsert
- Administrative module CRUD
"""

from __future__ import annotations

import logging

from creative_hustle.domains.access import ensure_accessible, is_accessible
from creative_hustle.infrastructure.storage import RecordNotFoundError, Storage
from creative_hustle.models.common import ModuleStatus
from creative_hustle.models.curriculum import (
    Module,
    ModuleCreate,
    ModuleResponse,
    ModuleUpdate,
    ProgressUpdateRequest,
    UserProgress,
)
from creative_hustle.models.user import User

logger = logging.getLogger(__name__)


class CurriculumServiceError(Exception):
    """Base exception for curriculum service errors."""

    pass


class CurriculumModuleNotFoundError(CurriculumServiceError):
    """Raised when a module is not found or not visible to the user."""

    def __init__(self, module_id: int) -> None:
        self.module_id = module_id
        super().__init__("Module not found")


class CurriculumService:
    """Service for curriculum modules and progress.

    Drafts are only visible when ``include_drafts`` is set, which the API
    does for administrators.

    Attributes:
        storage: Entity store.
    """

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    async def list_modules(
        self,
        user: User,
        include_drafts: bool = False,
    ) -> list[ModuleResponse]:
        """List modules in display order, as seen by ``user``.

        Locked modules are included with their content withheld.
        """
        modules = await self.storage.list_modules()
        return [
            self._to_response(module, user)
            for module in modules
            if include_drafts or module.status == ModuleStatus.PUBLISHED
        ]

    async def get_module(
        self,
        user: User,
        module_id: int,
        include_drafts: bool = False,
    ) -> ModuleResponse:
        """Get a single module with its content.

        Raises:
            CurriculumModuleNotFoundError: If the module does not exist or is a hidden draft.
            AccessDeniedError: If the user's tier does not unlock the module.
        """
        module = await self._get_visible(module_id, include_drafts)
        ensure_accessible(module.tier, user.tier)
        return self._to_response(module, user)

    async def list_progress(self, user: User) -> list[UserProgress]:
        """List the user's progress records."""
        return await self.storage.list_progress(user.id)

    async def record_progress(
        self,
        user: User,
        request: ProgressUpdateRequest,
    ) -> UserProgress:
        """Create or overwrite the user's progress on a module.

        Progress on a module that does not exist is still recorded.

        Raises:
            AccessDeniedError: If the module exists and is locked for the user.
        """
        module = await self.storage.get_module(request.module_id)
        if module is not None:
            ensure_accessible(module.tier, user.tier)

        progress = await self.storage.upsert_progress(
            user.id,
            request.module_id,
            completed=request.completed,
            progress=request.progress,
        )
        logger.debug(
            "Recorded progress: user=%s, module=%s, progress=%s, completed=%s",
            user.id,
            request.module_id,
            progress.progress,
            progress.completed,
        )
        return progress

    # =========================================================================
    # Administration
    # =========================================================================

    async def create_module(self, data: ModuleCreate) -> Module:
        module = await self.storage.create_module(data)
        logger.info("Created module: %s (%s)", module.title, module.id)
        return module

    async def update_module(self, module_id: int, data: ModuleUpdate) -> Module:
        """Apply a partial update.

        Raises:
            CurriculumModuleNotFoundError: If the module does not exist.
        """
        try:
            module = await self.storage.update_module(module_id, data)
        except RecordNotFoundError as e:
            raise CurriculumModuleNotFoundError(module_id) from e

        logger.info("Updated module: %s (%s)", module.title, module.id)
        return module

    async def delete_module(self, module_id: int) -> None:
        """Delete a module.

        Progress records referring to it are left in place.

        Raises:
            CurriculumModuleNotFoundError: If the module does not exist.
        """
        if not await self.storage.delete_module(module_id):
            raise CurriculumModuleNotFoundError(module_id)
        logger.info("Deleted module: %s", module_id)

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _get_visible(self, module_id: int, include_drafts: bool) -> Module:
        module = await self.storage.get_module(module_id)
        if module is None:
            raise CurriculumModuleNotFoundError(module_id)
        if not include_drafts and module.status != ModuleStatus.PUBLISHED:
            raise CurriculumModuleNotFoundError(module_id)
        return module

    @staticmethod
    def _to_response(module: Module, user: User) -> ModuleResponse:
        locked = not is_accessible(module.tier, user.tier)
        data = module.model_dump()
        if locked:
            data["content"] = None
        return ModuleResponse(**data, locked=locked)
