# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Curriculum module and progress schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from creative_hustle.models.common import ContentTier, ModuleStatus, Record


class Module(Record):
    """Stored curriculum module."""

    title: str
    description: str
    content: str
    tier: ContentTier = ContentTier.FREE
    order_index: int
    status: ModuleStatus = ModuleStatus.DRAFT
    estimated_minutes: int = 15
    created_at: datetime


class ModuleCreate(BaseModel):
    """Request body for creating a module."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str
    content: str
    tier: ContentTier = ContentTier.FREE
    order_index: int
    status: ModuleStatus = ModuleStatus.DRAFT
    estimated_minutes: int = Field(default=15, ge=1)


class ModuleUpdate(BaseModel):
    """Request body for partially updating a module.

    Only fields that are present and not null are applied.
    """

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    content: str | None = None
    tier: ContentTier | None = None
    order_index: int | None = None
    status: ModuleStatus | None = None
    estimated_minutes: int | None = Field(None, ge=1)


class ModuleResponse(BaseModel):
    """Module as seen by a given user.

    ``content`` is withheld when the module is locked for the user.
    """

    id: int
    title: str
    description: str
    content: str | None
    tier: ContentTier
    order_index: int
    status: ModuleStatus
    estimated_minutes: int
    created_at: datetime
    locked: bool = False


class UserProgress(Record):
    """Stored per-user module progress."""

    user_id: int
    module_id: int
    completed: bool = False
    progress: int = 0
    completed_at: datetime | None = None
    created_at: datetime


class ProgressUpdateRequest(BaseModel):
    """Request body for recording module progress."""

    module_id: int = Field(..., gt=0)
    progress: int = Field(default=0, ge=0, le=100)
    completed: bool = False
