# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Template library schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from creative_hustle.models.common import ContentTier, Record


class Template(Record):
    """Stored downloadable template."""

    title: str
    description: str
    category: str
    tier: ContentTier = ContentTier.FREE
    download_url: str | None = None
    file_type: str = "pdf"
    created_at: datetime


class TemplateCreate(BaseModel):
    """Request body for creating a template."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str
    category: str = Field(..., min_length=1, max_length=50)
    tier: ContentTier = ContentTier.FREE
    download_url: str | None = None
    file_type: str = Field(default="pdf", min_length=1, max_length=20)


class TemplateUpdate(BaseModel):
    """Request body for partially updating a template.

    Fields left out or sent as null are not changed, except ``download_url``,
    which an explicit null clears.
    """

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    category: str | None = Field(None, min_length=1, max_length=50)
    tier: ContentTier | None = None
    download_url: str | None = None
    file_type: str | None = Field(None, min_length=1, max_length=20)


class TemplateResponse(BaseModel):
    """Template as seen by a given user.

    ``download_url`` is withheld when the template is locked for the user.
    """

    id: int
    title: str
    description: str
    category: str
    tier: ContentTier
    download_url: str | None
    file_type: str
    created_at: datetime
    locked: bool = False


class TemplateDownloadResponse(BaseModel):
    """Download reference for an accessible template."""

    id: int
    download_url: str
    file_type: str
