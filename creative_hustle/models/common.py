# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared enumerations and base models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class UserTier(str, Enum):
    """Subscription level of a user."""

    FREE = "free"
    PREMIUM = "premium"
    LIFETIME = "lifetime"


class ContentTier(str, Enum):
    """Minimum subscription level required to access a content item."""

    FREE = "free"
    PREMIUM = "premium"


class ModuleStatus(str, Enum):
    """Publication status of a curriculum module."""

    DRAFT = "draft"
    PUBLISHED = "published"


class ActivityType(str, Enum):
    """Kind of work logged in the activity tracker."""

    CLIENT_WORK = "client_work"
    PRACTICE = "practice"
    MARKETING = "marketing"
    ADMIN = "admin"


class Record(BaseModel):
    """Base class for stored entities.

    Stored records are replaced rather than mutated in place, so they are
    frozen to keep callers from editing shared instances.
    """

    model_config = ConfigDict(frozen=True)

    id: int
