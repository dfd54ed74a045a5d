# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Abstract storage interface.

Domain services talk to a Storage instance only, so the in-memory backend
can be swapped for a persistent one without touching services or routes.

Conventions shared by every backend:
- Identifiers are positive integers, strictly increasing per entity type.
- ``update_*`` raises RecordNotFoundError for unknown ids.
- ``delete_*`` returns False for unknown ids instead of raising.
- No referential integrity between user/module references and their targets.
"""

from abc import ABC, abstractmethod

from creative_hustle.models.activity import Activity, ActivityCreate
from creative_hustle.models.challenge import ChallengeProgress
from creative_hustle.models.common import UserTier
from creative_hustle.models.curriculum import Module, ModuleCreate, ModuleUpdate, UserProgress
from creative_hustle.models.template import Template, TemplateCreate, TemplateUpdate
from creative_hustle.models.user import User, UserCreate


class Storage(ABC):
    """Entity store for users, content, progress and tracker data."""

    # =========================================================================
    # Users
    # =========================================================================

    @abstractmethod
    async def list_users(self) -> list[User]:
        """List all users in creation order."""

    @abstractmethod
    async def get_user(self, user_id: int) -> User | None:
        """Get a user by id."""

    @abstractmethod
    async def get_user_by_username(self, username: str) -> User | None:
        """Get the first user with the given username."""

    @abstractmethod
    async def get_user_by_email(self, email: str) -> User | None:
        """Get the first user with the given email (case-insensitive)."""

    @abstractmethod
    async def create_user(self, data: UserCreate) -> User:
        """Create a user.

        Raises:
            DuplicateRecordError: If the username or email is taken.
        """

    @abstractmethod
    async def update_user_tier(self, user_id: int, tier: UserTier) -> User:
        """Change a user's subscription tier.

        Raises:
            RecordNotFoundError: If the user does not exist.
        """

    @abstractmethod
    async def update_user_billing(
        self,
        user_id: int,
        customer_id: str,
        subscription_id: str,
    ) -> User:
        """Store billing provider references on a user.

        Raises:
            RecordNotFoundError: If the user does not exist.
        """

    # =========================================================================
    # Modules
    # =========================================================================

    @abstractmethod
    async def list_modules(self) -> list[Module]:
        """List modules sorted ascending by order index."""

    @abstractmethod
    async def get_module(self, module_id: int) -> Module | None:
        """Get a module by id."""

    @abstractmethod
    async def create_module(self, data: ModuleCreate) -> Module:
        """Create a module."""

    @abstractmethod
    async def update_module(self, module_id: int, data: ModuleUpdate) -> Module:
        """Apply a partial update to a module.

        Raises:
            RecordNotFoundError: If the module does not exist.
        """

    @abstractmethod
    async def delete_module(self, module_id: int) -> bool:
        """Delete a module. Returns True if it existed."""

    # =========================================================================
    # Templates
    # =========================================================================

    @abstractmethod
    async def list_templates(self) -> list[Template]:
        """List templates in creation order."""

    @abstractmethod
    async def get_template(self, template_id: int) -> Template | None:
        """Get a template by id."""

    @abstractmethod
    async def create_template(self, data: TemplateCreate) -> Template:
        """Create a template."""

    @abstractmethod
    async def update_template(self, template_id: int, data: TemplateUpdate) -> Template:
        """Apply a partial update to a template.

        Raises:
            RecordNotFoundError: If the template does not exist.
        """

    @abstractmethod
    async def delete_template(self, template_id: int) -> bool:
        """Delete a template. Returns True if it existed."""

    # =========================================================================
    # Module progress
    # =========================================================================

    @abstractmethod
    async def list_progress(self, user_id: int) -> list[UserProgress]:
        """List a user's module progress records."""

    @abstractmethod
    async def get_module_progress(self, user_id: int, module_id: int) -> UserProgress | None:
        """Get the progress record for a (user, module) pair."""

    @abstractmethod
    async def upsert_progress(
        self,
        user_id: int,
        module_id: int,
        completed: bool = False,
        progress: int = 0,
    ) -> UserProgress:
        """Create or overwrite the progress record for a (user, module) pair."""

    # =========================================================================
    # Activities
    # =========================================================================

    @abstractmethod
    async def list_activities(self, user_id: int) -> list[Activity]:
        """List a user's activities, newest occurrence first."""

    @abstractmethod
    async def create_activity(self, user_id: int, data: ActivityCreate) -> Activity:
        """Log an activity for a user."""

    # =========================================================================
    # Challenge
    # =========================================================================

    @abstractmethod
    async def list_challenge_progress(self, user_id: int) -> list[ChallengeProgress]:
        """List a user's challenge records ordered by day."""

    @abstractmethod
    async def upsert_challenge_day(
        self,
        user_id: int,
        day: int,
        completed: bool,
    ) -> ChallengeProgress:
        """Create or overwrite the challenge record for a (user, day) pair."""
