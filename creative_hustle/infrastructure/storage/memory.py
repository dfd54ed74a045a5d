# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""In-memory storage backend.

Keeps one keyed table per entity type for the lifetime of the process.
Nothing is persisted; a restart keeps only whatever seed data is reloaded.

Every method runs to completion without awaiting, so on a single event loop
each call is atomic with respect to other requests.

Example:
    >>> storage = MemoryStorage()
    >>> module = await storage.create_module(ModuleCreate(...))
    >>> await storage.delete_module(module.id)
    True
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Generic, TypeVar

from creative_hustle.infrastructure.storage.base import Storage
from creative_hustle.infrastructure.storage.exceptions import (
    DuplicateRecordError,
    RecordNotFoundError,
)
from creative_hustle.models.activity import Activity, ActivityCreate
from creative_hustle.models.challenge import ChallengeProgress
from creative_hustle.models.common import Record, UserTier
from creative_hustle.models.curriculum import Module, ModuleCreate, ModuleUpdate, UserProgress
from creative_hustle.models.template import Template, TemplateCreate, TemplateUpdate
from creative_hustle.models.user import User, UserCreate
from creative_hustle.utils.datetime import ensure_utc, utc_now

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)

# Optional template fields that an explicit null clears
_CLEARABLE_TEMPLATE_FIELDS = frozenset({"download_url"})


class _Table(Generic[RecordT]):
    """Keyed collection with its own id sequence.

    Dicts keep insertion order, and ids are handed out in increasing order,
    so iteration order is also ascending id order.
    """

    def __init__(self) -> None:
        self._rows: dict[int, RecordT] = {}
        self._next_id = 1

    def allocate_id(self) -> int:
        record_id = self._next_id
        self._next_id += 1
        return record_id

    def add(self, record: RecordT) -> RecordT:
        self._rows[record.id] = record
        return record

    def get(self, record_id: int) -> RecordT | None:
        return self._rows.get(record_id)

    def values(self) -> list[RecordT]:
        return list(self._rows.values())

    def replace(self, record: RecordT) -> RecordT:
        self._rows[record.id] = record
        return record

    def remove(self, record_id: int) -> bool:
        return self._rows.pop(record_id, None) is not None

    def find(self, predicate: Callable[[RecordT], bool]) -> RecordT | None:
        return next((row for row in self._rows.values() if predicate(row)), None)

    def filter(self, predicate: Callable[[RecordT], bool]) -> list[RecordT]:
        return [row for row in self._rows.values() if predicate(row)]

    def __len__(self) -> int:
        return len(self._rows)


def _completed_at(
    completed: bool,
    previous: datetime | None,
    now: datetime,
) -> datetime | None:
    """Completion timestamp after an upsert.

    Set when completion is first reached, kept while it stays completed,
    cleared when it is undone.
    """
    if not completed:
        return None
    return previous or now


class MemoryStorage(Storage):
    """Process-local Storage implementation.

    Attributes:
        clock: Callable returning the current time; injectable for tests.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        """Initialize empty tables.

        Args:
            clock: Source of creation/completion timestamps.
        """
        self.clock = clock
        self._users: _Table[User] = _Table()
        self._modules: _Table[Module] = _Table()
        self._templates: _Table[Template] = _Table()
        self._progress: _Table[UserProgress] = _Table()
        self._activities: _Table[Activity] = _Table()
        self._challenge: _Table[ChallengeProgress] = _Table()

    def counts(self) -> dict[str, int]:
        """Number of stored records per entity type."""
        return {
            "users": len(self._users),
            "modules": len(self._modules),
            "templates": len(self._templates),
            "progress": len(self._progress),
            "activities": len(self._activities),
            "challenge_progress": len(self._challenge),
        }

    # =========================================================================
    # Users
    # =========================================================================

    async def list_users(self) -> list[User]:
        return self._users.values()

    async def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        return self._users.find(lambda u: u.username == username)

    async def get_user_by_email(self, email: str) -> User | None:
        wanted = email.casefold()
        return self._users.find(lambda u: u.email.casefold() == wanted)

    async def create_user(self, data: UserCreate) -> User:
        if await self.get_user_by_username(data.username):
            raise DuplicateRecordError("User", "username", data.username)
        if await self.get_user_by_email(data.email):
            raise DuplicateRecordError("User", "email", data.email)

        user = User(
            id=self._users.allocate_id(),
            username=data.username,
            email=data.email,
            password=data.password,
            tier=data.tier,
            created_at=self.clock(),
        )
        logger.debug("Created user: id=%s, username=%s", user.id, user.username)
        return self._users.add(user)

    async def update_user_tier(self, user_id: int, tier: UserTier) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise RecordNotFoundError("User", user_id)
        return self._users.replace(user.model_copy(update={"tier": tier}))

    async def update_user_billing(
        self,
        user_id: int,
        customer_id: str,
        subscription_id: str,
    ) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise RecordNotFoundError("User", user_id)
        return self._users.replace(
            user.model_copy(
                update={
                    "billing_customer_id": customer_id,
                    "billing_subscription_id": subscription_id,
                }
            )
        )

    # =========================================================================
    # Modules
    # =========================================================================

    async def list_modules(self) -> list[Module]:
        # sorted() is stable, so equal order indexes keep ascending id order
        return sorted(self._modules.values(), key=lambda m: m.order_index)

    async def get_module(self, module_id: int) -> Module | None:
        return self._modules.get(module_id)

    async def create_module(self, data: ModuleCreate) -> Module:
        module = Module(
            id=self._modules.allocate_id(),
            created_at=self.clock(),
            **data.model_dump(),
        )
        return self._modules.add(module)

    async def update_module(self, module_id: int, data: ModuleUpdate) -> Module:
        module = self._modules.get(module_id)
        if module is None:
            raise RecordNotFoundError("Module", module_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        return self._modules.replace(module.model_copy(update=changes))

    async def delete_module(self, module_id: int) -> bool:
        return self._modules.remove(module_id)

    # =========================================================================
    # Templates
    # =========================================================================

    async def list_templates(self) -> list[Template]:
        return self._templates.values()

    async def get_template(self, template_id: int) -> Template | None:
        return self._templates.get(template_id)

    async def create_template(self, data: TemplateCreate) -> Template:
        template = Template(
            id=self._templates.allocate_id(),
            created_at=self.clock(),
            **data.model_dump(),
        )
        return self._templates.add(template)

    async def update_template(self, template_id: int, data: TemplateUpdate) -> Template:
        template = self._templates.get(template_id)
        if template is None:
            raise RecordNotFoundError("Template", template_id)
        changes = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field in _CLEARABLE_TEMPLATE_FIELDS
        }
        return self._templates.replace(template.model_copy(update=changes))

    async def delete_template(self, template_id: int) -> bool:
        return self._templates.remove(template_id)

    # =========================================================================
    # Module progress
    # =========================================================================

    async def list_progress(self, user_id: int) -> list[UserProgress]:
        return self._progress.filter(lambda p: p.user_id == user_id)

    async def get_module_progress(self, user_id: int, module_id: int) -> UserProgress | None:
        return self._progress.find(
            lambda p: p.user_id == user_id and p.module_id == module_id
        )

    async def upsert_progress(
        self,
        user_id: int,
        module_id: int,
        completed: bool = False,
        progress: int = 0,
    ) -> UserProgress:
        now = self.clock()
        existing = await self.get_module_progress(user_id, module_id)

        if existing is not None:
            return self._progress.replace(
                existing.model_copy(
                    update={
                        "completed": completed,
                        "progress": progress,
                        "completed_at": _completed_at(completed, existing.completed_at, now),
                    }
                )
            )

        record = UserProgress(
            id=self._progress.allocate_id(),
            user_id=user_id,
            module_id=module_id,
            completed=completed,
            progress=progress,
            completed_at=_completed_at(completed, None, now),
            created_at=now,
        )
        return self._progress.add(record)

    # =========================================================================
    # Activities
    # =========================================================================

    async def list_activities(self, user_id: int) -> list[Activity]:
        activities = self._activities.filter(lambda a: a.user_id == user_id)
        return sorted(activities, key=lambda a: (a.date, a.id), reverse=True)

    async def create_activity(self, user_id: int, data: ActivityCreate) -> Activity:
        now = self.clock()
        activity = Activity(
            id=self._activities.allocate_id(),
            user_id=user_id,
            type=data.type,
            hours=data.hours,
            income=data.income,
            description=data.description or None,
            date=ensure_utc(data.date) if data.date is not None else now,
            created_at=now,
        )
        return self._activities.add(activity)

    # =========================================================================
    # Challenge
    # =========================================================================

    async def list_challenge_progress(self, user_id: int) -> list[ChallengeProgress]:
        records = self._challenge.filter(lambda c: c.user_id == user_id)
        return sorted(records, key=lambda c: c.day)

    async def upsert_challenge_day(
        self,
        user_id: int,
        day: int,
        completed: bool,
    ) -> ChallengeProgress:
        now = self.clock()
        existing = self._challenge.find(lambda c: c.user_id == user_id and c.day == day)

        if existing is not None:
            return self._challenge.replace(
                existing.model_copy(
                    update={
                        "completed": completed,
                        "completed_at": _completed_at(completed, existing.completed_at, now),
                    }
                )
            )

        record = ChallengeProgress(
            id=self._challenge.allocate_id(),
            user_id=user_id,
            day=day,
            completed=completed,
            completed_at=_completed_at(completed, None, now),
            created_at=now,
        )
        return self._challenge.add(record)
