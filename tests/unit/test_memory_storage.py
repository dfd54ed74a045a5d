# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the in-memory storage backend."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from creative_hustle.infrastructure.storage import (
    DuplicateRecordError,
    MemoryStorage,
    RecordNotFoundError,
    seed_storage,
)
from creative_hustle.models.activity import ActivityCreate
from creative_hustle.models.common import ActivityType, ContentTier, ModuleStatus, UserTier
from creative_hustle.models.curriculum import ModuleCreate, ModuleUpdate
from creative_hustle.models.template import TemplateCreate, TemplateUpdate
from creative_hustle.models.user import UserCreate


def _module(title: str, order_index: int, **kwargs) -> ModuleCreate:
    return ModuleCreate(
        title=title,
        description=f"{title} description",
        content=f"{title} content",
        order_index=order_index,
        **kwargs,
    )


def _template(title: str, category: str = "business", **kwargs) -> TemplateCreate:
    return TemplateCreate(
        title=title,
        description=f"{title} description",
        category=category,
        **kwargs,
    )


class TestMemoryStorageIdentifiers:
    """Tests for id assignment."""

    @pytest.mark.asyncio
    async def test_ids_start_at_one_and_increase(self, storage):
        first = await storage.create_module(_module("A", 1))
        second = await storage.create_module(_module("B", 2))
        third = await storage.create_module(_module("C", 3))

        assert [first.id, second.id, third.id] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_delete(self, storage):
        first = await storage.create_module(_module("A", 1))
        await storage.delete_module(first.id)
        second = await storage.create_module(_module("B", 2))

        assert second.id == 2

    @pytest.mark.asyncio
    async def test_each_entity_type_has_its_own_sequence(self, storage):
        module = await storage.create_module(_module("A", 1))
        template = await storage.create_template(_template("T"))
        user = await storage.create_user(
            UserCreate(username="maya", email="maya@example.com", password="pw")
        )

        assert module.id == 1
        assert template.id == 1
        assert user.id == 1

    @pytest.mark.asyncio
    async def test_created_at_uses_clock(self, storage, fixed_now):
        module = await storage.create_module(_module("A", 1))

        assert module.created_at == fixed_now


class TestMemoryStorageUsers:
    """Tests for user records."""

    @pytest.mark.asyncio
    async def test_create_user_defaults_to_free_tier(self, storage):
        user = await storage.create_user(
            UserCreate(username="maya", email="maya@example.com", password="pw")
        )

        assert user.tier == UserTier.FREE
        assert user.billing_customer_id is None
        assert await storage.get_user(user.id) == user

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, storage):
        await storage.create_user(
            UserCreate(username="maya", email="maya@example.com", password="pw")
        )

        with pytest.raises(DuplicateRecordError) as exc_info:
            await storage.create_user(
                UserCreate(username="maya", email="other@example.com", password="pw")
            )

        assert exc_info.value.field == "username"

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected_case_insensitively(self, storage):
        await storage.create_user(
            UserCreate(username="maya", email="maya@example.com", password="pw")
        )

        with pytest.raises(DuplicateRecordError) as exc_info:
            await storage.create_user(
                UserCreate(username="maya2", email="MAYA@example.com", password="pw")
            )

        assert exc_info.value.field == "email"

    @pytest.mark.asyncio
    async def test_update_tier(self, storage):
        user = await storage.create_user(
            UserCreate(username="maya", email="maya@example.com", password="pw")
        )

        updated = await storage.update_user_tier(user.id, UserTier.LIFETIME)

        assert updated.id == user.id
        assert updated.tier == UserTier.LIFETIME
        assert (await storage.get_user(user.id)).tier == UserTier.LIFETIME

    @pytest.mark.asyncio
    async def test_update_tier_missing_user(self, storage):
        with pytest.raises(RecordNotFoundError, match="User not found"):
            await storage.update_user_tier(42, UserTier.PREMIUM)

    @pytest.mark.asyncio
    async def test_update_billing(self, storage):
        user = await storage.create_user(
            UserCreate(username="maya", email="maya@example.com", password="pw")
        )

        updated = await storage.update_user_billing(user.id, "cus_1", "sub_1")

        assert updated.billing_customer_id == "cus_1"
        assert updated.billing_subscription_id == "sub_1"
        assert updated.tier == user.tier


class TestMemoryStorageModules:
    """Tests for module records."""

    @pytest.mark.asyncio
    async def test_list_sorted_by_order_index_then_id(self, storage):
        await storage.create_module(_module("Third", 5))
        await storage.create_module(_module("First", 1))
        await storage.create_module(_module("Second-a", 3))
        await storage.create_module(_module("Second-b", 3))

        modules = await storage.list_modules()

        assert [m.title for m in modules] == ["First", "Second-a", "Second-b", "Third"]

    @pytest.mark.asyncio
    async def test_create_applies_defaults(self, storage):
        module = await storage.create_module(_module("A", 1))

        assert module.tier == ContentTier.FREE
        assert module.status == ModuleStatus.DRAFT
        assert module.estimated_minutes == 15

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, storage):
        module = await storage.create_module(_module("A", 1, tier=ContentTier.PREMIUM))

        updated = await storage.update_module(
            module.id,
            ModuleUpdate(status=ModuleStatus.PUBLISHED, title=None),
        )

        assert updated.id == module.id
        assert updated.status == ModuleStatus.PUBLISHED
        assert updated.title == "A"
        assert updated.tier == ContentTier.PREMIUM
        assert updated.created_at == module.created_at

    @pytest.mark.asyncio
    async def test_update_missing_module(self, storage):
        with pytest.raises(RecordNotFoundError, match="Module not found"):
            await storage.update_module(99, ModuleUpdate(title="New"))

    @pytest.mark.asyncio
    async def test_delete(self, storage):
        module = await storage.create_module(_module("A", 1))

        assert await storage.delete_module(module.id) is True
        assert await storage.get_module(module.id) is None
        assert await storage.delete_module(module.id) is False

    @pytest.mark.asyncio
    async def test_delete_leaves_other_modules_untouched(self, storage):
        kept = await storage.create_module(_module("Kept", 1))
        removed = await storage.create_module(_module("Removed", 2))

        assert await storage.delete_module(99) is False
        assert await storage.delete_module(removed.id) is True

        assert await storage.get_module(kept.id) == kept
        assert await storage.list_modules() == [kept]

    @pytest.mark.asyncio
    async def test_get_missing_module_returns_none(self, storage):
        assert await storage.get_module(123) is None


class TestMemoryStorageTemplates:
    """Tests for template records."""

    @pytest.mark.asyncio
    async def test_list_in_insertion_order(self, storage):
        await storage.create_template(_template("B"))
        await storage.create_template(_template("A"))

        assert [t.title for t in await storage.list_templates()] == ["B", "A"]

    @pytest.mark.asyncio
    async def test_update_and_delete(self, storage):
        template = await storage.create_template(_template("A"))

        updated = await storage.update_template(template.id, TemplateUpdate(category="finance"))

        assert updated.category == "finance"
        assert updated.file_type == "pdf"
        assert await storage.delete_template(template.id) is True
        assert await storage.delete_template(template.id) is False

    @pytest.mark.asyncio
    async def test_update_missing_template(self, storage):
        with pytest.raises(RecordNotFoundError, match="Template not found"):
            await storage.update_template(5, TemplateUpdate(title="X"))

    @pytest.mark.asyncio
    async def test_explicit_null_clears_download_url(self, storage):
        template = await storage.create_template(
            _template("A", download_url="/templates/a.pdf")
        )

        untouched = await storage.update_template(
            template.id, TemplateUpdate(title=None, file_type=None)
        )
        assert untouched == template

        cleared = await storage.update_template(template.id, TemplateUpdate(download_url=None))
        assert cleared.download_url is None
        assert cleared.title == "A"
        assert cleared.file_type == "pdf"


class TestMemoryStorageProgress:
    """Tests for progress upsert semantics."""

    @pytest.mark.asyncio
    async def test_upsert_twice_keeps_one_record(self, storage):
        first = await storage.upsert_progress(1, 10, completed=False, progress=40)
        second = await storage.upsert_progress(1, 10, completed=False, progress=70)

        records = await storage.list_progress(1)
        assert len(records) == 1
        assert second.id == first.id
        assert records[0].progress == 70

    @pytest.mark.asyncio
    async def test_defaults_for_new_record(self, storage):
        record = await storage.upsert_progress(1, 10)

        assert record.completed is False
        assert record.progress == 0
        assert record.completed_at is None

    @pytest.mark.asyncio
    async def test_completed_at_tracks_completed(self):
        times = iter(
            datetime(2025, 3, 1, tzinfo=timezone.utc) + timedelta(hours=h)
            for h in range(10)
        )
        storage = MemoryStorage(clock=lambda: next(times))

        created = await storage.upsert_progress(1, 10, completed=False, progress=50)
        assert created.completed_at is None

        done = await storage.upsert_progress(1, 10, completed=True, progress=100)
        assert done.completed_at is not None

        again = await storage.upsert_progress(1, 10, completed=True, progress=100)
        assert again == done

        undone = await storage.upsert_progress(1, 10, completed=False, progress=90)
        assert undone.completed_at is None
        assert undone.created_at == created.created_at

    @pytest.mark.asyncio
    async def test_records_are_per_user_and_module(self, storage):
        await storage.upsert_progress(1, 10, progress=10)
        await storage.upsert_progress(1, 11, progress=20)
        await storage.upsert_progress(2, 10, progress=30)

        assert len(await storage.list_progress(1)) == 2
        assert len(await storage.list_progress(2)) == 1
        assert (await storage.get_module_progress(2, 10)).progress == 30
        assert await storage.get_module_progress(2, 11) is None


class TestMemoryStorageActivities:
    """Tests for activity records."""

    @pytest.mark.asyncio
    async def test_newest_first(self, storage, fixed_now):
        older = await storage.create_activity(
            1,
            ActivityCreate(
                type=ActivityType.PRACTICE,
                hours=Decimal("1"),
                date=fixed_now - timedelta(days=3),
            ),
        )
        newer = await storage.create_activity(
            1,
            ActivityCreate(
                type=ActivityType.MARKETING,
                hours=Decimal("2"),
                date=fixed_now - timedelta(days=1),
            ),
        )

        activities = await storage.list_activities(1)

        assert [a.id for a in activities] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_date_defaults_to_now(self, storage, fixed_now):
        activity = await storage.create_activity(
            1,
            ActivityCreate(type=ActivityType.ADMIN, hours=Decimal("0.5")),
        )

        assert activity.date == fixed_now
        assert activity.income == Decimal("0")

    @pytest.mark.asyncio
    async def test_naive_date_is_treated_as_utc(self, storage):
        activity = await storage.create_activity(
            1,
            ActivityCreate(
                type=ActivityType.ADMIN,
                hours=Decimal("1"),
                date=datetime(2025, 3, 2, 9, 30),
            ),
        )

        assert activity.date == datetime(2025, 3, 2, 9, 30, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_filtered_by_user(self, storage):
        await storage.create_activity(1, ActivityCreate(type=ActivityType.ADMIN, hours=Decimal("1")))
        await storage.create_activity(2, ActivityCreate(type=ActivityType.ADMIN, hours=Decimal("1")))

        assert len(await storage.list_activities(1)) == 1
        assert await storage.list_activities(3) == []


class TestMemoryStorageChallenge:
    """Tests for challenge day upsert."""

    @pytest.mark.asyncio
    async def test_repeated_identical_upsert_is_idempotent(self, storage):
        first = await storage.upsert_challenge_day(1, 2, completed=True)
        second = await storage.upsert_challenge_day(1, 2, completed=True)

        assert second == first
        assert len(await storage.list_challenge_progress(1)) == 1

    @pytest.mark.asyncio
    async def test_differing_upsert_mutates_in_place(self, storage):
        first = await storage.upsert_challenge_day(1, 2, completed=True)
        second = await storage.upsert_challenge_day(1, 2, completed=False)

        assert second.id == first.id
        assert second.completed is False
        assert second.completed_at is None

    @pytest.mark.asyncio
    async def test_sorted_by_day(self, storage):
        for day in (3, 1, 2):
            await storage.upsert_challenge_day(1, day, completed=True)

        assert [r.day for r in await storage.list_challenge_progress(1)] == [1, 2, 3]


class TestSeedStorage:
    """Tests for demo seed data."""

    @pytest.mark.asyncio
    async def test_seed_counts(self, storage):
        await seed_storage(storage)

        assert storage.counts() == {
            "users": 1,
            "modules": 4,
            "templates": 4,
            "progress": 2,
            "activities": 2,
            "challenge_progress": 3,
        }

    @pytest.mark.asyncio
    async def test_seed_twice_is_harmless(self, storage):
        await seed_storage(storage)
        await seed_storage(storage)

        assert storage.counts()["users"] == 1
        assert storage.counts()["modules"] == 4

    @pytest.mark.asyncio
    async def test_seeded_modules_are_published(self, storage):
        await seed_storage(storage)

        modules = await storage.list_modules()
        assert all(m.status == ModuleStatus.PUBLISHED for m in modules)
        assert [m.tier for m in modules].count(ContentTier.PREMIUM) == 2
