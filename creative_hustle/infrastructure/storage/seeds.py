# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Demo seed data.

Loads the demo account, the starter curriculum and template library, and a
little tracker history so a fresh process has something to show:
- 1 user (free tier)
- 4 modules (2 free, 2 premium, all published)
- 4 templates (2 free, 2 premium)
- 2 progress records, 2 activities, 3 challenge days
"""

import logging
from decimal import Decimal

from creative_hustle.infrastructure.storage.base import Storage
from creative_hustle.models.activity import ActivityCreate
from creative_hustle.models.common import ActivityType, ContentTier, ModuleStatus
from creative_hustle.models.curriculum import ModuleCreate
from creative_hustle.models.template import TemplateCreate
from creative_hustle.models.user import UserCreate
from creative_hustle.utils.datetime import days_ago

logger = logging.getLogger(__name__)

DEMO_USER = {
    "username": "sarah_artist",
    "email": "sarah@example.com",
    "password": "password123",
}

MODULES = [
    {
        "title": "Finding Your Creative Niche",
        "description": "Discover what makes your art unique",
        "content": "In this module, you'll learn how to identify your unique creative style...",
        "tier": ContentTier.FREE,
        "order_index": 1,
        "estimated_minutes": 12,
    },
    {
        "title": "Pricing Your Creative Work",
        "description": "Learn to value your time and talent",
        "content": "Pricing is one of the biggest challenges for creative entrepreneurs...",
        "tier": ContentTier.FREE,
        "order_index": 2,
        "estimated_minutes": 18,
    },
    {
        "title": "Building Your Brand Identity",
        "description": "Create a memorable visual presence",
        "content": "Your brand is more than just a logo - it's your entire visual identity...",
        "tier": ContentTier.PREMIUM,
        "order_index": 3,
        "estimated_minutes": 25,
    },
    {
        "title": "Marketing on Social Media",
        "description": "Grow your audience authentically",
        "content": "Social media marketing for creatives requires a different approach...",
        "tier": ContentTier.PREMIUM,
        "order_index": 4,
        "estimated_minutes": 30,
    },
]

TEMPLATES = [
    {
        "title": "Basic Pricing Calculator",
        "description": "Simple spreadsheet to calculate your artwork pricing",
        "category": "business",
        "tier": ContentTier.FREE,
        "download_url": "/templates/pricing-calculator.pdf",
        "file_type": "pdf",
    },
    {
        "title": "Goal Setting Worksheet",
        "description": "Set and track your creative business goals",
        "category": "planning",
        "tier": ContentTier.FREE,
        "download_url": "/templates/goal-worksheet.pdf",
        "file_type": "pdf",
    },
    {
        "title": "Complete Business Planner",
        "description": "90-day roadmap with goals, milestones, and action items",
        "category": "business",
        "tier": ContentTier.PREMIUM,
        "download_url": "/templates/business-planner.pdf",
        "file_type": "pdf",
    },
    {
        "title": "Financial Tracker",
        "description": "Track income, expenses, and profit margins",
        "category": "finance",
        "tier": ContentTier.PREMIUM,
        "download_url": "/templates/financial-tracker.xlsx",
        "file_type": "excel",
    },
]


async def seed_storage(storage: Storage) -> None:
    """Populate an empty storage with demo data.

    Skips seeding when the demo user already exists, so calling it twice
    is harmless.

    Args:
        storage: Storage to populate.
    """
    if await storage.get_user_by_username(DEMO_USER["username"]):
        logger.info("Demo data already present, skipping seed")
        return

    user = await storage.create_user(UserCreate(**DEMO_USER))

    modules = []
    for data in MODULES:
        modules.append(
            await storage.create_module(ModuleCreate(status=ModuleStatus.PUBLISHED, **data))
        )

    for data in TEMPLATES:
        await storage.create_template(TemplateCreate(**data))

    await storage.upsert_progress(user.id, modules[0].id, completed=True, progress=100)
    await storage.upsert_progress(user.id, modules[1].id, completed=False, progress=65)

    await storage.create_activity(
        user.id,
        ActivityCreate(
            type=ActivityType.CLIENT_WORK,
            hours=Decimal("3.0"),
            income=Decimal("75.00"),
            description="Logo design for local cafe",
            date=days_ago(1),
        ),
    )
    await storage.create_activity(
        user.id,
        ActivityCreate(
            type=ActivityType.PRACTICE,
            hours=Decimal("2.5"),
            income=Decimal("0.00"),
            description="Digital painting practice",
            date=days_ago(2),
        ),
    )

    await storage.upsert_challenge_day(user.id, 1, completed=True)
    await storage.upsert_challenge_day(user.id, 2, completed=True)
    await storage.upsert_challenge_day(user.id, 3, completed=False)

    logger.info(
        "Seeded demo data: user=%s, modules=%s, templates=%s",
        user.username,
        len(MODULES),
        len(TEMPLATES),
    )
