# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Activity tracker service.

Logs time and income entries and derives dashboard statistics from them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from creative_hustle.domains.analytics import compute_stats
from creative_hustle.infrastructure.storage import Storage
from creative_hustle.models.activity import Activity, ActivityCreate, UserStats
from creative_hustle.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class TrackerService:
    """Service for activity logging and stats.

    Attributes:
        storage: Entity store.
        clock: Source of the reference time for monthly stats.
    """

    def __init__(
        self,
        storage: Storage,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.storage = storage
        self.clock = clock

    async def list_activities(self, user_id: int) -> list[Activity]:
        """List a user's activities, most recent first."""
        return await self.storage.list_activities(user_id)

    async def log_activity(self, user_id: int, data: ActivityCreate) -> Activity:
        """Record an activity for a user."""
        activity = await self.storage.create_activity(user_id, data)
        logger.debug(
            "Logged activity: user=%s, type=%s, hours=%s, income=%s",
            user_id,
            activity.type.value,
            activity.hours,
            activity.income,
        )
        return activity

    async def get_stats(self, user_id: int) -> UserStats:
        """Aggregate a user's activities and module progress."""
        activities = await self.storage.list_activities(user_id)
        progress = await self.storage.list_progress(user_id)
        return compute_stats(activities, progress, now=self.clock())
