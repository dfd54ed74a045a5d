# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""7-day challenge service.

This module provides the ChallengeService class for:
- Listing a user's challenge checkpoints
- Marking a day complete or incomplete
- Summarizing overall standing and the next task
"""

from __future__ import annotations

import logging

from creative_hustle.domains.analytics import round_half_up
from creative_hustle.infrastructure.storage import Storage
from creative_hustle.models.challenge import (
    CHALLENGE_LENGTH,
    ChallengeProgress,
    ChallengeSummary,
)

logger = logging.getLogger(__name__)

CHALLENGE_DAYS: tuple[str, ...] = (
    "Set up your creative workspace and define your business goals",
    "Research your target audience and competitors",
    "Create your first portfolio piece and price it competitively",
    "Set up your social media presence and post your first content",
    "Reach out to 3 potential clients or collaborators",
    "Create a simple website or online portfolio",
    "Launch your business and celebrate your achievement!",
)


class ChallengeServiceError(Exception):
    """Base exception for challenge service errors."""

    pass


class InvalidChallengeDayError(ChallengeServiceError):
    """Raised when a day falls outside the challenge."""

    def __init__(self, day: int) -> None:
        self.day = day
        super().__init__(f"Challenge day must be between 1 and {CHALLENGE_LENGTH}")


def task_for_day(day: int) -> str:
    """Return the task prompt for a 1-based challenge day.

    Raises:
        InvalidChallengeDayError: If ``day`` is outside 1..7.
    """
    if not 1 <= day <= CHALLENGE_LENGTH:
        raise InvalidChallengeDayError(day)
    return CHALLENGE_DAYS[day - 1]


class ChallengeService:
    """Service for the fixed 7-day challenge.

    Attributes:
        storage: Entity store.
    """

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    async def list_progress(self, user_id: int) -> list[ChallengeProgress]:
        """List a user's challenge records by day."""
        return await self.storage.list_challenge_progress(user_id)

    async def mark_day(self, user_id: int, day: int, completed: bool) -> ChallengeProgress:
        """Create or overwrite the record for one day.

        Raises:
            InvalidChallengeDayError: If ``day`` is outside 1..7.
        """
        if not 1 <= day <= CHALLENGE_LENGTH:
            raise InvalidChallengeDayError(day)

        record = await self.storage.upsert_challenge_day(user_id, day, completed)
        logger.debug("Challenge day: user=%s, day=%s, completed=%s", user_id, day, completed)
        return record

    async def get_summary(self, user_id: int) -> ChallengeSummary:
        """Summarize a user's challenge standing.

        The current day is the day after the number of completed days,
        capped at the last day.
        """
        records = await self.storage.list_challenge_progress(user_id)
        completed_days = sum(1 for r in records if r.completed)
        current_day = min(completed_days + 1, CHALLENGE_LENGTH)

        return ChallengeSummary(
            completed_days=completed_days,
            current_day=current_day,
            progress_percent=round_half_up(completed_days * 100 / CHALLENGE_LENGTH),
            is_complete=completed_days >= CHALLENGE_LENGTH,
            current_task=task_for_day(current_day),
        )
