# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""7-day challenge schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from creative_hustle.models.common import Record

CHALLENGE_LENGTH = 7


class ChallengeProgress(Record):
    """Stored completion checkpoint for one challenge day."""

    user_id: int
    day: int
    completed: bool = False
    completed_at: datetime | None = None
    created_at: datetime


class ChallengeUpdateRequest(BaseModel):
    """Request body for marking a challenge day."""

    day: int = Field(..., ge=1, le=CHALLENGE_LENGTH)
    completed: bool


class ChallengeSummary(BaseModel):
    """Overall challenge standing for a user."""

    completed_days: int
    current_day: int
    progress_percent: int
    is_complete: bool
    current_task: str
