# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""7-day challenge domain package."""

from creative_hustle.domains.challenge.service import (
    CHALLENGE_DAYS,
    ChallengeService,
    ChallengeServiceError,
    InvalidChallengeDayError,
    task_for_day,
)

__all__ = [
    "CHALLENGE_DAYS",
    "ChallengeService",
    "ChallengeServiceError",
    "InvalidChallengeDayError",
    "task_for_day",
]
