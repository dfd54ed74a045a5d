# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tracker statistics aggregation.

Pure functions over already-loaded records; loading is the caller's job.

Usage:
    from creative_hustle.domains.analytics import compute_stats

    stats = compute_stats(activities, progress)
    stats.total_hours  # whole hours, rounded half-up
"""

from collections.abc import Iterable
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from creative_hustle.models.activity import Activity, UserStats
from creative_hustle.models.curriculum import UserProgress
from creative_hustle.utils.datetime import ensure_utc, utc_month_start


def round_half_up(value: Decimal | float) -> int:
    """Round to the nearest integer, halves away from zero (4.5 -> 5)."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def count_active_projects(progress: Iterable[UserProgress]) -> int:
    """Count modules that are started but not finished.

    Args:
        progress: A user's progress records.

    Returns:
        Number of records with 0 < progress < 100 that are not completed.
    """
    return sum(1 for p in progress if not p.completed and 0 < p.progress < 100)


def compute_stats(
    activities: Iterable[Activity],
    progress: Iterable[UserProgress] = (),
    now: datetime | None = None,
) -> UserStats:
    """Aggregate a user's activities into dashboard statistics.

    Args:
        activities: The user's activities.
        progress: The user's module progress records.
        now: Reference time for "this month". Defaults to the current UTC time.

    Returns:
        UserStats with total hours (rounded half-up), total income, income
        since the first instant of the current UTC month and the number of
        active projects.
    """
    month_start = utc_month_start(now)

    total_hours = Decimal("0")
    total_income = Decimal("0")
    this_month_income = Decimal("0")

    for activity in activities:
        income = activity.income or Decimal("0")
        total_hours += activity.hours
        total_income += income
        if ensure_utc(activity.date) >= month_start:
            this_month_income += income

    return UserStats(
        total_hours=round_half_up(total_hours),
        total_income=float(total_income),
        this_month_income=float(this_month_income),
        active_projects=count_active_projects(progress),
    )
