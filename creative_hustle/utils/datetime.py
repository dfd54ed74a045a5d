# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities for Creative Hustle Studio.

All datetimes handled by the application are timezone-aware UTC. Calendar
boundaries (such as "this month") are therefore computed on the UTC clock.

Usage:
------
    from creative_hustle.utils.datetime import utc_now

    # For current time
    now = utc_now()

    # For Pydantic model defaults
    created_at: datetime = Field(default_factory=utc_now)
"""

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Timezone-aware datetime representing current UTC time.

    Example:
        >>> now = utc_now()
        >>> now.tzinfo
        datetime.timezone.utc
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Ensure a datetime is timezone-aware UTC.

    Args:
        dt: A datetime object (naive or aware) or None.

    Returns:
        Timezone-aware UTC datetime or None.

    Note:
        - If dt is None, returns None
        - If dt is naive, assumes UTC and adds tzinfo
        - If dt is aware, converts to UTC
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume UTC
        return dt.replace(tzinfo=timezone.utc)

    # Already aware - convert to UTC
    return dt.astimezone(timezone.utc)


def utc_month_start(reference: datetime | None = None) -> datetime:
    """Get the first instant of the month containing ``reference``.

    Args:
        reference: Datetime inside the month. Defaults to now.

    Returns:
        Timezone-aware UTC datetime for day 1 at 00:00:00.
    """
    ref = ensure_utc(reference) if reference is not None else utc_now()
    return ref.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def days_ago(days: int, reference: datetime | None = None) -> datetime:
    """Get a datetime N days before ``reference`` (default: now).

    Args:
        days: Number of days to go back.
        reference: Starting point. Defaults to now.

    Returns:
        Timezone-aware UTC datetime.
    """
    ref = ensure_utc(reference) if reference is not None else utc_now()
    return ref - timedelta(days=days)
