# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Activity tracker and stats schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from creative_hustle.models.common import ActivityType, Record


class Activity(Record):
    """Stored activity log entry. Immutable once created."""

    user_id: int
    type: ActivityType
    hours: Decimal
    income: Decimal = Decimal("0")
    description: str | None = None
    date: datetime
    created_at: datetime


class ActivityCreate(BaseModel):
    """Request body for logging an activity.

    Attributes:
        type: Kind of work.
        hours: Time spent, between 0.1 and 24 inclusive.
        income: Money earned, non-negative.
        description: Optional free-text note.
        date: When the work happened. Defaults to the time of logging.
    """

    type: ActivityType
    hours: Decimal = Field(..., ge=Decimal("0.1"), le=Decimal("24"), max_digits=4, decimal_places=2)
    income: Decimal = Field(default=Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    description: str | None = Field(None, max_length=500)
    date: datetime | None = None


class UserStats(BaseModel):
    """Aggregated tracker statistics for one user."""

    total_hours: int = Field(description="Sum of hours, rounded half-up")
    total_income: float = Field(description="Sum of income")
    this_month_income: float = Field(description="Income since the start of the current month")
    active_projects: int = Field(description="Modules started but not finished")
