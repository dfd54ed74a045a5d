# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Analytics domain package (tracker statistics)."""

from creative_hustle.domains.analytics.stats import (
    compute_stats,
    count_active_projects,
    round_half_up,
)

__all__ = [
    "compute_stats",
    "count_active_projects",
    "round_half_up",
]
