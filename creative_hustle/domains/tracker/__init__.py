# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Activity tracker domain package."""

from creative_hustle.domains.tracker.service import TrackerService

__all__ = ["TrackerService"]
