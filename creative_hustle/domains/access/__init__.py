# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Content access domain package."""

from creative_hustle.domains.access.policy import (
    PAID_TIERS,
    AccessDeniedError,
    ensure_accessible,
    is_accessible,
)

__all__ = [
    "PAID_TIERS",
    "AccessDeniedError",
    "ensure_accessible",
    "is_accessible",
]
