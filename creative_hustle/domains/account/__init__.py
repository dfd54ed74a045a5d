# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Account domain package.

This package provides user account functionality including:
- Current user lookup and user creation
- Tier upgrades
- Billing pass-through for payments and subscriptions
"""

from creative_hustle.domains.account.service import (
    AccountService,
    AccountServiceError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

__all__ = [
    "AccountService",
    "AccountServiceError",
    "UserNotFoundError",
    "UserAlreadyExistsError",
]
