# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for Creative Hustle Studio.

Example:
    >>> from creative_hustle.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from creative_hustle.core.config.settings import (
    APISettings,
    AuthSettings,
    BillingSettings,
    CORSSettings,
    RateLimitSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Subsettings
    "AuthSettings",
    "BillingSettings",
    "RateLimitSettings",
    "CORSSettings",
    "APISettings",
]
