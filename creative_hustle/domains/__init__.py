# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain services layer for Creative Hustle Studio.

Domains:
    access: Tier-based content access predicate.
    account: Current user, tier upgrades and billing pass-through.
    analytics: Tracker statistics.
    billing: Billing provider clients.
    challenge: 7-day business challenge.
    curriculum: Modules and per-user module progress.
    templates: Template library.
    tracker: Activity logging.
"""
