"""Creative Hustle Studio Backend.

Subscription-gated learning and tracking platform for creative
entrepreneurs: curriculum modules, a template library, an activity
tracker and a 7-day business challenge.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
