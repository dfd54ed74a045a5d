# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Curriculum domain package.

Modules ordered by their order index, tier gating of module content and
per-user progress tracking.
"""

from creative_hustle.domains.curriculum.service import (
    CurriculumService,
    CurriculumServiceError,
    CurriculumModuleNotFoundError,
)

__all__ = [
    "CurriculumService",
    "CurriculumServiceError",
    "CurriculumModuleNotFoundError",
]
