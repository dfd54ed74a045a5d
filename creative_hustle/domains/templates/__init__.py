# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Template library domain package."""

from creative_hustle.domains.templates.service import (
    TemplateFileMissingError,
    TemplateNotFoundError,
    TemplateService,
    TemplateServiceError,
)

__all__ = [
    "TemplateService",
    "TemplateServiceError",
    "TemplateNotFoundError",
    "TemplateFileMissingError",
]
