# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API middleware components.

This package provides middleware for request processing:
- IdentityMiddleware: Resolves the current user id.
- RequestContextMiddleware: Binds request-scoped logging context.
- create_limiter: Builds the slowapi rate limiter of an application.
"""

from creative_hustle.api.middleware.identity import IdentityMiddleware, get_request_user_id
from creative_hustle.api.middleware.rate_limit import (
    create_limiter,
    rate_limit_exceeded_handler,
)
from creative_hustle.api.middleware.request_context import RequestContextMiddleware

__all__ = [
    "IdentityMiddleware",
    "RequestContextMiddleware",
    "get_request_user_id",
    "create_limiter",
    "rate_limit_exceeded_handler",
]
