# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Rate limiting using slowapi.

Rate limits are applied per client (resolved user id, or IP address when no
user is bound). Every application gets its own limiter and counters, built
from its rate limit settings.

Example:
    limiter = create_limiter(settings.rate_limit)
    rate_limited = limiter.limit(settings.rate_limit.billing)
    router.add_api_route("/create-payment-intent", rate_limited(endpoint), ...)
"""

import logging

from fastapi import Request, Response
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from creative_hustle.api.middleware.identity import get_request_user_id
from creative_hustle.core.config import RateLimitSettings

logger = logging.getLogger(__name__)


def get_client_identifier(request: Request) -> str:
    """Get a unique identifier for the client.

    Uses the resolved user id if there is one, otherwise the IP address.

    Args:
        request: HTTP request.

    Returns:
        Client identifier string.
    """
    user_id = get_request_user_id(request)
    if user_id is not None:
        return f"user:{user_id}"
    return f"ip:{get_remote_address(request)}"


def create_limiter(settings: RateLimitSettings) -> Limiter:
    """Create a limiter with its own in-memory counters.

    Args:
        settings: Rate limiting settings of the application.

    Returns:
        Limiter that is enabled or disabled per the settings.
    """
    return Limiter(
        key_func=get_client_identifier,
        storage_uri="memory://",
        enabled=settings.enabled,
    )


async def rate_limit_exceeded_handler(
    request: Request,
    exc: RateLimitExceeded,
) -> Response:
    """Handle rate limit exceeded errors.

    Returns a 429 Too Many Requests response with retry information.

    Args:
        request: HTTP request.
        exc: Rate limit exceeded exception.

    Returns:
        JSON response with error details.
    """
    logger.warning(
        "Rate limit exceeded: %s for %s",
        exc.detail,
        get_client_identifier(request),
    )

    return Response(
        content='{"detail": "Too many requests. Please try again later."}',
        status_code=429,
        media_type="application/json",
        headers={
            "Retry-After": str(getattr(exc, "retry_after", 60)),
            "X-RateLimit-Limit": str(exc.detail),
        },
    )
