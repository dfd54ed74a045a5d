# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Current-user resolution middleware.

There is no login in this service. Each request is bound to a user id taken
from the identity header (when trusted) or the configured default user.

Example:
    # Act as user 2
    GET /api/user
    X-User-Id: 2
"""

import logging
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from creative_hustle.core.config import AuthSettings

logger = logging.getLogger(__name__)


class IdentityMiddleware(BaseHTTPMiddleware):
    """Populate request.state.user_id for every request.

    The user id is None when the header is malformed, or when no header
    is sent and no default user is configured. Endpoints that need a user
    turn that into a 401.

    Attributes:
        _settings: Current-user resolution settings.
    """

    def __init__(self, app: ASGIApp, settings: AuthSettings) -> None:
        """Initialize the identity middleware.

        Args:
            app: ASGI application.
            settings: Current-user resolution settings.
        """
        super().__init__(app)
        self._settings = settings

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Response],
    ) -> Response:
        request.state.user_id = self._resolve_user_id(request)
        return await call_next(request)

    def _resolve_user_id(self, request: Request) -> int | None:
        if self._settings.allow_user_header:
            header = request.headers.get(self._settings.user_header)
            if header is not None:
                try:
                    user_id = int(header.strip())
                except ValueError:
                    logger.debug("Ignoring malformed user header: %r", header)
                    return None
                return user_id if user_id > 0 else None

        return self._settings.default_user_id


def get_request_user_id(request: Request) -> int | None:
    """Get the resolved user id from request state."""
    return getattr(request.state, "user_id", None)
