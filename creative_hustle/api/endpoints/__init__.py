# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API endpoint routers.

Each module provides a FastAPI router for a specific domain. All of them
are mounted under /api.

Modules:
    users: Current user, user creation and tier upgrade.
    billing: Payment intent and subscription pass-through.
    modules: Curriculum modules.
    progress: Per-user module progress.
    templates: Template library.
    activities: Activity tracker and stats.
    challenge: 7-day challenge.
"""

from fastapi import APIRouter
from slowapi import Limiter

from creative_hustle.api.endpoints import (
    activities,
    billing,
    challenge,
    modules,
    progress,
    templates,
    users,
)


def create_api_router(limiter: Limiter, billing_limit: str) -> APIRouter:
    """Assemble the /api router for one application.

    Args:
        limiter: Limiter of the application.
        billing_limit: Limit string for the billing endpoints.

    Returns:
        Router with every endpoint router mounted.
    """
    router = APIRouter(prefix="/api")

    router.include_router(users.router, tags=["Users"])
    router.include_router(billing.create_router(limiter, billing_limit), tags=["Billing"])
    router.include_router(modules.router, prefix="/modules", tags=["Modules"])
    router.include_router(progress.router, prefix="/progress", tags=["Progress"])
    router.include_router(templates.router, prefix="/templates", tags=["Templates"])
    router.include_router(activities.router, tags=["Tracker"])
    router.include_router(challenge.router, prefix="/challenge", tags=["Challenge"])
    return router
