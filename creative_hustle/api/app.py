# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI Application Factory.

This module provides the main application factory for the Creative Hustle
Studio API.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from creative_hustle import __version__
from creative_hustle.api.endpoints import create_api_router
from creative_hustle.api.middleware.identity import IdentityMiddleware
from creative_hustle.api.middleware.rate_limit import create_limiter, rate_limit_exceeded_handler
from creative_hustle.api.middleware.request_context import RequestContextMiddleware
from creative_hustle.api.routes import health
from creative_hustle.core.config import Settings, get_settings
from creative_hustle.domains.billing import BillingProvider, get_billing_provider
from creative_hustle.infrastructure.storage import MemoryStorage, Storage, seed_storage
from creative_hustle.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Configures logging and loads the demo data on startup.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    settings: Settings = app.state.settings
    setup_logging(settings)
    logger.info(
        "Starting Creative Hustle Studio API: environment=%s, billing=%s",
        settings.environment,
        app.state.billing.name,
    )

    if settings.seed_demo_data:
        await seed_storage(app.state.storage)

    yield

    logger.info("Shutting down Creative Hustle Studio API")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn any uncaught error into a 500 carrying the error message."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc) or "Internal Server Error"},
    )


def create_app(
    settings: Settings | None = None,
    storage: Storage | None = None,
    billing_provider: BillingProvider | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. Defaults to get_settings().
        storage: Entity store. Defaults to a new MemoryStorage.
        billing_provider: Billing provider. Defaults to the one selected
            by the billing settings.

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Creative Hustle Studio API",
        description="Courses, templates and tracking for creative entrepreneurs",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    # =========================================================================
    # State
    # =========================================================================
    app.state.settings = settings
    app.state.storage = storage if storage is not None else MemoryStorage()
    app.state.billing = billing_provider or get_billing_provider(settings.billing)
    app.state.limiter = create_limiter(settings.rate_limit)

    # =========================================================================
    # Exception handlers
    # =========================================================================
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Middleware (order matters - last added is first executed)
    # =========================================================================

    # Request context - runs after identity so user_id can be bound
    app.add_middleware(RequestContextMiddleware)

    # Identity - resolves request.state.user_id
    app.add_middleware(IdentityMiddleware, settings=settings.auth)

    # CORS middleware (should be last to execute first)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins_list,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
    )

    # =========================================================================
    # Routes
    # =========================================================================
    app.include_router(health.router, tags=["Health"])
    app.include_router(create_api_router(app.state.limiter, settings.rate_limit.billing))

    return app
