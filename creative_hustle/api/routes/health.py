# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Health check endpoints.

This module provides health and liveness endpoints for the API.
"""

import time
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from creative_hustle import __version__
from creative_hustle.api.dependencies import get_app_settings, get_billing
from creative_hustle.core.config import Settings
from creative_hustle.domains.billing import BillingProvider

logger = logging.getLogger(__name__)

router = APIRouter()

# Track server start time for uptime calculation
_server_start_time = time.time()


class StorageHealth(BaseModel):
    """Storage status with record counts per entity type."""
    status: str = Field(description="Storage status")
    backend: str = Field(description="Storage backend name")
    records: dict[str, int] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(description="Current server timestamp")
    version: str = Field(description="API version")
    environment: str = Field(description="Deployment environment")
    uptime_seconds: int = Field(description="Server uptime in seconds")
    billing_provider: str = Field(description="Active billing provider")
    storage: StorageHealth


@router.get("/health", response_model=HealthResponse)
async def health_check(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    billing: BillingProvider = Depends(get_billing),
) -> HealthResponse:
    """Check if the API is healthy.

    Returns:
        HealthResponse with storage and billing details.
    """
    storage = request.app.state.storage
    counts = storage.counts() if hasattr(storage, "counts") else {}

    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        environment=settings.environment,
        uptime_seconds=int(time.time() - _server_start_time),
        billing_provider=billing.name,
        storage=StorageHealth(
            status="healthy",
            backend=type(storage).__name__,
            records=counts,
        ),
    )


@router.get("/health/live")
async def liveness() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "alive"}
