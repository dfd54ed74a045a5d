# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests
- Integration tests
"""

from collections.abc import Generator
from datetime import datetime, timezone
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from creative_hustle.api.app import create_app
from creative_hustle.core.config import (
    AuthSettings,
    BillingSettings,
    RateLimitSettings,
    Settings,
)
from creative_hustle.domains.billing import MockBillingProvider
from creative_hustle.infrastructure.storage import MemoryStorage
from creative_hustle.models.common import UserTier
from creative_hustle.models.user import User

FIXED_NOW = datetime(2025, 3, 15, 12, 0, tzinfo=timezone.utc)


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (runs the full app in-process)"
    )


# =============================================================================
# Storage Fixtures
# =============================================================================


@pytest.fixture
def fixed_now() -> datetime:
    """Provide a fixed reference time (mid-month, UTC)."""
    return FIXED_NOW


@pytest.fixture
def storage(fixed_now) -> MemoryStorage:
    """Create an empty storage with a frozen clock."""
    return MemoryStorage(clock=lambda: fixed_now)


def make_user(user_id: int = 1, tier: UserTier = UserTier.FREE, **overrides: Any) -> User:
    """Build a user record without going through storage."""
    data: dict[str, Any] = {
        "id": user_id,
        "username": f"user{user_id}",
        "email": f"user{user_id}@example.com",
        "password": "secret",
        "tier": tier,
        "created_at": FIXED_NOW,
    }
    data.update(overrides)
    return User(**data)


@pytest.fixture
def user_factory():
    """Provide the user builder to tests."""
    return make_user


@pytest.fixture
def free_user() -> User:
    return make_user(1, UserTier.FREE)


@pytest.fixture
def premium_user() -> User:
    return make_user(2, UserTier.PREMIUM)


@pytest.fixture
def lifetime_user() -> User:
    return make_user(3, UserTier.LIFETIME)


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def app_settings() -> Settings:
    """Provide settings for an in-process test application."""
    return Settings(
        environment="development",
        debug=True,
        log_level="INFO",
        seed_demo_data=True,
        auth=AuthSettings(
            default_user_id=1,
            allow_user_header=True,
            admin_user_ids=[1],
        ),
        billing=BillingSettings(secret_key=None, price_id="price_test"),
        rate_limit=RateLimitSettings(enabled=True),
    )


@pytest.fixture
def app(app_settings) -> FastAPI:
    """Create the application with fresh storage and the mock billing provider."""
    return create_app(
        settings=app_settings,
        storage=MemoryStorage(),
        billing_provider=MockBillingProvider(),
    )


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client; entering it runs startup, which seeds demo data."""
    with TestClient(app) as client:
        yield client
