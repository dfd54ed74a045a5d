# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for application settings."""

import pytest
from pydantic import SecretStr

from creative_hustle.core.config import (
    AuthSettings,
    BillingSettings,
    CORSSettings,
    RateLimitSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)


class TestSubsettings:
    """Tests for the individual settings groups."""

    def test_auth_defaults(self, monkeypatch):
        monkeypatch.delenv("AUTH_DEFAULT_USER_ID", raising=False)
        monkeypatch.delenv("AUTH_ADMIN_USER_IDS", raising=False)

        auth = AuthSettings()

        assert auth.default_user_id == 1
        assert auth.user_header == "X-User-Id"
        assert auth.admin_user_ids == [1]

    def test_auth_from_environment(self, monkeypatch):
        monkeypatch.setenv("AUTH_DEFAULT_USER_ID", "7")
        monkeypatch.setenv("AUTH_ADMIN_USER_IDS", "[7, 8]")

        auth = AuthSettings()

        assert auth.default_user_id == 7
        assert auth.admin_user_ids == [7, 8]

    def test_billing_not_configured_without_key(self):
        assert BillingSettings(secret_key=None).is_configured is False
        assert BillingSettings(secret_key=SecretStr("")).is_configured is False

    def test_billing_configured_with_key(self):
        billing = BillingSettings(secret_key=SecretStr("sk_test_123"))

        assert billing.is_configured is True
        assert "sk_test_123" not in repr(billing)

    def test_billing_from_environment(self, monkeypatch):
        monkeypatch.setenv("STRIPE_PRICE_ID", "price_123")
        monkeypatch.setenv("STRIPE_CURRENCY", "eur")

        billing = BillingSettings()

        assert billing.price_id == "price_123"
        assert billing.currency == "eur"

    def test_rate_limit_from_environment(self, monkeypatch):
        monkeypatch.setenv("RATE_LIMIT_BILLING", "3/minute")

        assert RateLimitSettings().billing == "3/minute"

    def test_cors_origins_list(self):
        cors = CORSSettings(origins="http://a.test, http://b.test,,")

        assert cors.origins_list == ["http://a.test", "http://b.test"]


class TestSettingsValidation:
    """Tests for production validation."""

    def test_production_rejects_trusted_user_header(self):
        with pytest.raises(ValueError, match="AUTH_ALLOW_USER_HEADER"):
            Settings(
                environment="production",
                auth=AuthSettings(allow_user_header=True),
                billing=BillingSettings(secret_key=None),
            )

    def test_production_requires_price_with_billing_key(self):
        with pytest.raises(ValueError, match="STRIPE_PRICE_ID"):
            Settings(
                environment="production",
                auth=AuthSettings(allow_user_header=False),
                billing=BillingSettings(
                    secret_key=SecretStr("sk_live_123"),
                    price_id="price_default",
                ),
            )

    def test_production_accepts_safe_configuration(self):
        settings = Settings(
            environment="production",
            debug=False,
            auth=AuthSettings(allow_user_header=False),
            billing=BillingSettings(secret_key=SecretStr("sk_live_123"), price_id="price_pro"),
        )

        assert settings.is_production is True
        assert settings.is_development is False

    def test_development_allows_defaults(self):
        settings = Settings(environment="development")

        assert settings.is_development is True


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_cached_until_cleared(self):
        clear_settings_cache()
        first = get_settings()

        assert get_settings() is first

        clear_settings_cache()
        assert get_settings() is not first
        clear_settings_cache()
