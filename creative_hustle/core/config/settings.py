# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

This module provides centralized configuration management for Creative
Hustle Studio. Settings are loaded from environment variables with sensible
defaults.

The Settings class is the main entry point and aggregates all subsettings.
A singleton instance is provided via get_settings() for dependency injection.

Example:
    >>> from creative_hustle.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from functools import lru_cache
from typing import Literal, Self

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Current-user resolution configuration.

    Real authentication is not part of this service. Every request is bound
    to a user id that is either taken from a trusted header or falls back to
    a configured default.

    Attributes:
        default_user_id: User id bound to requests without an identity header.
        allow_user_header: Whether the X-User-Id header is honored.
        user_header: Name of the identity header.
        admin_user_ids: User ids allowed to call administrative endpoints.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        extra="ignore",
    )

    default_user_id: int | None = 1
    allow_user_header: bool = True
    user_header: str = "X-User-Id"
    admin_user_ids: list[int] = [1]


class BillingSettings(BaseSettings):
    """Billing provider (Stripe) configuration.

    When no secret key is configured the mock billing provider is used,
    which returns fixed demo client secrets.

    Attributes:
        secret_key: Stripe secret API key.
        price_id: Price used for premium subscriptions.
        currency: ISO currency code for one-off payments.
        api_base: Base URL of the Stripe REST API.
        timeout: Request timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="STRIPE_",
        extra="ignore",
    )

    secret_key: SecretStr | None = None
    price_id: str = "price_default"
    currency: str = "usd"
    api_base: str = "https://api.stripe.com/v1"
    timeout: int = 30

    @property
    def is_configured(self) -> bool:
        """Check whether real billing credentials are present."""
        return self.secret_key is not None and bool(self.secret_key.get_secret_value())


class RateLimitSettings(BaseSettings):
    """Rate limiting configuration.

    Attributes:
        enabled: Whether rate limiting is applied.
        billing: Limit string applied to billing endpoints.
    """

    model_config = SettingsConfigDict(
        env_prefix="RATE_LIMIT_",
        extra="ignore",
    )

    enabled: bool = True
    billing: str = "10/minute"


class CORSSettings(BaseSettings):
    """CORS configuration for API.

    Attributes:
        origins: Comma-separated list of allowed origins.
        allow_credentials: Whether to allow credentials.
        allow_methods: Allowed HTTP methods.
        allow_headers: Allowed HTTP headers.
    """

    model_config = SettingsConfigDict(
        env_prefix="CORS_",
        extra="ignore",
    )

    origins: str = "http://localhost:3000,http://localhost:5173"
    allow_credentials: bool = True
    allow_methods: list[str] = ["*"]
    allow_headers: list[str] = ["*"]

    @property
    def origins_list(self) -> list[str]:
        """Parse origins string into a list."""
        return [origin.strip() for origin in self.origins.split(",") if origin.strip()]


class APISettings(BaseSettings):
    """API server configuration.

    Attributes:
        host: Host to bind to.
        port: Port to listen on.
        reload: Whether to enable auto-reload.
    """

    model_config = SettingsConfigDict(
        env_prefix="API_",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Use get_settings() to obtain a cached singleton instance.

    Attributes:
        environment: Current environment (development, staging, production).
        debug: Enable debug mode.
        log_level: Logging level.
        seed_demo_data: Load the demo user and sample content at startup.
        auth: Current-user resolution settings.
        billing: Billing provider settings.
        rate_limit: Rate limiting settings.
        cors: CORS settings.
        api: API server settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"
    seed_demo_data: bool = True

    # Subsettings - loaded with their own env prefixes
    auth: AuthSettings = Field(default_factory=AuthSettings)
    billing: BillingSettings = Field(default_factory=BillingSettings)
    rate_limit: RateLimitSettings = Field(default_factory=RateLimitSettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)
    api: APISettings = Field(default_factory=APISettings)

    @model_validator(mode="after")
    def validate_production_settings(self) -> Self:
        """Validate that production settings are properly configured.

        Raises:
            ValueError: If running in production with insecure defaults.
        """
        if self.environment == "production":
            if self.auth.allow_user_header:
                raise ValueError(
                    "The user id header must not be trusted in production. "
                    "Set AUTH_ALLOW_USER_HEADER=false."
                )
            if self.billing.is_configured and self.billing.price_id == "price_default":
                raise ValueError(
                    "A Stripe price id is required when billing is configured. "
                    "Set STRIPE_PRICE_ID environment variable."
                )
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call clear_settings_cache() if you need to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Call this if you need to reload settings from environment.
    Useful for testing or dynamic configuration updates.
    """
    get_settings.cache_clear()
