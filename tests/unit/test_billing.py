# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for billing providers."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest
from pydantic import SecretStr

from creative_hustle.core.config import BillingSettings
from creative_hustle.domains.billing import (
    BillingAPIError,
    MockBillingProvider,
    StripeBillingProvider,
    get_billing_provider,
    to_minor_units,
)


def _mock_session(status: int, payload: dict):
    """Build a patched aiohttp.ClientSession returning one canned response."""
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=payload)

    request_ctx = MagicMock()
    request_ctx.__aenter__ = AsyncMock(return_value=response)
    request_ctx.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.post = MagicMock(return_value=request_ctx)

    session_ctx = MagicMock()
    session_ctx.__aenter__ = AsyncMock(return_value=session)
    session_ctx.__aexit__ = AsyncMock(return_value=False)
    return session_ctx, session


@pytest.fixture
def stripe_provider():
    """Create a Stripe provider pointed at a fake base URL."""
    return StripeBillingProvider(
        secret_key="sk_test_123",
        currency="usd",
        api_base="https://stripe.test/v1/",
    )


class TestToMinorUnits:
    """Tests for currency conversion."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (Decimal("29.99"), 2999),
            (Decimal("10"), 1000),
            (Decimal("0.005"), 1),
            (Decimal("0.004"), 0),
        ],
    )
    def test_conversion(self, amount, expected):
        assert to_minor_units(amount) == expected


class TestMockBillingProvider:
    """Tests for the mock provider."""

    @pytest.mark.asyncio
    async def test_payment_intent(self):
        intent = await MockBillingProvider().create_payment_intent(Decimal("29.99"))

        assert intent.client_secret == "pi_mock_client_secret_for_demo"
        assert intent.amount == 2999

    @pytest.mark.asyncio
    async def test_subscription(self):
        subscription = await MockBillingProvider().create_subscription("cus_1", "price_1")

        assert subscription.subscription_id == "sub_mock_subscription_id"
        assert subscription.client_secret == "seti_mock_client_secret_for_demo"

    @pytest.mark.asyncio
    async def test_customer_id_is_deterministic(self):
        provider = MockBillingProvider()

        first = await provider.create_customer("Maya@Example.com", "maya")
        second = await provider.create_customer("maya@example.com", "maya")
        other = await provider.create_customer("sam@example.com", "sam")

        assert first.startswith("cus_mock_")
        assert first == second
        assert first != other


class TestGetBillingProvider:
    """Tests for provider selection."""

    def test_mock_without_secret_key(self):
        provider = get_billing_provider(BillingSettings(secret_key=None))

        assert isinstance(provider, MockBillingProvider)
        assert provider.name == "mock"

    def test_stripe_with_secret_key(self):
        provider = get_billing_provider(
            BillingSettings(secret_key=SecretStr("sk_test_123"), currency="eur")
        )

        assert isinstance(provider, StripeBillingProvider)
        assert provider.currency == "eur"
        assert provider.name == "stripe"


class TestStripeBillingProvider:
    """Tests for the Stripe REST client."""

    @pytest.mark.asyncio
    async def test_create_payment_intent(self, stripe_provider):
        session_ctx, session = _mock_session(
            200, {"id": "pi_123", "client_secret": "pi_123_secret_abc", "amount": 2999}
        )

        with patch("aiohttp.ClientSession", return_value=session_ctx):
            intent = await stripe_provider.create_payment_intent(Decimal("29.99"))

        assert intent.client_secret == "pi_123_secret_abc"
        assert intent.amount == 2999

        args, kwargs = session.post.call_args
        assert args[0] == "https://stripe.test/v1/payment_intents"
        assert kwargs["data"] == {"amount": "2999", "currency": "usd"}
        assert kwargs["headers"]["Authorization"] == "Bearer sk_test_123"

    @pytest.mark.asyncio
    async def test_create_customer(self, stripe_provider):
        session_ctx, session = _mock_session(200, {"id": "cus_123"})

        with patch("aiohttp.ClientSession", return_value=session_ctx):
            customer_id = await stripe_provider.create_customer("maya@example.com", "maya")

        assert customer_id == "cus_123"
        assert session.post.call_args.kwargs["data"] == {
            "email": "maya@example.com",
            "name": "maya",
        }

    @pytest.mark.asyncio
    async def test_create_subscription_extracts_client_secret(self, stripe_provider):
        session_ctx, session = _mock_session(
            200,
            {
                "id": "sub_123",
                "latest_invoice": {
                    "id": "in_123",
                    "payment_intent": {"id": "pi_456", "client_secret": "pi_456_secret"},
                },
            },
        )

        with patch("aiohttp.ClientSession", return_value=session_ctx):
            subscription = await stripe_provider.create_subscription("cus_123", "price_pro")

        assert subscription.subscription_id == "sub_123"
        assert subscription.client_secret == "pi_456_secret"

        data = session.post.call_args.kwargs["data"]
        assert data["customer"] == "cus_123"
        assert data["items[0][price]"] == "price_pro"
        assert data["payment_behavior"] == "default_incomplete"
        assert data["expand[]"] == "latest_invoice.payment_intent"

    @pytest.mark.asyncio
    async def test_subscription_without_expanded_invoice(self, stripe_provider):
        session_ctx, _ = _mock_session(200, {"id": "sub_123", "latest_invoice": "in_123"})

        with patch("aiohttp.ClientSession", return_value=session_ctx):
            subscription = await stripe_provider.create_subscription("cus_123", "price_pro")

        assert subscription.client_secret is None

    @pytest.mark.asyncio
    async def test_error_response_raises(self, stripe_provider):
        session_ctx, _ = _mock_session(
            402,
            {"error": {"type": "card_error", "code": "card_declined", "message": "Your card was declined."}},
        )

        with patch("aiohttp.ClientSession", return_value=session_ctx):
            with pytest.raises(BillingAPIError) as exc_info:
                await stripe_provider.create_payment_intent(Decimal("5"))

        assert exc_info.value.status_code == 402
        assert exc_info.value.message == "Your card was declined."
        assert exc_info.value.details["code"] == "card_declined"
        assert str(exc_info.value).startswith("[402]")

    @pytest.mark.asyncio
    async def test_connection_error_raises(self, stripe_provider):
        session_ctx, session = _mock_session(200, {})
        session.post.side_effect = aiohttp.ClientConnectionError("connection refused")

        with patch("aiohttp.ClientSession", return_value=session_ctx):
            with pytest.raises(BillingAPIError) as exc_info:
                await stripe_provider.create_customer("maya@example.com", "maya")

        assert exc_info.value.status_code is None
        assert "Failed to connect to Stripe API" in exc_info.value.message
        assert exc_info.value.details["error_type"] == "ClientConnectionError"
