# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for tier-based access control."""

import pytest

from creative_hustle.domains.access import (
    AccessDeniedError,
    ensure_accessible,
    is_accessible,
)
from creative_hustle.models.common import ContentTier, UserTier


class TestIsAccessible:
    """Tests for the access predicate."""

    @pytest.mark.parametrize(
        "content_tier,user_tier,expected",
        [
            (ContentTier.FREE, UserTier.FREE, True),
            (ContentTier.FREE, UserTier.PREMIUM, True),
            (ContentTier.FREE, UserTier.LIFETIME, True),
            (ContentTier.PREMIUM, UserTier.FREE, False),
            (ContentTier.PREMIUM, UserTier.PREMIUM, True),
            (ContentTier.PREMIUM, UserTier.LIFETIME, True),
        ],
    )
    def test_truth_table(self, content_tier, user_tier, expected):
        assert is_accessible(content_tier, user_tier) is expected

    def test_accepts_plain_strings(self):
        assert is_accessible("premium", "lifetime") is True
        assert is_accessible("premium", "free") is False

    def test_unknown_tier_rejected(self):
        with pytest.raises(ValueError):
            is_accessible("gold", "free")


class TestEnsureAccessible:
    """Tests for ensure_accessible."""

    def test_allows_accessible_content(self):
        ensure_accessible(ContentTier.PREMIUM, UserTier.PREMIUM)

    def test_raises_for_locked_content(self):
        with pytest.raises(AccessDeniedError) as exc_info:
            ensure_accessible(ContentTier.PREMIUM, UserTier.FREE)

        assert exc_info.value.content_tier == ContentTier.PREMIUM
        assert exc_info.value.user_tier == UserTier.FREE
        assert "requires an upgrade" in str(exc_info.value)
