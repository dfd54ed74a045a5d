# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tier-based access control for gated content."""

from creative_hustle.models.common import ContentTier, UserTier

PAID_TIERS = frozenset({UserTier.PREMIUM, UserTier.LIFETIME})


class AccessDeniedError(Exception):
    """Raised when a user's tier does not unlock a content item.

    Attributes:
        content_tier: Tier required by the content.
        user_tier: Tier of the requesting user.
    """

    def __init__(self, content_tier: ContentTier, user_tier: UserTier) -> None:
        self.content_tier = ContentTier(content_tier)
        self.user_tier = UserTier(user_tier)
        super().__init__(
            f"{self.content_tier.value.capitalize()} content requires an upgrade "
            f"(current tier: {self.user_tier.value})"
        )


def is_accessible(content_tier: ContentTier | str, user_tier: UserTier | str) -> bool:
    """Check whether a user tier unlocks a content tier.

    Free content is open to everyone; anything else needs a paid tier.

    Args:
        content_tier: Tier required by the content item.
        user_tier: Tier of the user.

    Returns:
        True if the user may see the content.
    """
    if ContentTier(content_tier) == ContentTier.FREE:
        return True
    return UserTier(user_tier) in PAID_TIERS


def ensure_accessible(content_tier: ContentTier | str, user_tier: UserTier | str) -> None:
    """Raise AccessDeniedError unless ``is_accessible`` holds."""
    if not is_accessible(content_tier, user_tier):
        raise AccessDeniedError(ContentTier(content_tier), UserTier(user_tier))
