"""Fallback behavior when no rules are registered for a scheme."""

from enum import Enum


class NotFoundBehavior(str, Enum):
    """What the enforcer does when a credential's scheme has no rules.

    DENY rejects the request with 403. PERMIT forwards it without running
    any validation, which supports rolling policies out one scheme at a time.
    """

    DENY = "deny"
    PERMIT = "permit"
