"""Credential value objects produced by the authentication stage.

The authentication stage parses the Authorization header, verifies it, and
attaches a Credential to the request context. The enforcer only uses the
scheme as a lookup key and hands the token to the validation chain; it never
inspects the token itself.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, NewType

AuthorizationScheme = NewType("AuthorizationScheme", str)
"""Declared credential category, e.g. "Bearer" or "Basic". Compared exactly."""


@dataclass(frozen=True, slots=True, kw_only=True)
class Token:
    """Authenticated token.

    Attributes:
        type: Token type reported by the authenticator (e.g. "jwt", "basic").
        principal: Identity the token was issued to.
        attributes: Claims or other metadata, possibly nested mappings.
    """

    type: str
    principal: str
    attributes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True, kw_only=True)
class Credential:
    """Scheme and token pair attached to a request. Immutable per request."""

    scheme: AuthorizationScheme
    token: Token
