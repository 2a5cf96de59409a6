"""Domain value objects.

Usage:
    from authgate.domain.value_objects import AuthorizationScheme, Credential, Token
"""

from authgate.domain.value_objects.credential import (
    AuthorizationScheme,
    Credential,
    Token,
)

__all__ = ["AuthorizationScheme", "Credential", "Token"]
