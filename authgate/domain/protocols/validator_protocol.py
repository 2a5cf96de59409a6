"""Validator and validation chain protocols.

A validator is a callable taking the request-scoped context and the
credential's token and returning a Result. It may be synchronous or a
coroutine function (e.g. a remote introspection call).

A validation chain is the unit registered per authorization scheme. The
enforcer depends only on ValidationChainProtocol.evaluate(); how a chain
combines its members is up to the chain.
"""

from collections.abc import Awaitable
from typing import Any, Protocol

from authgate.core.errors import ValidationError
from authgate.core.result import Result
from authgate.domain.value_objects import Token


class ValidatorProtocol(Protocol):
    """A single authorization check."""

    def __call__(
        self, context: Any, token: Token, /
    ) -> Result[None, ValidationError] | Awaitable[Result[None, ValidationError]]:
        """Check the token.

        Args:
            context: Request-scoped context (the Starlette Request over HTTP).
            token: Token of the authenticated credential.

        Returns:
            Success(value=None) when the check passes, Failure otherwise.
        """
        ...


class ValidationChainProtocol(Protocol):
    """Ordered validators registered for one authorization scheme."""

    async def evaluate(
        self, context: Any, token: Token
    ) -> Result[None, ValidationError]:
        """Run the chain against a token.

        Args:
            context: Request-scoped context.
            token: Token of the authenticated credential.

        Returns:
            Success(value=None) or Failure carrying a ValidationError.
        """
        ...
