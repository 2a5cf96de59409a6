"""Ordered validation chain.

ValidatorChain runs every member in order and collects all failures rather
than stopping at the first one, so a rejection reports everything that was
wrong with the token.

An empty chain fails. Registering a scheme without any validators is treated
as a configuration mistake, not as "allow everything"; use allow_all() to
express that explicitly.
"""

import inspect
from typing import Any

from authgate.core.enums import ErrorCode
from authgate.core.errors import (
    AggregateValidationError,
    ValidationError,
    ValidationFailure,
)
from authgate.core.result import Failure, Result, Success
from authgate.domain.protocols.validator_protocol import ValidatorProtocol
from authgate.domain.value_objects import Token


class ValidatorChain:
    """Validators registered for one authorization scheme.

    Chains are callable, so one chain can be a member of another.

    Example:
        >>> chain = ValidatorChain(non_empty_type(), non_empty_principal())
        >>> result = await chain.evaluate(request, token)
    """

    def __init__(self, *validators: ValidatorProtocol) -> None:
        self._validators: tuple[ValidatorProtocol, ...] = validators

    def __len__(self) -> int:
        return len(self._validators)

    def __repr__(self) -> str:
        return f"ValidatorChain(size={len(self._validators)})"

    async def __call__(
        self, context: Any, token: Token, /
    ) -> Result[None, ValidationError]:
        return await self.evaluate(context, token)

    async def evaluate(
        self, context: Any, token: Token
    ) -> Result[None, ValidationError]:
        """Run all validators and combine their verdicts.

        Args:
            context: Request-scoped context passed to each validator.
            token: Token of the authenticated credential.

        Returns:
            Success(value=None) if every validator passed. Failure with the
            single error if exactly one failed, or an AggregateValidationError
            listing each error in order if several failed.
        """
        if not self._validators:
            return Failure(
                error=ValidationFailure(
                    code=ErrorCode.EMPTY_VALIDATION_CHAIN,
                    message="no validators configured",
                )
            )

        errors: list[ValidationError] = []
        for validator in self._validators:
            result = validator(context, token)
            if inspect.isawaitable(result):
                result = await result
            match result:
                case Failure(error=error):
                    errors.append(error)
                case Success():
                    pass

        if not errors:
            return Success(value=None)
        if len(errors) == 1:
            return Failure(error=errors[0])
        return Failure(error=AggregateValidationError(causes=tuple(errors)))
