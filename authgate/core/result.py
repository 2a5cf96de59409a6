"""Result types for railway-oriented programming.

Validators report their verdict as data rather than by raising, so the
enforcer can branch on it with structural pattern matching.

Usage:
    def check_principal(token: Token) -> Result[None, ValidationError]:
        if not token.principal:
            return Failure(error=ValidationFailure(
                code=ErrorCode.EMPTY_PRINCIPAL,
                message="empty principal",
            ))
        return Success(value=None)

    match check_principal(token):
        case Success():
            ...
        case Failure(error=error):
            print(error.messages())
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying a value (often None for checks)."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying the error that caused it."""

    error: E


Result: TypeAlias = Success[T] | Failure[E]
