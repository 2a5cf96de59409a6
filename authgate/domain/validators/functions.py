"""Stock validators.

Each factory returns a validator callable (context, token) -> Result.
Validators are pure: they never raise for a bad token and never touch the
request beyond reading it.
"""

from collections.abc import Collection, Iterable, Mapping, Sequence
from typing import Any

from authgate.core.enums import ErrorCode
from authgate.core.errors import ValidationError, ValidationFailure
from authgate.core.result import Failure, Result, Success
from authgate.domain.protocols.validator_protocol import ValidatorProtocol
from authgate.domain.value_objects import Token

_OK: Result[None, ValidationError] = Success(value=None)


def allow_all() -> ValidatorProtocol:
    """Validator that accepts every token.

    Use it to register a scheme that needs no checks beyond authentication.
    """

    def check(context: Any, token: Token, /) -> Result[None, ValidationError]:
        return _OK

    return check


def valid_type(allowed_types: Collection[str]) -> ValidatorProtocol:
    """Validator requiring the token type to be one of allowed_types.

    Args:
        allowed_types: Accepted token types (exact match).

    Example:
        >>> check = valid_type({"jwt"})
        >>> check(request, Token(type="basic", principal="joe"))
        Failure(error=ValidationFailure(code=<ErrorCode.INVALID_TYPE: ...>, ...))
    """
    allowed = frozenset(allowed_types)

    def check(context: Any, token: Token, /) -> Result[None, ValidationError]:
        if token.type not in allowed:
            return Failure(
                error=ValidationFailure(
                    code=ErrorCode.INVALID_TYPE,
                    message="invalid token type",
                    details={"token_type": token.type},
                )
            )
        return _OK

    return check


def non_empty_type() -> ValidatorProtocol:
    """Validator requiring a non-empty token type."""

    def check(context: Any, token: Token, /) -> Result[None, ValidationError]:
        if not token.type:
            return Failure(
                error=ValidationFailure(
                    code=ErrorCode.EMPTY_TYPE,
                    message="empty token type",
                )
            )
        return _OK

    return check


def non_empty_principal() -> ValidatorProtocol:
    """Validator requiring a non-empty principal."""

    def check(context: Any, token: Token, /) -> Result[None, ValidationError]:
        if not token.principal:
            return Failure(
                error=ValidationFailure(
                    code=ErrorCode.EMPTY_PRINCIPAL,
                    message="empty principal",
                )
            )
        return _OK

    return check


def attribute_contains(
    keys: Sequence[str],
    expected: Iterable[Any],
    *,
    any_match: bool = True,
) -> ValidatorProtocol:
    """Validator checking a list-valued token attribute.

    The attribute is located by walking keys through nested mappings, e.g.
    ("capabilities",) or ("realm_access", "roles").

    Args:
        keys: Path to the attribute inside token.attributes.
        expected: Values to look for in the attribute list.
        any_match: When True, one expected value is enough. When False,
            every expected value must be present.

    Returns:
        Validator callable.
    """
    path = tuple(keys)
    wanted = tuple(expected)
    key_path = ".".join(path)

    def check(context: Any, token: Token, /) -> Result[None, ValidationError]:
        value: Any = token.attributes
        for key in path:
            if not isinstance(value, Mapping) or key not in value:
                return Failure(
                    error=ValidationFailure(
                        code=ErrorCode.ATTRIBUTE_NOT_FOUND,
                        message="attribute not found",
                        details={"attribute": key_path},
                    )
                )
            value = value[key]

        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            return Failure(
                error=ValidationFailure(
                    code=ErrorCode.ATTRIBUTE_NOT_LIST,
                    message="attribute is not a list",
                    details={"attribute": key_path},
                )
            )

        present = list(value)
        matches = [item in present for item in wanted]
        if (any_match and any(matches)) or (not any_match and all(matches)):
            return _OK
        return Failure(
            error=ValidationFailure(
                code=ErrorCode.ATTRIBUTE_MISMATCH,
                message="attribute does not contain expected values",
                details={"attribute": key_path},
            )
        )

    return check
