"""Validation errors returned by validators and validation chains.

A ValidationError is a tagged union with two variants:

- ValidationFailure: a single cause.
- AggregateValidationError: a primary message plus the ordered causes that
  several validators in a chain reported.

Neither variant inherits from Exception. They flow through the system as
data inside Failure results and are matched structurally:

    match error:
        case AggregateValidationError(causes=causes):
            ...
        case ValidationFailure():
            ...
"""

from dataclasses import dataclass, field
from typing import TypeAlias

from authgate.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationFailure:
    """A single validation cause.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message, surfaced in the 401 body.
        details: Optional structured context, merged into the diagnostic event.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def messages(self) -> list[str]:
        """Return the ordered list of messages for this error."""
        return [self.message]

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


@dataclass(frozen=True, slots=True, kw_only=True)
class AggregateValidationError:
    """Several causes reported together by one validation chain.

    Attributes:
        code: Machine-readable error code for the aggregate.
        message: Primary message.
        causes: Secondary errors, in the order the chain reported them.
        details: Optional structured context.
    """

    code: ErrorCode = ErrorCode.MULTIPLE_VALIDATION_ERRORS
    message: str = "multiple validation errors"
    causes: tuple["ValidationError", ...] = field(default_factory=tuple)
    details: dict[str, str] | None = None

    def messages(self) -> list[str]:
        """Return the primary message followed by each cause's message."""
        return [self.message, *(cause.message for cause in self.causes)]

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


ValidationError: TypeAlias = ValidationFailure | AggregateValidationError
