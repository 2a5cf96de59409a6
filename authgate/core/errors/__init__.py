"""Core errors package.

Usage:
    from authgate.core.errors import ValidationFailure, AggregateValidationError
"""

from authgate.core.errors.validation_error import (
    AggregateValidationError,
    ValidationError,
    ValidationFailure,
)

__all__ = [
    "AggregateValidationError",
    "ValidationError",
    "ValidationFailure",
]
