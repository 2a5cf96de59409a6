"""Validation chains and stock validators.

Usage:
    from authgate.domain.validators import ValidatorChain, valid_type, non_empty_principal

    chain = ValidatorChain(valid_type({"jwt"}), non_empty_principal())
"""

from authgate.domain.validators.chain import ValidatorChain
from authgate.domain.validators.functions import (
    allow_all,
    attribute_contains,
    non_empty_principal,
    non_empty_type,
    valid_type,
)

__all__ = [
    "ValidatorChain",
    "allow_all",
    "attribute_contains",
    "non_empty_principal",
    "non_empty_type",
    "valid_type",
]
