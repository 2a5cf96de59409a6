"""Machine-readable error codes for authorization failures.

Codes follow the ENTITY_REASON naming convention and are carried by
ValidationError values returned from validators.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Token shape errors
    EMPTY_TYPE = "empty_type"
    INVALID_TYPE = "invalid_type"
    EMPTY_PRINCIPAL = "empty_principal"

    # Attribute errors
    ATTRIBUTE_NOT_FOUND = "attribute_not_found"
    ATTRIBUTE_NOT_LIST = "attribute_not_list"
    ATTRIBUTE_MISMATCH = "attribute_mismatch"

    # Chain errors
    EMPTY_VALIDATION_CHAIN = "empty_validation_chain"
    MULTIPLE_VALIDATION_ERRORS = "multiple_validation_errors"
    VALIDATOR_EXCEPTION = "validator_exception"

    # Generic
    VALIDATION_FAILED = "validation_failed"
