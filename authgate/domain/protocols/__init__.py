"""Domain protocols (structural interfaces).

Usage:
    from authgate.domain.protocols import LoggerProtocol, ValidationChainProtocol
"""

from authgate.domain.protocols.logger_protocol import LoggerProtocol
from authgate.domain.protocols.validator_protocol import (
    ValidationChainProtocol,
    ValidatorProtocol,
)

__all__ = ["LoggerProtocol", "ValidationChainProtocol", "ValidatorProtocol"]
