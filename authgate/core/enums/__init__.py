"""Core enums package.

Usage:
    from authgate.core.enums import ErrorCode, Environment, NotFoundBehavior
"""

from authgate.core.enums.environment import Environment
from authgate.core.enums.error_code import ErrorCode
from authgate.core.enums.not_found_behavior import NotFoundBehavior

__all__ = ["Environment", "ErrorCode", "NotFoundBehavior"]
