"""LoggerProtocol definition for structured logging.

The enforcer reports every request outcome to a LoggerProtocol (the
diagnostic sink). Implementations MUST keep logs structured (message plus
key-value context) and MUST NOT log token values.

Log Levels:
    - DEBUG: request accepted
    - ERROR: request rejected
    - INFO / WARNING / CRITICAL: available to collaborators

Usage:
    logger: LoggerProtocol = get_logger()
    logger.error("no rules found for authorization", scheme="Bearer")

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.debug("authentication accepted by enforcer")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Implementations need not inherit from this class (PEP 544 structural
    subtyping); any object with the same call signatures is compatible.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
