"""Composition root for application-scoped collaborators.

Application-scoped objects are @lru_cache() decorated factory functions.
Nothing here is imported implicitly by the enforcer: callers pass the
process-wide logger to EnforcerBuilder, which only falls back to
get_logger() when it was given none.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from authgate.core.config import get_settings

if TYPE_CHECKING:
    from authgate.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the process-wide default logger.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from authgate.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    adapter = ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
    return adapter.bind(app=settings.app_name, environment=settings.environment.value)
