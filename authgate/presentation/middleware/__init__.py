"""Request-scoped context accessors and the enforcer middleware."""

from authgate.presentation.middleware.context import (
    credential_from_context,
    logger_from_context,
    set_credential,
    set_logger,
)
from authgate.presentation.middleware.enforcer import (
    Accepted,
    Enforcer,
    EnforcerBuilder,
    EnforcerMiddleware,
    Outcome,
    Rejected,
)

__all__ = [
    "Accepted",
    "Enforcer",
    "EnforcerBuilder",
    "EnforcerMiddleware",
    "Outcome",
    "Rejected",
    "credential_from_context",
    "logger_from_context",
    "set_credential",
    "set_logger",
]
