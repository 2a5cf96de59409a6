"""authgate - authorization enforcement gate for Starlette/FastAPI services.

Usage:
    from authgate import EnforcerBuilder, EnforcerMiddleware, NotFoundBehavior
    from authgate.domain.validators import ValidatorChain, valid_type

    enforcer = (
        EnforcerBuilder()
        .with_not_found_behavior(NotFoundBehavior.DENY)
        .with_rules("Bearer", ValidatorChain(valid_type({"jwt"})))
        .build()
    )
    app.add_middleware(EnforcerMiddleware, enforcer=enforcer)
"""

from authgate.core.enums import NotFoundBehavior
from authgate.presentation.middleware.enforcer import (
    Accepted,
    Enforcer,
    EnforcerBuilder,
    EnforcerMiddleware,
    Rejected,
)

__all__ = [
    "Accepted",
    "Enforcer",
    "EnforcerBuilder",
    "EnforcerMiddleware",
    "NotFoundBehavior",
    "Rejected",
]
