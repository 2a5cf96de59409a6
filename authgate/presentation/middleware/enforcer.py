"""Authorization enforcer middleware.

Runs after authentication and before the endpoint. For each request it:

1. Resolves a logger from the request (or uses the process-wide default).
2. Reads the credential the authentication stage attached.
3. Looks up the validation chain registered for the credential's scheme.
4. Runs the chain, or applies the not-found behavior when there is none.
5. Forwards the request, or rejects it.

Outcomes:
    | Condition                              | Response             |
    |----------------------------------------|----------------------|
    | No credential                          | 403, empty body      |
    | No rules for scheme, behavior DENY     | 403, empty body      |
    | No rules for scheme, behavior PERMIT   | forwarded            |
    | Validation chain fails                 | 401, problem details |
    | Validation chain succeeds              | forwarded            |

Exactly one log event is emitted per request: error level for a
rejection, debug level for a forwarded request.

Usage:
    from authgate import EnforcerBuilder, EnforcerMiddleware, NotFoundBehavior

    enforcer = (
        EnforcerBuilder.from_settings()
        .with_rules("Bearer", ValidatorChain(valid_type({"jwt"})))
        .build()
    )
    app.add_middleware(EnforcerMiddleware, enforcer=enforcer)
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, TypeAlias

from starlette import status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from authgate.core import container
from authgate.core.config import Settings, get_settings
from authgate.core.enums import ErrorCode, NotFoundBehavior
from authgate.core.errors import ValidationError, ValidationFailure
from authgate.core.result import Failure, Success
from authgate.domain.protocols.logger_protocol import LoggerProtocol
from authgate.domain.protocols.validator_protocol import ValidationChainProtocol
from authgate.domain.value_objects import AuthorizationScheme
from authgate.presentation.errors import write_response
from authgate.presentation.middleware.context import (
    credential_from_context,
    logger_from_context,
)

LoggerResolver: TypeAlias = Callable[[Request], LoggerProtocol | None]


@dataclass(frozen=True, slots=True)
class Accepted:
    """Forward the request to the next handler unchanged."""


@dataclass(frozen=True, slots=True, kw_only=True)
class Rejected:
    """Reject the request.

    Attributes:
        status_code: HTTP status to send.
        error: Validation error to serialize; None means an empty body.
    """

    status_code: int
    error: ValidationError | None = None


Outcome: TypeAlias = Accepted | Rejected


def _error_context(
    scheme: AuthorizationScheme, error: ValidationError
) -> dict[str, Any]:
    # Details stay nested: validator-chosen keys must never reach the sink as
    # keyword arguments (structlog reserves "event", LoggerProtocol "error").
    context: dict[str, Any] = {
        "scheme": scheme,
        "error_code": error.code.value,
        "errors": error.messages(),
    }
    if error.details:
        context["details"] = dict(error.details)
    return context


class Enforcer:
    """Per-request authorization decision.

    Build instances with EnforcerBuilder. The rules mapping is frozen at
    construction, so one Enforcer is safe to share across concurrent
    requests without locking.
    """

    def __init__(
        self,
        *,
        not_found_behavior: NotFoundBehavior,
        rules: Mapping[AuthorizationScheme, ValidationChainProtocol],
        get_logger: LoggerResolver,
        default_logger: LoggerProtocol,
        problem_base_url: str,
    ) -> None:
        self._not_found_behavior = not_found_behavior
        self._rules: Mapping[AuthorizationScheme, ValidationChainProtocol] = (
            MappingProxyType(dict(rules))
        )
        self._get_logger = get_logger
        self._default_logger = default_logger
        self._problem_base_url = problem_base_url

    @property
    def not_found_behavior(self) -> NotFoundBehavior:
        return self._not_found_behavior

    @property
    def rules(self) -> Mapping[AuthorizationScheme, ValidationChainProtocol]:
        """Read-only view of the registered scheme to chain mapping."""
        return self._rules

    async def enforce(self, request: Request) -> Outcome:
        """Decide whether the request may proceed.

        Never raises for a bad or missing credential, and converts an
        exception raised by a validation chain into a 401 rejection.

        Args:
            request: Incoming request carrying the authentication context.

        Returns:
            Accepted, or Rejected with the status code and optional error.
        """
        logger = self._get_logger(request) or self._default_logger

        credential, ok = credential_from_context(request)
        if not ok or credential is None:
            logger.error("no authentication found")
            return Rejected(status_code=status.HTTP_403_FORBIDDEN)

        chain = self._rules.get(credential.scheme)
        if chain is None:
            if self._not_found_behavior == NotFoundBehavior.PERMIT:
                logger.debug(
                    "authentication accepted by enforcer",
                    scheme=credential.scheme,
                    behavior=self._not_found_behavior.value,
                    reason="no rules found for authorization",
                )
                return Accepted()
            logger.error(
                "no rules found for authorization",
                scheme=credential.scheme,
                behavior=self._not_found_behavior.value,
            )
            return Rejected(status_code=status.HTTP_403_FORBIDDEN)

        exc: Exception | None = None
        try:
            result = await chain.evaluate(request, credential.token)
        except Exception as e:
            exc = e
            result = Failure(
                error=ValidationFailure(
                    code=ErrorCode.VALIDATOR_EXCEPTION,
                    message="validation chain raised an exception",
                )
            )
        if not isinstance(result, (Success, Failure)):
            result = Failure(
                error=ValidationFailure(
                    code=ErrorCode.VALIDATOR_EXCEPTION,
                    message="validation chain returned no result",
                )
            )

        match result:
            case Failure(error=error):
                logger.error(
                    "credential rejected by validation chain",
                    error=exc,
                    **_error_context(credential.scheme, error),
                )
                return Rejected(status_code=status.HTTP_401_UNAUTHORIZED, error=error)
            case _:
                logger.debug(
                    "authentication accepted by enforcer",
                    scheme=credential.scheme,
                )
                return Accepted()

    def respond(self, request: Request, outcome: Rejected) -> Response:
        """Build the HTTP response for a rejection."""
        if outcome.error is None:
            return Response(status_code=outcome.status_code)
        return write_response(
            request,
            outcome.status_code,
            outcome.error,
            base_url=self._problem_base_url,
        )

    def decorate(self, app: ASGIApp) -> ASGIApp:
        """Wrap an ASGI app so every request passes through this enforcer."""
        return EnforcerMiddleware(app, enforcer=self)


class EnforcerMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that applies an Enforcer to each request.

    Must be installed inside (after) the authentication middleware, since
    Starlette runs the last added middleware first.
    """

    def __init__(self, app: ASGIApp, *, enforcer: Enforcer) -> None:
        super().__init__(app)
        self._enforcer = enforcer

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Forward accepted requests; answer rejected ones directly.

        Args:
            request: Incoming request.
            call_next: Next handler in the middleware chain.

        Returns:
            Response: Downstream response, or the rejection response.
        """
        outcome = await self._enforcer.enforce(request)
        match outcome:
            case Rejected():
                return self._enforcer.respond(request, outcome)
            case Accepted():
                return await call_next(request)


class EnforcerBuilder:
    """Collects construction-time options for an Enforcer.

    Defaults: not-found behavior DENY, no rules, loggers resolved from the
    request context, the container's process-wide logger as fallback.

    Example:
        >>> enforcer = (
        ...     EnforcerBuilder()
        ...     .with_not_found_behavior(NotFoundBehavior.PERMIT)
        ...     .with_rules("Bearer", bearer_chain)
        ...     .with_rules("Basic", basic_chain)
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._not_found_behavior = NotFoundBehavior.DENY
        self._rules: dict[AuthorizationScheme, ValidationChainProtocol] = {}
        self._get_logger: LoggerResolver = logger_from_context
        self._default_logger: LoggerProtocol | None = None
        self._problem_base_url: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "EnforcerBuilder":
        """Start a builder seeded from application settings.

        Args:
            settings: Settings to read; defaults to get_settings().
        """
        settings = settings or get_settings()
        return (
            cls()
            .with_not_found_behavior(settings.enforcer_not_found_behavior)
            .with_problem_base_url(settings.api_base_url)
        )

    def with_not_found_behavior(self, behavior: NotFoundBehavior) -> "EnforcerBuilder":
        self._not_found_behavior = NotFoundBehavior(behavior)
        return self

    def with_rules(
        self, scheme: str, chain: ValidationChainProtocol
    ) -> "EnforcerBuilder":
        """Register the chain for a scheme, replacing any earlier registration."""
        self._rules[AuthorizationScheme(scheme)] = chain
        return self

    def with_logger(self, get_logger: LoggerResolver) -> "EnforcerBuilder":
        """Override how the per-request logger is resolved."""
        self._get_logger = get_logger
        return self

    def with_default_logger(self, logger: LoggerProtocol) -> "EnforcerBuilder":
        """Logger used when the resolver yields none."""
        self._default_logger = logger
        return self

    def with_problem_base_url(self, base_url: str) -> "EnforcerBuilder":
        self._problem_base_url = base_url.rstrip("/")
        return self

    def build(self) -> Enforcer:
        """Create the Enforcer. Later changes to the builder do not affect it."""
        default_logger = self._default_logger
        if default_logger is None:
            default_logger = container.get_logger()

        problem_base_url = self._problem_base_url
        if problem_base_url is None:
            problem_base_url = get_settings().api_base_url

        return Enforcer(
            not_found_behavior=self._not_found_behavior,
            rules=self._rules,
            get_logger=self._get_logger,
            default_logger=default_logger,
            problem_base_url=problem_base_url,
        )
