"""Request-scoped context accessors.

The authentication stage stores the credential (and optionally a
request-scoped logger) on request.state. Starlette shares that state with
every downstream middleware and the endpoint, so the enforcer reads what the
authenticator wrote.

Usage:
    # authentication middleware
    set_credential(request, Credential(scheme=scheme, token=token))

    # downstream
    credential, ok = credential_from_context(request)
"""

from starlette.requests import Request

from authgate.domain.protocols.logger_protocol import LoggerProtocol
from authgate.domain.value_objects import Credential

_CREDENTIAL_KEY = "authgate_credential"
_LOGGER_KEY = "authgate_logger"


def set_credential(request: Request, credential: Credential) -> None:
    """Attach the authenticated credential to the request."""
    setattr(request.state, _CREDENTIAL_KEY, credential)


def credential_from_context(request: Request) -> tuple[Credential | None, bool]:
    """Return the request's credential and whether one is present."""
    credential = getattr(request.state, _CREDENTIAL_KEY, None)
    if not isinstance(credential, Credential):
        return None, False
    return credential, True


def set_logger(request: Request, logger: LoggerProtocol) -> None:
    """Attach a request-scoped logger (e.g. bound with a trace_id)."""
    setattr(request.state, _LOGGER_KEY, logger)


def logger_from_context(request: Request) -> LoggerProtocol | None:
    """Return the request-scoped logger, or None if none was attached."""
    return getattr(request.state, _LOGGER_KEY, None)
