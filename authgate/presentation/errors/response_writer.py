"""Response writer for rejected requests.

Serializes a ValidationError into an HTTP response. JSON (RFC 7807) is the
default; a client that only accepts text/plain gets the ordered messages,
one per line. Both encodings always contain the primary message.
"""

from http import HTTPStatus

from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response

from authgate.core.errors import (
    AggregateValidationError,
    ValidationError,
    ValidationFailure,
)
from authgate.presentation.errors.problem_details import ErrorDetail, ProblemDetails


def _wants_plain_text(request: Request) -> bool:
    accept = request.headers.get("accept", "").lower()
    return "text/plain" in accept and "json" not in accept and "*/*" not in accept


def _error_details(error: ValidationError) -> list[ErrorDetail]:
    primary = ErrorDetail(code=error.code.value, message=error.message)
    match error:
        case AggregateValidationError(causes=causes):
            return [primary] + [
                ErrorDetail(code=cause.code.value, message=cause.message)
                for cause in causes
            ]
        case ValidationFailure():
            return [primary]


def write_response(
    request: Request,
    status_code: int,
    error: ValidationError,
    *,
    base_url: str,
) -> Response:
    """Build the rejection response for a validation error.

    Args:
        request: Rejected request (for content negotiation and instance path).
        status_code: HTTP status to send.
        error: Error whose messages form the body.
        base_url: Base URL for the problem type URI.

    Returns:
        PlainTextResponse or JSONResponse with RFC 7807 ProblemDetails content.
    """
    if _wants_plain_text(request):
        return PlainTextResponse("\n".join(error.messages()), status_code=status_code)

    problem = ProblemDetails(
        type=f"{base_url}/errors/{error.code.value}",
        title=HTTPStatus(status_code).phrase,
        status=status_code,
        detail=error.message,
        instance=str(request.url.path),
        errors=_error_details(error),
        trace_id=request.headers.get("X-Trace-Id"),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
    )
