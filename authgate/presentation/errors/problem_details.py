"""RFC 7807 Problem Details for HTTP APIs.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual validation error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual validation error.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message

    Examples:
        >>> error = ErrorDetail(code="invalid_type", message="invalid token type")
    """

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Primary error message
        instance: Request path
        errors: Primary error followed by any secondary errors
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/multiple_validation_errors",
        ...     title="Unauthorized",
        ...     status=401,
        ...     detail="multiple validation errors",
        ...     instance="/api/v1/devices",
        ...     errors=[
        ...         ErrorDetail(code="multiple_validation_errors", message="multiple validation errors"),
        ...         ErrorDetail(code="empty_principal", message="empty principal"),
        ...         ErrorDetail(code="invalid_type", message="invalid token type"),
        ...     ],
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/invalid_type"],
    )
    title: str = Field(..., description="Short, human-readable summary", examples=["Unauthorized"])
    status: int = Field(..., description="HTTP status code", examples=[401])
    detail: str = Field(..., description="Primary error message", examples=["invalid token type"])
    instance: str = Field(..., description="Request path", examples=["/api/v1/devices"])
    errors: list[ErrorDetail] | None = Field(None, description="Ordered validation errors")
    trace_id: str | None = Field(None, description="Request trace ID for debugging")
