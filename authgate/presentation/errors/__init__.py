"""RFC 7807 error response schemas and the rejection response writer.

Exports:
    ErrorDetail: One validation message in a problem response
    ProblemDetails: RFC 7807 compliant error response schema
    write_response: Serialize a rejection with its status code and error
"""

from authgate.presentation.errors.problem_details import ErrorDetail, ProblemDetails
from authgate.presentation.errors.response_writer import write_response

__all__ = ["ErrorDetail", "ProblemDetails", "write_response"]
