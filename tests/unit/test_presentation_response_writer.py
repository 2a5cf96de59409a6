"""Unit tests for the rejection response writer."""

import json

import pytest

from authgate.core.enums import ErrorCode
from authgate.core.errors import AggregateValidationError, ValidationFailure
from authgate.presentation.errors import write_response
from tests.conftest import make_request

BASE_URL = "https://auth.example.com"

EXPIRED = ValidationFailure(code=ErrorCode.VALIDATION_FAILED, message="expired")
AGGREGATE = AggregateValidationError(
    causes=(
        ValidationFailure(code=ErrorCode.EMPTY_PRINCIPAL, message="empty principal"),
        ValidationFailure(code=ErrorCode.INVALID_TYPE, message="invalid token type"),
    )
)


@pytest.mark.unit
class TestProblemDetailsResponse:
    def test_single_error(self):
        response = write_response(make_request("/devices"), 401, EXPIRED, base_url=BASE_URL)

        body = json.loads(response.body)
        assert response.status_code == 401
        assert body == {
            "type": f"{BASE_URL}/errors/validation_failed",
            "title": "Unauthorized",
            "status": 401,
            "detail": "expired",
            "instance": "/devices",
            "errors": [{"code": "validation_failed", "message": "expired"}],
        }

    def test_aggregate_lists_primary_then_causes(self):
        response = write_response(make_request(), 401, AGGREGATE, base_url=BASE_URL)

        body = json.loads(response.body)
        assert body["detail"] == "multiple validation errors"
        assert [item["message"] for item in body["errors"]] == [
            "multiple validation errors",
            "empty principal",
            "invalid token type",
        ]

    def test_trace_id_from_header(self):
        request = make_request(headers={"X-Trace-Id": "trace-123"})

        response = write_response(request, 401, EXPIRED, base_url=BASE_URL)

        assert json.loads(response.body)["trace_id"] == "trace-123"


@pytest.mark.unit
class TestContentNegotiation:
    def test_plain_text_when_only_text_accepted(self):
        request = make_request(headers={"Accept": "text/plain"})

        response = write_response(request, 401, AGGREGATE, base_url=BASE_URL)

        assert response.media_type == "text/plain"
        assert response.body.decode() == (
            "multiple validation errors\nempty principal\ninvalid token type"
        )

    @pytest.mark.parametrize(
        "accept", ["", "*/*", "application/json", "text/plain, application/json"]
    )
    def test_json_otherwise(self, accept):
        request = make_request(headers={"Accept": accept})

        response = write_response(request, 401, EXPIRED, base_url=BASE_URL)

        assert response.media_type == "application/json"
        assert json.loads(response.body)["detail"] == "expired"
