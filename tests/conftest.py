"""Pytest configuration and shared fixtures.

Provides:
1. Async tests run under pytest-asyncio (asyncio_mode = auto)
2. RecordingLogger: LoggerProtocol implementation that keeps events in memory
3. Request and credential builders for enforcer tests
"""

from dataclasses import dataclass, field
from typing import Any

import pytest
from starlette.requests import Request

from authgate.core.result import Failure, Success
from authgate.domain.value_objects import AuthorizationScheme, Credential, Token


@dataclass
class LogEvent:
    """One recorded log call."""

    level: str
    message: str
    context: dict[str, Any]
    error: Exception | None = None


@dataclass
class RecordingLogger:
    """In-memory logger implementing LoggerProtocol structurally."""

    events: list[LogEvent] = field(default_factory=list)
    bound: dict[str, Any] = field(default_factory=dict)

    def _record(
        self, level: str, message: str, context: dict[str, Any], error: Exception | None = None
    ) -> None:
        self.events.append(LogEvent(level, message, {**self.bound, **context}, error))

    def debug(self, message: str, /, **context: Any) -> None:
        self._record("debug", message, context)

    def info(self, message: str, /, **context: Any) -> None:
        self._record("info", message, context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._record("warning", message, context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._record("error", message, context, error)

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._record("critical", message, context, error)

    def bind(self, **context: Any) -> "RecordingLogger":
        # Shares the event list so bound loggers can be asserted on via the parent.
        return RecordingLogger(events=self.events, bound={**self.bound, **context})

    def with_context(self, **context: Any) -> "RecordingLogger":
        return self.bind(**context)

    @property
    def levels(self) -> list[str]:
        return [event.level for event in self.events]


class StaticChain:
    """Validation chain returning a fixed result and recording its calls."""

    def __init__(self, result: Success | Failure) -> None:
        self.result = result
        self.calls: list[tuple[Any, Token]] = []

    async def evaluate(self, context: Any, token: Token) -> Success | Failure:
        self.calls.append((context, token))
        return self.result


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Fresh in-memory logger."""
    return RecordingLogger()


def make_request(
    path: str = "/resource",
    headers: dict[str, str] | None = None,
) -> Request:
    """Build a bare Starlette Request without an ASGI server."""
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "server": ("testserver", 80),
        "root_path": "",
        "path": path,
        "raw_path": path.encode(),
        "query_string": b"",
        "headers": [
            (key.lower().encode(), value.encode())
            for key, value in (headers or {}).items()
        ],
    }
    return Request(scope)


def make_credential(
    scheme: str = "Bearer",
    token_type: str = "jwt",
    principal: str = "joe",
    attributes: dict[str, Any] | None = None,
) -> Credential:
    """Build a Credential with sensible defaults."""
    return Credential(
        scheme=AuthorizationScheme(scheme),
        token=Token(type=token_type, principal=principal, attributes=attributes or {}),
    )

