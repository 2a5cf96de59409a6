"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods with structured context
- Exception details on error/critical
- Context binding
- Renderer and level selection
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from authgate.infrastructure.logging.console_adapter import ConsoleAdapter

MODULE = "authgate.infrastructure.logging.console_adapter.structlog"


@pytest.fixture
def mock_structlog():
    with patch(MODULE) as mock_structlog:
        mock_structlog.get_logger.return_value = MagicMock()
        yield mock_structlog


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    def test_debug_logs_message_with_context(self, mock_structlog):
        adapter = ConsoleAdapter()
        adapter.debug("authentication accepted by enforcer", scheme="Bearer")

        mock_structlog.get_logger.return_value.debug.assert_called_once_with(
            "authentication accepted by enforcer",
            scheme="Bearer",
        )

    def test_info_and_warning_pass_context(self, mock_structlog):
        adapter = ConsoleAdapter()
        adapter.info("Info message", request_id="abc-123")
        adapter.warning("Warning message", value=100)

        mock_logger = mock_structlog.get_logger.return_value
        mock_logger.info.assert_called_once_with("Info message", request_id="abc-123")
        mock_logger.warning.assert_called_once_with("Warning message", value=100)

    def test_error_without_exception(self, mock_structlog):
        adapter = ConsoleAdapter()
        adapter.error("no authentication found")

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "no authentication found"
        )

    def test_error_with_exception_adds_error_fields(self, mock_structlog):
        adapter = ConsoleAdapter()
        adapter.error("chain failed", error=RuntimeError("boom"), scheme="Bearer")

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "chain failed",
            scheme="Bearer",
            error_type="RuntimeError",
            error_message="boom",
        )

    def test_critical_with_exception_adds_error_fields(self, mock_structlog):
        adapter = ConsoleAdapter()
        adapter.critical("down", error=ValueError("bad"))

        mock_structlog.get_logger.return_value.critical.assert_called_once_with(
            "down",
            error_type="ValueError",
            error_message="bad",
        )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter(self, mock_structlog):
        adapter = ConsoleAdapter()
        bound_logger = MagicMock()
        mock_structlog.get_logger.return_value.bind.return_value = bound_logger

        bound = adapter.bind(trace_id="t-1")
        bound.info("hello")

        assert bound is not adapter
        mock_structlog.get_logger.return_value.bind.assert_called_once_with(trace_id="t-1")
        bound_logger.info.assert_called_once_with("hello")

    def test_with_context_is_bind(self, mock_structlog):
        adapter = ConsoleAdapter()

        adapter.with_context(app="authgate")

        mock_structlog.get_logger.return_value.bind.assert_called_once_with(app="authgate")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer_when_use_json(self, mock_structlog):
        ConsoleAdapter(use_json=True)

        mock_structlog.processors.JSONRenderer.assert_called_once()
        mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self, mock_structlog):
        ConsoleAdapter()

        mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
        mock_structlog.processors.JSONRenderer.assert_not_called()

    def test_level_filter(self, mock_structlog):
        ConsoleAdapter(level="debug")

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(logging.DEBUG)
