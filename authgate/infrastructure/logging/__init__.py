"""Logging adapters implementing LoggerProtocol."""

from authgate.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
