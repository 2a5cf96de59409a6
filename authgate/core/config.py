"""
Configuration management using Pydantic Settings.

Type-safe configuration loaded from environment variables (and an optional
.env file). Only construction-time options live here; the enforcer exposes
no runtime reconfiguration.

Usage:
    from authgate.core.config import get_settings

    settings = get_settings()
    if settings.is_development:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from authgate.core.enums import Environment, NotFoundBehavior

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. .env file
        3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    app_name: str = Field(
        default="authgate",
        description="Application name, bound to every log event",
    )
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL used to build RFC 7807 problem type URIs",
    )
    enforcer_not_found_behavior: NotFoundBehavior = Field(
        default=NotFoundBehavior.DENY,
        description="What to do when no rules are registered for a scheme (deny, permit)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Strip trailing slash so URIs can be joined with '/'."""
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing or CI environment."""
        return self.environment in (Environment.TESTING, Environment.CI)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
