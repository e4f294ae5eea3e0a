#!/usr/bin/env python3
"""
Centralized Configuration Module using Pydantic Settings

This module provides type-safe, environment-based configuration for the
tracing layer. Everything that changes tracer behaviour between a developer
machine and production lives here.

Architectural Decision: Pydantic Settings for type safety and validation
- Environment variable loading with .env support
- Type validation at startup (fail fast on misconfiguration)
- Easy testing with override mechanisms
"""

import re
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DOTTED_PATH = re.compile(r"^[A-Za-z_][\w]*(\.[A-Za-z_][\w]*)+$")

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _check_log_level(v: str) -> str:
    if v.upper() not in VALID_LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}")
    return v.upper()


def _check_exception_paths(v: list[str]) -> list[str]:
    for path in v:
        if not _DOTTED_PATH.match(path):
            raise ValueError(
                f"TRACE_BREAK_ON_EXCEPTION_TYPES entries must be dotted paths, got {path!r}"
            )
    return v


class LoggingSettings(BaseSettings):
    """
    Logging configuration for structured logging.

    Architectural Decision: structlog for production-grade logging
    """

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: Literal["json", "console"] = Field(default="json", description="Log output format")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        return _check_log_level(v)

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)


class TracingSettings(BaseSettings):
    """
    Exception tracing configuration.

    TRACE_DEBUG is the "debug build" switch: developer trace lines and the
    debug-break gate are inert unless it is set.

    TRACE_BREAK_ON_EXCEPTION_TYPES lists exception classes by dotted path,
    e.g. ``builtins.KeyError`` or ``errtrace.core.exceptions.ArgumentError``.
    """

    TRACE_DEBUG: bool = Field(default=False, description="Enable debug-only tracing behaviour")
    TRACE_BREAK_ON_EXCEPTION_TYPES: list[str] = Field(
        default_factory=list,
        description="Exception classes that request a debugger when traced",
    )

    @field_validator("TRACE_BREAK_ON_EXCEPTION_TYPES")
    @classmethod
    def validate_exception_paths(cls, v):
        """Validate that every entry is a dotted class path."""
        return _check_exception_paths(v)

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)


class Settings(BaseSettings):
    """
    Main settings class that aggregates all configuration sections.

    Usage:
        from errtrace.core.config import get_settings

        settings = get_settings()
        log_level = settings.logging.LOG_LEVEL
        break_types = settings.tracing.TRACE_BREAK_ON_EXCEPTION_TYPES
    """

    # Logging settings
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: Literal["json", "console"] = Field(default="json", description="Log output format")

    # Tracing settings
    TRACE_DEBUG: bool = Field(default=False, description="Enable debug-only tracing behaviour")
    TRACE_BREAK_ON_EXCEPTION_TYPES: list[str] = Field(
        default_factory=list,
        description="Exception classes that request a debugger when traced",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        return _check_log_level(v)

    @field_validator("TRACE_BREAK_ON_EXCEPTION_TYPES")
    @classmethod
    def validate_exception_paths(cls, v):
        """Validate that every entry is a dotted class path."""
        return _check_exception_paths(v)

    @property
    def logging(self) -> "LoggingSettings":
        """Get logging settings."""
        return LoggingSettings(
            LOG_LEVEL=self.LOG_LEVEL,
            LOG_FORMAT=self.LOG_FORMAT,
        )

    @property
    def tracing(self) -> "TracingSettings":
        """Get tracing settings."""
        return TracingSettings(
            TRACE_DEBUG=self.TRACE_DEBUG,
            TRACE_BREAK_ON_EXCEPTION_TYPES=list(self.TRACE_BREAK_ON_EXCEPTION_TYPES),
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra environment variables
    )


# Global settings instance (singleton pattern)
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global settings instance (singleton).

    Returns:
        Settings: Global settings instance
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reload_settings() -> Settings:
    """
    Reload settings (useful for testing).

    Returns:
        Settings: New settings instance
    """
    global _settings
    _settings = Settings()
    return _settings
