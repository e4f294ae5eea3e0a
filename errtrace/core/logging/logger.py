#!/usr/bin/env python3
"""
Structured Logging Module using structlog

This module provides the structured logging backend that trace sinks write
through:
- Activity ID correlation across a logical operation
- JSON formatting for log aggregation
- Credential redaction for connection strings and SAS tokens
- Context processors for automatic field injection

Architectural Decision: structlog for production logging
- Context-aware logging with automatic field injection
- JSON output for log aggregation
- Console output for development
"""

import logging
import re
import sys
from contextvars import ContextVar
from datetime import datetime, timezone

import structlog
from structlog.types import EventDict, WrappedLogger

from errtrace.core.config.settings import get_settings

# Context variable for the current activity ID
activity_id_ctx: ContextVar[str | None] = ContextVar("activity_id", default=None)

_SECRET_PATTERNS = [
    (re.compile(r"(SharedAccessKey=)[^;\s]+", re.IGNORECASE), r"\1[REDACTED]"),
    (re.compile(r"(SharedAccessSignature\s+)\S+", re.IGNORECASE), r"\1[REDACTED]"),
    (re.compile(r"([?&]sig=)[^&\s]+", re.IGNORECASE), r"\1[REDACTED]"),
]


def add_activity_id(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add activity ID to log event from context variable.

    An explicit ``activity_id`` already present in the event wins.
    """
    if "activity_id" not in event_dict:
        activity_id = activity_id_ctx.get()
        if activity_id:
            event_dict["activity_id"] = activity_id
    return event_dict


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    return event_dict


def redact_secrets(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Redact credentials from log messages.

    Patterns redacted:
    - SharedAccessKey=... in connection strings
    - SharedAccessSignature tokens
    - sig= query parameters of SAS URIs

    Exception messages raised by the protocol stack routinely echo the
    connection string or token they failed with.
    """
    message = event_dict.get("event", "")

    if isinstance(message, str):
        for pattern, replacement in _SECRET_PATTERNS:
            message = pattern.sub(replacement, message)
        event_dict["event"] = message

    return event_dict


def add_log_level_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Upper-case the level name added by structlog."""
    if "level" in event_dict:
        event_dict["level"] = event_dict["level"].upper()
    return event_dict


def setup_logging(log_level: str | None = None, log_format: str | None = None) -> None:
    """
    Setup structured logging with structlog.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log format ('json' or 'console')
    """
    settings = get_settings()

    # Use settings if not provided
    log_level = log_level or settings.logging.LOG_LEVEL
    log_format = log_format or settings.logging.LOG_FORMAT

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s", stream=sys.stdout, level=getattr(logging, log_level.upper())
    )

    # Choose renderer based on format
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_activity_id,
            add_timestamp,
            structlog.stdlib.add_log_level,
            add_log_level_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            redact_secrets,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ or an event source name)

    Returns:
        BoundLogger: Structured logger instance
    """
    return structlog.get_logger(name)


def set_activity_id(activity_id: str | None) -> None:
    """
    Set activity ID in context for the current operation.

    Args:
        activity_id: Activity ID to set
    """
    activity_id_ctx.set(activity_id)


def get_activity_id() -> str | None:
    """
    Get current activity ID from context.

    Returns:
        Optional[str]: Current activity ID or None
    """
    return activity_id_ctx.get()


def clear_activity_id() -> None:
    """Clear activity ID from context."""
    activity_id_ctx.set(None)
