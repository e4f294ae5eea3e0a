"""
Core Module

Foundational components: configuration, logging, exceptions, formatting and
exception tracing.
"""

from .config import Settings, TraceChannel, TraceLevel, get_settings, reload_settings
from .exceptions import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    ConfigurationError,
    ObjectDisposedError,
    TraceError,
)
from .formatting import CommonResources, get_string, render
from .logging import (
    clear_activity_id,
    get_activity_id,
    get_logger,
    set_activity_id,
    setup_logging,
)
from .tracing import (
    ExceptionTracer,
    RecordingTraceSink,
    StructlogTraceSink,
    TraceConfig,
    TraceSink,
    format_details,
)

__all__ = [
    "Settings",
    "get_settings",
    "reload_settings",
    "TraceLevel",
    "TraceChannel",
    "setup_logging",
    "get_logger",
    "set_activity_id",
    "get_activity_id",
    "clear_activity_id",
    "TraceError",
    "ConfigurationError",
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "ObjectDisposedError",
    "CommonResources",
    "get_string",
    "render",
    "ExceptionTracer",
    "TraceConfig",
    "TraceSink",
    "StructlogTraceSink",
    "RecordingTraceSink",
    "format_details",
]
