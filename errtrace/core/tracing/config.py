"""
Tracer Configuration

Immutable configuration handed to each ExceptionTracer at construction.
"""

from dataclasses import dataclass, field

from errtrace.core.config.settings import Settings, get_settings
from errtrace.core.tracing.debug_break import (
    DebugBreaker,
    NullDebugBreaker,
    build_debug_breaker,
    resolve_exception_type,
)


@dataclass(frozen=True)
class TraceConfig:
    """
    Debug switches for a tracer.

    Attributes:
        debug: Emit developer-only trace lines and run the debug-break gate
        debug_breaker: Strategy invoked after tracing; a no-op in release mode
    """

    debug: bool = False
    debug_breaker: DebugBreaker = field(default_factory=NullDebugBreaker)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "TraceConfig":
        """
        Build the configuration from application settings.

        Raises:
            ConfigurationError: If a debug-break type cannot be resolved
        """
        tracing = (settings or get_settings()).tracing
        exception_types = tuple(
            resolve_exception_type(path) for path in tracing.TRACE_BREAK_ON_EXCEPTION_TYPES
        )
        return cls(
            debug=tracing.TRACE_DEBUG,
            debug_breaker=build_debug_breaker(tracing.TRACE_DEBUG, exception_types),
        )


RELEASE = TraceConfig()
