"""
Tracing Module

Exception tracer, detail rendering, trace sinks and the debug-break gate.
"""

from errtrace.core.tracing.annotations import annotation_bag, is_traced_by
from errtrace.core.tracing.config import TraceConfig
from errtrace.core.tracing.debug_break import (
    DebugBreaker,
    DebuggerLaunchBreaker,
    NullDebugBreaker,
    build_debug_breaker,
    resolve_exception_type,
)
from errtrace.core.tracing.details import (
    current_stack_trace,
    format_details,
    format_exception_slim,
)
from errtrace.core.tracing.exception_trace import ExceptionTracer
from errtrace.core.tracing.sink import (
    RecordingTraceSink,
    StructlogTraceSink,
    TraceRecord,
    TraceSink,
)

__all__ = [
    "ExceptionTracer",
    "TraceConfig",
    # Annotation bag
    "annotation_bag",
    "is_traced_by",
    # Details
    "format_details",
    "format_exception_slim",
    "current_stack_trace",
    # Sinks
    "TraceSink",
    "StructlogTraceSink",
    "RecordingTraceSink",
    "TraceRecord",
    # Debug break
    "DebugBreaker",
    "NullDebugBreaker",
    "DebuggerLaunchBreaker",
    "build_debug_breaker",
    "resolve_exception_type",
]
