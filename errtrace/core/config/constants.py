"""
System Constants and Enumerations

This module defines the constants and enumerations shared by the tracing
and formatting layers.

Architectural Decision: Centralized constants for maintainability
- Single source of truth for size limits and marker keys
- Type-safe enums for trace levels and sink channels
"""

from enum import Enum, IntEnum

# ============================================================================
# Trace Levels
# ============================================================================


class TraceLevel(IntEnum):
    """
    Severity of a traced exception.

    Ordered from most to least severe, so ``level <= TraceLevel.ERROR``
    selects everything that goes to the error channel.
    """

    CRITICAL = 1
    ERROR = 2
    WARNING = 3
    INFORMATIONAL = 4
    VERBOSE = 5


class TraceChannel(str, Enum):
    """Channels accepted by a trace sink."""

    ERROR = "error"
    WARNING = "warning"


# ============================================================================
# Size Limits
# ============================================================================

# Fallback call stack captured for exceptions that were never raised
MAX_STACK_TRACE_LENGTH = 2000

# String arguments longer than this are cut before template substitution
MAX_FORMAT_ARGUMENT_LENGTH = 1024
TRUNCATED_ARGUMENT_LENGTH = 1021

ELLIPSIS = "..."

# ============================================================================
# Annotation Bag
# ============================================================================

# Attribute on the exception instance holding the annotation bag
TRACE_DATA_ATTRIBUTE = "_errtrace_data"

# Bag key recording the catch site of a handled exception
HANDLED_AT_KEY = "handled_at"

# Prefix of every record written for a traced exception
THROWING_MESSAGE_PREFIX = "An Exception is being thrown: "
