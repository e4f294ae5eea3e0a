"""
Exception Module

Structured exception hierarchy for errtrace, organized by theme.

Module Structure:
-----------------
- **base.py**: TraceError base class + ConfigurationError
- **argument.py**: Argument validation exceptions
- **lifecycle.py**: Use-after-close exceptions

Usage:
------
```python
from errtrace.core.exceptions import ArgumentNullError, ObjectDisposedError
```
"""

# Base exception
from errtrace.core.exceptions.base import ConfigurationError, TraceError

# Argument exceptions
from errtrace.core.exceptions.argument import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
)

# Lifecycle exceptions
from errtrace.core.exceptions.lifecycle import ObjectDisposedError

__all__ = [
    # Base
    "TraceError",
    "ConfigurationError",
    # Argument
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    # Lifecycle
    "ObjectDisposedError",
]
