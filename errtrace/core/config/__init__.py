"""
Configuration Module

Centralized, type-safe configuration for the tracing layer.

Components:
-----------
- **settings.py**: Pydantic-based configuration with environment variable loading
- **constants.py**: Trace levels, sink channels, size limits and marker keys

Environment Variables:
---------------------
```bash
LOG_LEVEL=INFO
LOG_FORMAT=json

TRACE_DEBUG=true
TRACE_BREAK_ON_EXCEPTION_TYPES='["builtins.KeyError"]'
```

Testing:
-------
```python
import os
from errtrace.core.config import reload_settings

os.environ["TRACE_DEBUG"] = "true"
settings = reload_settings()
assert settings.tracing.TRACE_DEBUG is True
```
"""

from errtrace.core.config.constants import (
    ELLIPSIS,
    HANDLED_AT_KEY,
    MAX_FORMAT_ARGUMENT_LENGTH,
    MAX_STACK_TRACE_LENGTH,
    THROWING_MESSAGE_PREFIX,
    TRACE_DATA_ATTRIBUTE,
    TRUNCATED_ARGUMENT_LENGTH,
    TraceChannel,
    TraceLevel,
)
from errtrace.core.config.settings import Settings, get_settings, reload_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "reload_settings",
    # Enums
    "TraceLevel",
    "TraceChannel",
    # Limits
    "MAX_STACK_TRACE_LENGTH",
    "MAX_FORMAT_ARGUMENT_LENGTH",
    "TRUNCATED_ARGUMENT_LENGTH",
    "ELLIPSIS",
    # Annotation bag keys
    "TRACE_DATA_ATTRIBUTE",
    "HANDLED_AT_KEY",
    "THROWING_MESSAGE_PREFIX",
]
