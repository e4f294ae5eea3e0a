"""
Base Exception Class

This module contains the base exception class that all other errtrace
exceptions inherit from, plus ConfigurationError.
"""

from typing import Any


class TraceError(Exception):
    """
    Base exception for all errtrace errors.

    Attributes:
        message: Error message
        details: Additional error details (dict)

    Example:
        raise ConfigurationError(
            "Cannot resolve debug-break type",
            details={"path": "mylib.errors.Missing"}
        )
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = (details or {}).copy()
        super().__init__(self.message)

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        message: str | None = None,
        **details
    ) -> "TraceError":
        """
        Create an error of this class from another exception.

        Args:
            exc: Original exception to wrap
            message: Custom message (defaults to original exception message)
            **details: Additional context to include

        Returns:
            New instance carrying the wrapped exception's type and message
        """
        error_details = {
            "original_error": exc.__class__.__name__,
            "original_message": str(exc),
            **details
        }
        return cls(message or str(exc), details=error_details)


class ConfigurationError(TraceError):
    """Raised when tracing configuration is invalid or cannot be resolved."""
    pass
