"""
Argument Validation Exceptions

Exceptions built by the tracer's argument combinators. They are ValueError
subclasses so callers that only know the builtin hierarchy still catch them.
"""

from typing import Any

from errtrace.core.exceptions.base import TraceError


class ArgumentError(TraceError, ValueError):
    """
    Raised when an argument value is invalid.

    Attributes:
        param_name: Name of the offending parameter (may be None)
    """

    def __init__(self, message: str, param_name: str | None = None):
        self.param_name = param_name
        super().__init__(message)

    def __str__(self) -> str:
        if self.param_name:
            return f"{self.message} (Parameter '{self.param_name}')"
        return self.message


class ArgumentNullError(ArgumentError):
    """Raised when a required argument is None."""

    DEFAULT_MESSAGE = "Value cannot be null."

    def __init__(self, param_name: str | None = None, message: str | None = None):
        super().__init__(message or self.DEFAULT_MESSAGE, param_name=param_name)


class ArgumentOutOfRangeError(ArgumentError):
    """
    Raised when an argument lies outside its allowed range.

    Attributes:
        actual_value: The rejected value
    """

    DEFAULT_MESSAGE = "Specified argument was out of the range of valid values."

    def __init__(
        self,
        param_name: str | None = None,
        actual_value: Any = None,
        message: str | None = None,
    ):
        self.actual_value = actual_value
        super().__init__(message or self.DEFAULT_MESSAGE, param_name=param_name)

    def __str__(self) -> str:
        text = super().__str__()
        if self.actual_value is not None:
            text += f"\nActual value was {self.actual_value}."
        return text
