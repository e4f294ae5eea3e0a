"""
Object Lifecycle Exceptions

All exceptions related to using an object after it has been closed.
"""

from errtrace.core.exceptions.base import TraceError


class ObjectDisposedError(TraceError, RuntimeError):
    """
    Raised when an operation is attempted on a closed or disposed object.

    The tracer always leaves object_name as None and relies on the message.
    Common causes:
    - Sending on a link after it was closed
    - Reusing a session after the connection was aborted
    """

    def __init__(self, message: str, object_name: str | None = None):
        self.object_name = object_name
        super().__init__(message)

    def __str__(self) -> str:
        if self.object_name:
            return f"{self.message} (Object name: '{self.object_name}')"
        return self.message
