"""
Debug-Break Gate

Developer-only hook that requests a debugger when an exception of a watched
type is traced. Release configurations use NullDebugBreaker, so nothing here
runs in production.
"""

import importlib
import sys
from typing import Callable, Iterable, Protocol

from errtrace.core.exceptions import ConfigurationError
from errtrace.core.logging import get_logger

logger = get_logger(__name__)


class DebugBreaker(Protocol):
    """Strategy invoked after an exception has been traced."""

    def __call__(self, exception: BaseException) -> None:
        ...


class NullDebugBreaker:
    """No-op breaker used when debug behaviour is off."""

    def __call__(self, exception: BaseException) -> None:
        return None

    def __repr__(self) -> str:
        return "NullDebugBreaker()"


def is_debugger_attached() -> bool:
    """Best-effort check for a trace-function or sys.monitoring debugger."""
    if sys.gettrace() is not None:
        return True

    monitoring = getattr(sys, "monitoring", None)
    if monitoring is not None:
        return monitoring.get_tool(monitoring.DEBUGGER_ID) is not None

    return False


def launch_debugger() -> None:
    """Hand control to whatever debugger sys.breakpointhook is bound to."""
    sys.breakpointhook()


class DebuggerLaunchBreaker:
    """
    Request a debugger for exceptions of the configured types.

    A type matches when the exception is an instance of it, which covers
    subclasses and ABC registrations. Nothing happens while a debugger is
    already attached, since it will see the exception on its own.

    Attributes:
        exception_types: Watched exception classes
    """

    def __init__(
        self,
        exception_types: Iterable[type[BaseException]],
        is_attached: Callable[[], bool] = is_debugger_attached,
        launch: Callable[[], None] = launch_debugger,
    ):
        self.exception_types = tuple(exception_types)
        self._is_attached = is_attached
        self._launch = launch

    def __call__(self, exception: BaseException) -> None:
        if not self.exception_types:
            return

        try:
            if isinstance(exception, self.exception_types) and not self._is_attached():
                self._launch()
        except Exception:
            # Never let the gate replace the exception being traced
            logger.debug(
                "debugger_launch_failed",
                exception_type=type(exception).__name__,
                exc_info=True,
            )

    def __repr__(self) -> str:
        names = ", ".join(t.__qualname__ for t in self.exception_types)
        return f"DebuggerLaunchBreaker(exception_types=({names}))"


def resolve_exception_type(path: str) -> type[BaseException]:
    """
    Import an exception class from its dotted path.

    Args:
        path: e.g. "builtins.KeyError" or "errtrace.core.exceptions.ArgumentError"

    Returns:
        The exception class

    Raises:
        ConfigurationError: If the path cannot be imported or is not an exception class
    """
    module_name, _, attr = path.rpartition(".")
    if not module_name:
        raise ConfigurationError(
            f"Debug-break type '{path}' is not a dotted path",
            details={"path": path},
        )

    try:
        module = importlib.import_module(module_name)
        resolved = getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise ConfigurationError.from_exception(
            e, message=f"Cannot resolve debug-break type '{path}'", path=path
        ) from e

    if not isinstance(resolved, type) or not issubclass(resolved, BaseException):
        raise ConfigurationError(
            f"Debug-break type '{path}' is not an exception class",
            details={"path": path},
        )

    return resolved


def build_debug_breaker(
    debug: bool, exception_types: Iterable[type[BaseException]] = ()
) -> DebugBreaker:
    """
    Pick the breaker strategy for a configuration.

    Returns NullDebugBreaker unless debug behaviour is on and at least one
    exception type is watched.
    """
    exception_types = tuple(exception_types)
    if debug and exception_types:
        return DebuggerLaunchBreaker(exception_types)
    return NullDebugBreaker()
