"""
Exception Tracer

Single choke-point through which a subsystem logs the exceptions it raises
or lets propagate. Each tracer is identified by an event source name; an
exception is written to the sink at most once per identity, however many
layers it unwinds through.

Usage:
    trace = ExceptionTracer("amqp.link")

    if address is None:
        raise trace.argument_null("address")

    try:
        session.attach(link)
    except TimeoutError as e:
        raise trace.as_warning(e)
"""

import threading
from typing import Any, Callable, TypeVar

from errtrace.core.config.constants import (
    HANDLED_AT_KEY,
    THROWING_MESSAGE_PREFIX,
    TraceChannel,
    TraceLevel,
)
from errtrace.core.exceptions import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    ObjectDisposedError,
)
from errtrace.core.formatting import CommonResources, get_string
from errtrace.core.logging import get_logger
from errtrace.core.tracing.annotations import annotation_bag, is_traced_by, mark_traced
from errtrace.core.tracing.config import RELEASE, TraceConfig
from errtrace.core.tracing.details import format_details
from errtrace.core.tracing.sink import StructlogTraceSink, TraceSink

logger = get_logger(__name__)

E = TypeVar("E", bound=BaseException)


class ExceptionTracer:
    """
    Tag, log and optionally construct exceptions for one event source.

    Attributes:
        event_source_name: Tracer identity, used as sink label and bag marker
    """

    def __init__(
        self,
        event_source_name: str,
        sink: TraceSink | None = None,
        config: TraceConfig | None = None,
    ):
        self._event_source_name = event_source_name
        self._sink = sink if sink is not None else StructlogTraceSink(event_source_name)
        self._config = config or RELEASE

    @property
    def event_source_name(self) -> str:
        return self._event_source_name

    @property
    def config(self) -> TraceConfig:
        return self._config

    # ------------------------------------------------------------------
    # Tracing
    # ------------------------------------------------------------------

    def trace(self, exception: E, level: TraceLevel, activity: str | None = None) -> E:
        """
        Log the exception once for this tracer and return it unchanged.

        The first call for a given instance marks it in its annotation bag,
        writes CRITICAL/ERROR records to the error channel and WARNING
        records to the warning channel, then runs the debug-break gate.
        Later calls return immediately.

        Args:
            exception: Exception to trace
            level: Severity deciding the sink channel
            activity: Optional activity ID attached to the record

        Returns:
            The same exception instance
        """
        if is_traced_by(exception, self._event_source_name):
            return exception

        mark_traced(exception, self._event_source_name)

        if level <= TraceLevel.ERROR:
            self._write(TraceChannel.ERROR, exception, activity)
        elif level == TraceLevel.WARNING:
            self._write(TraceChannel.WARNING, exception, activity)
        elif self._config.debug:
            self._debug_line(
                "exception_traced",
                level=level.name,
                activity_id=activity,
                details=lambda: format_details(exception),
            )

        self._break_on_exception(exception)
        return exception

    def as_error(self, exception: E, activity: str | None = None) -> E:
        return self.trace(exception, TraceLevel.ERROR, activity)

    def as_warning(self, exception: E, activity: str | None = None) -> E:
        return self.trace(exception, TraceLevel.WARNING, activity)

    def as_information(self, exception: E, activity: str | None = None) -> E:
        return self.trace(exception, TraceLevel.INFORMATIONAL, activity)

    def as_verbose(self, exception: E, activity: str | None = None) -> E:
        return self.trace(exception, TraceLevel.VERBOSE, activity)

    def trace_handled(
        self, exception: BaseException, catch_location: str, activity: str | None = None
    ) -> None:
        """
        Record that an exception was caught and swallowed at catch_location.

        Args:
            exception: The handled exception
            catch_location: Name of the catch site, e.g. "AmqpLink.OnReceive"
            activity: Optional activity ID
        """
        annotation_bag(exception)[HANDLED_AT_KEY] = catch_location

        if self._config.debug:
            self._debug_line(
                "exception_handled",
                thread_id=threading.get_ident(),
                catch_location=catch_location,
                exception_type=type(exception).__qualname__,
                activity_id=activity,
                details=lambda: format_details(exception),
            )

        self._break_on_exception(exception)

    # ------------------------------------------------------------------
    # Construct-and-trace helpers
    # ------------------------------------------------------------------

    def argument(self, param_name: str, message: str) -> ArgumentError:
        return self.as_error(ArgumentError(message, param_name=param_name))

    def argument_null(self, param_name: str, message: str | None = None) -> ArgumentNullError:
        return self.as_error(ArgumentNullError(param_name, message))

    def argument_null_or_empty(self, param_name: str) -> ArgumentError:
        return self.argument(
            param_name, get_string(CommonResources.ARGUMENT_NULL_OR_EMPTY, param_name)
        )

    def argument_null_or_white_space(self, param_name: str) -> ArgumentError:
        return self.argument(
            param_name, get_string(CommonResources.ARGUMENT_NULL_OR_WHITE_SPACE, param_name)
        )

    def argument_out_of_range(
        self, param_name: str, actual_value: Any, message: str
    ) -> ArgumentOutOfRangeError:
        return self.as_error(ArgumentOutOfRangeError(param_name, actual_value, message))

    def object_disposed(self, message: str) -> ObjectDisposedError:
        """
        Build an ObjectDisposedError carrying only a message.

        The object name is left as None: the closed object is usually
        internal and naming its type tells the caller nothing they can act on.
        """
        return self.as_error(ObjectDisposedError(message, object_name=None))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _write(self, channel: TraceChannel, exception: BaseException, activity: str | None) -> None:
        try:
            self._sink.write(channel, THROWING_MESSAGE_PREFIX + format_details(exception), activity)
        except Exception:  # noqa: BLE001
            # Sink failures are dropped; the caller is about to raise the original exception
            pass

    def _break_on_exception(self, exception: BaseException) -> None:
        try:
            self._config.debug_breaker(exception)
        except Exception:  # noqa: BLE001
            pass

    def _debug_line(self, event: str, details: Callable[[], str], **fields: Any) -> None:
        try:
            logger.debug(event, event_source=self._event_source_name, details=details(), **fields)
        except Exception:  # noqa: BLE001
            pass

    def __repr__(self) -> str:
        return f"ExceptionTracer(event_source_name={self._event_source_name!r})"
