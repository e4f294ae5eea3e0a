"""
Trace Sinks

A trace sink receives one ``(channel, message)`` record per traced exception.
The default sink writes through structlog; the recording sink keeps records
in memory for tests and diagnostics.
"""

import threading
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from errtrace.core.config.constants import TraceChannel
from errtrace.core.logging import get_logger


@runtime_checkable
class TraceSink(Protocol):
    """Destination for traced exception records."""

    def write(self, channel: TraceChannel, message: str, activity: str | None = None) -> None:
        ...


class StructlogTraceSink:
    """
    Write trace records to a structlog logger named after the event source.

    Usage:
        sink = StructlogTraceSink("amqp.link")
        sink.write(TraceChannel.ERROR, "An Exception is being thrown: ...")
    """

    def __init__(self, event_source_name: str):
        self.event_source_name = event_source_name
        self._logger = get_logger(event_source_name)

    def write(self, channel: TraceChannel, message: str, activity: str | None = None) -> None:
        fields = {"event_source": self.event_source_name}
        if activity:
            fields["activity_id"] = activity

        if channel is TraceChannel.ERROR:
            self._logger.error(message, **fields)
        else:
            self._logger.warning(message, **fields)


@dataclass(frozen=True)
class TraceRecord:
    """A single record captured by RecordingTraceSink."""

    channel: TraceChannel
    message: str
    activity: str | None = None


class RecordingTraceSink:
    """Thread-safe in-memory sink."""

    def __init__(self):
        self._records: list[TraceRecord] = []
        self._lock = threading.Lock()

    def write(self, channel: TraceChannel, message: str, activity: str | None = None) -> None:
        with self._lock:
            self._records.append(TraceRecord(channel, message, activity))

    @property
    def records(self) -> list[TraceRecord]:
        with self._lock:
            return list(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
