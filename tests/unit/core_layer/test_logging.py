"""
Unit Tests for Logging Module

Tests logger creation, activity context, processors and the structlog sink.
"""

from unittest.mock import MagicMock

import pytest
import structlog

from errtrace.core.config.constants import TraceChannel
from errtrace.core.logging.logger import (
    add_activity_id,
    add_log_level_name,
    add_timestamp,
    clear_activity_id,
    get_activity_id,
    get_logger,
    redact_secrets,
    set_activity_id,
    setup_logging,
)
from errtrace.core.tracing.sink import RecordingTraceSink, StructlogTraceSink, TraceSink


@pytest.mark.unit
class TestLoggerCreation:
    """Test logger creation and configuration."""

    def test_get_logger_returns_logger_instance(self):
        """Test that get_logger returns a logger instance."""
        logger = get_logger(__name__)
        assert logger is not None
        assert hasattr(logger, "error")
        assert hasattr(logger, "warning")
        assert hasattr(logger, "debug")


@pytest.mark.unit
class TestActivityContext:
    """Test activity ID context management."""

    def test_set_and_clear(self):
        """Test that set_activity_id stores and clear_activity_id removes the ID."""
        set_activity_id("act-1")
        assert get_activity_id() == "act-1"

        clear_activity_id()
        assert get_activity_id() is None

    def test_processor_injects_context_activity(self):
        """Test that add_activity_id copies the context value into the event."""
        set_activity_id("act-2")
        try:
            event = add_activity_id(None, "error", {"event": "x"})
        finally:
            clear_activity_id()

        assert event["activity_id"] == "act-2"

    def test_explicit_activity_wins(self):
        """Test that an activity passed with the event is not overwritten."""
        set_activity_id("from-context")
        try:
            event = add_activity_id(None, "error", {"event": "x", "activity_id": "explicit"})
        finally:
            clear_activity_id()

        assert event["activity_id"] == "explicit"

    def test_no_activity_no_field(self):
        """Test that nothing is added without an activity."""
        clear_activity_id()
        assert "activity_id" not in add_activity_id(None, "error", {"event": "x"})


@pytest.mark.unit
class TestProcessors:
    """Test custom structlog processors."""

    def test_timestamp_is_iso_utc(self):
        """Test that add_timestamp writes a Z-suffixed ISO timestamp."""
        event = add_timestamp(None, "info", {})
        assert event["timestamp"].endswith("Z")
        assert "T" in event["timestamp"]

    def test_level_name_upper_cased(self):
        """Test that the level name is upper-cased."""
        assert add_log_level_name(None, "error", {"level": "error"})["level"] == "ERROR"

    def test_redacts_shared_access_key(self):
        """Test that connection-string keys are masked."""
        message = "Endpoint=sb://ns.example.net/;SharedAccessKeyName=root;SharedAccessKey=abc123=="
        event = redact_secrets(None, "error", {"event": message})

        assert "abc123" not in event["event"]
        assert "SharedAccessKeyName=root" in event["event"]
        assert "SharedAccessKey=[REDACTED]" in event["event"]

    def test_redacts_sas_token(self):
        """Test that SAS tokens and sig parameters are masked."""
        message = "Auth failed: SharedAccessSignature sr=amqps%3A%2F%2Fns&sig=SECRETSIG&se=1&skn=root"
        event = redact_secrets(None, "error", {"event": message})

        assert "SECRETSIG" not in event["event"]

    def test_non_string_event_untouched(self):
        """Test that non-string events pass through."""
        payload = {"a": 1}
        assert redact_secrets(None, "info", {"event": payload})["event"] is payload


@pytest.mark.unit
class TestStructlogTraceSink:
    """Test the structlog-backed trace sink."""

    def test_error_channel_logs_error(self):
        """Test that ERROR records go to logger.error."""
        sink = StructlogTraceSink("amqp.link")
        sink._logger = MagicMock()

        sink.write(TraceChannel.ERROR, "boom", activity="act-9")

        sink._logger.error.assert_called_once_with(
            "boom", event_source="amqp.link", activity_id="act-9"
        )

    def test_warning_channel_logs_warning(self):
        """Test that WARNING records go to logger.warning."""
        sink = StructlogTraceSink("amqp.link")
        sink._logger = MagicMock()

        sink.write(TraceChannel.WARNING, "careful")

        sink._logger.warning.assert_called_once_with("careful", event_source="amqp.link")
        sink._logger.error.assert_not_called()

    def test_sinks_satisfy_protocol(self):
        """Test that both sinks implement TraceSink."""
        assert isinstance(StructlogTraceSink("x"), TraceSink)
        assert isinstance(RecordingTraceSink(), TraceSink)


@pytest.mark.unit
class TestRecordingTraceSink:
    """Test the in-memory sink."""

    def test_records_and_clear(self):
        """Test that writes are kept in order and can be cleared."""
        sink = RecordingTraceSink()
        sink.write(TraceChannel.ERROR, "one")
        sink.write(TraceChannel.WARNING, "two", activity="a")

        assert [r.message for r in sink.records] == ["one", "two"]
        assert sink.records[1].activity == "a"

        sink.clear()
        assert sink.records == []


@pytest.mark.unit
class TestSetupLogging:
    """Test structlog configuration."""

    @pytest.mark.parametrize("log_format", ["json", "console"])
    def test_setup_configures_structlog(self, log_format):
        """Test that setup_logging configures structlog for both formats."""
        try:
            setup_logging(log_level="WARNING", log_format=log_format)

            assert structlog.is_configured()
            processors = structlog.get_config()["processors"]
            assert add_activity_id in processors
            assert redact_secrets in processors
        finally:
            structlog.reset_defaults()
