"""
Pytest Configuration and Shared Test Fixtures

This module provides pytest configuration and reusable fixtures for all tests.
All fixtures defined here are automatically available to all test files.
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Add project root to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def clean_env(monkeypatch):
    """Remove tracing and logging variables so Settings sees defaults."""
    for name in ("LOG_LEVEL", "LOG_FORMAT", "TRACE_DEBUG", "TRACE_BREAK_ON_EXCEPTION_TYPES"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# ============================================================================
# Tracer Fixtures
# ============================================================================


@pytest.fixture
def recording_sink():
    """In-memory sink that keeps every record written to it."""
    from errtrace.core.tracing.sink import RecordingTraceSink

    return RecordingTraceSink()


@pytest.fixture
def tracer(recording_sink):
    """Release-mode tracer writing to the recording sink."""
    from errtrace.core.tracing import ExceptionTracer

    return ExceptionTracer("test.source", sink=recording_sink)


@pytest.fixture
def mock_breaker():
    """Debug breaker double that records the exceptions it is handed."""
    return MagicMock(return_value=None)


@pytest.fixture
def debug_tracer(recording_sink, mock_breaker):
    """Debug-mode tracer whose debug-break gate is a MagicMock."""
    from errtrace.core.tracing import ExceptionTracer, TraceConfig

    config = TraceConfig(debug=True, debug_breaker=mock_breaker)
    return ExceptionTracer("test.debug", sink=recording_sink, config=config)
