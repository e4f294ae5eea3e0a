"""
Unit Tests for Configuration Settings

Tests the settings loading, validation, default values and the tracer
configuration built from them.
"""

import pytest
from pydantic import ValidationError

from errtrace.core.config.settings import Settings, get_settings, reload_settings
from errtrace.core.exceptions import ConfigurationError
from errtrace.core.tracing import DebuggerLaunchBreaker, NullDebugBreaker, TraceConfig


@pytest.mark.unit
class TestSettingsInitialization:
    """Test Settings class initialization and validation."""

    def test_settings_defaults(self, clean_env):
        """Test release-mode defaults."""
        settings = Settings()

        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == "json"
        assert settings.TRACE_DEBUG is False
        assert settings.TRACE_BREAK_ON_EXCEPTION_TYPES == []

    def test_settings_has_required_attribute_groups(self, clean_env):
        """Test that Settings exposes the nested views."""
        settings = Settings()

        assert settings.logging.LOG_LEVEL == "INFO"
        assert settings.tracing.TRACE_DEBUG is False

    def test_log_level_is_normalized(self, clean_env):
        """Test that lower-case log levels are accepted."""
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level_rejected(self, clean_env):
        """Test that unknown log levels fail validation."""
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="LOUD")

    def test_invalid_log_format_rejected(self, clean_env):
        """Test that only json and console formats are accepted."""
        with pytest.raises(ValidationError):
            Settings(LOG_FORMAT="xml")

    def test_break_types_must_be_dotted(self, clean_env):
        """Test that bare class names are rejected."""
        with pytest.raises(ValidationError):
            Settings(TRACE_BREAK_ON_EXCEPTION_TYPES=["KeyError"])


@pytest.mark.unit
class TestSettingsEnvironment:
    """Environment variable loading."""

    def test_env_overrides(self, clean_env):
        """Test that environment variables are picked up on reload."""
        clean_env.setenv("TRACE_DEBUG", "true")
        clean_env.setenv("TRACE_BREAK_ON_EXCEPTION_TYPES", '["builtins.KeyError"]')
        clean_env.setenv("LOG_FORMAT", "console")

        settings = reload_settings()

        assert settings.TRACE_DEBUG is True
        assert settings.TRACE_BREAK_ON_EXCEPTION_TYPES == ["builtins.KeyError"]
        assert settings.LOG_FORMAT == "console"

        clean_env.delenv("TRACE_DEBUG")
        clean_env.delenv("TRACE_BREAK_ON_EXCEPTION_TYPES")
        clean_env.delenv("LOG_FORMAT")
        reload_settings()

    def test_get_settings_is_singleton(self):
        """Test that get_settings returns the cached instance."""
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestTraceConfigFromSettings:
    """TraceConfig construction."""

    def test_release_config(self, clean_env):
        """Test that default settings produce a release configuration."""
        config = TraceConfig.from_settings(Settings())

        assert config.debug is False
        assert isinstance(config.debug_breaker, NullDebugBreaker)

    def test_debug_config_resolves_types(self, clean_env):
        """Test that dotted paths are resolved into the breaker."""
        settings = Settings(
            TRACE_DEBUG=True,
            TRACE_BREAK_ON_EXCEPTION_TYPES=["builtins.LookupError", "builtins.TimeoutError"],
        )
        config = TraceConfig.from_settings(settings)

        assert config.debug is True
        assert isinstance(config.debug_breaker, DebuggerLaunchBreaker)
        assert config.debug_breaker.exception_types == (LookupError, TimeoutError)

    def test_types_ignored_without_debug(self, clean_env):
        """Test that watch lists are inert when debug is off."""
        settings = Settings(TRACE_BREAK_ON_EXCEPTION_TYPES=["builtins.KeyError"])
        config = TraceConfig.from_settings(settings)

        assert isinstance(config.debug_breaker, NullDebugBreaker)

    def test_unresolvable_type_fails_fast(self, clean_env):
        """Test that a bad type path fails at configuration time."""
        settings = Settings(TRACE_DEBUG=True, TRACE_BREAK_ON_EXCEPTION_TYPES=["builtins.Nope"])

        with pytest.raises(ConfigurationError):
            TraceConfig.from_settings(settings)

    def test_config_is_immutable(self):
        """Test that TraceConfig cannot be modified after construction."""
        config = TraceConfig()

        with pytest.raises(AttributeError):
            config.debug = True
