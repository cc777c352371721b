"""Tests for settings and observability setup."""

import logging
from unittest.mock import patch

from lazy_fs.core.config import Settings
from lazy_fs.core.observability import get_tracer, setup_logging, setup_tracing


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Test default settings values."""
        for name in ("LOG_LEVEL", "OTEL_ENABLED", "OTEL_SERVICE_NAME", "TEXT_ENCODING"):
            monkeypatch.delenv(f"LAZY_FS_{name}", raising=False)

        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.otel_enabled is False
        assert settings.otel_service_name == "lazy-fs"
        assert settings.text_encoding == "utf-8"

    def test_environment_overrides(self, monkeypatch):
        """Test LAZY_FS_ variables override defaults, case-insensitively."""
        monkeypatch.setenv("LAZY_FS_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("lazy_fs_text_encoding", "latin-1")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.text_encoding == "latin-1"


class TestTracing:
    """Test tracing setup."""

    @patch("lazy_fs.core.observability.trace.set_tracer_provider")
    @patch("lazy_fs.core.observability.settings")
    def test_tracing_disabled(self, mock_settings, mock_set_provider):
        """Test no provider is installed when tracing is disabled."""
        mock_settings.otel_enabled = False

        setup_tracing()

        mock_set_provider.assert_not_called()

    @patch("lazy_fs.core.observability.trace.set_tracer_provider")
    @patch("lazy_fs.core.observability.settings")
    def test_tracing_enabled(self, mock_settings, mock_set_provider):
        """Test a provider is installed when tracing is enabled."""
        mock_settings.otel_enabled = True
        mock_settings.otel_service_name = "test-service"

        setup_tracing()

        mock_set_provider.assert_called_once()

    def test_get_tracer_spans(self):
        """Test spans can be started without an SDK provider."""
        with get_tracer("tests").start_as_current_span("span") as span:
            span.set_attribute("key", "value")


class TestLogging:
    """Test logging setup."""

    def test_setup_logging_sets_package_level(self):
        """Test the lazy_fs logger follows the requested level."""
        setup_logging("DEBUG")
        assert logging.getLogger("lazy_fs").level == logging.DEBUG

        setup_logging("WARNING")
        assert logging.getLogger("lazy_fs").level == logging.WARNING

    @patch("lazy_fs.core.observability.structlog.configure")
    @patch("lazy_fs.core.observability.structlog.is_configured", return_value=True)
    def test_existing_structlog_configuration_kept(self, mock_is_configured, mock_configure):
        """Test an application's structlog configuration is not replaced."""
        setup_logging("INFO")

        mock_configure.assert_not_called()

    @patch("lazy_fs.core.observability.structlog.configure")
    @patch("lazy_fs.core.observability.structlog.is_configured", return_value=False)
    def test_structlog_configured_when_unset(self, mock_is_configured, mock_configure):
        """Test structlog is configured when nothing else has done so."""
        setup_logging("INFO")

        mock_configure.assert_called_once()

    @patch("lazy_fs.core.observability.logging.basicConfig")
    def test_existing_handlers_kept(self, mock_basic_config):
        """Test root handlers installed by an application are kept."""
        root = logging.getLogger()
        handler = logging.NullHandler()
        root.addHandler(handler)
        try:
            setup_logging("INFO")
        finally:
            root.removeHandler(handler)

        mock_basic_config.assert_not_called()
