"""Tests for centralized logging configuration."""

import json
import logging
import sys
from unittest.mock import MagicMock, patch

from safety_api.core.logging_config import (
    NOISY_LOGGERS,
    CorrelationIDFilter,
    JSONFormatter,
    setup_logging,
)
from safety_api.core.middleware import correlation_id_var


def _record(msg: str = "Test message", level: int = logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestJSONFormatter:
    def test_formats_as_json(self):
        result = json.loads(JSONFormatter().format(_record()))
        assert result["message"] == "Test message"
        assert result["level"] == "INFO"
        assert result["logger"] == "test.logger"
        assert "timestamp" in result

    def test_includes_exception_info(self):
        try:
            raise ValueError("test error")
        except ValueError:
            record = _record("Error occurred", logging.ERROR, sys.exc_info())
        result = json.loads(JSONFormatter().format(record))
        assert "ValueError" in result["exception"]

    def test_excludes_exception_when_none(self):
        result = json.loads(JSONFormatter().format(_record()))
        assert "exception" not in result

    def test_includes_moderation_extra_fields(self):
        record = _record("Message blocked")
        record.user_id = "user-123"
        record.content_type = "message"
        record.risk_level = "critical"
        result = json.loads(JSONFormatter().format(record))
        assert result["user_id"] == "user-123"
        assert result["content_type"] == "message"
        assert result["risk_level"] == "critical"

    def test_phrases_list_is_kept_as_json_array(self):
        record = _record("Profile publish rejected")
        record.phrases = ["no limits", "whatsapp"]
        result = json.loads(JSONFormatter().format(record))
        assert result["phrases"] == ["no limits", "whatsapp"]

    def test_timestamp_is_record_creation_time(self):
        record = _record()
        record.created = 0.0
        result = json.loads(JSONFormatter().format(record))
        assert result["timestamp"] == "1970-01-01T00:00:00+00:00"

    def test_includes_correlation_id(self):
        record = _record()
        record.correlation_id = "req-1"
        assert json.loads(JSONFormatter().format(record))["correlation_id"] == "req-1"

    def test_omits_placeholder_correlation_id(self):
        record = _record()
        record.correlation_id = "-"
        assert "correlation_id" not in json.loads(JSONFormatter().format(record))


class TestCorrelationIDFilter:
    def test_injects_context_value(self):
        token = correlation_id_var.set("req-99")
        try:
            record = _record()
            assert CorrelationIDFilter().filter(record) is True
            assert record.correlation_id == "req-99"
        finally:
            correlation_id_var.reset(token)

    def test_defaults_to_dash(self):
        record = _record()
        CorrelationIDFilter().filter(record)
        assert record.correlation_id == "-"


class TestSetupLogging:
    def teardown_method(self):
        """Reset root logger after each test."""
        root = logging.getLogger()
        root.handlers.clear()
        root.setLevel(logging.WARNING)

    @patch("safety_api.core.logging_config.get_settings")
    def test_debug_mode_uses_readable_format(self, mock_settings):
        mock_settings.return_value = MagicMock(debug=True)
        setup_logging()
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JSONFormatter)
        assert root.level == logging.DEBUG

    @patch("safety_api.core.logging_config.get_settings")
    def test_production_mode_uses_json(self, mock_settings):
        mock_settings.return_value = MagicMock(debug=False)
        setup_logging()
        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    @patch("safety_api.core.logging_config.get_settings")
    def test_level_override(self, mock_settings):
        mock_settings.return_value = MagicMock(debug=False)
        setup_logging(level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    @patch("safety_api.core.logging_config.get_settings")
    def test_quiets_noisy_loggers(self, mock_settings):
        mock_settings.return_value = MagicMock(debug=False)
        setup_logging()
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
