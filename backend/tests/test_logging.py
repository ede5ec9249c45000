"""
Tests for structured logging configuration and JSON formatter.
"""
import json
import logging
import sys
from unittest.mock import patch

import pytest

from gradebook.core.logging_config import (
    JSONFormatter,
    get_logger,
    request_id_context,
    setup_logging,
)


def make_record(level: int = logging.INFO, msg: str = "Test message") -> logging.LogRecord:
    return logging.LogRecord(
        name="test_logger",
        level=level,
        pathname="/gradebook/api/v1/item_analysis.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestJSONFormatter:
    """Tests for the JSONFormatter class."""

    def test_basic_log_entry(self):
        """Basic log entry produces valid JSON with required fields."""
        log_entry = json.loads(JSONFormatter().format(make_record()))

        assert "timestamp" in log_entry
        assert log_entry["level"] == "INFO"
        assert log_entry["logger"] == "test_logger"
        assert log_entry["message"] == "Test message"

    def test_request_id_from_context(self):
        """request_id is included when set in context."""
        token = request_id_context.set("test-request-123")
        try:
            log_entry = json.loads(JSONFormatter().format(make_record()))
            assert log_entry["request_id"] == "test-request-123"
        finally:
            request_id_context.reset(token)

    def test_no_request_id_when_not_set(self):
        """request_id is omitted when not set."""
        token = request_id_context.set(None)
        try:
            log_entry = json.loads(JSONFormatter().format(make_record()))
            assert "request_id" not in log_entry
        finally:
            request_id_context.reset(token)

    def test_structured_fields_from_extra(self):
        """Extra structured fields set by the middleware are included."""
        record = make_record(msg="Request completed")
        record.method = "POST"
        record.path = "/v1/item-analysis"
        record.status_code = 200
        record.duration_ms = 15.5
        record.client_host = "127.0.0.1"
        record.error_id = "abc"

        log_entry = json.loads(JSONFormatter().format(record))

        assert log_entry["method"] == "POST"
        assert log_entry["path"] == "/v1/item-analysis"
        assert log_entry["status_code"] == 200
        assert log_entry["duration_ms"] == pytest.approx(15.5)
        assert log_entry["client_host"] == "127.0.0.1"
        assert log_entry["error_id"] == "abc"

    def test_source_location_for_errors(self):
        """Source location is included for error-level logs."""
        log_entry = json.loads(JSONFormatter().format(make_record(logging.ERROR)))

        assert log_entry["source"] == "/gradebook/api/v1/item_analysis.py:42"

    def test_no_source_location_for_info(self):
        """Source location is not included for info-level logs."""
        log_entry = json.loads(JSONFormatter().format(make_record()))

        assert "source" not in log_entry

    def test_exception_info_included(self):
        """Exception info is included when present."""
        try:
            raise ValueError("Test error")
        except ValueError:
            record = make_record(logging.ERROR, "An error occurred")
            record.exc_info = sys.exc_info()

            log_entry = json.loads(JSONFormatter().format(record))

        assert "ValueError" in log_entry["exception"]
        assert "Test error" in log_entry["exception"]

    def test_timestamp_is_utc_iso_format(self):
        """Timestamp is ISO formatted in UTC."""
        log_entry = json.loads(JSONFormatter().format(make_record()))

        assert "T" in log_entry["timestamp"]
        assert log_entry["timestamp"].endswith("+00:00")


class TestSetupLogging:
    """Tests for the setup_logging function."""

    @patch("gradebook.core.logging_config.settings")
    def test_production_uses_json_formatter(self, mock_settings):
        """Production environment uses JSON formatter."""
        mock_settings.ENV = "production"
        mock_settings.DEBUG = False
        mock_settings.LOG_LEVEL = "INFO"

        with patch("logging.config.dictConfig") as mock_dictconfig:
            setup_logging()

            call_args = mock_dictconfig.call_args[0][0]
            assert call_args["handlers"]["console"]["formatter"] == "json"

    @patch("gradebook.core.logging_config.settings")
    def test_development_uses_default_formatter(self, mock_settings):
        """Development environment uses human-readable formatter."""
        mock_settings.ENV = "development"
        mock_settings.DEBUG = True
        mock_settings.LOG_LEVEL = "DEBUG"

        with patch("logging.config.dictConfig") as mock_dictconfig:
            setup_logging()

            call_args = mock_dictconfig.call_args[0][0]
            assert call_args["handlers"]["console"]["formatter"] == "default"
            assert call_args["loggers"]["gradebook"]["level"] == logging.DEBUG

    @patch("gradebook.core.logging_config.settings")
    def test_unknown_level_falls_back_to_info(self, mock_settings):
        """An unrecognised LOG_LEVEL falls back to INFO."""
        mock_settings.ENV = "development"
        mock_settings.DEBUG = True
        mock_settings.LOG_LEVEL = "verbose"

        with patch("logging.config.dictConfig") as mock_dictconfig:
            setup_logging()

            call_args = mock_dictconfig.call_args[0][0]
            assert call_args["root"]["level"] == logging.INFO

    @patch("gradebook.core.logging_config.settings")
    def test_access_log_quiet_in_debug(self, mock_settings):
        """uvicorn access lines are raised to WARNING while DEBUG is on."""
        mock_settings.ENV = "development"
        mock_settings.DEBUG = True
        mock_settings.LOG_LEVEL = "INFO"

        with patch("logging.config.dictConfig") as mock_dictconfig:
            setup_logging()

            call_args = mock_dictconfig.call_args[0][0]
            assert call_args["loggers"]["uvicorn.access"]["level"] == logging.WARNING


class TestGetLogger:
    """Tests for the get_logger function."""

    def test_get_logger_returns_named_logger(self):
        logger = get_logger("test_module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test_module"

    def test_get_logger_same_instance(self):
        assert get_logger("same_name") is get_logger("same_name")
