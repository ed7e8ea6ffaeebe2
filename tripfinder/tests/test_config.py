"""
Tests for client configuration and logging helpers.
"""

import io
import json
import logging

import pytest

from tripfinder.shared.config import DEFAULT_CONFIG, get_config, load_config
from tripfinder.main import build_parser, configure_logging
from tripfinder.shared.logging.config import (
    StructuredFormatter,
    log_state_transition,
    setup_logging,
)
from tripfinder.view.state import initial_view_state


class TestConfig:
    """Tests for get_config and load_config."""

    def test_defaults(self):
        config = get_config()

        assert config.base_url == "http://localhost:5000"
        assert config.timeout_seconds is None
        assert config.max_results == 5

    def test_overrides(self):
        config = get_config(base_url="http://api.test", timeout_seconds=3, max_results=2)

        assert config.base_url == "http://api.test"
        assert config.timeout_seconds == 3
        assert config.max_results == 2
        assert DEFAULT_CONFIG.max_results == 5

    def test_load_from_environment(self, monkeypatch):
        monkeypatch.setenv("TRIPFINDER_BASE_URL", "http://env.test")
        monkeypatch.setenv("TRIPFINDER_TIMEOUT_SECONDS", "7.5")
        monkeypatch.setenv("TRIPFINDER_MAX_RESULTS", "3")

        config = load_config()

        assert config.base_url == "http://env.test"
        assert config.timeout_seconds == 7.5
        assert config.max_results == 3

    def test_invalid_number_names_variable(self, monkeypatch):
        monkeypatch.setenv("TRIPFINDER_MAX_RESULTS", "many")

        with pytest.raises(ValueError, match="TRIPFINDER_MAX_RESULTS"):
            load_config()


class TestStructuredLogging:
    """Tests for the JSON formatter and state transition logging."""

    def test_state_transition_is_logged_as_json(self):
        logger = logging.getLogger("tripfinder.tests.transitions")
        logger.setLevel(logging.INFO)
        records = []

        class _Collect(logging.Handler):
            def emit(self, record):
                records.append(record)

        handler = _Collect()
        logger.addHandler(handler)
        try:
            log_state_transition("list_ready", initial_view_state(), extra={"request": 1}, logger=logger)
        finally:
            logger.removeHandler(handler)

        entry = json.loads(StructuredFormatter().format(records[0]))

        assert entry["message"] == "State transition: list_ready"
        assert entry["extra"]["event"] == "list_ready"
        assert entry["extra"]["state_summary"]["phase"] == "loading"
        assert entry["extra"]["state_summary"]["summaries"] == 0
        assert entry["extra"]["extra"] == {"request": 1}

    def test_disabled_level_skips_transition_record(self):
        """Transitions are not emitted when INFO is disabled."""
        logger = logging.getLogger("tripfinder.tests.quiet")
        logger.setLevel(logging.WARNING)
        records = []

        class _Collect(logging.Handler):
            def emit(self, record):
                records.append(record)

        handler = _Collect()
        logger.addHandler(handler)
        try:
            log_state_transition("list_ready", initial_view_state(), logger=logger)
        finally:
            logger.removeHandler(handler)

        assert records == []


def _snapshot_logger(name):
    logger = logging.getLogger(name)
    return logger, (list(logger.handlers), logger.level, logger.propagate)


def _restore_logger(logger, saved):
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


class TestSetupLogging:
    """Tests for setup_logging and the command-line logging switch."""

    def test_emits_json_to_stream_and_file(self, tmp_path):
        stream = io.StringIO()
        log_file = tmp_path / "tripfinder.log"
        logger, saved = _snapshot_logger("tripfinder.tests.json")
        try:
            configured = setup_logging(
                level=logging.INFO,
                log_file=str(log_file),
                logger_name="tripfinder.tests.json",
                stream=stream,
            )
            configured.info("hello")
            for handler in configured.handlers:
                handler.flush()
        finally:
            _restore_logger(logger, saved)

        console_entry = json.loads(stream.getvalue().strip())
        file_entry = json.loads(log_file.read_text().strip())

        assert console_entry["message"] == "hello"
        assert console_entry["level"] == "INFO"
        assert console_entry["logger"] == "tripfinder.tests.json"
        assert file_entry["message"] == "hello"

    def test_repeated_setup_does_not_duplicate_handlers(self):
        logger, saved = _snapshot_logger("tripfinder.tests.repeat")
        try:
            setup_logging(logger_name="tripfinder.tests.repeat", stream=io.StringIO())
            configured = setup_logging(logger_name="tripfinder.tests.repeat", stream=io.StringIO())

            assert len(configured.handlers) == 1
            assert configured.propagate is False
        finally:
            _restore_logger(logger, saved)

    def test_json_logs_switch_installs_structured_formatter(self):
        logger, saved = _snapshot_logger("tripfinder")
        try:
            configure_logging(verbose=True, json_logs=True)

            assert logger.level == logging.INFO
            assert len(logger.handlers) == 1
            assert isinstance(logger.handlers[0].formatter, StructuredFormatter)
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            _restore_logger(logger, saved)

    def test_parser_accepts_json_log_flags(self):
        args = build_parser().parse_args(["--json-logs", "--log-file", "run.log"])

        assert args.json_logs is True
        assert args.log_file == "run.log"
        assert build_parser().parse_args([]).json_logs is False
