"""
Structured logging configuration.

Provides JSON-formatted logging for view state transitions and events.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO


class StructuredFormatter(logging.Formatter):
    """
    Custom formatter that outputs log records as JSON.

    Each log entry includes:
    - timestamp: ISO format datetime
    - level: Log level name
    - logger: Logger name
    - message: Log message
    - extra: Any additional fields passed to the log call
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra"):
            log_entry["extra"] = record.extra

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    logger_name: str = "tripfinder",
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure structured JSON logging.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional path to log file. If not provided, logs to stderr only.
        logger_name: Name for the logger instance.
        stream: Console stream (default: stderr).

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # JSON records are emitted here only, not again by root handlers
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = StructuredFormatter()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def log_state_transition(
    event: str,
    state: Dict[str, Any],
    extra: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Log a view state transition event.

    Args:
        event: Name of the event (e.g., "list_loading", "detail_opened")
        state: Current view state dictionary (key fields are extracted)
        extra: Additional context to include in the log
        logger: Logger instance to use. If not provided, uses default.
    """
    if logger is None:
        logger = logging.getLogger("tripfinder")
    if not logger.isEnabledFor(logging.INFO):
        return

    state_summary = {
        "phase": state.get("phase"),
        "summaries": len(state.get("summaries") or []),
        "error_message": state.get("error_message"),
        "detail_loading": state.get("detail_loading"),
        "detail_open": state.get("detail_open"),
    }

    log_data = {
        "event": event,
        "state_summary": state_summary,
    }

    if extra:
        log_data["extra"] = extra

    record = logger.makeRecord(
        logger.name,
        logging.INFO,
        "",
        0,
        f"State transition: {event}",
        args=(),
        exc_info=None,
    )
    record.extra = log_data

    logger.handle(record)
