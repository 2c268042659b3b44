"""
Structured logging configuration for fsrs-history.

Provides JSON or text logs with a trace_id field for correlating the log
lines of one replay.

Environment Variables:
    FSRS_HISTORY_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    FSRS_HISTORY_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from fsrs_history.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="replay-1")
    logger.info("Replaying", extra={"events": 120})
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


def setup_logging() -> None:
    """
    Configure root logger with structured logging.

    Reads configuration from environment variables:
    - FSRS_HISTORY_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - FSRS_HISTORY_LOG_FORMAT: json, text (default: text)

    Logs go to stderr so command output on stdout stays machine readable.
    """
    log_level = os.getenv("FSRS_HISTORY_LOG_LEVEL", "INFO").upper()
    log_format = os.getenv("FSRS_HISTORY_LOG_FORMAT", "text").lower()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    level = level_map.get(log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())

    if log_format == "json":
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically a replay id)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures records emitted through plain loggers still format.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True
