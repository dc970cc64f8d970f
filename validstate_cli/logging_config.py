"""
Logging configuration for the validstate CLI.

Provides JSON or text logs with trace_id support for correlating a replay run.

Environment Variables:
    VALIDSTATE_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    VALIDSTATE_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from validstate_cli.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="actions.jsonl")
    logger.info("Replaying actions")
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


def setup_logging(log_format: Optional[str] = None) -> None:
    """
    Configure root logger.

    Reads configuration from environment variables:
    - VALIDSTATE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - VALIDSTATE_LOG_FORMAT: json, text (default: text)

    Logs go to stderr so that --json command output on stdout stays parseable.
    """
    log_level = os.getenv("VALIDSTATE_LOG_LEVEL", "INFO").upper()
    log_format = (log_format or os.getenv("VALIDSTATE_LOG_FORMAT", "text")).lower()

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
        trace_id: Trace ID for correlating logs (typically the action log path)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures records from plain module loggers format cleanly.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True
