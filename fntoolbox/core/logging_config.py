"""
Logging configuration for fntoolbox.

Library modules only emit DEBUG records; the command-line tool calls
setup_logging() once at startup to decide where and how they are rendered.

Environment Variables:
    FNTOOLBOX_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: WARNING
    FNTOOLBOX_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from fntoolbox.core.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, source="actions.jsonl")
    logger.debug("Applied action %s", "inc")
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class SourceFilter(logging.Filter):
    """
    Logging filter that adds `source` to all log records.

    Records emitted through a plain logger (not via get_logger) would
    otherwise break formatters that reference %(source)s.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "source"):
            record.source = "-"  # type: ignore
        return True


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure root logger.

    Explicit arguments win over environment variables:
    - FNTOOLBOX_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: WARNING)
    - FNTOOLBOX_LOG_FORMAT: json, text (default: text)

    Logs go to stderr so command output on stdout stays machine-readable.
    """
    log_level = (level or os.getenv("FNTOOLBOX_LOG_LEVEL", "WARNING")).upper()
    log_format = (fmt or os.getenv("FNTOOLBOX_LOG_FORMAT", "text")).lower()
    resolved = LEVELS.get(log_level, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.addFilter(SourceFilter())

    if log_format == "json":
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(source)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [source=%(source)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, source: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger tagged with the origin of the data being processed.

    Args:
        name: Logger name (typically __name__)
        source: Where the processed data came from (e.g. an action log path)

    Returns:
        LoggerAdapter with `source` in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"source": source or "-"})
