"""
Logging utilities for Linguist.

Logs go to stderr so that CLI results printed on stdout stay pipeable.
"""

import logging
import os
import sys
from typing import Literal, TextIO

# Default log format
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Log level type
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(
    name: str | None = None,
    level: LogLevel | None = None,
    format: str = DEFAULT_FORMAT,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Configure logging and return a logger.

    Args:
        name: Logger name (typically __name__). If None, returns root logger.
        level: Log level. Defaults to LOG_LEVEL env var or INFO.
        format: Log format string.
        stream: Output stream. Defaults to stderr.

    Returns:
        Configured logger instance.

    Usage:
        from linguist.utils import setup_logging
        logger = setup_logging("linguist")
        logger.info("Translation started")
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()

    log_level = getattr(logging, level, logging.INFO)

    # Configure root logger (only once)
    logging.basicConfig(
        level=log_level,
        format=format,
        stream=stream or sys.stderr,
    )

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    return logger


def preview(text: str, limit: int = 60) -> str:
    """Shorten text for log lines."""
    if text is None:
        return ""
    return text if len(text) <= limit else text[:limit] + "..."
