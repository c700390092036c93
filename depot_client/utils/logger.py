"""
Logging configuration and utilities for depot-client.

Log records go to stderr so they never interleave with the progress line
and command results written to stdout.
"""

import logging
import sys
import textwrap
from typing import Optional

# Default width for log message wrapping
DEFAULT_LOG_WIDTH = 120

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# -d count to root logger level
VERBOSITY_LEVELS = {0: logging.WARNING, 1: logging.INFO}

# Loggers of the HTTP stack, silenced unless asked for with -ddd
HTTP_LOGGERS = ("httpx", "httpcore")
HTTP_LOG_VERBOSITY = 3


class WrappingFormatter(logging.Formatter):
    """Formatter that wraps long log messages, indenting continuation lines."""

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        width: int = DEFAULT_LOG_WIDTH,
        indent: str = "    ",
    ) -> None:
        """
        Args:
            fmt: Format string for log messages
            datefmt: Date format string
            width: Maximum width of each output line
            indent: Prefix for continuation lines
        """
        super().__init__(fmt, datefmt)
        self.width = width
        self.indent = indent

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if len(formatted) <= self.width:
            return formatted

        return "\n".join(
            textwrap.wrap(
                formatted,
                width=self.width,
                subsequent_indent=self.indent,
                break_long_words=True,
                break_on_hyphens=False,
            )
        )


def level_for_verbosity(verbosity: int) -> int:
    """Map the number of -d flags to a logging level."""
    return VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)


def setup_logging(verbosity: int = 0, use_wrapping: bool = False) -> None:
    """
    Setup logging configuration with multi-level verbosity.

    Verbosity Levels:
        0 (default): WARNING - Only warnings and errors, progress output only
        1 (-d):      INFO - Operation start and completion
        2 (-dd):     DEBUG - Request URLs, responses and bodies
        3+ (-ddd):   DEBUG - Everything above plus httpx/httpcore logs
    """
    level = level_for_verbosity(verbosity)

    if use_wrapping:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(WrappingFormatter(fmt=LOG_FORMAT))

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)

    http_level = logging.DEBUG if verbosity >= HTTP_LOG_VERBOSITY else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Fetching package")
    """
    return logging.getLogger(name)


__all__ = [
    "WrappingFormatter",
    "level_for_verbosity",
    "setup_logging",
    "get_logger",
]
