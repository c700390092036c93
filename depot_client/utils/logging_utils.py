"""
Logging helpers for consistent operation logging.

Every client operation logs one line when it starts and one when it
completes, and every transfer logs a summary with its size.
"""

import logging
from typing import Any, Dict, Optional

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def _log_operation(prefix: str, operation: str, logger: Optional[logging.Logger], details: Dict[str, Any]) -> None:
    log = logger or logging.getLogger()
    if not details:
        log.info("%s %s", prefix, operation)
        return
    log.info("%s %s (%s)", prefix, operation, ", ".join(f"{key}={value}" for key, value in details.items()))


def log_operation_start(operation: str, logger: Optional[logging.Logger] = None, **details: Any) -> None:
    """
    Log the start of an operation.

    Args:
        operation: Description of the operation, e.g. "package download"
        logger: Logger to use (defaults to the root logger)
        **details: Additional details logged as key=value pairs
    """
    _log_operation("Starting", operation, logger, details)


def log_operation_complete(operation: str, logger: Optional[logging.Logger] = None, **details: Any) -> None:
    """Log the completion of an operation, with the same arguments as log_operation_start."""
    _log_operation("Completed", operation, logger, details)


def log_transfer(
    direction: str, target: str, size_bytes: Optional[int], logger: Optional[logging.Logger] = None
) -> None:
    """
    Log a debug summary of one finished transfer.

    Example:
        >>> log_transfer("Downloaded", "/tmp/core-redis-3.0.7-1.bldr", 1536)
        # DEBUG: Downloaded /tmp/core-redis-3.0.7-1.bldr (1.5 KB)
    """
    log = logger or logging.getLogger()
    size = format_file_size(size_bytes) if size_bytes is not None else "unknown size"
    log.debug("%s %s (%s)", direction, target, size)


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Examples:
        >>> format_file_size(0)
        '0 B'
        >>> format_file_size(1536)
        '1.5 KB'
    """
    if size_bytes == 0:
        return "0 B"

    size = float(size_bytes)
    unit = 0
    while size >= 1024 and unit < len(SIZE_UNITS) - 1:
        size /= 1024.0
        unit += 1

    return f"{size:.1f} {SIZE_UNITS[unit]}"


__all__ = [
    "log_operation_start",
    "log_operation_complete",
    "log_transfer",
    "format_file_size",
]
