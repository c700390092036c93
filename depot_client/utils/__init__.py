"""
Utility modules for depot-client.
"""

from .logger import setup_logging, WrappingFormatter, get_logger
from .session import create_session
from .checksum import calculate_sha256_checksum
from .config_manager import ConfigManager
from .url import (
    url_fetch_key,
    url_fetch_package,
    url_put_key,
    url_put_package,
    url_show_package,
)

from . import constants
from . import error_handling
from . import logging_utils

__all__ = [
    "setup_logging",
    "WrappingFormatter",
    "get_logger",
    "create_session",
    "calculate_sha256_checksum",
    "ConfigManager",
    "url_fetch_key",
    "url_fetch_package",
    "url_put_key",
    "url_put_package",
    "url_show_package",
    "constants",
    "error_handling",
    "logging_utils",
]
