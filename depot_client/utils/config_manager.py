"""
Configuration management utilities.

The client reads a small TOML file whose [cli] table names the depot and
the local cache directories::

    [cli]
    url = "http://depot.example.com/v1/depot"
    cache_key_path = "/opt/bldr/cache/keys"
    cache_pkg_path = "/opt/bldr/cache/pkgs"
    timeout = 300
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import DEFAULT_CONFIG_PATH, DEFAULT_KEY_CACHE_PATH, DEFAULT_PACKAGE_CACHE_PATH, DEFAULT_TIMEOUT

CLI_SECTION = "cli"


class ConfigManager:
    """Loads the client configuration file lazily and answers lookups from it."""

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Args:
            config_path: Path to configuration file. If None, uses default path.
        """
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file, once.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is not valid TOML or cannot be read
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "rb") as f:
                self._config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in configuration file {self.config_path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Failed to load configuration from {self.config_path}: {e}") from e

        logging.debug("Loaded configuration from %s", self.config_path)
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a value by dotted key, e.g. "cli.url".

        A missing key, or a path that runs through a non-table value,
        yields the default.
        """
        node: Any = self.load()
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get an entire configuration table, or an empty dict."""
        value = self.load().get(section, {})
        return value if isinstance(value, dict) else {}

    def has_key(self, key: str) -> bool:
        """Check if a configuration key exists in a loadable file."""
        try:
            self.load()
        except (FileNotFoundError, ValueError):
            return False

        marker = object()
        return self.get(key, marker) is not marker

    def reload(self) -> None:
        """Force reload configuration from file."""
        self._config = None
        self.load()

    # [cli] accessors

    @property
    def depot_url(self) -> Optional[str]:
        """The depot base URL, if configured."""
        return self.get(f"{CLI_SECTION}.url") or None

    @property
    def key_cache_path(self) -> str:
        return self.get(f"{CLI_SECTION}.cache_key_path", DEFAULT_KEY_CACHE_PATH)

    @property
    def package_cache_path(self) -> str:
        return self.get(f"{CLI_SECTION}.cache_pkg_path", DEFAULT_PACKAGE_CACHE_PATH)

    @property
    def timeout(self) -> float:
        """
        Request timeout in seconds.

        Raises:
            ValueError: If the configured value is not a number
        """
        value = self.get(f"{CLI_SECTION}.timeout", DEFAULT_TIMEOUT)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"cli.timeout must be a number in {self.config_path}, got {value!r}")
        return float(value)


__all__ = ["ConfigManager"]
