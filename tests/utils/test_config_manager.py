"""Tests for ConfigManager class."""

from pathlib import Path

import pytest

from depot_client.utils.config_manager import ConfigManager
from depot_client.utils.constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_KEY_CACHE_PATH,
    DEFAULT_PACKAGE_CACHE_PATH,
    DEFAULT_TIMEOUT,
)


class TestConfigManagerInit:
    """Tests for ConfigManager initialization."""

    def test_init_with_path(self):
        """Test ConfigManager initialization with explicit path."""
        manager = ConfigManager("~/depot.toml")
        assert manager.config_path == Path("~/depot.toml").expanduser()
        assert manager._config is None

    def test_init_without_path(self):
        """Test ConfigManager initialization with default path."""
        manager = ConfigManager()
        assert manager.config_path == Path(DEFAULT_CONFIG_PATH).expanduser()


class TestConfigManagerLoad:
    """Tests for ConfigManager.load() method."""

    def test_load_cached_config(self):
        """Test load() returns cached config."""
        manager = ConfigManager()
        manager._config = {"test": "value"}
        assert manager.load() == {"test": "value"}

    def test_load_file_not_found(self, tmp_path):
        """Test load() raises FileNotFoundError when file doesn't exist."""
        config_path = tmp_path / "nonexistent.toml"
        manager = ConfigManager(str(config_path))

        with pytest.raises(FileNotFoundError) as exc_info:
            manager.load()

        assert str(config_path) in str(exc_info.value)

    def test_load_success(self, temp_config_file):
        """Test load() successfully loads TOML file."""
        manager = ConfigManager(str(temp_config_file))
        result = manager.load()
        assert result["cli"]["url"] == "http://repo.example"

    def test_load_invalid_toml(self, tmp_path):
        """Test load() raises ValueError for invalid TOML."""
        config_path = tmp_path / "bad.toml"
        config_path.write_text("[cli\nurl = ")

        with pytest.raises(ValueError, match="Invalid TOML"):
            ConfigManager(str(config_path)).load()


class TestConfigManagerAccess:
    """Tests for get, get_section, has_key and reload."""

    def test_get_nested(self, temp_config_file):
        """Test get() with dot notation."""
        manager = ConfigManager(str(temp_config_file))
        assert manager.get("cli.url") == "http://repo.example"
        assert manager.get("cli.timeout") == 60

    def test_get_default(self, temp_config_file):
        """Test get() returns the default for missing keys."""
        manager = ConfigManager(str(temp_config_file))
        assert manager.get("cli.missing", "fallback") == "fallback"
        assert manager.get("cli.url.deeper", "fallback") == "fallback"

    def test_get_section(self, temp_config_file):
        """Test get_section() returns a whole table."""
        manager = ConfigManager(str(temp_config_file))
        assert "url" in manager.get_section("cli")
        assert manager.get_section("missing") == {}

    def test_has_key(self, temp_config_file, tmp_path):
        """Test has_key() for present, absent and unloadable configs."""
        manager = ConfigManager(str(temp_config_file))
        assert manager.has_key("cli.url")
        assert not manager.has_key("cli.missing")
        assert not ConfigManager(str(tmp_path / "missing.toml")).has_key("cli.url")

    def test_reload(self, temp_config_file):
        """Test reload() picks up changes."""
        manager = ConfigManager(str(temp_config_file))
        manager.load()
        temp_config_file.write_text('[cli]\nurl = "http://other.example"\n')

        manager.reload()

        assert manager.get("cli.url") == "http://other.example"


class TestCliAccessors:
    """Tests for the [cli] table accessors."""

    def test_values_from_file(self, temp_config_file, tmp_path):
        """Test accessors read the [cli] table."""
        manager = ConfigManager(str(temp_config_file))
        assert manager.depot_url == "http://repo.example"
        assert manager.key_cache_path == str(tmp_path / "keys")
        assert manager.package_cache_path == str(tmp_path / "pkgs")
        assert manager.timeout == 60.0

    def test_defaults(self, tmp_path):
        """Test accessors fall back to the built-in defaults."""
        config_path = tmp_path / "cli.toml"
        config_path.write_text("[cli]\n")
        manager = ConfigManager(str(config_path))

        assert manager.depot_url is None
        assert manager.key_cache_path == DEFAULT_KEY_CACHE_PATH
        assert manager.package_cache_path == DEFAULT_PACKAGE_CACHE_PATH
        assert manager.timeout == DEFAULT_TIMEOUT

    def test_empty_url_is_unset(self, tmp_path):
        """Test an empty url counts as not configured."""
        config_path = tmp_path / "cli.toml"
        config_path.write_text('[cli]\nurl = ""\n')
        assert ConfigManager(str(config_path)).depot_url is None

    def test_invalid_timeout(self, tmp_path):
        """Test a non-numeric timeout is rejected."""
        config_path = tmp_path / "cli.toml"
        config_path.write_text('[cli]\ntimeout = "slow"\n')

        with pytest.raises(ValueError, match="cli.timeout must be a number"):
            ConfigManager(str(config_path)).timeout
