"""
Shared helpers for depot-client commands.
"""

import os
import sys
from typing import Optional

import click

from ..api import DepotClient
from ..transfer import ProgressReporter
from ..utils.config_manager import ConfigManager
from ..utils.constants import DEFAULT_CONFIG_PATH, DEFAULT_KEY_CACHE_PATH, DEFAULT_PACKAGE_CACHE_PATH, DEFAULT_TIMEOUT


def load_config(config: Optional[str]) -> Optional[ConfigManager]:
    """Return a loaded ConfigManager for the given or default config file, if one exists."""
    if config:
        manager = ConfigManager(config)
    elif os.path.exists(os.path.expanduser(DEFAULT_CONFIG_PATH)):
        manager = ConfigManager(DEFAULT_CONFIG_PATH)
    else:
        return None

    try:
        manager.load()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    return manager


def _config(ctx: click.Context) -> Optional[ConfigManager]:
    return ctx.obj.get("config_manager")


def key_cache_path(ctx: click.Context) -> str:
    config = _config(ctx)
    return config.key_cache_path if config else DEFAULT_KEY_CACHE_PATH


def package_cache_path(ctx: click.Context) -> str:
    config = _config(ctx)
    return config.package_cache_path if config else DEFAULT_PACKAGE_CACHE_PATH


def build_client(ctx: click.Context) -> DepotClient:
    """
    Create a DepotClient from the group options.

    The --url option (or DEPOT_URL) wins over cli.url from the config file.
    """
    config = _config(ctx)
    url = ctx.obj.get("url") or (config.depot_url if config else None)
    if not url:
        click.echo("Error: No depot URL given. Use --url, DEPOT_URL or cli.url in the config file", err=True)
        sys.exit(1)

    try:
        timeout = config.timeout if config else DEFAULT_TIMEOUT
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    return DepotClient(url, progress=ProgressReporter(), timeout=timeout)


__all__ = ["load_config", "key_cache_path", "package_cache_path", "build_client"]
