"""
Unified CLI entry point for depot-client operations using Click.

This module provides the main CLI group and shared options.
"""

import sys
from typing import Optional

import click

from . import fetch, publish
from .common import load_config
from .._version import __version__
from ..utils import setup_logging
from ..utils.constants import DEPOT_URL_ENVVAR


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="depot-client")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to config file (default: ~/.config/depot/cli.toml)",
)
@click.option(
    "-u",
    "--url",
    envvar=DEPOT_URL_ENVVAR,
    help=f"Depot URL (overrides cli.url from the config file; env: {DEPOT_URL_ENVVAR})",
)
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP logs)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], url: Optional[str], debug: int) -> None:
    """Depot Client - Fetch and publish packages and public keys."""
    setup_logging(debug)

    # Store shared options in context for subcommands to access
    ctx.ensure_object(dict)
    ctx.obj["url"] = url
    ctx.obj["debug"] = debug
    ctx.obj["config_manager"] = load_config(config)


# Register subcommands
cli.add_command(fetch.fetch_key)
cli.add_command(fetch.fetch_package)
cli.add_command(fetch.show)
cli.add_command(publish.upload_key)
cli.add_command(publish.upload_package)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(130)


__all__ = ["cli", "main"]
