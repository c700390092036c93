"""
Fetch commands for depot-client CLI.

This module provides the commands that read from a depot: fetch-key,
fetch-package and show.
"""

import sys
from typing import Optional

import click

from ..models import PackageIdent
from ..utils.constants import DEFAULT_KEY_CACHE_PATH, DEFAULT_PACKAGE_CACHE_PATH
from ..utils.error_handling import with_error_handling
from .common import build_client, key_cache_path, package_cache_path


def _parse_ident(value: str) -> PackageIdent:
    try:
        return PackageIdent.from_string(value)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command("fetch-key")
@click.argument("key")
@click.option(
    "--dest",
    type=click.Path(file_okay=False, writable=True),
    help=f"Directory to save the key to (default: cli.cache_key_path or {DEFAULT_KEY_CACHE_PATH})",
)
@click.pass_context
@with_error_handling("key download", exit_on_error=True)
def fetch_key(ctx: click.Context, key: str, dest: Optional[str]) -> None:
    """Download a public key from the depot."""
    destination = dest or key_cache_path(ctx)
    with build_client(ctx) as client:
        path = client.fetch_key(key, destination)
    click.echo(path)


@click.command("fetch-package")
@click.argument("ident")
@click.option(
    "--dest",
    type=click.Path(file_okay=False, writable=True),
    help=f"Directory to save the package to (default: cli.cache_pkg_path or {DEFAULT_PACKAGE_CACHE_PATH})",
)
@click.pass_context
@with_error_handling("package download", exit_on_error=True)
def fetch_package(ctx: click.Context, ident: str, dest: Optional[str]) -> None:
    """Download a package archive (origin/name[/version[/release]]) from the depot."""
    package_ident = _parse_ident(ident)
    destination = dest or package_cache_path(ctx)
    with build_client(ctx) as client:
        archive = client.fetch_package(package_ident, destination)
    click.echo(str(archive.path))


@click.command("show")
@click.argument("ident")
@click.pass_context
@with_error_handling("package show", exit_on_error=True)
def show(ctx: click.Context, ident: str) -> None:
    """Show depot metadata for a package (origin/name[/version[/release]])."""
    package_ident = _parse_ident(ident)
    with build_client(ctx) as client:
        metadata = client.show_package(package_ident)
    click.echo(metadata.model_dump_json(indent=2))


__all__ = ["fetch_key", "fetch_package", "show"]
