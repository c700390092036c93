"""
Publish commands for depot-client CLI.

This module provides the commands that write to a depot: upload-key and
upload-package.
"""

import sys
from typing import Optional

import click

from ..models import Package, PackageIdent
from ..utils.constants import DEFAULT_PACKAGE_CACHE_PATH
from ..utils.error_handling import with_error_handling
from .common import build_client, package_cache_path


@click.command("upload-key")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
@with_error_handling("key upload", exit_on_error=True)
def upload_key(ctx: click.Context, path: str) -> None:
    """Upload a public key file to the depot."""
    with build_client(ctx) as client:
        client.put_key(path)
    click.echo(f"Uploaded key {path}")


@click.command("upload-package")
@click.argument("ident")
@click.option(
    "--cache-dir",
    type=click.Path(exists=True, file_okay=False),
    help=f"Package cache directory (default: cli.cache_pkg_path or {DEFAULT_PACKAGE_CACHE_PATH})",
)
@click.pass_context
@with_error_handling("package upload", exit_on_error=True)
def upload_package(ctx: click.Context, ident: str, cache_dir: Optional[str]) -> None:
    """Upload a cached package (origin/name/version/release) to the depot."""
    try:
        package = Package.from_ident(
            PackageIdent.from_string(ident),
            cache_dir=cache_dir or package_cache_path(ctx),
        )
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    with build_client(ctx) as client:
        client.put_package(package)
    click.echo(f"Uploaded package {package.ident}")


__all__ = ["upload_key", "upload_package"]
