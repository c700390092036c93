"""
Depot Client - a Python client for package depots.

This package moves package archives and public keys between the local
filesystem and a depot over HTTP: it resolves package identifiers to
depot URLs, streams downloads into place atomically, and uploads files
with their checksum.
"""

from ._version import __version__

# Import main classes and functions for easy access
from .api import DepotClient
from .exceptions import (
    DepotError,
    DepotHTTPError,
    MetadataDecodeError,
    NoFilePartError,
    NoXFilenameError,
    RemotePackageNotFound,
    WriteSyncFailedError,
)
from .models import Package, PackageArchive, PackageIdent, PackageMetadata
from .utils import setup_logging, WrappingFormatter, get_logger
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "DepotClient",
    "DepotError",
    "DepotHTTPError",
    "MetadataDecodeError",
    "NoFilePartError",
    "NoXFilenameError",
    "RemotePackageNotFound",
    "WriteSyncFailedError",
    "Package",
    "PackageArchive",
    "PackageIdent",
    "PackageMetadata",
    "setup_logging",
    "WrappingFormatter",
    "get_logger",
    "cli_main",
    "cli_group",
]
