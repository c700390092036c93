"""Local package and archive models."""

import os
from pathlib import Path
from typing import Optional

from ..utils.constants import DEFAULT_PACKAGE_CACHE_PATH, PACKAGE_ARCHIVE_EXTENSION
from .base import DepotBaseModel
from .ident import PackageIdent


class Package(DepotBaseModel):
    """
    A fully qualified package present in the local package cache.

    Attributes:
        origin: Package origin
        name: Package name
        version: Package version
        release: Package release
        cache_dir: Directory holding cached package archives
    """

    origin: str
    name: str
    version: str
    release: str
    cache_dir: str = DEFAULT_PACKAGE_CACHE_PATH

    @classmethod
    def from_ident(cls, ident: PackageIdent, cache_dir: Optional[str] = None) -> "Package":
        """
        Build a Package from a fully qualified identifier.

        Raises:
            ValueError: If the identifier lacks a version or release
        """
        if not ident.fully_qualified:
            raise ValueError(f"Package identifier must be fully qualified: '{ident}'")

        kwargs = {"cache_dir": cache_dir} if cache_dir else {}
        return cls(
            origin=ident.origin,
            name=ident.name,
            version=ident.version,
            release=ident.release,
            **kwargs,
        )

    @property
    def ident(self) -> PackageIdent:
        """Identifier of this package."""
        return PackageIdent(origin=self.origin, name=self.name, version=self.version, release=self.release)

    @property
    def cache_file(self) -> str:
        """Path of the package archive in the cache directory."""
        file_name = f"{self.origin}-{self.name}-{self.version}-{self.release}{PACKAGE_ARCHIVE_EXTENSION}"
        return os.path.join(self.cache_dir, file_name)


class PackageArchive(DepotBaseModel):
    """Handle to a downloaded package archive on disk."""

    path: Path

    @property
    def file_name(self) -> str:
        """Base name of the archive file."""
        return self.path.name


__all__ = ["Package", "PackageArchive"]
