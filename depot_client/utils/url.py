"""
URL construction for depot operations.

All functions here are pure string construction: the depot URL is used
as given and joined with the fixed path segments of each endpoint.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import Package, PackageIdent


def url_show_package(repo: str, ident: "PackageIdent") -> str:
    """
    Build the URL describing a package.

    A fully qualified identifier addresses one exact release; anything
    less asks for the latest release matching the given parts.

    Example:
        >>> url_show_package("http://repo.example", PackageIdent.from_string("core/foo"))
        'http://repo.example/pkgs/core/foo/latest'
    """
    if ident.fully_qualified:
        return f"{repo}/pkgs/{ident}"
    return f"{repo}/pkgs/{ident}/latest"


def url_fetch_key(repo: str, key: str) -> str:
    """Build the URL of a public key."""
    return f"{repo}/keys/{key}"


def url_fetch_package(repo: str, ident: "PackageIdent") -> str:
    """Build the download URL of a package archive."""
    return f"{repo}/pkgs/{ident}/download"


def url_put_key(repo: str, file_name: str) -> str:
    """Build the URL a public key is uploaded to."""
    return f"{repo}/keys/{file_name}"


def url_put_package(repo: str, package: "Package", checksum: str) -> str:
    """Build the upload URL of a package archive, carrying its checksum."""
    return f"{repo}/pkgs/{package.origin}/{package.name}/{package.version}/{package.release}?checksum={checksum}"


__all__ = [
    "url_show_package",
    "url_fetch_key",
    "url_fetch_package",
    "url_put_key",
    "url_put_package",
]
