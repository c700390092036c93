"""
Depot client for fetching and publishing packages and public keys.

This module provides the DepotClient class, which composes URL
construction, the streaming transfer primitives and response status
handling into the public depot operations:

    - fetch_key: download a public key
    - fetch_package: download a package archive
    - show_package: describe a package
    - put_key: upload a public key
    - put_package: upload a package archive with its checksum

Every operation makes exactly one attempt and raises on failure.
"""

# Standard library imports
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

# Third-party imports
import httpx
from pydantic import ValidationError

# Local imports
from ..exceptions import (
    DepotHTTPError,
    MetadataDecodeError,
    NoFilePartError,
    RemotePackageNotFound,
)
from ..models import Package, PackageArchive, PackageIdent, PackageMetadata
from ..transfer import download, upload
from ..transfer.download import ProgressCallback
from ..utils import (
    ConfigManager,
    calculate_sha256_checksum,
    create_session,
    get_logger,
    url_fetch_key,
    url_fetch_package,
    url_put_key,
    url_put_package,
    url_show_package,
)
from ..utils.constants import DEFAULT_TIMEOUT
from ..utils.logging_utils import log_operation_complete, log_operation_start


class DepotClient:
    """
    A client for a package depot.

    The client owns its HTTP session unless one is passed in, and can be
    used as a context manager to release connections deterministically.

    Example:
        >>> with DepotClient("http://depot.example.com/v1/depot") as client:
        ...     archive = client.fetch_package(PackageIdent.from_string("core/redis"), "/tmp")
    """

    def __init__(
        self,
        url: str,
        session: Optional[httpx.Client] = None,
        progress: Optional[ProgressCallback] = None,
        logger: Optional[logging.Logger] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the depot client.

        Args:
            url: Base URL of the depot
            session: Optional HTTP client; one is created if not given
            progress: Optional progress callback for downloads
            logger: Optional logger (defaults to this module's logger)
            timeout: Request timeout used when creating a session
        """
        self.url = url
        self._owns_session = session is None
        self.session = session if session is not None else create_session(timeout=timeout)
        self.progress = progress
        self.logger = logger or get_logger(__name__)

    @classmethod
    def create_from_config_file(cls, path: Optional[str] = None, **kwargs: Any) -> "DepotClient":
        """Create a client from the [cli] section of a TOML config file.

        Args:
            path: Path to the config file (defaults to ~/.config/depot/cli.toml)
            **kwargs: Extra arguments passed to the constructor

        Raises:
            ValueError: If the config has no cli.url entry
        """
        config = ConfigManager(path)
        url = config.depot_url
        if not url:
            raise ValueError(f"No depot url configured in {config.config_path} (expected cli.url)")

        kwargs.setdefault("timeout", config.timeout)
        return cls(url, **kwargs)

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self.session.close()
            self.logger.debug("DepotClient session closed and connections released")

    def __enter__(self) -> "DepotClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Optional[type], exc_val: Optional[BaseException], exc_tb: Optional[Any]) -> None:
        """Context manager exit - ensures session is closed."""
        self.close()

    def _download(self, label: str, url: str, destination: str) -> str:
        return download(self.session, label, url, destination, progress=self.progress, logger=self.logger)

    def fetch_key(self, key: str, destination: str) -> str:
        """Download a public key into a directory.

        Args:
            key: Name of the key, e.g. "core-20160423193745"
            destination: Directory to write the key file to

        Returns:
            Path of the downloaded key file

        Raises:
            DepotHTTPError: If the key cannot be found or the depot fails
            NoXFilenameError: If the depot response names no file
            OSError: If the file cannot be created and written
        """
        log_operation_start("key download", self.logger, key=key)
        path = self._download(key, url_fetch_key(self.url, key), destination)
        log_operation_complete("key download", self.logger, path=path)
        return path

    def fetch_package(self, ident: PackageIdent, destination: str) -> PackageArchive:
        """Download a package archive into a directory.

        A partial identifier fetches the latest matching release; a fully
        qualified one fetches that exact package.

        Args:
            ident: Package identifier
            destination: Directory to write the archive to

        Returns:
            Handle to the downloaded archive

        Raises:
            RemotePackageNotFound: If the depot has no such package
            DepotHTTPError: For any other non-200 status
            NoXFilenameError: If the depot response names no file
            OSError: If the file cannot be created and written
        """
        log_operation_start("package download", self.logger, ident=ident)
        try:
            path = self._download(ident.name, url_fetch_package(self.url, ident), destination)
        except DepotHTTPError as e:
            if e.status_code == httpx.codes.NOT_FOUND:
                raise RemotePackageNotFound(ident) from e
            raise

        log_operation_complete("package download", self.logger, path=path)
        return PackageArchive(path=Path(path))

    def show_package(self, ident: PackageIdent) -> PackageMetadata:
        """Return the depot's description of a package.

        A partial identifier describes the latest matching release.

        Raises:
            RemotePackageNotFound: If the depot has no such package
            DepotHTTPError: For any other non-200 status
            MetadataDecodeError: If the response body is not valid package metadata
        """
        url = url_show_package(self.url, ident)
        self.logger.debug("Making request to url %s", url)
        response = self.session.get(url)

        if response.status_code == httpx.codes.NOT_FOUND:
            raise RemotePackageNotFound(ident)
        if response.status_code != httpx.codes.OK:
            raise DepotHTTPError(response.status_code, url)

        self.logger.debug("Body: %s", response.text)
        try:
            return PackageMetadata.model_validate_json(response.content)
        except ValidationError as e:
            raise MetadataDecodeError(ident, str(e)) from e

    def put_key(self, path: Union[str, Path]) -> None:
        """Upload a public key file.

        The key is published under its file name.

        Raises:
            NoFilePartError: If the path has no file name component
            DepotHTTPError: If the depot rejects the upload
            OSError: If the file cannot be read
        """
        file_name = os.path.basename(os.fspath(path))
        if file_name in ("", ".", ".."):
            raise NoFilePartError(path)

        url = url_put_key(self.url, file_name)
        log_operation_start("key upload", self.logger, file=file_name)
        with open(path, "rb") as file:
            upload(self.session, url, file, logger=self.logger)
        log_operation_complete("key upload", self.logger, file=file_name)

    def put_package(self, package: Package) -> None:
        """Upload a package archive from the local cache.

        The archive's SHA256 checksum is sent with the upload so the depot
        can verify what it receives.

        Raises:
            DepotHTTPError: If the depot rejects the upload
            OSError: If the archive cannot be read
        """
        log_operation_start("package upload", self.logger, ident=package.ident)
        with open(package.cache_file, "rb") as file:
            checksum = calculate_sha256_checksum(file)
            upload(self.session, url_put_package(self.url, package, checksum), file, logger=self.logger)
        log_operation_complete("package upload", self.logger, ident=package.ident, checksum=checksum)


__all__ = ["DepotClient"]
