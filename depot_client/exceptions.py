"""
Exceptions raised by depot-client.

Every failure the client can report has its own class rooted at
DepotError, so callers only special-case the kind they care about and
let the rest propagate. Local I/O failures are left as OSError and
network failures as httpx.HTTPError.
"""

from typing import Any, Optional


class DepotError(Exception):
    """Base class for depot-client errors."""


class DepotHTTPError(DepotError):
    """The depot answered with a non-success status code."""

    def __init__(self, status_code: int, url: Optional[str] = None) -> None:
        self.status_code = status_code
        self.url = url
        message = f"HTTP {status_code}"
        if url:
            message = f"{message} from {url}"
        super().__init__(message)


class RemotePackageNotFound(DepotError):
    """The requested package does not exist in the depot."""

    def __init__(self, ident: Any) -> None:
        self.ident = ident
        super().__init__(f"Cannot find package in any sources: {ident}")


class NoXFilenameError(DepotError):
    """A download response did not say which file name to use."""

    def __init__(self, url: Optional[str] = None) -> None:
        self.url = url
        super().__init__(f"Invalid download from depot - missing X-Filename header: {url}")


class WriteSyncFailedError(DepotError):
    """The output file stopped accepting bytes during a download."""

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(f"Could not write to destination; write did not progress: {path}")


class NoFilePartError(DepotError):
    """A local path has no file name component."""

    def __init__(self, path: Any) -> None:
        self.path = path
        super().__init__(f"Path has no file name component: {path}")


class MetadataDecodeError(DepotError):
    """The depot returned package metadata that could not be decoded."""

    def __init__(self, ident: Any, detail: str) -> None:
        self.ident = ident
        self.detail = detail
        super().__init__(f"Invalid package metadata for {ident}: {detail}")


__all__ = [
    "DepotError",
    "DepotHTTPError",
    "RemotePackageNotFound",
    "NoXFilenameError",
    "WriteSyncFailedError",
    "NoFilePartError",
    "MetadataDecodeError",
]
