"""
Streaming download of depot files.

The response body is copied to a staging file next to its destination
and only renamed to its final name once the whole body has been written,
so a file at the final path is always complete.
"""

import logging
import os
from typing import BinaryIO, Callable, Optional

import httpx

from ..exceptions import DepotHTTPError, NoXFilenameError, WriteSyncFailedError
from ..models.transfer import TransferDescriptor
from ..utils.constants import BUFFER_SIZE, UNKNOWN_LENGTH, X_FILENAME_HEADER
from ..utils.logger import get_logger
from ..utils.logging_utils import log_transfer
from .progress import ProgressReporter

ProgressCallback = Callable[[str, int, str, bool], None]

_logger = get_logger(__name__)


def _file_name_from_headers(headers: httpx.Headers) -> Optional[str]:
    """Return the announced file name reduced to its base name, if any."""
    file_name = headers.get(X_FILENAME_HEADER)
    if file_name is None:
        return None
    return os.path.basename(file_name.strip()) or None


def _write_chunk(writer: BinaryIO, chunk: bytes, path: str) -> int:
    """
    Write all of chunk to writer.

    Raises:
        WriteSyncFailedError: If the writer accepts zero bytes
    """
    view = memoryview(chunk)
    while view:
        bytes_written = writer.write(view)
        if not bytes_written:
            raise WriteSyncFailedError(path)
        view = view[bytes_written:]
    return len(chunk)


def download(
    session: httpx.Client,
    label: str,
    url: str,
    destination: str,
    progress: Optional[ProgressCallback] = None,
    logger: Optional[logging.Logger] = None,
) -> str:
    """
    Download a file from the depot into a directory.

    Args:
        session: HTTP client to use
        label: Label used for progress output
        url: URL to download from
        destination: Directory the file is written to
        progress: Progress callback (defaults to a ProgressReporter on stdout)
        logger: Logger to use

    Returns:
        Path of the downloaded file

    Raises:
        DepotHTTPError: If the response status is not 200
        NoXFilenameError: If the response lacks the X-Filename header
        WriteSyncFailedError: If the staging file stops accepting bytes
        OSError: If the staging file cannot be written or renamed;
            the staging file is left in place
        httpx.HTTPError: If the connection fails
    """
    log = logger or _logger
    report = progress or ProgressReporter()

    log.debug("Making request to url %s", url)
    with session.stream("GET", url) as response:
        log.debug("Response: %s", response)

        if response.status_code != httpx.codes.OK:
            raise DepotHTTPError(response.status_code, url)

        file_name = _file_name_from_headers(response.headers)
        if file_name is None:
            raise NoXFilenameError(url)

        transfer = TransferDescriptor(
            file_name=file_name,
            destination=destination,
            length=response.headers.get("content-length", UNKNOWN_LENGTH),
        )

        with open(transfer.temp_path, "wb", buffering=BUFFER_SIZE) as writer:
            for chunk in response.iter_bytes(chunk_size=BUFFER_SIZE):
                if not chunk:
                    continue
                transfer.written += _write_chunk(writer, chunk, transfer.temp_path)
                report(label, transfer.written, transfer.length, False)
            report(label, transfer.written, transfer.length, True)

    os.replace(transfer.temp_path, transfer.final_path)
    log_transfer("Downloaded", transfer.final_path, transfer.written, log)
    return transfer.final_path


__all__ = ["download", "ProgressCallback"]
