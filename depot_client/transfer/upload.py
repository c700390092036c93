"""
Streaming upload of local files to the depot.
"""

import logging
import os
from typing import BinaryIO, Iterator, Optional

import httpx

from ..exceptions import DepotHTTPError
from ..utils.constants import BUFFER_SIZE
from ..utils.logger import get_logger
from ..utils.logging_utils import log_transfer

_logger = get_logger(__name__)


def _iter_file(file: BinaryIO) -> Iterator[bytes]:
    """Yield the rest of file in BUFFER_SIZE pieces."""
    for chunk in iter(lambda: file.read(BUFFER_SIZE), b""):
        yield chunk


def upload(session: httpx.Client, url: str, file: BinaryIO, logger: Optional[logging.Logger] = None) -> None:
    """
    Upload the whole content of an open file to the depot.

    The file is rewound first, so a handle that has already been read
    (for example to compute its checksum) is sent in full. The body is
    streamed with its exact length declared up front.

    Args:
        session: HTTP client to use
        url: URL to POST to
        file: File opened in binary mode
        logger: Logger to use

    Raises:
        DepotHTTPError: If the depot answers with a non-2xx status
        OSError: If the file cannot be read
        httpx.HTTPError: If the connection fails
    """
    log = logger or _logger

    log.debug("Uploading to %s", url)
    length = file.seek(0, os.SEEK_END)
    file.seek(0)

    response = session.post(url, content=_iter_file(file), headers={"Content-Length": str(length)})
    if not response.is_success:
        log.debug("Response %s", response)
        raise DepotHTTPError(response.status_code, url)

    log_transfer("Uploaded", url, length, log)


__all__ = ["upload"]
