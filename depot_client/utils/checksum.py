"""Checksum utilities for package uploads."""

import hashlib
from typing import BinaryIO

from .constants import BUFFER_SIZE


def calculate_sha256_checksum(file: BinaryIO) -> str:
    """
    Calculate the SHA256 checksum of an open file's full content.

    The file is read from its start; it is left positioned at EOF.

    Args:
        file: File opened in binary mode

    Returns:
        SHA256 checksum as hexadecimal string
    """
    sha256_hash = hashlib.sha256()
    file.seek(0)
    for chunk in iter(lambda: file.read(BUFFER_SIZE), b""):
        sha256_hash.update(chunk)
    return sha256_hash.hexdigest()


__all__ = ["calculate_sha256_checksum"]
