"""Transfer state models."""

import os

from pydantic import Field

from ..utils.constants import TEMP_SUFFIX, UNKNOWN_LENGTH
from .base import DepotBaseModel


class TransferDescriptor(DepotBaseModel):
    """
    State of one in-flight download.

    Created once the response headers are known and dropped after the
    file is renamed into place or the transfer fails.

    Attributes:
        file_name: Final file name announced by the server
        destination: Directory the file is written to
        written: Bytes written so far
        length: Declared total length, or "Unknown"
    """

    file_name: str
    destination: str
    written: int = Field(default=0, ge=0)
    length: str = UNKNOWN_LENGTH

    @property
    def final_path(self) -> str:
        """Path the completed file is committed to."""
        return os.path.join(self.destination, self.file_name)

    @property
    def temp_path(self) -> str:
        """Staging path written during the transfer."""
        return f"{self.final_path}{TEMP_SUFFIX}"


__all__ = ["TransferDescriptor"]
