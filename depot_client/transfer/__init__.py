"""
Transfer primitives for moving files to and from a depot.

Modules:
    - download: Streaming download with write-to-temp then rename
    - upload: Streaming upload with a declared body length
    - progress: Single-line progress output
"""

from .download import download
from .upload import upload
from .progress import ProgressReporter, backspaces, format_progress

__all__ = [
    "download",
    "upload",
    "ProgressReporter",
    "backspaces",
    "format_progress",
]
