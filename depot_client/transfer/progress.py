"""
Progress reporting for transfers.

Progress is drawn on a single terminal line: each update backspaces over
the previous rendering and prints the new one, and the final update ends
the line.
"""

from typing import Optional, TextIO

import click


def format_progress(label: str, written: int, length: str) -> str:
    """
    Render the progress text for a transfer.

    Example:
        >>> format_progress("core/redis", 500, "1000")
        'core/redis 500/1000'
    """
    return f"{label} {written}/{length}"


def backspaces(text: str) -> str:
    """Return the backspaces needed to erase a rendering of the same byte length."""
    return "\x08" * len(text.encode("utf-8"))


class ProgressReporter:
    """Writes transfer progress to a terminal stream."""

    def __init__(self, stream: Optional[TextIO] = None, enabled: bool = True) -> None:
        """
        Args:
            stream: Output stream (defaults to standard output)
            enabled: If False, reports are dropped
        """
        self.stream = stream
        self.enabled = enabled

    def report(self, label: str, written: int, length: str, finished: bool = False) -> None:
        """
        Draw one progress update.

        Args:
            label: Label shown before the counters
            written: Bytes transferred so far
            length: Total length as text ("Unknown" if not known)
            finished: If True, terminate the line
        """
        if not self.enabled:
            return

        text = format_progress(label, written, length)
        click.echo(backspaces(text) + text, file=self.stream, nl=finished)

    __call__ = report


__all__ = ["format_progress", "backspaces", "ProgressReporter"]
