"""Byte-size probe for the asset behind a content record."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

SizeProbe = Callable[[str], int]


def file_size(location: str) -> int:
    """Return the size in bytes of the file at *location*, or 0 if absent.

    Raises OSError (or ValueError for malformed paths) when the file
    exists but cannot be stat'ed; callers decide whether that is fatal.
    """
    path = Path(location)
    if not path.is_file():
        return 0
    return path.stat().st_size
