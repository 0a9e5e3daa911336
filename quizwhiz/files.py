"""Small filesystem helpers."""

from __future__ import annotations

import os


def file_exists(path: str | os.PathLike) -> bool:
    """Return True when *path* can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False