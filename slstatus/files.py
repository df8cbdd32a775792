"""Components that read a file or count the entries of a directory."""

from __future__ import annotations

import os
from pathlib import Path

from .util import read_first_line, warn


def cat(path: str | Path) -> str | None:
    """Return the first line of a file, or None when it is empty."""
    line = read_first_line(path)
    return line or None


def num_files(path: str | Path) -> str | None:
    """Return the number of entries in a directory."""
    try:
        with os.scandir(path) as entries:
            count = sum(1 for _ in entries)
    except OSError as exc:
        warn(f"opendir '{path}': {exc.strerror or exc}")
        return None
    return str(count)