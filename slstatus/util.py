"""Shared helpers: diagnostics, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys
from pathlib import Path

PREFIXES: dict[int, tuple[str, ...]] = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

# A line read from a file is cut to this many characters.
MAX_LINE = 1022

_INTEGER = re.compile(r"\s*([+-]?\d+)")


class FatalError(Exception):
    """An error after which the program cannot go on."""


def warn(message: str) -> None:
    """Write a diagnostic line to standard error."""
    print(message, file=sys.stderr)


def die(message: str) -> None:
    """Abort with a fatal error carrying ``message``."""
    raise FatalError(message)


def fmt_human(num: int | float, base: int) -> str:
    """Scale ``num`` by ``base`` and attach the matching unit prefix."""
    try:
        prefixes = PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: Invalid base {base}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_first_line(path: str | Path) -> str | None:
    """Return the first line of a file without its newline.

    Returns None when the file cannot be opened or holds no data.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            line = fp.readline(MAX_LINE)
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None
    if not line:
        return None
    return line.removesuffix("\n")


def read_int(path: str | Path) -> int | None:
    """Return the integer a file starts with, or None if there is none."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            text = fp.read()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else None