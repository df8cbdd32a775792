"""Temperature from a thermal sensor file."""

from __future__ import annotations

from pathlib import Path

from .util import read_int


def temp(file: str | Path) -> str | None:
    """Return the temperature in whole degrees Celsius.

    The sensor file holds the value in thousandths of a degree.
    """
    value = read_int(file)
    if value is None:
        return None
    degrees = abs(value) // 1000
    return str(degrees if value >= 0 else -degrees)