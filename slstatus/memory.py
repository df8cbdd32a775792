"""Memory and swap usage from the kernel's meminfo file."""

from __future__ import annotations

from pathlib import Path

from .util import fmt_human, warn

MEMINFO = "/proc/meminfo"


def read_meminfo(path: str | Path = MEMINFO) -> dict[str, int] | None:
    """Return the fields of a meminfo file in kB, keyed by name."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None
    fields: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        parts = rest.split()
        if not parts:
            continue
        try:
            fields[name.strip()] = int(parts[0])
        except ValueError:
            continue
    return fields


def _fields(path: str | Path, *names: str) -> tuple[int, ...] | None:
    info = read_meminfo(path)
    if info is None:
        return None
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def ram_free(unused: str | None = None, path: str | Path = MEMINFO) -> str | None:
    """Return the memory available for new work."""
    values = _fields(path, "MemAvailable")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_perc(unused: str | None = None, path: str | Path = MEMINFO) -> str | None:
    """Return memory usage, excluding buffers and cache, in percent."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    if total == 0:
        return None
    return str(_trunc_div(100 * ((total - free) - (buffers + cached)), total))


def ram_total(unused: str | None = None, path: str | Path = MEMINFO) -> str | None:
    """Return the size of memory."""
    values = _fields(path, "MemTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(unused: str | None = None, path: str | Path = MEMINFO) -> str | None:
    """Return the memory in use, excluding buffers and cache."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(unused: str | None = None, path: str | Path = MEMINFO) -> str | None:
    """Return the free swap space."""
    values = _fields(path, "SwapFree")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_perc(unused: str | None = None, path: str | Path = MEMINFO) -> str | None:
    """Return swap usage in percent."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(_trunc_div(100 * (total - free - cached), total))


def swap_total(unused: str | None = None, path: str | Path = MEMINFO) -> str | None:
    """Return the size of swap."""
    values = _fields(path, "SwapTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_used(unused: str | None = None, path: str | Path = MEMINFO) -> str | None:
    """Return the swap space in use, excluding swap cache."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)