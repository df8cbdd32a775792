"""Date, host, kernel, load, uptime and user components."""

from __future__ import annotations

import os
import pwd
import socket
import time
from pathlib import Path

from .util import read_int, warn

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

# Results of this many bytes or more do not fit the output buffer.
MAX_RESULT = 1024

_UPTIME_CLOCK = getattr(
    time, "CLOCK_BOOTTIME", getattr(time, "CLOCK_UPTIME", time.CLOCK_MONOTONIC)
)


def datetime(fmt: str) -> str | None:
    """Return the local time formatted with ``fmt``."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result.encode()) >= MAX_RESULT:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def entropy(unused: str | None = None, path: str | Path = ENTROPY_AVAIL) -> str | None:
    """Return the available entropy."""
    value = read_int(path)
    return None if value is None else str(value)


def hostname(unused: str | None = None) -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        warn(f"gethostname: {exc.strerror or exc}")
        return None


def kernel_release(unused: str | None = None) -> str | None:
    """Return the kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except OSError as exc:
        warn(f"uname: {exc.strerror or exc}")
        return None


def load_avg(unused: str | None = None) -> str | None:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def format_uptime(seconds: float) -> str:
    """Format a number of seconds as 'Hh Mm'."""
    seconds = int(seconds)
    return f"{seconds // 3600}h {seconds % 3600 // 60}m"


def uptime(unused: str | None = None) -> str | None:
    """Return the system uptime as 'Hh Mm'."""
    try:
        seconds = time.clock_gettime(_UPTIME_CLOCK)
    except OSError:
        warn(f"clock_gettime {_UPTIME_CLOCK}")
        return None
    return format_uptime(seconds)


def gid(unused: str | None = None) -> str:
    """Return the real group id."""
    return str(os.getgid())


def uid(unused: str | None = None) -> str:
    """Return the effective user id."""
    return str(os.geteuid())


def username(unused: str | None = None) -> str | None:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None