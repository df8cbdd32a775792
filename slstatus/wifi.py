"""WiFi signal quality and network name."""

from __future__ import annotations

import array
import fcntl
import re
import socket
import struct
from pathlib import Path

from .util import MAX_LINE, warn

NET_CLASS = "/sys/class/net"
PROC_WIRELESS = "/proc/net/wireless"

# Highest link quality reported by the wireless statistics file.
MAX_QUALITY = 70

IW_ESSID_MAX_SIZE = 32
_SIOCGIWESSID = 0x8B1B
_IFNAMSIZ = 16
_IWREQ_SIZE = 32

_LINK = re.compile(r"\s*[+-]?\d+\s*([+-]?\d+)")


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm onto 0-100."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def parse_wireless(text: str, interface: str) -> str | None:
    """Return the link quality of ``interface`` in percent.

    ``text`` is the content of the wireless statistics file; the third line
    is the one that is read.
    """
    lines = text.splitlines(keepends=True)
    if len(lines) < 3:
        return None
    line = lines[2][:MAX_LINE]

    pos = line.find(interface)
    if pos < 0:
        return None
    match = _LINK.match(line, pos + len(interface) + 2)
    if match is None:
        return None
    link = int(match.group(1))
    return str(int(link * 100 / MAX_QUALITY))


def wifi_perc(interface: str, root: str | Path = NET_CLASS) -> str | None:
    """Return the link quality of ``interface`` in percent while it is up."""
    operstate = Path(root, interface, "operstate")
    try:
        with open(operstate, encoding="utf-8", errors="replace") as fp:
            status = fp.readline(4)
    except OSError as exc:
        warn(f"fopen '{operstate}': {exc.strerror or exc}")
        return None
    if status != "up\n":
        return None

    try:
        with open(PROC_WIRELESS, encoding="utf-8", errors="replace") as fp:
            head = "".join(fp.readline() for _ in range(3))
    except OSError as exc:
        warn(f"fopen '{PROC_WIRELESS}': {exc.strerror or exc}")
        return None
    return parse_wireless(head, interface)


def wifi_essid(interface: str) -> str | None:
    """Return the ESSID ``interface`` is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("snprintf: Output truncated")
        return None

    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = bytearray(
        struct.pack("16sPHH", name, address, IW_ESSID_MAX_SIZE + 1, 0)
        .ljust(_IWREQ_SIZE, b"\0")
    )

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        warn(f"socket 'AF_INET': {exc.strerror or exc}")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request, True)
        except OSError as exc:
            warn(f"ioctl 'SIOCGIWESSID': {exc.strerror or exc}")
            return None

    result = essid.tobytes().split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return result or None