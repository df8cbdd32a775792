"""Interface addresses and network throughput."""

from __future__ import annotations

import fcntl
import ipaddress
import socket
import struct
from pathlib import Path

from .util import fmt_human, read_int, warn

NET_CLASS = "/sys/class/net"
IF_INET6 = "/proc/net/if_inet6"

# Default time between two readings, in milliseconds.
INTERVAL = 1000

_SIOCGIFADDR = 0x8915
_IFNAMSIZ = 16
_LINK_LOCAL_SCOPE = 0x20


def _parse_if_inet6(text: str, interface: str) -> str | None:
    """Return the first IPv6 address of ``interface`` in if_inet6 text."""
    for line in text.splitlines():
        fields = line.split()
        if len(fields) != 6 or fields[5] != interface:
            continue
        try:
            address = ipaddress.IPv6Address(bytes.fromhex(fields[0]))
            scope = int(fields[3], 16)
        except ValueError:
            continue
        if scope == _LINK_LOCAL_SCOPE:
            return f"{address.compressed}%{interface}"
        return address.compressed
    return None


def ipv4(interface: str) -> str | None:
    """Return the IPv4 address of ``interface``."""
    request = struct.pack("256s", interface.encode()[: _IFNAMSIZ - 1])
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        warn(f"socket 'AF_INET': {exc.strerror or exc}")
        return None
    with sock:
        try:
            reply = fcntl.ioctl(sock.fileno(), _SIOCGIFADDR, request)
        except OSError:
            return None
    return socket.inet_ntoa(reply[20:24])


def ipv6(interface: str) -> str | None:
    """Return the IPv6 address of ``interface``."""
    try:
        text = Path(IF_INET6).read_text()
    except OSError as exc:
        warn(f"getifaddrs: {exc.strerror or exc}")
        return None
    return _parse_if_inet6(text, interface)


class NetSpeed:
    """Byte rate of one direction of an interface between two readings."""

    def __init__(
        self,
        direction: str,
        interval: int = INTERVAL,
        root: str | Path = NET_CLASS,
    ) -> None:
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = Path(root)
        self._bytes = 0

    def measure(self, interface: str) -> str | None:
        """Return bytes per second since the previous call; None on the first."""
        path = self.root / interface / "statistics" / f"{self.direction}_bytes"
        previous = self._bytes
        current = read_int(path)
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None
        return fmt_human((current - previous) * 1000 // self.interval, 1024)


_RX = NetSpeed("rx")
_TX = NetSpeed("tx")


def netspeed_rx(interface: str) -> str | None:
    """Return the receive rate of ``interface``."""
    return _RX.measure(interface)


def netspeed_tx(interface: str) -> str | None:
    """Return the transmit rate of ``interface``."""
    return _TX.measure(interface)