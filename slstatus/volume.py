"""Master volume of an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct

from .util import warn

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic",
    "cd", "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2",
    "line3", "dig1", "dig2", "dig3", "phin", "phout", "video", "radio",
    "monitor",
)

# _IOR('M', nr, int)
_MIXER_READ_BASE = 0x80044D00
_SOUND_MIXER_READ_DEVMASK = _MIXER_READ_BASE | 0xFE


def _read_int(fd: int, request: int) -> int:
    reply = fcntl.ioctl(fd, request, struct.pack("i", 0))
    return struct.unpack("i", reply)[0]


def vol_perc(card: str) -> str | None:
    """Return the volume of the 'vol' channel of mixer ``card`` in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        warn(f"open '{card}': {exc.strerror or exc}")
        return None

    try:
        try:
            devmask = _read_int(fd, _SOUND_MIXER_READ_DEVMASK)
        except OSError as exc:
            warn(f"ioctl 'SOUND_MIXER_READ_DEVMASK': {exc.strerror or exc}")
            return None

        value = None
        for index, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << index) and name == "vol":
                try:
                    value = _read_int(fd, _MIXER_READ_BASE | index)
                except OSError as exc:
                    warn(f"ioctl 'MIXER_READ({index})': {exc.strerror or exc}")
                    return None
    finally:
        os.close(fd)

    if value is None:
        return None
    return str(value & 0xFF)