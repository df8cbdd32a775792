"""Battery charge, state and remaining time from the power-supply class."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .util import read_first_line, read_int

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

_STATE = re.compile(r"\s*([a-zA-Z ]{1,12})")


def _read_state(root: str | Path, bat: str) -> str | None:
    line = read_first_line(Path(root, bat, "status"))
    if line is None:
        return None
    match = _STATE.match(line)
    return match.group(1) if match else None


def _pick(root: str | Path, bat: str, *names: str) -> Path | None:
    for name in names:
        path = Path(root, bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str, root: str | Path = POWER_SUPPLY) -> str | None:
    """Return the battery capacity in percent."""
    capacity = read_int(Path(root, bat, "capacity"))
    return None if capacity is None else str(capacity)


def battery_state(bat: str, root: str | Path = POWER_SUPPLY) -> str | None:
    """Return '+', '-', 'o' or '?' for the charging state."""
    state = _read_state(root, bat)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str, root: str | Path = POWER_SUPPLY) -> str | None:
    """Return the time left as 'Hh Mm' while discharging, else ''."""
    state = _read_state(root, bat)
    if state is None:
        return None

    charge_path = _pick(root, bat, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_int(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(root, bat, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_int(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"