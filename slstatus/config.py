"""Status bar configuration: refresh interval, placeholder and components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .battery import battery_perc, battery_state
from .command import run_command
from .cpu import cpu_perc
from .memory import ram_perc
from .network import netspeed_rx, netspeed_tx
from .system import datetime

VERSION = "1.0"

# Time between updates, in milliseconds.
INTERVAL = 1000

# Text shown when a component yields no value.
UNKNOWN_STR = "n/a"

# Size of the status text in bytes, terminator included.
MAXLEN = 2048

Component = Callable[[Optional[str]], Optional[str]]


@dataclass(frozen=True)
class Arg:
    """One status entry: a component, its format and its argument."""

    func: Component
    fmt: str
    args: str | None = None

    def value(self) -> str | None:
        """Run the component on its argument."""
        return self.func(self.args)


def default_args() -> list[Arg]:
    """Return the configured status entries in display order."""
    return [
        Arg(
            run_command,
            "[🎧 %s] ",
            "amixer sget Master | tail -1 | awk '{print $5 }' "
            "| sed 's@\\(\\[\\|\\]\\)@@g'",
        ),
        Arg(cpu_perc, "[⚡ %s%] ", None),
        Arg(ram_perc, "[🚀 %s%] ", None),
        Arg(battery_state, "[🔌  %s] ", "BAT1"),
        Arg(battery_perc, "[🔋 %s%] ", "BAT1"),
        Arg(netspeed_rx, "[🔻 %sB/s] ", "wlp0s20f3"),
        Arg(netspeed_tx, "[🔺 %sB/s] ", "wlp0s20f3"),
        Arg(datetime, "[📅 %s]", "%F %r"),
    ]