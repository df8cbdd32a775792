"""CPU frequency and usage."""

from __future__ import annotations

from pathlib import Path

from .util import fmt_human, read_int, warn

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

# user nice system idle iowait irq softirq
_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


class CpuMeter:
    """Measures CPU usage between successive readings of a stat file."""

    def __init__(self, stat_path: str | Path = PROC_STAT) -> None:
        self.stat_path = Path(stat_path)
        self._previous: tuple[float, ...] | None = None

    def _read(self) -> tuple[float, ...] | None:
        try:
            text = self.stat_path.read_text()
        except OSError as exc:
            warn(f"fopen '{self.stat_path}': {exc.strerror or exc}")
            return None
        tokens = text.split()[1 : 1 + _FIELDS]
        if len(tokens) != _FIELDS:
            return None
        try:
            return tuple(float(token) for token in tokens)
        except ValueError:
            return None

    def perc(self) -> str | None:
        """Return usage in percent since the last call; None on the first."""
        current = self._read()
        if current is None:
            return None
        previous, self._previous = self._previous, current
        if previous is None or previous[0] == 0:
            return None

        total = sum(current) - sum(previous)
        if total == 0:
            return None
        busy = sum(current[i] for i in _BUSY) - sum(previous[i] for i in _BUSY)
        return str(int(100 * busy / total))


_METER = CpuMeter()


def cpu_freq(unused: str | None = None, path: str | Path = CPU_FREQ) -> str | None:
    """Return the frequency of the first CPU in human units of Hz."""
    freq_khz = read_int(path)
    if freq_khz is None:
        return None
    return fmt_human(freq_khz * 1000, 1000)


def cpu_perc(unused: str | None = None) -> str | None:
    """Return overall CPU usage in percent since the previous call."""
    return _METER.perc()