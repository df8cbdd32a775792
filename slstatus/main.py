"""Command line entry point and the status update loop."""

from __future__ import annotations

import os
import re
import shutil
import signal
import subprocess
import sys
import threading
import time
from dataclasses import dataclass
from typing import Iterable, TextIO

from .config import INTERVAL, MAXLEN, UNKNOWN_STR, VERSION, Arg, default_args
from .util import FatalError, die, warn

PROG = "slstatus"

_CONVERSION = re.compile(r"%(.?)", re.DOTALL)


@dataclass
class Options:
    """Command line options."""

    single: bool = False
    once: bool = False


def _usage() -> None:
    die(f"usage: {PROG} [-v] [-s] [-1]")


def parse_args(argv: Iterable[str]) -> Options:
    """Parse the arguments that follow the program name."""
    args = list(argv)
    options = Options()
    while args and args[0].startswith("-") and len(args[0]) > 1:
        arg = args.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                die(f"{PROG}-{VERSION}")
            elif flag == "1":
                options.once = True
                options.single = True
            elif flag == "s":
                options.single = True
            else:
                _usage()
    if args:
        _usage()
    return options


def render(fmt: str, value: str) -> str:
    """Substitute ``value`` for '%s' in ``fmt``; '%%' gives '%'.

    Other '%' sequences are kept as written.
    """

    def replace(match: re.Match[str]) -> str:
        spec = match.group(1)
        if spec == "s":
            return value
        if spec == "%":
            return "%"
        return match.group(0)

    return _CONVERSION.sub(replace, fmt)


def build_status(
    args: Iterable[Arg], unknown: str = UNKNOWN_STR, maxlen: int = MAXLEN
) -> str:
    """Concatenate the formatted entries into a text under ``maxlen`` bytes.

    An entry that does not fit is cut and ends the text.
    """
    status = b""
    for arg in args:
        value = arg.func(arg.args)
        if value is None:
            value = unknown
        piece = render(arg.fmt, value).encode()
        remaining = maxlen - len(status)
        if len(piece) >= remaining:
            warn("vsnprintf: Output truncated")
            status += piece[: max(remaining - 1, 0)]
            break
        status += piece
    return status.decode("utf-8", errors="ignore")


class _RootName:
    """Sets the name of the root window, which the window manager shows."""

    def __init__(self) -> None:
        self._tool = shutil.which("xsetroot")
        if not os.environ.get("DISPLAY") or self._tool is None:
            die("XOpenDisplay: Failed to open display")

    def store(self, name: str) -> None:
        try:
            subprocess.run(
                [self._tool, "-name", name],
                stdin=subprocess.DEVNULL,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError):
            die("XStoreName: Allocation failed")

    def clear(self) -> None:
        try:
            subprocess.run(
                [self._tool, "-name", ""], stdin=subprocess.DEVNULL, check=False
            )
        except OSError as exc:
            die(f"XCloseDisplay: Failed to close display: {exc.strerror or exc}")


class _Signals:
    """Stop on SIGINT/SIGTERM, refresh early on SIGUSR1."""

    def __init__(self, done: threading.Event, wake: threading.Event) -> None:
        self._done = done
        self._wake = wake
        self._previous: dict[int, object] = {}

    def _handler(self, signo: int, frame: object) -> None:
        if signo != signal.SIGUSR1:
            self._done.set()
        self._wake.set()

    def __enter__(self) -> _Signals:
        if threading.current_thread() is threading.main_thread():
            for signo in (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1):
                self._previous[signo] = signal.signal(signo, self._handler)
        return self

    def __exit__(self, *exc_info: object) -> None:
        for signo, handler in self._previous.items():
            signal.signal(signo, handler)


def run(
    args: Iterable[Arg],
    options: Options,
    interval: int = INTERVAL,
    out: TextIO | None = None,
) -> None:
    """Update the status every ``interval`` milliseconds until stopped."""
    args = list(args)
    out = sys.stdout if out is None else out
    done = threading.Event()
    wake = threading.Event()
    if options.once:
        done.set()

    root = None if options.single else _RootName()

    with _Signals(done, wake):
        while True:
            start = time.monotonic()
            status = build_status(args, UNKNOWN_STR, MAXLEN)

            if root is None:
                try:
                    print(status, file=out)
                    out.flush()
                except OSError as exc:
                    die(f"puts: {exc.strerror or exc}")
            else:
                root.store(status)

            if done.is_set():
                break
            wait = interval / 1000 - (time.monotonic() - start)
            if wait >= 0:
                wake.wait(wait)
                wake.clear()
            if done.is_set():
                break

    if root is not None:
        root.clear()


def main(argv: list[str] | None = None) -> int:
    """Run the status program; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
        run(default_args(), options, INTERVAL, sys.stdout)
    except FatalError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())