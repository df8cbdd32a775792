"""Output of a custom shell command."""

from __future__ import annotations

import subprocess

from .util import MAX_LINE, warn


def run_command(cmd: str) -> str | None:
    """Run ``cmd`` in the shell and return the first line it prints.

    Returns None when the command cannot be started or prints nothing.
    """
    try:
        completed = subprocess.run(
            cmd,
            shell=True,
            stdout=subprocess.PIPE,
            stdin=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        warn(f"popen '{cmd}': {exc.strerror or exc}")
        return None

    output = completed.stdout.decode("utf-8", errors="replace")
    if not output:
        return None
    line = output.splitlines(keepends=True)[0][:MAX_LINE]
    line = line.removesuffix("\n")
    return line or None