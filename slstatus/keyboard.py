"""Keyboard indicator formatting and keymap layout selection."""

from __future__ import annotations

import re

# Symbols from the xkb rules configuration that name no layout.
_INVALID = ("evdev", "inet", "pc", "base")

_SEPARATORS = re.compile(r"[+:]")


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps/num lock state according to ``fmt``.

    ``fmt`` holds 'c' for caps lock and/or 'n' for num lock, either case,
    each optionally followed by '?'. With '?', the letter appears as written
    only while the indicator is on; without it, the letter always appears,
    upper case when on and lower case when off.
    """
    fmt = fmt[:4]
    out = []
    for i, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        togglecase = i + 1 >= len(fmt) or fmt[i + 1] != "?"
        isset = bool(led_mask & (1 << (key == "n")))
        if togglecase:
            out.append(key.upper() if isset else key)
        elif isset:
            out.append(char)
    return "".join(out)


def valid_layout_or_variant(sym: str) -> bool:
    """Tell whether ``sym`` names a layout rather than a rules symbol."""
    return not sym.startswith(_INVALID)


def get_layout(symbols: str, group: int) -> str | None:
    """Return the layout of keyboard group ``group`` in an xkb symbols name."""
    layout = None
    found = 0
    for token in filter(None, _SEPARATORS.split(symbols)):
        if found > group:
            break
        if not valid_layout_or_variant(token):
            continue
        if len(token) == 1 and token.isdigit():
            # :2, :3, :4 mark additional layout groups
            continue
        layout = token
        found += 1
    return layout