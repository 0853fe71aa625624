"""Terminal style table and ANSI helpers."""

from __future__ import annotations

import re
from typing import Dict

__all__ = ["STYLES", "RESET", "resolve_color", "strip_ansi"]

STYLES: Dict[str, str] = {
    "reset": "\x1b[0m",
    "bright": "\x1b[1m",
    "dim": "\x1b[2m",
    "underscore": "\x1b[4m",
    "blink": "\x1b[5m",
    "reverse": "\x1b[7m",
    "hidden": "\x1b[8m",
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "bgBlack": "\x1b[40m",
    "bgRed": "\x1b[41m",
    "bgGreen": "\x1b[42m",
    "bgYellow": "\x1b[43m",
    "bgBlue": "\x1b[44m",
    "bgMagenta": "\x1b[45m",
    "bgCyan": "\x1b[46m",
    "bgWhite": "\x1b[47m",
}

RESET = STYLES["reset"]

# CSI and single-character escapes, introduced by ESC or the 8-bit CSI byte.
_ANSI_RE = re.compile(r"[\u001b\u009b][\[()#;?]*(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-ORZcf-nqry=><]")


def _canonical(name: str) -> str:
    # bg_red / bg-red -> bgRed
    for sep in ("_", "-"):
        if name.lower().startswith("bg" + sep):
            return "bg" + name[3:].capitalize()
    return name


def resolve_color(name: str | None) -> str:
    """Return the escape sequence for ``name``, or ``""`` when falsy or unknown."""
    if not name:
        return ""
    return STYLES.get(name) or STYLES.get(_canonical(name), "")


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)
