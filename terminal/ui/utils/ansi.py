#!/usr/bin/env python3
# terminal/ui/utils/ansi.py
from __future__ import annotations

"""
SGR colors and the cursor controls used by the line editor.

Two ways to color text:
  paint(text, code)      numeric SGR code, applied line by line
  colorize(text, *names) named styles from ANSI, e.g. "green", "bold"
"""

import re

# Numeric foreground codes used by the status helpers
RED = 31
GREEN = 32
YELLOW = 33
BLUE = 34
MAGENTA = 35
CYAN = 36
GRAY = 37

# paint() accepts 0..97 (up to bright white)
MAX_COLOR_CODE = 97

_STYLE_CODES = {
    "reset": 0,
    "bold": 1,
    "dim": 2,
    "underline": 4,
    "black": 30,
    "red": RED,
    "green": GREEN,
    "yellow": YELLOW,
    "blue": BLUE,
    "magenta": MAGENTA,
    "cyan": CYAN,
    "gray": GRAY,
    "bright_black": 90,
    "bright_red": 91,
    "bright_green": 92,
    "bright_yellow": 93,
}


def sgr(code: int) -> str:
    return f"\x1b[{code}m"


ANSI = {name: sgr(code) for name, code in _STYLE_CODES.items()}

# Carriage return + erase to end of line
CLEAR_LINE = "\r\x1b[K"

# CSI sequences, including private-mode ones such as ESC[?25l
_CSI_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    """Remove CSI escape sequences from text."""
    return _CSI_RE.sub("", text)


def cursor_left(count: int = 1) -> str:
    return f"\x1b[{count}D" if count > 0 else ""


def cursor_right(count: int = 1) -> str:
    return f"\x1b[{count}C" if count > 0 else ""


def colorize(text: str, *styles: str) -> str:
    """Apply named styles; unknown names are ignored. Resets at the end."""
    prefix = "".join(ANSI[name] for name in styles if name in ANSI)
    if not prefix:
        return text
    return f"{prefix}{text}{ANSI['reset']}"


def paint(text: str, code: int = 0) -> str:
    """
    Wrap every line of `text` in SGR `code`, resetting at each line end.

    Codes outside [0, 97] are treated as 0 (no color).
    """
    if not 0 <= code <= MAX_COLOR_CODE:
        code = 0
    start, end = sgr(code), ANSI["reset"]
    return "\n".join(start + line + end for line in text.split("\n"))
