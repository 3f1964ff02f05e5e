#!/usr/bin/env python3
# terminal/ui/utils/__init__.py
from __future__ import annotations
from .ansi import (
    ANSI,
    RED,
    GREEN,
    YELLOW,
    BLUE,
    MAGENTA,
    CYAN,
    GRAY,
    CLEAR_LINE,
    strip_ansi,
    colorize,
    paint,
    cursor_left,
    cursor_right,
)
from .console import print_line, info, error, success, warn

__all__ = [
    "ANSI",
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "MAGENTA",
    "CYAN",
    "GRAY",
    "CLEAR_LINE",
    "strip_ansi",
    "colorize",
    "paint",
    "cursor_left",
    "cursor_right",
    "print_line",
    "info",
    "error",
    "success",
    "warn",
]
