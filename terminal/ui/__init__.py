#!/usr/bin/env python3
# terminal/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
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
    print_line,
    info,
    error,
    success,
    warn,
)
from .static import (
    format_table,
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)

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
    "format_table",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
