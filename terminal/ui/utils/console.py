#!/usr/bin/env python3
# terminal/ui/utils/console.py
from __future__ import annotations

import sys
from typing import TextIO

from .ansi import GREEN, RED, YELLOW, paint


def print_line(text: str = "", *, file: TextIO | None = None, flush: bool = False) -> None:
    """Write a single line to `file` (stdout when omitted)."""
    stream = file or sys.stdout
    stream.write(f"{text}\n")
    if flush:
        stream.flush()


def info(message: str, code: int = 0, *, file: TextIO | None = None) -> None:
    """Print `message` painted with SGR `code`."""
    print_line(paint(message, code), file=file, flush=True)


def error(message: str, *, file: TextIO | None = None) -> None:
    info(f"[ERROR] {message}\n", RED, file=file)


def success(message: str, *, file: TextIO | None = None) -> None:
    info(f"[SUCCESS] {message}\n", GREEN, file=file)


def warn(message: str, *, file: TextIO | None = None) -> None:
    info(f"[WARNING] {message}\n", YELLOW, file=file)
