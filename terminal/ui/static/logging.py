#!/usr/bin/env python3
# terminal/ui/static/logging.py
from __future__ import annotations

"""
Logging setup for the console.

Records go to stderr, colored by level when stderr is a terminal, and
optionally to a rotating plain-text file. Command output never goes
through logging; it is printed with the helpers in terminal.ui.utils.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, TextIO

from terminal.ui.utils import colorize, strip_ansi

CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_MAX_BYTES = 2_000_000
LOG_FILE_BACKUPS = 3


class ColorizingStreamHandler(logging.StreamHandler):
    """StreamHandler that colors records by level on a TTY, plain otherwise."""

    LEVEL_STYLES = {
        logging.DEBUG: ("bright_black",),
        logging.WARNING: ("yellow",),
        logging.ERROR: ("red",),
        logging.CRITICAL: ("magenta", "bold"),
    }

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        super().__init__(stream)
        isatty = getattr(self.stream, "isatty", None)
        self.use_color = bool(isatty and isatty())

    def format(self, record: logging.LogRecord) -> str:
        message = strip_ansi(super().format(record))
        if self.use_color:
            message = colorize(message, *self.LEVEL_STYLES.get(record.levelno, ()))
        return message


class PlainFormatter(logging.Formatter):
    """Formatter without escape codes, for log files."""

    def format(self, record: logging.LogRecord) -> str:
        return strip_ansi(super().format(record))


def _file_handler(path: str) -> RotatingFileHandler:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(PlainFormatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
    return handler


def init_logger(
    name: str = "terminal",
    level: int | str = logging.WARNING,
    logfile: Optional[str] = None,
) -> logging.Logger:
    """
    Configure and return the `name` logger.

    Safe to call more than once: existing handlers are reused and only
    their level is updated.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    console = next((h for h in logger.handlers if isinstance(h, ColorizingStreamHandler)), None)
    if console is None:
        console = ColorizingStreamHandler(stream=sys.stderr)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console)
    console.setLevel(level)

    if logfile and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        logger.addHandler(_file_handler(logfile))

    return logger
