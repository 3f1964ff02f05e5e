#!/usr/bin/env python3
# terminal/interface/rawmode.py
from __future__ import annotations

"""
Scoped raw-mode acquisition for POSIX terminals.

RawTerminal disables canonical mode and local echo on enter and restores
the saved attributes on every exit path, including SIGTERM delivered while
a read is blocked.
"""

import logging
import signal
import termios
import threading
from typing import Any, Optional

from terminal.errors import TerminalModeError

logger = logging.getLogger("terminal.rawmode")

# One raw-mode session per process
_ACTIVE = threading.Lock()


def _raise_exit(signum: int, frame: Any) -> None:
    raise SystemExit(128 + signum)


class RawTerminal:
    """
    Raw-mode context manager for the terminal behind `fd`.

        with RawTerminal(sys.stdin.fileno()):
            ...read bytes...
    """

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._saved_attrs: Optional[list] = None
        self._saved_sigterm: Any = None
        self._sigterm_installed = False
        self._owns_lock = False

    @property
    def active(self) -> bool:
        return self._saved_attrs is not None

    def setup(self) -> None:
        if not _ACTIVE.acquire(blocking=False):
            raise TerminalModeError("A raw-mode session is already active.")
        self._owns_lock = True

        try:
            attrs = termios.tcgetattr(self.fd)
            raw_attrs = list(attrs)
            raw_attrs[3] = raw_attrs[3] & ~(termios.ICANON | termios.ECHO)
            raw_attrs[6] = list(raw_attrs[6])
            raw_attrs[6][termios.VMIN] = 1
            raw_attrs[6][termios.VTIME] = 0
            termios.tcsetattr(self.fd, termios.TCSADRAIN, raw_attrs)
        except (termios.error, OSError, ValueError) as exc:
            self._release()
            raise TerminalModeError(f"Cannot enter raw mode: {exc}") from exc

        self._saved_attrs = attrs
        if threading.current_thread() is threading.main_thread():
            self._saved_sigterm = signal.signal(signal.SIGTERM, _raise_exit)
            self._sigterm_installed = True
        logger.debug("Raw mode entered on fd %d", self.fd)

    def teardown(self) -> None:
        if self._saved_attrs is None:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved_attrs)
        except (termios.error, OSError, ValueError) as exc:
            raise TerminalModeError(f"Cannot restore terminal mode: {exc}") from exc
        finally:
            self._saved_attrs = None
            if self._sigterm_installed:
                previous = self._saved_sigterm
                signal.signal(signal.SIGTERM, signal.SIG_DFL if previous is None else previous)
                self._sigterm_installed = False
                self._saved_sigterm = None
            self._release()
        logger.debug("Raw mode restored on fd %d", self.fd)

    def _release(self) -> None:
        if self._owns_lock:
            self._owns_lock = False
            _ACTIVE.release()

    # Context manager helpers
    def __enter__(self) -> "RawTerminal":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()
