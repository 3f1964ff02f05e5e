#!/usr/bin/env python3
# terminal/errors.py
from __future__ import annotations

"""
Error taxonomy for the console runtime.

- CommandNotFound: no registered command matches a signature (recoverable).
- UnrecognizedEscapeSequence: the line editor could not decode an escape
  sequence (diagnostic only, the read continues).
- TerminalModeError: raw mode could not be entered or restored (fatal).
- ExecutionError: a command's own handler failed (shown to the user).
"""


class ConsoleError(Exception):
    """Base class for console runtime errors."""


class CommandNotFound(ConsoleError):
    def __init__(self, signature: str, hint: str = "") -> None:
        self.signature = signature
        self.hint = hint
        super().__init__(f"Command {signature} not found.{hint}")


class UnrecognizedEscapeSequence(ConsoleError):
    def __init__(self, sequence: bytes) -> None:
        self.sequence = sequence
        super().__init__(f"Unknown sequence: {sequence.hex()}")


class TerminalModeError(ConsoleError):
    """Raw terminal mode could not be entered or restored."""


class ExecutionError(ConsoleError):
    def __init__(self, message: str, usage: str | None = None) -> None:
        self.usage = usage
        super().__init__(message)

    def __str__(self) -> str:
        text = super().__str__()
        return f"{text}\nUsage: {self.usage}" if self.usage else text
