#!/usr/bin/env python3
# terminal/interface/editor.py
from __future__ import annotations

"""
Raw-mode line editor.

The editor consumes an unbuffered byte stream one byte at a time and does
its own echo. It understands:

  printable text       inserted at the cursor (UTF-8, decoded incrementally)
  Enter  (\\n, \\r)      completes the line
  Backspace (0x7f, 0x08) deletes the character before the cursor
  Ctrl-D (0x04)        ends input when the buffer is empty
  ESC [ A/B/C/D        history up/down, cursor right/left
  ESC O A/B/C/D        same, application cursor mode

Anything else after ESC is reported as an unrecognized sequence and the
read continues with the buffer untouched. A control byte (ESC, Enter,
Backspace, Ctrl-D) arriving mid-sequence reports the partial sequence and
keeps its own meaning.
"""

import codecs
import contextlib
import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import BinaryIO, Callable, Iterator, List, Optional, TextIO

from terminal.errors import UnrecognizedEscapeSequence
from terminal.interface.parser import tokenize
from terminal.interface.rawmode import RawTerminal
from terminal.ui import CLEAR_LINE, cursor_left, cursor_right

logger = logging.getLogger("terminal.editor")

ESC = 0x1B
ENTER_KEYS = (0x0A, 0x0D)
BACKSPACE_KEYS = (0x7F, 0x08)
CTRL_D = 0x04

# Longest escape sequence we keep buffering before giving up on it
_MAX_ESCAPE_LEN = 16


def _is_control(byte: int) -> bool:
    return byte < 0x20 or byte == 0x7F


class KeyState(Enum):
    READING = "reading"
    ESCAPE_START = "escape_start"
    ESCAPE_BRACKET = "escape_bracket"
    DONE = "done"
    ABORTED = "aborted"


class History:
    """
    Append-only record of submitted lines, shared across reads.

    Unbounded by default. With a positive `limit` the oldest entries are
    dropped once the limit is exceeded.
    """

    def __init__(self, entries: Optional[List[str]] = None, limit: Optional[int] = None) -> None:
        self.limit = limit if limit and limit > 0 else None
        self._entries: List[str] = []
        for entry in entries or []:
            self.append(entry)

    def append(self, line: str) -> None:
        self._entries.append(line)
        if self.limit is not None and len(self._entries) > self.limit:
            del self._entries[: len(self._entries) - self.limit]

    def entries(self) -> List[str]:
        return list(self._entries)

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


@dataclass
class EditorState:
    """Transient state of a single line read."""

    buffer: List[str] = field(default_factory=list)
    cursor: int = 0
    history_index: Optional[int] = None
    key_state: KeyState = KeyState.READING
    escape: bytearray = field(default_factory=bytearray)

    @property
    def text(self) -> str:
        return "".join(self.buffer)


class LineEditor:
    """
    Read one line at a time from a raw byte stream.

    `terminal` is the raw-mode context acquired around each read; pass None
    when the stream is not a terminal (pipes, tests).
    """

    def __init__(
        self,
        history: Optional[History] = None,
        *,
        stdin: Optional[BinaryIO] = None,
        stdout: Optional[TextIO] = None,
        terminal: Optional[RawTerminal] = None,
        prompt: str = "",
    ) -> None:
        self.history = history if history is not None else History()
        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.stdout = stdout if stdout is not None else sys.stdout
        self.terminal = terminal
        self.prompt = prompt
        self.state = EditorState()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def buffer(self) -> str:
        return self.state.text

    @property
    def cursor(self) -> int:
        return self.state.cursor

    def reset(self) -> None:
        """Start a fresh read session."""
        self.state = EditorState()
        self._decoder.reset()

    def read_line(
        self,
        on_line: Optional[Callable[..., object]] = None,
        *,
        split: bool = False,
    ) -> Optional[str]:
        """
        Read bytes until Enter and return the completed line.

        Returns None when the stream ends first (nothing is appended to the
        history). On success the line is appended to the history, even when
        empty, and `on_line` is called with the line, or with its tokens when
        `split` is true.
        """
        self.reset()
        scope = self.terminal if self.terminal is not None else contextlib.nullcontext()
        with scope:
            self._write(self.prompt)
            while self.state.key_state not in (KeyState.DONE, KeyState.ABORTED):
                data = self.stdin.read(1)
                if not data:
                    self._abort()
                    break
                self.feed(data)

        if self.state.key_state is KeyState.ABORTED:
            return None

        line = self.state.text
        self.history.append(line)
        self.reset()
        if on_line is not None:
            on_line(tokenize(line) if split else line)
        return line

    def feed(self, data: bytes) -> KeyState:
        """Process raw bytes against the current session state."""
        for byte in data:
            if self.state.key_state in (KeyState.DONE, KeyState.ABORTED):
                break
            try:
                self._feed_byte(byte)
            except UnrecognizedEscapeSequence as exc:
                self._report(exc)
        return self.state.key_state

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def _feed_byte(self, byte: int) -> None:
        state = self.state

        if state.key_state in (KeyState.ESCAPE_START, KeyState.ESCAPE_BRACKET) \
                and _is_control(byte):
            # A control byte ends the pending sequence and is then handled as usual
            self._interrupt_escape()

        if state.key_state is KeyState.ESCAPE_START:
            state.escape.append(byte)
            if byte in (ord("["), ord("O")):
                state.key_state = KeyState.ESCAPE_BRACKET
                return
            self._fail_escape()

        if state.key_state is KeyState.ESCAPE_BRACKET:
            state.escape.append(byte)
            if 0x30 <= byte <= 0x3F and len(state.escape) < _MAX_ESCAPE_LEN:
                return
            self._decode_escape()
            return

        if byte == ESC:
            self._decoder.reset()
            state.key_state = KeyState.ESCAPE_START
            state.escape = bytearray([byte])
        elif byte in ENTER_KEYS:
            state.key_state = KeyState.DONE
            self._write("\n")
        elif byte in BACKSPACE_KEYS:
            self._backspace()
        elif byte == CTRL_D and not state.buffer:
            self._abort()
        else:
            for char in self._decoder.decode(bytes([byte])):
                if char.isprintable():
                    self._insert(char)

    def _decode_escape(self) -> None:
        sequence = bytes(self.state.escape)
        actions = {
            ord("A"): self._history_up,
            ord("B"): self._history_down,
            ord("C"): self._cursor_right,
            ord("D"): self._cursor_left,
        }
        action = actions.get(sequence[-1]) if len(sequence) == 3 else None
        if action is None:
            self._fail_escape()
        self._end_escape()
        action()

    def _interrupt_escape(self) -> None:
        sequence = bytes(self.state.escape)
        self._end_escape()
        self._report(UnrecognizedEscapeSequence(sequence))

    def _fail_escape(self) -> None:
        sequence = bytes(self.state.escape)
        self._end_escape()
        raise UnrecognizedEscapeSequence(sequence)

    def _end_escape(self) -> None:
        self.state.key_state = KeyState.READING
        self.state.escape = bytearray()

    def _abort(self) -> None:
        self.state.key_state = KeyState.ABORTED
        self._write("\n")

    # ------------------------------------------------------------------
    # Editing actions
    # ------------------------------------------------------------------

    def _insert(self, char: str) -> None:
        state = self.state
        state.buffer.insert(state.cursor, char)
        state.cursor += 1
        tail = "".join(state.buffer[state.cursor:])
        self._write(char + tail + cursor_left(len(tail)))

    def _backspace(self) -> None:
        state = self.state
        if not state.buffer or state.cursor == 0:
            return
        del state.buffer[state.cursor - 1]
        state.cursor -= 1
        tail = "".join(state.buffer[state.cursor:])
        self._write(cursor_left(1) + tail + " " + cursor_left(len(tail) + 1))

    def _history_up(self) -> None:
        if not len(self.history):
            return
        state = self.state
        if state.history_index is None:
            state.history_index = len(self.history) - 1
        elif state.history_index > 0:
            state.history_index -= 1
        self._replace_buffer(self.history[state.history_index])

    def _history_down(self) -> None:
        state = self.state
        if state.history_index is None:
            return
        if state.history_index < len(self.history) - 1:
            state.history_index += 1
            self._replace_buffer(self.history[state.history_index])
        else:
            state.history_index = None
            self._replace_buffer("")

    def _cursor_right(self) -> None:
        if self.state.cursor < len(self.state.buffer):
            self.state.cursor += 1
            self._write(cursor_right(1))

    def _cursor_left(self) -> None:
        if self.state.cursor > 0:
            self.state.cursor -= 1
            self._write(cursor_left(1))

    def _replace_buffer(self, text: str) -> None:
        self.state.buffer = list(text)
        self.state.cursor = len(self.state.buffer)
        self._redraw()

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _redraw(self) -> None:
        state = self.state
        self._write(CLEAR_LINE + self.prompt + state.text
                    + cursor_left(len(state.buffer) - state.cursor))

    def _report(self, exc: UnrecognizedEscapeSequence) -> None:
        if not logger.isEnabledFor(logging.WARNING):
            return
        self._write("\n")
        logger.warning(str(exc))
        self._redraw()

    def _write(self, text: str) -> None:
        if not text:
            return
        self.stdout.write(text)
        self.stdout.flush()
