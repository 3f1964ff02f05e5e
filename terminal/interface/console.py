#!/usr/bin/env python3
# terminal/interface/console.py
from __future__ import annotations

"""
Console orchestrator: reads lines, dispatches them, decides what happens
next.

One-shot:    `console emails:send` runs a single command and returns.
Interactive: no signature (or a command with a continuation, such as
             `list`) switches the context to INTERACTIVE and the console
             keeps reading lines until `exit` or end of input.

On a miss the console reports CommandNotFound; in interactive mode it then
shows the fallback listing and waits for the next line.
"""

import sys
from typing import Optional, Sequence, TextIO

from terminal.errors import CommandNotFound, ExecutionError
from terminal.interface.context import ConsoleContext, ConsoleMode
from terminal.interface.editor import LineEditor
from terminal.interface.handler import suggest_similar_names
from terminal.interface.rawmode import RawTerminal
from terminal.ui import error, print_line


class Console:
    def __init__(self, context: ConsoleContext, editor: Optional[LineEditor] = None) -> None:
        self.context = context
        self.editor = editor if editor is not None else self._make_editor()

    @property
    def out(self) -> TextIO:
        return self.context.stdout or sys.stdout

    def _make_editor(self) -> LineEditor:
        stdin = self.context.stdin or sys.stdin.buffer
        isatty = getattr(stdin, "isatty", None)
        terminal = RawTerminal(stdin.fileno()) if isatty and isatty() else None
        return LineEditor(
            self.context.history,
            stdin=stdin,
            stdout=self.out,
            terminal=terminal,
            prompt=self.context.config.prompt,
        )

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def capture(self, argv: Sequence[str]) -> int:
        """
        Run the console for process arguments `argv` (program name excluded).

        Returns the exit status: 0 on success, 1 when a one-shot command is
        missing or fails, 130 when interrupted from the keyboard.
        """
        self.context.mode = ConsoleMode.ONE_SHOT
        signature, *args = list(argv) or [""]

        ok = self.handle(signature, args, reprompt=False)
        if self.context.mode is ConsoleMode.ONE_SHOT:
            return 0 if ok else 1

        try:
            self.interact()
        except KeyboardInterrupt:
            print_line(file=self.out)
            return 130
        return 0

    def interact(self) -> None:
        """Read and handle lines until end of input or `exit`."""
        self.context.mode = ConsoleMode.INTERACTIVE
        while self.context.mode is ConsoleMode.INTERACTIVE:
            if self.editor.read_line(self._on_tokens, split=True) is None:
                break

    def _on_tokens(self, tokens: list[str]) -> None:
        if not tokens:
            return
        signature, *args = tokens
        self.handle(signature, args, reprompt=True)

    # ------------------------------------------------------------------
    # Dispatch policy
    # ------------------------------------------------------------------

    def handle(self, signature: str, args: Sequence[str], *, reprompt: bool) -> bool:
        """Dispatch one tokenized line; returns True when a command ran."""
        dispatcher = self.context.dispatcher
        if not signature and not reprompt:
            signature = self.context.config.fallback_command
            run_continuation = True
        else:
            run_continuation = reprompt

        try:
            if dispatcher.dispatch(signature, args, run_continuation=run_continuation):
                return True
        except ExecutionError as exc:
            self._report_failure(exc)
            return False

        missing = CommandNotFound(
            signature, suggest_similar_names(self.context.registry, signature))
        error(str(missing), file=self.out)
        if reprompt:
            self._show_fallback()
        return False

    def _show_fallback(self) -> None:
        try:
            self.context.dispatcher.dispatch(self.context.config.fallback_command, ())
        except ExecutionError as exc:
            self._report_failure(exc)

    def _report_failure(self, exc: ExecutionError) -> None:
        self.context.logger.debug("Command failed", exc_info=exc)
        error(str(exc), file=self.out)
