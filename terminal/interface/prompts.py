#!/usr/bin/env python3
# terminal/interface/prompts.py
from __future__ import annotations

"""
Cooked-mode questions asked by commands (outside any raw-mode session).
"""

from typing import Sequence, TextIO

from prompt_toolkit import prompt
from prompt_toolkit.validation import Validator

from terminal.ui import print_line


def _is_valid_choice(text: str, count: int) -> bool:
    text = text.strip()
    return text.isdigit() and int(text) < count


def question(
    message: str,
    options: Sequence[str] = ("no", "yes"),
    *,
    file: TextIO | None = None,
) -> int:
    """
    Show numbered `options` on `file` and return the index the user selects.

    Re-asks until the answer is a valid index.
    """
    if not options:
        raise ValueError("question() needs at least one option.")

    print_line(f"{message}\n", file=file)
    for index, option in enumerate(options):
        print_line(f"  [{index}] {option}", file=file)
    print_line(file=file)

    validator = Validator.from_callable(
        lambda text: _is_valid_choice(text, len(options)),
        error_message="Invalid selection. Try again.",
        move_cursor_to_end=True,
    )
    answer = prompt(
        f"Select an option (0-{len(options) - 1}): ",
        validator=validator,
        validate_while_typing=False,
    )
    return int(answer.strip())
