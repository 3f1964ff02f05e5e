#!/usr/bin/env python3
# terminal/interface/parser.py
from __future__ import annotations

"""
Command-line splitting and usage strings.
"""

import inspect
import re
import shlex
from typing import Any

# Quoted substring or bare word; used when shlex rejects the line
_LOOSE_TOKEN_RE = re.compile(r"""("[^"]*"|'[^']*'|\S+)""")


def _loose_tokenize(command_line: str) -> list[str]:
    tokens = []
    for match in _LOOSE_TOKEN_RE.findall(command_line.strip()):
        if len(match) >= 2 and match[0] == match[-1] and match[0] in "\"'":
            match = match[1:-1]
        tokens.append(match)
    return tokens


def _shell_words(command_line: str) -> list[str]:
    lexer = shlex.shlex(command_line, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    # Backslashes are ordinary characters (Windows paths, regexes)
    lexer.escape = ""
    return list(lexer)


def tokenize(command_line: str) -> list[str]:
    """
    Split a raw command line into whitespace-separated tokens.

    Single- and double-quoted substrings are atomic tokens with the quotes
    stripped; backslashes and `#` are kept as typed. Unbalanced quotes do
    not raise; the line is split on whitespace with complete quoted
    substrings kept together.
    """
    try:
        return _shell_words(command_line)
    except ValueError:
        return _loose_tokenize(command_line)


def build_usage(command_name: str, func: Any) -> str:
    """
    Describe the positional arguments `func` accepts, e.g.

        emails:send <recipient> [subject] [args...]

    Keyword-only parameters are not reachable from the command line and
    are left out.
    """
    try:
        parameters = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return command_name

    parts: list[str] = []
    for param in parameters:
        if param.kind is param.VAR_POSITIONAL:
            parts.append("[args...]")
        elif param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            required = param.default is inspect.Parameter.empty
            parts.append(f"<{param.name}>" if required else f"[{param.name}]")

    return " ".join([command_name, *parts])
