#!/usr/bin/env python3
# terminal/interface/__init__.py
from __future__ import annotations

"""
Package for the interactive console and command dispatch policy.

Provides:
- Raw-mode line editor with in-memory history.
- Scoped raw terminal acquisition.
- Parser utilities (tokenize, usage strings).
- Command listing and not-found hints.
- Console orchestrator and its context.
- Command loader for the plugins package.
"""


# Parser FIRST (editor and commands depend on it)
from .parser import tokenize, build_usage

# Line editing
from .rawmode import RawTerminal
from .editor import LineEditor, History, EditorState, KeyState

# Listing / hints
from .handler import format_command_list, suggest_similar_names

# Context, loader, orchestrator
from .context import ConsoleContext, ConsoleMode
from .loader import load_commands, reload_commands
from .console import Console
from .prompts import question

__all__ = [
    # parser
    "tokenize",
    "build_usage",
    # editor
    "RawTerminal",
    "LineEditor",
    "History",
    "EditorState",
    "KeyState",
    # handler
    "format_command_list",
    "suggest_similar_names",
    # console
    "ConsoleContext",
    "ConsoleMode",
    "load_commands",
    "reload_commands",
    "Console",
    "question",
]
