#!/usr/bin/env python3
# terminal/commands/__init__.py
from __future__ import annotations

"""
Package for command management and registration.

Provides:
- Data structures and protocols (`Command`, `CommandCallback`, `command`).
- In-memory registry (`CommandRegistry`).
- The shared dispatch primitive (`Dispatcher`).

Built-in commands live in `terminal.commands.builtin` and are registered
explicitly at boot.
"""


# Re-export from submodules
from .command_types import Command, CommandCallback, command
from .commands import CommandRegistry, NAMESPACE_SEPARATOR
from .dispatcher import Dispatcher

__all__ = [
    "Command",
    "CommandCallback",
    "command",
    "CommandRegistry",
    "NAMESPACE_SEPARATOR",
    "Dispatcher",
]
