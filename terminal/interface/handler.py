#!/usr/bin/env python3
# terminal/interface/handler.py
from __future__ import annotations

"""
Help formatting and not-found hints.

The command listing has one canonical layout:

    Available Commands:
      exit                                 Exit the application terminal
      list                                 Displays all the available commands

      emails
        emails:birthday                    Send birthday emails to users
        emails:send                        Send queued emails

Signatures are padded before they are colored so that escape codes never
affect alignment.
"""

import difflib

from terminal.commands import CommandRegistry
from terminal.ui import BLUE, YELLOW, colorize, paint

DEFAULT_COLUMN_WIDTH = 39


def _row(indent: int, signature: str, description: str, width: int, color: bool) -> str:
    padded = signature.ljust(max(width - indent, len(signature) + 1))
    if color:
        padded = colorize(padded, "green")
    return f"{' ' * indent}{padded}{description}"


def format_command_list(
    registry: CommandRegistry,
    *,
    width: int = DEFAULT_COLUMN_WIDTH,
    color: bool = True,
) -> str:
    """Render every registered command, ungrouped first, then by namespace."""
    top_level, grouped = registry.groups()

    header = "Available Commands:"
    lines = ["", paint(header, YELLOW) if color else header]

    for command_obj in top_level:
        lines.append(_row(2, command_obj.signature,
                     command_obj.description, width, color))

    if top_level and grouped:
        lines.append("")

    for group, members in grouped.items():
        lines.append("  " + (paint(group, BLUE) if color else group))
        for command_obj in members:
            lines.append(_row(4, command_obj.signature,
                         command_obj.description, width, color))

    return "\n".join(lines) + "\n"


def suggest_similar_names(registry: CommandRegistry, name: str) -> str:
    """Return a short suggestion string for misspelled commands."""
    if not name:
        return ""
    matches = difflib.get_close_matches(name, registry.names(), n=3, cutoff=0.6)
    return f" Did you mean: {', '.join(matches)}?" if matches else ""
