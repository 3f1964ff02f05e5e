#!/usr/bin/env python3
# terminal/commands/commands.py
from __future__ import annotations

"""
Command registry.

Signatures are matched exactly (case-sensitive). Registering a signature
that already exists replaces the previous command: last registration wins
and the command keeps the listing slot of the first registration.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .command_types import Command

logger = logging.getLogger("terminal.commands")

NAMESPACE_SEPARATOR = ":"


class CommandRegistry:
    """Holds all command definitions and provides lookup utilities."""

    def __init__(self) -> None:
        # Signature -> Command, insertion ordered
        self._commands_by_signature: Dict[str, Command] = {}

    # ---------------- Registration ----------------

    def register(self, command_obj: Command) -> None:
        """Add or replace the mapping for `command_obj.signature`."""
        signature = command_obj.signature
        if not signature:
            raise ValueError("Command signature must be a non-empty string.")

        previous = self._commands_by_signature.get(signature)
        if previous is not None and previous is not command_obj:
            logger.debug("Replacing command '%s' (%s -> %s)",
                         signature, previous.module or "?", command_obj.module or "?")
        self._commands_by_signature[signature] = command_obj

    def clear(self) -> None:
        self._commands_by_signature.clear()

    # ---------------- Lookup ----------------

    def lookup(self, signature: str) -> Optional[Command]:
        """Return the command registered under `signature`, or None."""
        if not signature:
            return None
        return self._commands_by_signature.get(signature)

    def all(self) -> List[Command]:
        """Return commands in registration order."""
        return list(self._commands_by_signature.values())

    def names(self) -> List[str]:
        return list(self._commands_by_signature.keys())

    def __contains__(self, signature: object) -> bool:
        return isinstance(signature, str) and self.lookup(signature) is not None

    def __len__(self) -> int:
        return len(self._commands_by_signature)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.all())

    # ---------------- Groups ----------------

    def groups(self) -> Tuple[List[Command], Dict[str, List[Command]]]:
        """
        Partition commands into top-level and namespaced groups.

        A command belongs to group `g` when its signature has a non-empty
        prefix `g` before the first separator. Group order follows first
        appearance; members keep registration order.
        """
        top_level: List[Command] = []
        grouped: Dict[str, List[Command]] = {}
        for command_obj in self._commands_by_signature.values():
            group, sep, _ = command_obj.signature.partition(NAMESPACE_SEPARATOR)
            if sep and group:
                grouped.setdefault(group, []).append(command_obj)
            else:
                top_level.append(command_obj)
        return top_level, grouped
