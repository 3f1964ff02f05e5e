#!/usr/bin/env python3
# terminal/commands/dispatcher.py
from __future__ import annotations

"""
Pure lookup + invoke primitive shared by the console and the scheduler.

The dispatcher never prints and never decides what happens on a miss;
callers apply their own failure policy.
"""

import logging
from typing import Sequence

from .commands import CommandRegistry

logger = logging.getLogger("terminal.dispatch")


class Dispatcher:
    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry

    def dispatch(self, signature: str, args: Sequence[str] = (), run_continuation: bool = False) -> bool:
        """
        Invoke the command registered under `signature`.

        Returns False when nothing matches. ExecutionError raised by the
        command propagates to the caller.
        """
        command_obj = self.registry.lookup(signature)
        if command_obj is None:
            return False

        logger.debug("Dispatching '%s' args=%r continuation=%s",
                     signature, list(args), run_continuation)
        command_obj.handle(list(args))
        if run_continuation and command_obj.has_continuation:
            command_obj.continue_loop()
        return True
