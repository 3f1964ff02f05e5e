#!/usr/bin/env python3
# terminal/commands/command_types.py
from __future__ import annotations

"""
The Command record and the @command decorator that builds one.

A command is identified by its signature and invoked with the positional
string arguments that followed it on the line.
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol, Sequence

from terminal.errors import ExecutionError


class CommandCallback(Protocol):
    """Anything callable with positional string arguments."""

    def __call__(self, *args: str) -> Any:  # pragma: no cover - signature only
        ...


@dataclass(slots=True)
class Command:
    """
    A named, documented callable.

    `continuation` is a second entry point; the dispatcher runs it after the
    callback only when asked to (interactive mode). `module` records where
    the command was defined and shows up in replacement diagnostics.
    """

    signature: str
    description: str
    callback: CommandCallback
    continuation: Optional[Callable[[], Any]] = None
    example: str = ""
    module: str = field(default="", repr=False)

    @property
    def has_continuation(self) -> bool:
        return self.continuation is not None

    def handle(self, args: Sequence[str]) -> Any:
        """
        Run the callback with `args` bound positionally.

        Raises ExecutionError when the arguments do not fit the callback or
        when the callback itself fails.
        """
        # Late import: parser lives in the interface package
        from terminal.interface.parser import build_usage

        try:
            inspect.signature(self.callback).bind(*args)
        except TypeError as exc:
            raise ExecutionError(
                str(exc), usage=build_usage(self.signature, self.callback)) from exc
        except ValueError:
            # builtins without an introspectable signature; call and see
            pass

        try:
            return self.callback(*args)
        except ExecutionError:
            raise
        except Exception as exc:
            raise ExecutionError(f"{type(exc).__name__}: {exc}") from exc

    def continue_loop(self) -> None:
        """Invoke the continuation, if this command exposes one."""
        if self.continuation is None:
            return
        try:
            self.continuation()
        except ExecutionError:
            raise
        except Exception as exc:
            raise ExecutionError(f"{type(exc).__name__}: {exc}") from exc


def command(
    *,
    signature: str | None = None,
    description: str | None = None,
    example: str | None = None,
    continuation: Callable[[], Any] | None = None,
) -> Callable[[Callable[..., Any]], Command]:
    """
    Decorator building a Command from a function.

    - Function name is transformed from snake_case to kebab-case for
      `signature` if not provided.
    - The docstring is used as description when none is given.
    - Nothing is registered here; modules export the result through
      COMMAND/COMMANDS or a register(context) function.
    """

    def wrapper(func: Callable[..., Any]) -> Command:
        command_obj = Command(
            signature=signature or func.__name__.replace("_", "-"),
            description=(description or (func.__doc__ or "")).strip(),
            callback=func,
            continuation=continuation,
            example=example or "",
        )
        command_obj.module = func.__module__
        return command_obj

    return wrapper
