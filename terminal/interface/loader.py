#!/usr/bin/env python3
# terminal/interface/loader.py
from __future__ import annotations

"""
Command loader.

Features:
- Imports all public modules under a given package (default: 'plugins').
- Supports 'entrypoint.py' inside a subpackage.
- Registers only what each module declares explicitly:
    COMMAND / COMMANDS     Command objects (see terminal.commands.command)
    register(context)      function registering commands itself
    schedule(scheduler)    function declaring recurring invocations
- A module that fails to import, or whose register()/schedule() hook
  raises, is logged and skipped.
"""

import importlib
import logging
import pkgutil
import sys
from pathlib import Path
from types import ModuleType
from typing import Iterable, TYPE_CHECKING

from terminal.commands import Command
from terminal.commands.builtin import register_builtin_commands
from terminal.schedule import Scheduler

if TYPE_CHECKING:
    from terminal.interface.context import ConsoleContext

logger = logging.getLogger("terminal.loader")


def _register_from_entry_module(module: ModuleType, context: "ConsoleContext") -> int:
    """
    Register COMMAND/COMMANDS/register() exported by a module, if present.

    Schedules are collected into a staging scheduler and only merged once
    every hook has returned, as are the declared COMMAND/COMMANDS. Commands a
    failing register(context) added before raising stay registered.
    """
    registry = context.registry
    declared: list[Command] = []

    obj = getattr(module, "COMMAND", None)
    if isinstance(obj, Command):
        declared.append(obj)
    objs = getattr(module, "COMMANDS", None)
    if isinstance(objs, Iterable) and not isinstance(objs, (str, bytes)):
        declared.extend(item for item in objs if isinstance(item, Command))

    staged = Scheduler()
    schedule_fn = getattr(module, "schedule", None)
    if callable(schedule_fn):
        schedule_fn(staged)

    registered_count = len(declared)
    register_fn = getattr(module, "register", None)
    if callable(register_fn):
        before = len(registry)
        register_fn(context)
        registered_count += max(len(registry) - before, 0)

    for command_obj in declared:
        if not command_obj.module:
            command_obj.module = module.__name__
        registry.register(command_obj)
    context.scheduler.extend(staged.entries())

    logger.debug("Module %s registered %d command(s)",
                 module.__name__, registered_count)
    return registered_count


def _import(module_name: str, reload: bool) -> ModuleType | None:
    try:
        if reload and module_name in sys.modules:
            return importlib.reload(sys.modules[module_name])
        return importlib.import_module(module_name)
    except Exception:
        logger.exception("Failed to load command module '%s'", module_name)
        return None


def load_commands(
    context: "ConsoleContext",
    commands_package: str = "plugins",
    *,
    reload: bool = False,
) -> int:
    """
    Import all modules under the given package and register their commands.

    Supported layouts:
      1) Plain modules: plugins/foo.py  -> import plugins.foo
      2) Packages with an entrypoint: plugins/bar/entrypoint.py
         -> import plugins.bar.entrypoint

    Returns the number of modules loaded.
    """

    package = importlib.import_module(commands_package)
    package_paths = [str(p) for p in getattr(package, "__path__", [])]

    if not package_paths:
        raise RuntimeError(
            f"'{commands_package}' must be a package (folder) with modules."
        )

    loaded_count = 0
    for base_path in package_paths:
        for modinfo in pkgutil.iter_modules([base_path]):
            module_name = modinfo.name
            if module_name.startswith("_"):
                # Ignore private modules
                continue

            target = f"{commands_package}.{module_name}"
            if modinfo.ispkg and (Path(base_path) / module_name / "entrypoint.py").exists():
                target = f"{target}.entrypoint"

            module = _import(target, reload)
            if module is None:
                continue
            try:
                _register_from_entry_module(module, context)
            except Exception:
                logger.exception("Command module '%s' failed to register", target)
                continue
            loaded_count += 1

    return loaded_count


def reload_commands(context: "ConsoleContext", commands_package: str | None = None) -> int:
    """Explicit re-scan: rebuild the registry and schedules from scratch."""
    context.registry.clear()
    context.scheduler.clear()
    register_builtin_commands(context)
    return load_commands(
        context,
        commands_package or context.config.commands_package,
        reload=True,
    )
