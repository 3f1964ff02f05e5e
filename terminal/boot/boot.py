#!/usr/bin/env python3
# terminal/boot/boot.py
from __future__ import annotations
"""
Boot sequence for the console.

Steps: load configuration, initialize logging, build the console context,
register built-in commands, load the command package, collect schedules.
Each step prints a Linux-style [  OK  ] / [FAILED] line when SHOW_BOOT is on.
"""

import logging
from dataclasses import dataclass
from typing import Any, BinaryIO, Callable, Optional, TextIO

from terminal.commands.builtin import register_builtin_commands
from terminal.config import AppConfig, load_config
from terminal.interface import ConsoleContext, History, load_commands
from terminal.schedule import Scheduler
from terminal.ui import colorize, init_logger, print_line


@dataclass(slots=True)
class BootState:
    config: AppConfig
    logger: logging.Logger
    context: ConsoleContext
    loaded_count: int


def _step(label: str, fn: Callable[[], Any], *, verbose: bool) -> Any:
    """Run a boot step with status output."""
    try:
        out = fn()
    except Exception as exc:
        if verbose:
            print_line(
                colorize(f"[FAILED] {label} ({type(exc).__name__}: {exc})", "red")
            )
        raise
    if verbose:
        print_line(colorize(f"[  OK  ] {label}", "green"))
    return out


def boot_sequence(
    config: Optional[AppConfig] = None,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[TextIO] = None,
) -> BootState:
    # ---------- config ----------
    config = config or load_config()
    verbose = config.show_boot

    # ---------- logging ----------
    logger = _step(
        "Initialize logger",
        lambda: init_logger("terminal", level=config.log_level,
                            logfile=str(config.log_file_path) if config.log_file_path else None),
        verbose=verbose,
    )

    # ---------- context ----------
    def _build_context() -> ConsoleContext:
        scheduler = Scheduler()
        if config.schedule_executable:
            scheduler.set_executable(str(config.schedule_executable))
        return ConsoleContext(
            config=config,
            history=History(limit=config.history_limit),
            scheduler=scheduler,
            stdin=stdin,
            stdout=stdout,
            logger=logger,
        )

    context = _step("Create console context", _build_context, verbose=verbose)

    # ---------- commands ----------
    _step("Register built-in commands",
          lambda: register_builtin_commands(context), verbose=verbose)
    _step(f"Load commands package '{config.commands_package}'",
          lambda: load_commands(context, config.commands_package), verbose=verbose)
    loaded_count = _step("Count command definitions",
                         lambda: len(context.registry), verbose=verbose)
    logger.debug("Boot complete: %d commands, %d schedules",
                 loaded_count, len(context.scheduler.entries()))

    return BootState(
        config=config,
        logger=logger,
        context=context,
        loaded_count=loaded_count,
    )
