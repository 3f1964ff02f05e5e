#!/usr/bin/env python3
# terminal/commands/builtin.py
from __future__ import annotations

"""
Commands every console has: list, exit, schedule:list, schedule:run.
"""

from typing import TYPE_CHECKING

from terminal.commands.command_types import Command
from terminal.ui import format_table, info, print_line, success

if TYPE_CHECKING:
    from terminal.interface.context import ConsoleContext


def register_builtin_commands(context: "ConsoleContext") -> None:
    # Late import: terminal.interface loads this module through its loader
    from terminal.interface.handler import format_command_list

    def list_commands(*_ignored: str) -> None:
        print_line(
            format_command_list(
                context.registry, width=context.config.list_column_width),
            file=context.stdout,
        )

    def exit_terminal() -> None:
        info("Terminating the application...", file=context.stdout)
        success("Application terminated successfully.", file=context.stdout)
        raise SystemExit(0)

    def schedule_list() -> None:
        entries = context.scheduler.entries()
        if not entries:
            info("No scheduled commands.", file=context.stdout)
            return
        rows = [
            [entry.signature, " ".join(entry.args) or "-", entry.expression,
             context.scheduler.next_run(entry).strftime("%Y-%m-%d %H:%M")]
            for entry in entries
        ]
        print_line(format_table(rows, headers=["Command", "Args", "Cron", "Next run"]),
                   file=context.stdout)

    def schedule_run() -> None:
        started = context.scheduler.run_due(dispatcher=context.dispatcher)
        info(f"Started {len(started)} scheduled command(s).", file=context.stdout)

    for command_obj in (
        Command(
            signature="list",
            description="Displays all the available commands",
            callback=list_commands,
            continuation=context.request_input,
        ),
        Command(
            signature="exit",
            description="Exit the application terminal",
            callback=exit_terminal,
        ),
        Command(
            signature="schedule:list",
            description="Show scheduled commands and their next run",
            callback=schedule_list,
        ),
        Command(
            signature="schedule:run",
            description="Run the scheduled commands that are due now",
            callback=schedule_run,
        ),
    ):
        command_obj.module = __name__
        context.registry.register(command_obj)
