#!/usr/bin/env python3
# terminal/schedule/schedule.py
from __future__ import annotations

"""
Cron-like recurring invocations of console commands.

Usage:
    scheduler = Scheduler(executable="/srv/app/console")

    scheduler.command("emails:send").every_minute()
    scheduler.command("backup:run").daily()
    scheduler.command("report:generate", ["--type=daily"]).at("14:30")

    scheduler.run_due()

`run_due` is meant to be triggered once a minute by the system cron:

    * * * * * cd /srv/app && python -m terminal schedule:run >> /dev/null 2>&1

Due entries are spawned as detached processes when an executable is
configured, otherwise they are dispatched in-process.
"""

import logging
import os
import subprocess
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

from croniter import croniter

from terminal.commands.dispatcher import Dispatcher
from terminal.errors import ExecutionError

logger = logging.getLogger("terminal.schedule")


@dataclass
class ScheduleEntry:
    signature: str
    args: List[str] = field(default_factory=list)
    expression: str = "* * * * *"

    # ─── Frequency Helpers ───────────────────────────────

    def every_minute(self) -> "ScheduleEntry":
        return self.cron("* * * * *")

    def every_five_minutes(self) -> "ScheduleEntry":
        return self.cron("*/5 * * * *")

    def hourly(self) -> "ScheduleEntry":
        return self.cron("0 * * * *")

    def daily(self) -> "ScheduleEntry":
        return self.cron("0 0 * * *")

    def weekly(self) -> "ScheduleEntry":
        """Sundays at midnight."""
        return self.cron("0 0 * * 0")

    def monthly(self) -> "ScheduleEntry":
        return self.cron("0 0 1 * *")

    def yearly(self) -> "ScheduleEntry":
        return self.cron("0 0 1 1 *")

    def cron(self, expression: str) -> "ScheduleEntry":
        if not croniter.is_valid(expression):
            raise ValueError(f"Invalid cron expression: {expression!r}")
        self.expression = expression
        return self

    def at(self, time_text: str) -> "ScheduleEntry":
        """Run daily at "HH:MM" (24-hour)."""
        hour, sep, minute = time_text.partition(":")
        if not sep or not hour.isdigit() or not minute.isdigit() \
                or int(hour) > 23 or int(minute) > 59:
            raise ValueError(f"Expected HH:MM, got {time_text!r}")
        return self.cron(f"{int(minute)} {int(hour)} * * *")

    def is_due(self, now: datetime) -> bool:
        return croniter.match(self.expression, now)


class Scheduler:
    """Holds schedule entries and runs the ones that are due."""

    def __init__(self, executable: Optional[str] = None) -> None:
        self._entries: List[ScheduleEntry] = []
        self.executable: Optional[str] = None
        if executable:
            self.set_executable(executable)

    def set_executable(self, path: str) -> None:
        if not Path(path).exists():
            raise FileNotFoundError(f"Path to execute not found: {path}")
        self.executable = path

    def command(self, signature: str, args: Sequence[str] = ()) -> ScheduleEntry:
        entry = ScheduleEntry(signature=signature, args=list(args))
        self._entries.append(entry)
        return entry

    def extend(self, entries: Sequence[ScheduleEntry]) -> None:
        self._entries.extend(entries)

    def entries(self) -> List[ScheduleEntry]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def due(self, now: Optional[datetime] = None) -> List[ScheduleEntry]:
        now = now or datetime.now()
        return [entry for entry in self._entries if entry.is_due(now)]

    def next_run(self, entry: ScheduleEntry, now: Optional[datetime] = None) -> datetime:
        return croniter(entry.expression, now or datetime.now()).get_next(datetime)

    def run_due(
        self,
        now: Optional[datetime] = None,
        dispatcher: Optional[Dispatcher] = None,
    ) -> List[ScheduleEntry]:
        """Start every due entry; returns the entries that were started."""
        started: List[ScheduleEntry] = []
        for entry in self.due(now):
            if self.executable:
                self._spawn(entry)
            elif dispatcher is not None:
                try:
                    found = dispatcher.dispatch(entry.signature, entry.args)
                except ExecutionError as exc:
                    logger.error("Scheduled command '%s' failed: %s", entry.signature, exc)
                    continue
                if not found:
                    logger.warning("Scheduled command '%s' is not registered.",
                                   entry.signature)
                    continue
            else:
                logger.warning("No executable or dispatcher for '%s'; skipped.",
                               entry.signature)
                continue
            started.append(entry)
        return started

    def _spawn(self, entry: ScheduleEntry) -> None:
        if self.executable.endswith(".py") or not os.access(self.executable, os.X_OK):
            argv = [sys.executable, self.executable]
        else:
            argv = [self.executable]
        argv += [entry.signature, *entry.args]

        logger.info("Spawning scheduled command: %s", " ".join(argv))
        subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
