#!/usr/bin/env python3
# terminal/schedule/__init__.py
from __future__ import annotations
"""
Recurring command invocations (cron expressions evaluated with croniter).
"""

from .schedule import ScheduleEntry, Scheduler

__all__ = ["ScheduleEntry", "Scheduler"]
