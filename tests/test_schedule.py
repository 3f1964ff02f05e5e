#!/usr/bin/env python3
# tests/test_schedule.py
"""
Scheduler: frequency helpers, due evaluation and the two run strategies.

Run with: python -m pytest tests/test_schedule.py -v
"""

import os
import sys
import tempfile
import unittest
from datetime import datetime
from unittest import mock

from terminal.commands import Command, CommandRegistry, Dispatcher
from terminal.errors import ExecutionError
from terminal.schedule import ScheduleEntry, Scheduler

MONDAY_MIDNIGHT = datetime(2024, 1, 1, 0, 0)


class TestScheduleEntry(unittest.TestCase):

    def test_default_is_every_minute(self):
        self.assertEqual(ScheduleEntry("x").expression, "* * * * *")

    def test_helpers(self):
        cases = {
            "every_minute": "* * * * *",
            "every_five_minutes": "*/5 * * * *",
            "hourly": "0 * * * *",
            "daily": "0 0 * * *",
            "weekly": "0 0 * * 0",
            "monthly": "0 0 1 * *",
            "yearly": "0 0 1 1 *",
        }
        for helper, expression in cases.items():
            with self.subTest(helper=helper):
                entry = ScheduleEntry("x")
                self.assertIs(getattr(entry, helper)(), entry)
                self.assertEqual(entry.expression, expression)

    def test_at(self):
        self.assertEqual(ScheduleEntry("x").at("14:30").expression, "30 14 * * *")
        self.assertEqual(ScheduleEntry("x").at("07:05").expression, "5 7 * * *")

    def test_at_rejects_bad_times(self):
        for text in ("24:00", "12:60", "noon", "12", "-1:30"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    ScheduleEntry("x").at(text)

    def test_invalid_cron_expression(self):
        with self.assertRaises(ValueError):
            ScheduleEntry("x").cron("not a cron")

    def test_is_due(self):
        daily = ScheduleEntry("x").daily()
        self.assertTrue(daily.is_due(MONDAY_MIDNIGHT))
        self.assertFalse(daily.is_due(datetime(2024, 1, 1, 0, 1)))

        weekly = ScheduleEntry("x").weekly()
        self.assertFalse(weekly.is_due(MONDAY_MIDNIGHT))
        self.assertTrue(weekly.is_due(datetime(2024, 1, 7, 0, 0)))


class TestScheduler(unittest.TestCase):

    def test_command_returns_entry_for_chaining(self):
        scheduler = Scheduler()
        entry = scheduler.command("report:generate", ["--type=daily"]).at("14:30")
        self.assertEqual(scheduler.entries(), [entry])
        self.assertEqual(entry.args, ["--type=daily"])

    def test_due_filters_entries(self):
        scheduler = Scheduler()
        scheduler.command("a").daily()
        scheduler.command("b").hourly()
        scheduler.command("c").at("12:00")
        due = [entry.signature for entry in scheduler.due(MONDAY_MIDNIGHT)]
        self.assertEqual(due, ["a", "b"])

    def test_next_run(self):
        scheduler = Scheduler()
        entry = scheduler.command("a").hourly()
        self.assertEqual(scheduler.next_run(entry, datetime(2024, 1, 1, 10, 15)),
                         datetime(2024, 1, 1, 11, 0))

    def test_clear(self):
        scheduler = Scheduler()
        scheduler.command("a")
        scheduler.clear()
        self.assertEqual(scheduler.entries(), [])

    def test_missing_executable(self):
        with self.assertRaises(FileNotFoundError):
            Scheduler(executable="/nonexistent/console")


class TestRunDue(unittest.TestCase):

    def setUp(self):
        self.calls = []
        self.registry = CommandRegistry()
        self.registry.register(Command(signature="greet", description="",
                                       callback=lambda *a: self.calls.append(a)))
        self.dispatcher = Dispatcher(self.registry)

    def test_dispatches_in_process(self):
        scheduler = Scheduler()
        scheduler.command("greet", ["cron"]).daily()
        scheduler.command("greet", ["later"]).at("12:00")
        started = scheduler.run_due(MONDAY_MIDNIGHT, dispatcher=self.dispatcher)
        self.assertEqual(len(started), 1)
        self.assertEqual(self.calls, [("cron",)])

    def test_unknown_and_failing_commands_are_logged(self):
        def broken():
            raise ExecutionError("nope")

        self.registry.register(Command(signature="broken", description="", callback=broken))
        scheduler = Scheduler()
        scheduler.command("missing")
        scheduler.command("broken")
        scheduler.command("greet")
        with self.assertLogs("terminal.schedule", level="WARNING") as logs:
            started = scheduler.run_due(MONDAY_MIDNIGHT, dispatcher=self.dispatcher)
        self.assertEqual([entry.signature for entry in started], ["greet"])
        self.assertEqual(len(logs.records), 2)

    def test_nothing_to_run_with(self):
        scheduler = Scheduler()
        scheduler.command("greet")
        with self.assertLogs("terminal.schedule", level="WARNING"):
            self.assertEqual(scheduler.run_due(MONDAY_MIDNIGHT), [])

    def test_spawns_detached_process_with_executable(self):
        with tempfile.NamedTemporaryFile(suffix=".py", delete=False) as fh:
            script = fh.name
        self.addCleanup(os.unlink, script)

        scheduler = Scheduler(executable=script)
        scheduler.command("greet", ["cron"]).daily()
        with mock.patch("terminal.schedule.schedule.subprocess.Popen") as popen:
            started = scheduler.run_due(MONDAY_MIDNIGHT, dispatcher=self.dispatcher)

        self.assertEqual(len(started), 1)
        self.assertEqual(self.calls, [])
        argv = popen.call_args.args[0]
        self.assertEqual(argv, [sys.executable, script, "greet", "cron"])
        self.assertTrue(popen.call_args.kwargs["start_new_session"])


if __name__ == "__main__":
    unittest.main()
