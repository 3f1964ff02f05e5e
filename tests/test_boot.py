#!/usr/bin/env python3
# tests/test_boot.py
"""
Boot pipeline and the process entry point.

Run with: python -m pytest tests/test_boot.py -v
"""

import io
import logging
import unittest
from unittest import mock

from terminal import __main__ as entry
from terminal.boot import boot_sequence
from terminal.config import AppConfig
from terminal.errors import TerminalModeError


class TestBootSequence(unittest.TestCase):

    def test_builds_context_with_commands(self):
        config = AppConfig(commands_package="plugins", history_limit=5)
        state = boot_sequence(config, stdin=io.BytesIO(), stdout=io.StringIO())

        registry = state.context.registry
        for signature in ("list", "exit", "schedule:list", "schedule:run", "emails:send"):
            self.assertIn(signature, registry)
        self.assertEqual(state.loaded_count, len(registry))
        self.assertEqual(state.context.history.limit, 5)
        self.assertIs(state.logger, logging.getLogger("terminal"))
        self.assertIsNone(state.context.scheduler.executable)

    def test_missing_executable_fails_boot(self):
        config = AppConfig(schedule_executable="/nonexistent/console")
        with self.assertRaises(FileNotFoundError):
            boot_sequence(config)


class TestMain(unittest.TestCase):

    def test_invalid_configuration_exits_with_2(self):
        with mock.patch.object(entry, "boot_sequence", side_effect=ValueError("bad")), \
                mock.patch("sys.stderr", new_callable=io.StringIO) as err:
            self.assertEqual(entry.main(["list"]), 2)
        self.assertIn("Invalid configuration: bad", err.getvalue())

    def test_unloadable_commands_exit_with_2(self):
        with mock.patch.object(entry, "boot_sequence", side_effect=ImportError("gone")), \
                mock.patch("sys.stderr", new_callable=io.StringIO):
            self.assertEqual(entry.main([]), 2)

    def test_terminal_mode_error_exits_with_2(self):
        state = mock.Mock()
        with mock.patch.object(entry, "boot_sequence", return_value=state), \
                mock.patch.object(entry, "Console") as console:
            console.return_value.capture.side_effect = TerminalModeError("no tty")
            self.assertEqual(entry.main([]), 2)
        state.logger.critical.assert_called_once()

    def test_exit_status_comes_from_console(self):
        with mock.patch.object(entry, "boot_sequence"), \
                mock.patch.object(entry, "Console") as console:
            console.return_value.capture.return_value = 1
            self.assertEqual(entry.main(["nope"]), 1)
        console.return_value.capture.assert_called_once_with(["nope"])


if __name__ == "__main__":
    unittest.main()
