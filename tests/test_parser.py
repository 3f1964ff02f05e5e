#!/usr/bin/env python3
# tests/test_parser.py
"""
Tokenizer, usage strings and command listing.

Run with: python -m pytest tests/test_parser.py -v
"""

import unittest

from terminal.commands import Command, CommandRegistry
from terminal.interface import build_usage, format_command_list, suggest_similar_names, tokenize
from terminal.ui import strip_ansi


class TestTokenize(unittest.TestCase):

    def test_quoted_substrings_are_atomic(self):
        self.assertEqual(tokenize('foo "bar baz" \'qux\''), ["foo", "bar baz", "qux"])

    def test_whitespace_is_collapsed(self):
        self.assertEqual(tokenize("  list   emails  "), ["list", "emails"])

    def test_empty_line(self):
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("   "), [])

    def test_backslashes_are_kept(self):
        self.assertEqual(tokenize(r"emails:send C:\tmp\report a\ b"),
                         ["emails:send", r"C:\tmp\report", "a\\", "b"])
        self.assertEqual(tokenize(r'grep "\d+" #tag'), ["grep", r"\d+", "#tag"])

    def test_unbalanced_quote_does_not_raise(self):
        self.assertEqual(tokenize('say "hello world" "oops'), ["say", "hello world", '"oops'])


class TestBuildUsage(unittest.TestCase):

    def test_required_optional_and_rest(self):
        def send(recipient, subject="", *attachments):
            pass

        self.assertEqual(build_usage("emails:send", send),
                         "emails:send <recipient> [subject] [args...]")

    def test_no_parameters(self):
        self.assertEqual(build_usage("exit", lambda: None), "exit")


def _registry(*signatures):
    registry = CommandRegistry()
    for signature in signatures:
        registry.register(Command(signature=signature,
                                  description=f"about {signature}",
                                  callback=lambda: None))
    return registry


class TestFormatCommandList(unittest.TestCase):

    def test_groups_namespaced_commands(self):
        registry = _registry("list", "emails:send", "emails:birthday")
        lines = format_command_list(registry, color=False).splitlines()
        self.assertEqual(lines[1], "Available Commands:")
        self.assertTrue(lines[2].startswith("  list "))
        self.assertEqual(lines[3], "")
        self.assertEqual(lines[4], "  emails")
        self.assertTrue(lines[5].startswith("    emails:send "))
        self.assertTrue(lines[6].startswith("    emails:birthday "))
        self.assertEqual(sum(1 for line in lines if line.strip() == "emails"), 1)

    def test_descriptions_align(self):
        registry = _registry("list", "emails:send")
        lines = format_command_list(registry, width=30, color=False).splitlines()
        columns = {line.index("about") for line in lines if "about" in line}
        self.assertEqual(columns, {30})

    def test_color_does_not_change_layout(self):
        registry = _registry("exit", "db:seed", "emails:send", "db:wipe")
        plain = format_command_list(registry, color=False)
        colored = format_command_list(registry, color=True)
        self.assertNotEqual(plain, colored)
        self.assertEqual(strip_ansi(colored), plain)

    def test_group_order_follows_first_appearance(self):
        registry = _registry("db:seed", "emails:send", "db:wipe")
        lines = format_command_list(registry, color=False).splitlines()
        headers = [line.strip() for line in lines if line.startswith("  ") and not line.startswith("    ")]
        self.assertEqual(headers, ["db", "emails"])
        # no blank separator without ungrouped commands
        self.assertEqual(lines[2], "  db")

    def test_long_signature_keeps_a_space(self):
        registry = _registry("x" * 50)
        line = format_command_list(registry, width=20, color=False).splitlines()[2]
        self.assertIn("x" * 50 + " about", line)


class TestSuggestions(unittest.TestCase):

    def test_close_match(self):
        registry = _registry("list", "emails:send")
        self.assertIn("emails:send", suggest_similar_names(registry, "emails:sned"))

    def test_no_match(self):
        registry = _registry("list")
        self.assertEqual(suggest_similar_names(registry, "zzzzzz"), "")


if __name__ == "__main__":
    unittest.main()
