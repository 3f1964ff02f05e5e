#!/usr/bin/env python3
# terminal/__init__.py
from __future__ import annotations
"""
Command console runtime.

Keep imports here light: only the command types and errors, so plugin
modules can `from terminal import command` without pulling in the
interactive interface.
"""

from terminal.commands import Command, command  # noqa: F401
from terminal.errors import ExecutionError  # noqa: F401

__version__ = "0.1.0"
