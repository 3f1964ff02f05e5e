#!/usr/bin/env python3
# terminal/interface/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import BinaryIO, Optional, TextIO

from terminal.commands import CommandRegistry, Dispatcher
from terminal.config import AppConfig
from terminal.interface.editor import History
from terminal.schedule import Scheduler


class ConsoleMode(Enum):
    ONE_SHOT = "one-shot"
    INTERACTIVE = "interactive"


@dataclass
class ConsoleContext:
    """
    Everything one console instance owns: registry, history, streams.

    Passed explicitly to the console, the loader and built-in commands so
    that several isolated instances can coexist (tests).
    """

    config: AppConfig = field(default_factory=AppConfig)
    registry: CommandRegistry = field(default_factory=CommandRegistry)
    history: History = field(default_factory=History)
    scheduler: Scheduler = field(default_factory=Scheduler)
    stdin: Optional[BinaryIO] = None
    stdout: Optional[TextIO] = None
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("terminal"))
    mode: ConsoleMode = ConsoleMode.ONE_SHOT

    def __post_init__(self) -> None:
        self.dispatcher = Dispatcher(self.registry)

    def request_input(self) -> None:
        """Keep prompting for lines after the current command."""
        self.mode = ConsoleMode.INTERACTIVE
