#!/usr/bin/env python3
# terminal/__main__.py
from __future__ import annotations

import sys
from typing import Optional, Sequence

from terminal.boot import boot_sequence
from terminal.errors import TerminalModeError
from terminal.interface import Console
from terminal.ui import error


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    try:
        state = boot_sequence()
    except ValueError as exc:
        error(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2
    except (ImportError, RuntimeError) as exc:
        error(f"Cannot load commands: {exc}", file=sys.stderr)
        return 2

    try:
        return Console(state.context).capture(argv)
    except TerminalModeError as exc:
        state.logger.critical("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
