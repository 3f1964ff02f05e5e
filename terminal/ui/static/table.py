#!/usr/bin/env python3
# terminal/ui/static/table.py
from __future__ import annotations

"""
Bordered text tables for command output (schedule:list and friends).

Widths are measured on the visible text, so colored cells line up.
"""

from typing import List, Optional, Sequence

from terminal.ui.utils import strip_ansi


def _visible_len(cell: str) -> int:
    return len(strip_ansi(cell))


def _column_widths(rows: Sequence[Sequence[str]]) -> List[int]:
    width_count = max((len(row) for row in rows), default=0)
    widths = [0] * width_count
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], _visible_len(cell))
    return widths


def format_table(
    rows: Sequence[Sequence[object]],
    headers: Optional[Sequence[object]] = None,
    *,
    padding: int = 1,
    align: Optional[Sequence[str]] = None,
) -> str:
    """
    Render `rows` as a bordered table.

    `align` holds one of "<" or ">" per column (left by default). Short rows
    are padded with empty cells.
    """
    body = [[str(cell) for cell in row] for row in rows]
    head = [str(cell) for cell in headers] if headers is not None else None
    widths = _column_widths(([head] if head else []) + body)
    align = list(align or [])
    pad = " " * padding

    def cell_text(index: int, cell: str) -> str:
        fill = " " * (widths[index] - _visible_len(cell))
        if index < len(align) and align[index] == ">":
            return f"{pad}{fill}{cell}{pad}"
        return f"{pad}{cell}{fill}{pad}"

    def render(row: Sequence[str]) -> str:
        cells = list(row) + [""] * (len(widths) - len(row))
        return "|" + "|".join(cell_text(i, c) for i, c in enumerate(cells)) + "|"

    rule = "+" + "+".join("-" * (w + 2 * padding) for w in widths) + "+"

    lines = [rule]
    if head is not None:
        lines += [render(head), rule]
    lines += [render(row) for row in body]
    lines.append(rule)
    return "\n".join(lines)
