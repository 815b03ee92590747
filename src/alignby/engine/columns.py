# topmark:header:start
#
#   project      : AlignBy
#   file         : columns.py
#   file_relpath : src/alignby/engine/columns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Column padding and sorting of collected blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from alignby.engine.directives import Mode


def align_rows(rows: Sequence[Sequence[str]]) -> list[str]:
    """Pad the columns of a block and join each row into a line.

    Every column except the final two (last text segment and row end) is
    right-padded with spaces to its widest entry. Widths are counted in code
    points.

    Args:
        rows (Sequence[Sequence[str]]): Segment rows of equal length.

    Returns:
        list[str]: One finished line per row, in input order.

    Raises:
        ValueError: If the rows do not all have the same length.
    """
    if not rows:
        return []
    width: int = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all segment rows of a block must have the same length")

    columns: list[tuple[str, ...]] = []
    for index, column in enumerate(zip(*rows)):
        if index < width - 2:
            column_width: int = max(len(entry) for entry in column)
            column = tuple(entry.ljust(column_width) for entry in column)
        columns.append(column)
    return ["".join(row) for row in zip(*columns)]


def sort_lines(lines: Sequence[str]) -> list[str]:
    """Sort finished lines by code point."""
    return sorted(lines)


def format_block(rows: Sequence[Sequence[str]], mode: Mode) -> list[str]:
    """Align a block, then sort it when ``mode`` asks for it."""
    lines: list[str] = align_rows(rows)
    if mode.sorts:
        lines = sort_lines(lines)
    return lines
