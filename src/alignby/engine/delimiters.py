# topmark:header:start
#
#   project      : AlignBy
#   file         : delimiters.py
#   file_relpath : src/alignby/engine/delimiters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Delimiter sequences and block collection.

A block row is ``[text0, delim0, text1, delim1, ..., textN, ROW_END]``: every
delimiter token of the active sequence is located once, left to right, by
first-occurrence literal search in what remains of the line.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from alignby.config.logging import get_logger
from alignby.constants import DIRECTIVE_MARKER

if TYPE_CHECKING:
    from collections.abc import Sequence

    from alignby.config.logging import AlignbyLogger

logger: AlignbyLogger = get_logger(__name__)

# Space, tab, line feed, form feed, carriage return.
_ASCII_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"[ \t\n\f\r]+")

ROW_END: Final[str] = ""


def split_ascii_whitespace(text: str) -> list[str]:
    """Return the non-empty fragments of ``text`` between runs of ASCII whitespace."""
    return [fragment for fragment in _ASCII_WHITESPACE_RE.split(text) if fragment]


def parse_delimiters(literal: str) -> tuple[str, ...]:
    """Split a quoted literal into its ordered delimiter tokens.

    An empty (or all-whitespace) literal yields an empty sequence: the directive
    is recognized but aligns nothing.
    """
    return tuple(split_ascii_whitespace(literal))


def collapse_whitespace(line: str) -> str:
    """Normalize a candidate line: single spaces between words, no indentation."""
    return " ".join(split_ascii_whitespace(line))


def split_on_delimiters(line: str, delimiters: Sequence[str]) -> list[str] | None:
    """Split ``line`` into a segment row.

    Args:
        line (str): A whitespace-collapsed line.
        delimiters (Sequence[str]): Ordered, non-empty delimiter tokens.

    Returns:
        list[str] | None: The segment row, or ``None`` as soon as one delimiter
        cannot be found in the remaining tail.
    """
    row: list[str] = []
    tail: str = line
    for delimiter in delimiters:
        head, found, tail = tail.partition(delimiter)
        if not found:
            return None
        row.append(head)
        row.append(delimiter)
    row.append(tail)
    row.append(ROW_END)
    return row


def collect_block(
    lines: Sequence[str],
    start: int,
    delimiters: Sequence[str],
) -> tuple[list[list[str]], int]:
    """Greedily collect the block that follows a delimiter directive.

    Collection stops, without consuming the line, at a line containing the
    directive marker, at the first line that fails to tokenize, or at the end
    of the document.

    Args:
        lines (Sequence[str]): All lines of the document.
        start (int): Index of the first candidate line.
        delimiters (Sequence[str]): The active delimiter sequence.

    Returns:
        tuple[list[list[str]], int]: The segment rows and the index of the first
        line that was not consumed.
    """
    rows: list[list[str]] = []
    index: int = start
    while index < len(lines):
        line: str = lines[index]
        if DIRECTIVE_MARKER in line:
            break
        row: list[str] | None = split_on_delimiters(collapse_whitespace(line), delimiters)
        if row is None:
            logger.trace("line %d does not match %r, block ends", index, delimiters)
            break
        rows.append(row)
        index += 1
    return rows, index
