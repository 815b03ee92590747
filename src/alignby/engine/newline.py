# topmark:header:start
#
#   project      : AlignBy
#   file         : newline.py
#   file_relpath : src/alignby/engine/newline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Newline-style detection and line splitting.

Only the three conventional terminators are recognized: LF (``"\n"``),
CRLF (``"\r\n"``) and CR (``"\r"``). Other Unicode line separators are
ordinary characters for the engine.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Final

_LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


class NewlineStyle(str, Enum):
    """Line terminator conventions, valued by their literal sequence."""

    LF = "\n"
    CRLF = "\r\n"
    CR = "\r"


def newline_histogram(text: str) -> dict[NewlineStyle, int]:
    """Count standalone LF, standalone CR and CR-LF pairs in ``text``."""
    crlf: int = text.count("\r\n")
    return {
        NewlineStyle.LF: text.count("\n") - crlf,
        NewlineStyle.CRLF: crlf,
        NewlineStyle.CR: text.count("\r") - crlf,
    }


def detect_newline_style(text: str) -> NewlineStyle:
    """Return the dominant line terminator of ``text``.

    A style wins only when its count is strictly greater than each of the two
    others; ties and terminator-free text fall back to LF.

    Args:
        text (str): Full document text.

    Returns:
        NewlineStyle: The dominant terminator style.
    """
    hist: dict[NewlineStyle, int] = newline_histogram(text)
    for style, count in hist.items():
        if all(count > other for key, other in hist.items() if key is not style):
            return style
    return NewlineStyle.LF


def split_lines(text: str) -> tuple[list[str], bool]:
    """Split ``text`` on any terminator.

    Returns:
        tuple[list[str], bool]: The terminator-stripped lines and whether the
        text ended with a terminator. Empty text yields no lines.
    """
    if not text:
        return [], False
    lines: list[str] = _LINE_BREAK_RE.split(text)
    ends_with_newline: bool = lines[-1] == ""
    if ends_with_newline:
        lines.pop()
    return lines, ends_with_newline
