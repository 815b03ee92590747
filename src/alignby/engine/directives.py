# topmark:header:start
#
#   project      : AlignBy
#   file         : directives.py
#   file_relpath : src/alignby/engine/directives.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directive scanning for ``align_by`` lines.

A directive is recognized by plain substring search for the marker; the engine
knows nothing about the comment syntax of the host file. Grammar:

    align_by cancel_file
    align_by pause
    align_by resume
    align_by ["regex sort "|"regex "|"sort "]"<delim1> <delim2> ..."

Anything after the closing quote is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from alignby.constants import (
    CANCEL_KEYWORD,
    DIRECTIVE_MARKER,
    PAUSE_KEYWORD,
    QUOTE_CHAR,
    REGEX_PREFIX,
    REGEX_SORT_PREFIX,
    RESUME_KEYWORD,
    SORT_PREFIX,
)
from alignby.engine.errors import DirectiveErrorReason, MalformedDirectiveError
from alignby.engine.quoting import scan_quoted

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__: list[str] = [
    "Directive",
    "DirectiveErrorReason",
    "DirectiveKind",
    "MalformedDirectiveError",
    "Mode",
    "scan_line",
]


class Mode(str, Enum):
    """Alignment mode of a delimiter directive.

    Regex modes match delimiters literally, exactly like their plain
    counterparts; only the sort axis changes the output.
    """

    NORMAL = "normal"
    SORT = "sort"
    REGEX = "regex"
    REGEX_SORT = "regex sort"

    @property
    def sorts(self) -> bool:
        """Whether finished block lines are sorted."""
        return self in (Mode.SORT, Mode.REGEX_SORT)


class DirectiveKind(str, Enum):
    """Action requested by a directive line."""

    CANCEL = "cancel"
    PAUSE = "pause"
    RESUME = "resume"
    DELIMITER_SPEC = "delimiter spec"


# Order matters: "regex sort " must be tried before "regex ".
_MODE_PREFIXES: Final[Sequence[tuple[str, Mode]]] = (
    (REGEX_SORT_PREFIX, Mode.REGEX_SORT),
    (REGEX_PREFIX, Mode.REGEX),
    (SORT_PREFIX, Mode.SORT),
)

_KEYWORDS: Final[Sequence[tuple[str, DirectiveKind]]] = (
    (CANCEL_KEYWORD, DirectiveKind.CANCEL),
    (PAUSE_KEYWORD, DirectiveKind.PAUSE),
    (RESUME_KEYWORD, DirectiveKind.RESUME),
)


@dataclass(frozen=True)
class Directive:
    """A directive recognized on one line.

    Attributes:
        kind (DirectiveKind): Requested action.
        line (int): Zero-based line index.
        column (int): Zero-based offset of the marker within the line.
        mode (Mode): Alignment mode; only meaningful for ``DELIMITER_SPEC``.
        raw_literal (str): Text between the quotes, escapes preserved.
    """

    kind: DirectiveKind
    line: int
    column: int
    mode: Mode = Mode.NORMAL
    raw_literal: str = ""


def scan_line(text: str, line_index: int) -> Directive | None:
    """Recognize the directive on a line, if any.

    Args:
        text (str): The line, without its terminator.
        line_index (int): Zero-based index of the line, used for positions.

    Returns:
        Directive | None: The directive, or ``None`` when the marker is absent.

    Raises:
        MalformedDirectiveError: If the marker is present but the directive
            cannot be parsed.
    """
    column: int = text.find(DIRECTIVE_MARKER)
    if column < 0:
        return None

    pos: int = column + len(DIRECTIVE_MARKER)
    if pos >= len(text):
        raise MalformedDirectiveError(DirectiveErrorReason.UNEXPECTED_EOF, line_index, pos)
    if text[pos] != " " or text.startswith(" ", pos + 1):
        raise MalformedDirectiveError(DirectiveErrorReason.MISSING_SPACE, line_index, pos)
    pos += 1
    if pos >= len(text):
        raise MalformedDirectiveError(DirectiveErrorReason.UNEXPECTED_EOF, line_index, pos)

    for keyword, kind in _KEYWORDS:
        if text.startswith(keyword, pos):
            return Directive(kind=kind, line=line_index, column=column)

    mode: Mode = Mode.NORMAL
    for prefix, candidate in _MODE_PREFIXES:
        if text.startswith(prefix, pos):
            mode = candidate
            pos += len(prefix)
            break

    if pos >= len(text):
        raise MalformedDirectiveError(DirectiveErrorReason.UNEXPECTED_EOF, line_index, pos)
    if text[pos] != QUOTE_CHAR:
        raise MalformedDirectiveError(DirectiveErrorReason.MISSING_QUOTE, line_index, pos)

    literal, closing = scan_quoted(text[pos + 1 :])
    if closing is None:
        raise MalformedDirectiveError(DirectiveErrorReason.UNCLOSED_QUOTES, line_index, pos)

    return Directive(
        kind=DirectiveKind.DELIMITER_SPEC,
        line=line_index,
        column=column,
        mode=mode,
        raw_literal=literal,
    )
