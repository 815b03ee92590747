# topmark:header:start
#
#   project      : AlignBy
#   file         : errors.py
#   file_relpath : src/alignby/engine/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the alignment engine.

Both exceptions abort the whole document pass: callers must discard any
output and leave the source untouched.

Sections:
    AlignmentError:
        Common base class, so callers can catch every engine outcome at once.
    AlignmentCanceled:
        Soft outcome raised for an ``align_by cancel_file`` directive.
    MalformedDirectiveError:
        Hard error raised when a directive line cannot be parsed; carries a
        `DirectiveErrorReason` and a zero-based (line, column) position.
"""

from __future__ import annotations

from enum import Enum


class AlignmentError(Exception):
    """Base class for all alignment engine outcomes that abort a document."""


class AlignmentCanceled(AlignmentError):
    """Raised when a document contains an ``align_by cancel_file`` directive.

    Attributes:
        line (int): Zero-based index of the line holding the cancel directive.
    """

    def __init__(self, line: int) -> None:
        self.line: int = line
        super().__init__(f"alignment canceled by directive on line {line + 1}")


class DirectiveErrorReason(str, Enum):
    """Reason codes for malformed directives."""

    UNEXPECTED_EOF = "UnexpectedEOF"
    MISSING_SPACE = "MissingSpace"
    UNCLOSED_QUOTES = "UnclosedQuotes"
    MISSING_QUOTE = "MissingQuote"


_REASON_TEXT: dict[DirectiveErrorReason, str] = {
    DirectiveErrorReason.UNEXPECTED_EOF: "directive ends unexpectedly",
    DirectiveErrorReason.MISSING_SPACE: "directive marker must be followed by a single space",
    DirectiveErrorReason.UNCLOSED_QUOTES: "delimiter list has no closing quote",
    DirectiveErrorReason.MISSING_QUOTE: "delimiter list must start with a quote",
}


class MalformedDirectiveError(AlignmentError):
    """Raised when an ``align_by`` directive cannot be parsed.

    Attributes:
        reason (DirectiveErrorReason): Why the directive was rejected.
        line (int): Zero-based line index.
        column (int): Zero-based column offset from the start of the line.
    """

    def __init__(self, reason: DirectiveErrorReason, line: int, column: int) -> None:
        self.reason: DirectiveErrorReason = reason
        self.line: int = line
        self.column: int = column
        super().__init__(f"{reason.value} at {line + 1}:{column + 1}: {_REASON_TEXT[reason]}")

    @property
    def description(self) -> str:
        """Human-readable explanation of the reason code."""
        return _REASON_TEXT[self.reason]
