# topmark:header:start
#
#   project      : AlignBy
#   file         : driver.py
#   file_relpath : src/alignby/engine/driver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Engine driver: the per-document pass and its pause state machine.

The driver walks the document line by line. Every line is echoed; a line that
holds a delimiter directive is followed by its aligned block when the engine
is active. ``pause`` and ``resume`` toggle the state; ``cancel_file`` aborts
the pass. Scanning happens in both states, so malformed directives and
cancellation are detected while paused too.

All mutable state lives in an `EngineState` created per call; nothing is
shared between documents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from alignby.config.logging import get_logger
from alignby.constants import DIRECTIVE_MARKER
from alignby.engine.columns import format_block
from alignby.engine.delimiters import collect_block, parse_delimiters
from alignby.engine.directives import Directive, DirectiveKind, scan_line
from alignby.engine.errors import (
    AlignmentCanceled,
    AlignmentError,
    MalformedDirectiveError,
)
from alignby.engine.newline import NewlineStyle, detect_newline_style, split_lines

if TYPE_CHECKING:
    from alignby.config.logging import AlignbyLogger

logger: AlignbyLogger = get_logger(__name__)

__all__: list[str] = [
    "AlignmentCanceled",
    "AlignmentError",
    "Document",
    "EngineState",
    "MalformedDirectiveError",
    "align_document",
    "align_text",
]


@dataclass(frozen=True)
class Document:
    """Immutable view of a document's text.

    Attributes:
        text (str): The original text.
        newline (NewlineStyle): Dominant terminator, used to rebuild the text.
        ends_with_newline (bool): Whether ``text`` ended with a terminator.
        lines (tuple[str, ...]): Lines with their terminators stripped.
    """

    text: str
    newline: NewlineStyle
    ends_with_newline: bool
    lines: tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> Document:
        """Build a `Document` from raw text."""
        lines, ends_with_newline = split_lines(text)
        return cls(
            text=text,
            newline=detect_newline_style(text),
            ends_with_newline=ends_with_newline,
            lines=tuple(lines),
        )

    def render(self, lines: list[str]) -> str:
        """Join ``lines`` with this document's terminator conventions."""
        body: str = self.newline.value.join(lines)
        if self.ends_with_newline:
            body += self.newline.value
        return body


@dataclass
class EngineState:
    """Mutable state of one document pass."""

    paused: bool = False
    cursor: int = 0
    output: list[str] = field(default_factory=lambda: [])


def _apply_directive(directive: Directive, state: EngineState, lines: tuple[str, ...]) -> None:
    match directive.kind:
        case DirectiveKind.CANCEL:
            raise AlignmentCanceled(directive.line)
        case DirectiveKind.PAUSE:
            state.paused = True
        case DirectiveKind.RESUME:
            state.paused = False
        case DirectiveKind.DELIMITER_SPEC:
            if state.paused:
                return
            delimiters: tuple[str, ...] = parse_delimiters(directive.raw_literal)
            if not delimiters:
                return
            rows, next_index = collect_block(lines, state.cursor, delimiters)
            if not rows:
                return
            logger.debug(
                "line %d: aligning %d line(s) on %r (%s)",
                directive.line + 1,
                len(rows),
                delimiters,
                directive.mode.value,
            )
            state.output.extend(format_block(rows, directive.mode))
            state.cursor = next_index


def align_document(document: Document) -> str:
    """Align a parsed document.

    Returns:
        str: The aligned text. When no line changes, the original text is
        returned untouched (terminators included).

    Raises:
        AlignmentCanceled: If a ``cancel_file`` directive is present.
        MalformedDirectiveError: If a directive cannot be parsed.
    """
    state = EngineState()
    lines: tuple[str, ...] = document.lines
    while state.cursor < len(lines):
        line: str = lines[state.cursor]
        directive: Directive | None = scan_line(line, state.cursor)
        state.output.append(line)
        state.cursor += 1
        if directive is not None:
            logger.trace("line %d: %s directive", directive.line + 1, directive.kind.value)
            _apply_directive(directive, state, lines)

    if tuple(state.output) == lines:
        return document.text
    return document.render(state.output)


def align_text(text: str) -> str:
    """Align every directive block in ``text``.

    Text without the directive marker is returned as is.

    Raises:
        AlignmentCanceled: If a ``cancel_file`` directive is present.
        MalformedDirectiveError: If a directive cannot be parsed.
    """
    if DIRECTIVE_MARKER not in text:
        return text
    return align_document(Document.parse(text))
