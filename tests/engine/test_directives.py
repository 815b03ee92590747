# topmark:header:start
#
#   project      : AlignBy
#   file         : test_directives.py
#   file_relpath : tests/engine/test_directives.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the directive scanner: recognition, modes and malformed input."""

from __future__ import annotations

import pytest

from alignby.engine.directives import (
    Directive,
    DirectiveErrorReason,
    DirectiveKind,
    MalformedDirectiveError,
    Mode,
    scan_line,
)
from tests.conftest import parametrize


def test_line_without_marker_is_not_a_directive() -> None:
    assert scan_line("x = 1  # plain comment", 0) is None


@parametrize(
    "line, kind",
    [
        ("# align_by cancel_file", DirectiveKind.CANCEL),
        ("// align_by pause", DirectiveKind.PAUSE),
        ("-- align_by resume", DirectiveKind.RESUME),
        ("align_by pause and some words", DirectiveKind.PAUSE),
    ],
)
def test_keywords(line: str, kind: DirectiveKind) -> None:
    directive: Directive | None = scan_line(line, 3)
    assert directive is not None
    assert directive.kind is kind
    assert directive.line == 3


@parametrize(
    "line, mode, literal",
    [
        ('# align_by "="', Mode.NORMAL, "="),
        ('# align_by sort "= :"', Mode.SORT, "= :"),
        ('# align_by regex "->"', Mode.REGEX, "->"),
        ('# align_by regex sort ","', Mode.REGEX_SORT, ","),
        ('# align_by "" ignored', Mode.NORMAL, ""),
        ('# align_by "a\\"b" tail "x"', Mode.NORMAL, 'a\\"b'),
    ],
)
def test_delimiter_spec(line: str, mode: Mode, literal: str) -> None:
    directive: Directive | None = scan_line(line, 0)
    assert directive is not None
    assert directive.kind is DirectiveKind.DELIMITER_SPEC
    assert directive.mode is mode
    assert directive.raw_literal == literal
    assert directive.column == 2


@parametrize(
    "line, reason, column",
    [
        ("align_by", DirectiveErrorReason.UNEXPECTED_EOF, 8),
        ("# align_by", DirectiveErrorReason.UNEXPECTED_EOF, 10),
        ("align_by ", DirectiveErrorReason.UNEXPECTED_EOF, 9),
        ("align_by=", DirectiveErrorReason.MISSING_SPACE, 8),
        ("align_by_thing", DirectiveErrorReason.MISSING_SPACE, 8),
        ('align_by  "="', DirectiveErrorReason.MISSING_SPACE, 8),
        ("# align_by   pause", DirectiveErrorReason.MISSING_SPACE, 10),
        ("align_by x", DirectiveErrorReason.MISSING_QUOTE, 9),
        ("align_by sort", DirectiveErrorReason.MISSING_QUOTE, 9),
        ("align_by sort ", DirectiveErrorReason.UNEXPECTED_EOF, 14),
        ('align_by "=', DirectiveErrorReason.UNCLOSED_QUOTES, 9),
        ('align_by regex "= \\"', DirectiveErrorReason.UNCLOSED_QUOTES, 15),
    ],
)
def test_malformed(line: str, reason: DirectiveErrorReason, column: int) -> None:
    with pytest.raises(MalformedDirectiveError) as excinfo:
        scan_line(line, 4)
    err: MalformedDirectiveError = excinfo.value
    assert err.reason is reason
    assert err.line == 4
    assert err.column == column


def test_malformed_message_uses_one_based_position() -> None:
    with pytest.raises(MalformedDirectiveError) as excinfo:
        scan_line("align_by x", 0)
    assert str(excinfo.value).startswith("MissingQuote at 1:10")
    assert excinfo.value.description


def test_mode_sorts() -> None:
    assert [m for m in Mode if m.sorts] == [Mode.SORT, Mode.REGEX_SORT]
