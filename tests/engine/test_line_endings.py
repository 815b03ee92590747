# topmark:header:start
#
#   project      : AlignBy
#   file         : test_line_endings.py
#   file_relpath : tests/engine/test_line_endings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for how aligned documents are rebuilt with their line terminators."""

from __future__ import annotations

from alignby.engine import Document, align_document, align_text
from alignby.engine.newline import NewlineStyle
from tests.conftest import parametrize

_LINES: tuple[str, ...] = ('# align_by "="', "a = 1", "bbb = 2")
_ALIGNED: tuple[str, ...] = ('# align_by "="', "a   = 1", "bbb = 2")


@parametrize("newline", ["\n", "\r\n", "\r"])
@parametrize("trailing", [True, False])
def test_terminator_style_is_preserved(newline: str, trailing: bool) -> None:
    tail: str = newline if trailing else ""
    source: str = newline.join(_LINES) + tail
    assert align_text(source) == newline.join(_ALIGNED) + tail


def test_mixed_terminators_normalized_when_changed() -> None:
    source: str = 'x\r\n# align_by "="\r\na = 1\nbbb = 2\r\n'
    assert align_text(source) == 'x\r\n# align_by "="\r\na   = 1\r\nbbb = 2\r\n'


def test_mixed_terminators_kept_when_unchanged() -> None:
    source: str = '# align_by "="\na = 1\r\nb = 2\r'
    assert align_text(source) == source


def test_document_parse() -> None:
    document: Document = Document.parse("a\r\nb\r\n")
    assert document.newline is NewlineStyle.CRLF
    assert document.ends_with_newline
    assert document.lines == ("a", "b")
    assert document.render(["x"]) == "x\r\n"


def test_align_document_on_parsed_text() -> None:
    document: Document = Document.parse("\n".join(_LINES))
    assert align_document(document) == "\n".join(_ALIGNED)
