# topmark:header:start
#
#   project      : AlignBy
#   file         : test_pipeline_steps.py
#   file_relpath : tests/pipeline/test_pipeline_steps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the reader, aligner and comparer steps.

Each test runs the check pipeline (or a prefix of it) over a real file in
``tmp_path`` and inspects the per-axis status recorded on the context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from alignby.engine.errors import DirectiveErrorReason
from alignby.pipeline import runner
from alignby.pipeline.context import ProcessingContext
from alignby.pipeline.pipelines import Pipeline
from alignby.pipeline.status import (
    AlignStatus,
    Axis,
    ComparisonStatus,
    ContentStatus,
    FsStatus,
    WriteStatus,
)
from alignby.pipeline.steps.aligner import AlignerStep
from alignby.pipeline.steps.comparer import unified_diff
from alignby.pipeline.steps.reader import ReaderStep
from tests.conftest import make_config, mark_pipeline, parametrize, write_raw

if TYPE_CHECKING:
    from pathlib import Path

BLOCK: str = '# align_by "="\na = 1\nbbb = 2\n'
ALIGNED: str = '# align_by "="\na   = 1\nbbb = 2\n'


def _check(path: Path) -> ProcessingContext:
    ctx: ProcessingContext = ProcessingContext.bootstrap(path=path, config=make_config())
    return runner.run(ctx, Pipeline.CHECK.steps)


@mark_pipeline
def test_changed_file(tmp_path: Path) -> None:
    ctx: ProcessingContext = _check(write_raw(tmp_path / "a.txt", BLOCK))
    assert ctx.status.fs == FsStatus.OK
    assert ctx.status.content == ContentStatus.OK
    assert ctx.status.align == AlignStatus.ALIGNED
    assert ctx.status.comparison == ComparisonStatus.CHANGED
    assert ctx.status.write == WriteStatus.PENDING
    assert ctx.aligned_text == ALIGNED
    assert ctx.would_change is True
    assert ctx.diff_text is not None
    assert "+a   = 1" in ctx.diff_text
    assert [step.name for step in ctx.steps] == ["ReaderStep", "AlignerStep", "ComparerStep"]


@mark_pipeline
def test_file_without_directives(tmp_path: Path) -> None:
    ctx: ProcessingContext = _check(write_raw(tmp_path / "plain.txt", "a = 1\nbbb = 2\n"))
    assert ctx.status.align == AlignStatus.NO_DIRECTIVES
    assert ctx.status.comparison == ComparisonStatus.UNCHANGED
    assert ctx.would_change is False
    assert ctx.diff_text is None


@mark_pipeline
def test_empty_file(tmp_path: Path) -> None:
    ctx: ProcessingContext = _check(write_raw(tmp_path / "empty.txt", ""))
    assert ctx.status.fs == FsStatus.EMPTY
    assert ctx.status.comparison == ComparisonStatus.UNCHANGED


@mark_pipeline
def test_missing_file_halts(tmp_path: Path) -> None:
    ctx: ProcessingContext = _check(tmp_path / "missing.txt")
    assert ctx.status.fs == FsStatus.NOT_FOUND
    assert ctx.status.align == AlignStatus.SKIPPED
    assert ctx.status.comparison == ComparisonStatus.SKIPPED
    assert ctx.is_halted
    assert ctx.flow.at_step == "ReaderStep"
    assert ctx.would_change is None
    assert ctx.diagnostics.stats().n_error == 1


@mark_pipeline
def test_directory_is_reported_as_not_found(tmp_path: Path) -> None:
    ctx: ProcessingContext = _check(tmp_path)
    assert ctx.status.fs == FsStatus.NOT_FOUND


@mark_pipeline
def test_undecodable_file(tmp_path: Path) -> None:
    path: Path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9 = 1\n")
    ctx: ProcessingContext = _check(path)
    assert ctx.status.fs == FsStatus.OK
    assert ctx.status.content == ContentStatus.UNDECODABLE
    assert ctx.status.align == AlignStatus.SKIPPED
    assert ctx.original_text is None


@mark_pipeline
def test_reader_records_newline_facts(tmp_path: Path) -> None:
    ctx: ProcessingContext = ProcessingContext.bootstrap(
        path=write_raw(tmp_path / "mixed.txt", "a\r\nb\r\nc\n"), config=make_config()
    )
    ReaderStep()(ctx)
    assert ctx.original_text == "a\r\nb\r\nc\n"
    assert ctx.newline_hist == {"\n": 1, "\r\n": 2}
    assert ctx.newline_style == "\r\n"
    assert ctx.ends_with_newline is True
    assert ctx.mixed_newlines is True
    assert ctx.diagnostics.stats().n_warning == 1


@mark_pipeline
def test_reader_single_style_has_no_warning(tmp_path: Path) -> None:
    ctx: ProcessingContext = ProcessingContext.bootstrap(
        path=write_raw(tmp_path / "cr.txt", "a\rb"), config=make_config()
    )
    ReaderStep()(ctx)
    assert ctx.newline_style == "\r"
    assert ctx.ends_with_newline is False
    assert ctx.mixed_newlines is False
    assert len(ctx.diagnostics) == 0


@mark_pipeline
def test_canceled_file(tmp_path: Path) -> None:
    ctx: ProcessingContext = _check(
        write_raw(tmp_path / "c.txt", BLOCK + "# align_by cancel_file\n")
    )
    assert ctx.status.align == AlignStatus.CANCELED
    assert ctx.status.comparison == ComparisonStatus.SKIPPED
    assert ctx.directive_line == 3
    assert ctx.aligned_text is None
    assert ctx.flow.reason == "canceled"
    assert ctx.diagnostics.stats().n_info == 1
    assert ctx.diagnostics.stats().total == len(ctx.diagnostics) == 1


@parametrize(
    "directive, reason, column",
    [
        ("# align_by", DirectiveErrorReason.UNEXPECTED_EOF, 10),
        ("# align_by=", DirectiveErrorReason.MISSING_SPACE, 10),
        ("# align_by x", DirectiveErrorReason.MISSING_QUOTE, 11),
        ('# align_by "=', DirectiveErrorReason.UNCLOSED_QUOTES, 11),
    ],
)
@mark_pipeline
def test_malformed_file(
    tmp_path: Path, directive: str, reason: DirectiveErrorReason, column: int
) -> None:
    ctx: ProcessingContext = _check(write_raw(tmp_path / "m.txt", f"x\n{directive}\n"))
    assert ctx.status.align == AlignStatus.MALFORMED
    assert ctx.directive_error is reason
    assert (ctx.directive_line, ctx.directive_column) == (1, column)
    assert ctx.flow.reason == "malformed"
    assert ctx.status.get(Axis.COMPARISON) == ComparisonStatus.SKIPPED
    messages: list[str] = [d.message for d in ctx.diagnostics]
    assert len(messages) == 1
    assert messages[0].startswith(f"Malformed directive at 2:{column + 1} ({reason.value}): ")


@mark_pipeline
def test_aligner_skips_when_content_missing(tmp_path: Path) -> None:
    ctx: ProcessingContext = ProcessingContext.bootstrap(
        path=tmp_path / "never-read.txt", config=make_config()
    )
    AlignerStep()(ctx)
    assert ctx.status.align == AlignStatus.SKIPPED


def test_unified_diff_headers_and_hunks() -> None:
    diff: str = unified_diff("a\nb\n", "a\nc\n", "f.txt")
    assert diff.splitlines()[:2] == ["--- f.txt (current)", "+++ f.txt (aligned)"]
    assert "-b" in diff.splitlines()
    assert "+c" in diff.splitlines()
    assert diff.endswith("\n")


def test_unified_diff_ignores_terminators() -> None:
    assert unified_diff("a\r\nb\r\n", "a\nb\n", "f.txt") == ""


def test_display_name_is_used(tmp_path: Path) -> None:
    ctx: ProcessingContext = ProcessingContext.bootstrap(
        path=tmp_path / "x", config=make_config(), display_name="<stdin>"
    )
    assert ctx.name == "<stdin>"
