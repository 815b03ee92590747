# topmark:header:start
#
#   project      : AlignBy
#   file         : test_outcomes.py
#   file_relpath : tests/pipeline/test_outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for outcome classification and exit-code derivation."""

from __future__ import annotations

from pathlib import Path

from alignby.core.exit_codes import ExitCode
from alignby.pipeline.context import ProcessingContext
from alignby.pipeline.outcomes import (
    Outcome,
    classify_outcome,
    count_by_outcome,
    exit_code_for,
)
from alignby.pipeline.status import (
    AlignStatus,
    ComparisonStatus,
    ContentStatus,
    FsStatus,
    WriteStatus,
)
from tests.conftest import make_config, parametrize


def _ctx(
    *,
    fs: FsStatus = FsStatus.OK,
    content: ContentStatus = ContentStatus.OK,
    align: AlignStatus = AlignStatus.ALIGNED,
    comparison: ComparisonStatus = ComparisonStatus.UNCHANGED,
    write: WriteStatus = WriteStatus.PENDING,
) -> ProcessingContext:
    ctx: ProcessingContext = ProcessingContext.bootstrap(path=Path("f.txt"), config=make_config())
    ctx.status.fs = fs
    ctx.status.content = content
    ctx.status.align = align
    ctx.status.comparison = comparison
    ctx.status.write = write
    return ctx


def _changed() -> ProcessingContext:
    return _ctx(comparison=ComparisonStatus.CHANGED)


def _malformed() -> ProcessingContext:
    return _ctx(align=AlignStatus.MALFORMED, comparison=ComparisonStatus.SKIPPED)


def _missing() -> ProcessingContext:
    return _ctx(
        fs=FsStatus.NOT_FOUND,
        content=ContentStatus.PENDING,
        align=AlignStatus.SKIPPED,
        comparison=ComparisonStatus.SKIPPED,
    )


def _canceled() -> ProcessingContext:
    return _ctx(align=AlignStatus.CANCELED, comparison=ComparisonStatus.SKIPPED)


@parametrize(
    "ctx, expected",
    [
        (_ctx(), Outcome.UNCHANGED),
        (_changed(), Outcome.WOULD_ALIGN),
        (_ctx(comparison=ComparisonStatus.CHANGED, write=WriteStatus.WRITTEN), Outcome.ALIGNED),
        (_ctx(comparison=ComparisonStatus.CHANGED, write=WriteStatus.FAILED), Outcome.WRITE_ERROR),
        (_canceled(), Outcome.CANCELED),
        (_malformed(), Outcome.MALFORMED),
        (_missing(), Outcome.READ_ERROR),
        (_ctx(content=ContentStatus.UNDECODABLE, align=AlignStatus.SKIPPED), Outcome.READ_ERROR),
    ],
)
def test_classify_outcome(ctx: ProcessingContext, expected: Outcome) -> None:
    assert classify_outcome(ctx) is expected


def test_failure_outcomes() -> None:
    assert {o for o in Outcome if o.is_failure} == {
        Outcome.MALFORMED,
        Outcome.READ_ERROR,
        Outcome.WRITE_ERROR,
    }


def test_count_by_outcome_keeps_enum_order_and_drops_zeroes() -> None:
    counts: dict[Outcome, int] = count_by_outcome([_malformed(), _ctx(), _changed(), _ctx()])
    assert list(counts.items()) == [
        (Outcome.WOULD_ALIGN, 1),
        (Outcome.UNCHANGED, 2),
        (Outcome.MALFORMED, 1),
    ]


@parametrize(
    "results, apply, expected",
    [
        ([], False, ExitCode.SUCCESS),
        ([_ctx()], False, ExitCode.SUCCESS),
        ([_changed()], False, ExitCode.WOULD_CHANGE),
        ([_changed()], True, ExitCode.SUCCESS),
        ([_canceled()], False, ExitCode.SUCCESS),
        ([_changed(), _malformed()], False, ExitCode.DATA_ERROR),
        ([_missing(), _malformed()], False, ExitCode.FILE_NOT_FOUND),
        ([_malformed(), _missing()], True, ExitCode.DATA_ERROR),
        ([_ctx(fs=FsStatus.NO_READ_PERMISSION)], False, ExitCode.PERMISSION_DENIED),
        ([_ctx(fs=FsStatus.UNREADABLE)], False, ExitCode.IO_ERROR),
        (
            [
                _ctx(
                    fs=FsStatus.NO_WRITE_PERMISSION,
                    comparison=ComparisonStatus.CHANGED,
                    write=WriteStatus.FAILED,
                )
            ],
            True,
            ExitCode.PERMISSION_DENIED,
        ),
        (
            [_ctx(comparison=ComparisonStatus.CHANGED, write=WriteStatus.FAILED)],
            True,
            ExitCode.IO_ERROR,
        ),
    ],
)
def test_exit_code_for(
    results: list[ProcessingContext], apply: bool, expected: ExitCode
) -> None:
    assert exit_code_for(results, apply=apply) == expected
