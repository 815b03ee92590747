# topmark:header:start
#
#   project      : AlignBy
#   file         : outcomes.py
#   file_relpath : src/alignby/pipeline/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure outcome bucketing, counting and exit-code helpers.

This module maps a finished `ProcessingContext` to a stable public outcome
and derives the process exit code for a run.

Each `Outcome` carries its display color; printing is left to `alignby.cli.utils`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yachalk import chalk

from alignby.config.logging import get_logger
from alignby.core.exit_codes import ExitCode
from alignby.pipeline.status import (
    AlignStatus,
    ComparisonStatus,
    ContentStatus,
    FsStatus,
    WriteStatus,
)
from alignby.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable

    from alignby.config.logging import AlignbyLogger
    from alignby.pipeline.context import ProcessingContext

logger: AlignbyLogger = get_logger(__name__)


class Outcome(ColoredStrEnum):
    """Public per-file outcome buckets, in reporting order."""

    ALIGNED = ("aligned", chalk.green)
    WOULD_ALIGN = ("would align", chalk.yellow)
    UNCHANGED = ("unchanged", chalk.green)
    CANCELED = ("canceled", chalk.blue)
    MALFORMED = ("malformed directive", chalk.red_bright)
    READ_ERROR = ("read error", chalk.red)
    WRITE_ERROR = ("write error", chalk.red_bright)

    @property
    def is_failure(self) -> bool:
        """Whether the outcome counts as a failed file."""
        return self in {Outcome.MALFORMED, Outcome.READ_ERROR, Outcome.WRITE_ERROR}


_READ_ERRORS: frozenset[FsStatus] = frozenset(
    {FsStatus.NOT_FOUND, FsStatus.NO_READ_PERMISSION, FsStatus.UNREADABLE}
)


def classify_outcome(ctx: ProcessingContext) -> Outcome:
    """Map a file context to its outcome bucket.

    Precedence (high → low): write failure, read failure, malformed directive,
    cancellation, change (written or pending), unchanged.
    """
    if ctx.status.write == WriteStatus.FAILED:
        outcome = Outcome.WRITE_ERROR
    elif ctx.status.fs in _READ_ERRORS or ctx.status.content == ContentStatus.UNDECODABLE:
        outcome = Outcome.READ_ERROR
    elif ctx.status.align == AlignStatus.MALFORMED:
        outcome = Outcome.MALFORMED
    elif ctx.status.align == AlignStatus.CANCELED:
        outcome = Outcome.CANCELED
    elif ctx.status.comparison == ComparisonStatus.CHANGED:
        outcome = (
            Outcome.ALIGNED if ctx.status.write == WriteStatus.WRITTEN else Outcome.WOULD_ALIGN
        )
    else:
        outcome = Outcome.UNCHANGED
    logger.trace("outcome[%s] = %s (status: %s)", ctx.name, outcome.value, ctx.status)
    return outcome


def count_by_outcome(results: Iterable[ProcessingContext]) -> dict[Outcome, int]:
    """Count results per outcome.

    Returns:
        dict[Outcome, int]: Non-zero counts, ordered like `Outcome`.
    """
    counts: dict[Outcome, int] = dict.fromkeys(Outcome, 0)
    for ctx in results:
        counts[classify_outcome(ctx)] += 1
    return {outcome: n for outcome, n in counts.items() if n}


def _error_exit_code(ctx: ProcessingContext) -> ExitCode | None:
    if ctx.status.write == WriteStatus.FAILED:
        if ctx.status.fs == FsStatus.NO_WRITE_PERMISSION:
            return ExitCode.PERMISSION_DENIED
        return ExitCode.IO_ERROR
    if ctx.status.fs == FsStatus.NOT_FOUND:
        return ExitCode.FILE_NOT_FOUND
    if ctx.status.fs == FsStatus.NO_READ_PERMISSION:
        return ExitCode.PERMISSION_DENIED
    if ctx.status.fs == FsStatus.UNREADABLE:
        return ExitCode.IO_ERROR
    if ctx.status.content == ContentStatus.UNDECODABLE:
        return ExitCode.DATA_ERROR
    if ctx.status.align == AlignStatus.MALFORMED:
        return ExitCode.DATA_ERROR
    return None


def exit_code_for(results: Iterable[ProcessingContext], *, apply: bool) -> ExitCode:
    """Derive the exit code of a run.

    The first failing file (in processing order) decides the error code.
    Without errors, a dry run that found files to change yields
    ``WOULD_CHANGE``; everything else is ``SUCCESS``. Canceled files are not
    failures.

    Args:
        results (Iterable[ProcessingContext]): Finished per-file contexts.
        apply (bool): Whether changes were written.

    Returns:
        ExitCode: The process exit code.
    """
    would_change: bool = False
    for ctx in results:
        code: ExitCode | None = _error_exit_code(ctx)
        if code is not None:
            return code
        if ctx.would_change:
            would_change = True
    if would_change and not apply:
        return ExitCode.WOULD_CHANGE
    return ExitCode.SUCCESS
