# topmark:header:start
#
#   project      : AlignBy
#   file         : comparer.py
#   file_relpath : src/alignby/pipeline/steps/comparer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comparer step: decide whether alignment changes the file.

Compares the original text with the aligned text and, when they differ,
attaches a unified diff (``difflib``) to the context. This step performs no
I/O; the CLI decides whether and how to display the diff.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from alignby.config.logging import get_logger
from alignby.pipeline.status import AlignStatus, Axis, ComparisonStatus
from alignby.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from alignby.config.logging import AlignbyLogger
    from alignby.pipeline.context import ProcessingContext

logger: AlignbyLogger = get_logger(__name__)


def unified_diff(original: str, updated: str, name: str) -> str:
    """Return a unified diff between two texts, one line per hunk line.

    Terminators are not part of the comparison, so a diff is empty when the
    texts differ only by line endings.
    """
    patch_lines: list[str] = list(
        difflib.unified_diff(
            original.splitlines(),
            updated.splitlines(),
            fromfile=f"{name} (current)",
            tofile=f"{name} (aligned)",
            n=3,
            lineterm="",
        )
    )
    if not patch_lines:
        return ""
    return "\n".join(patch_lines) + "\n"


class ComparerStep(BaseStep):
    """Set `ComparisonStatus` and build the diff.

    Axes written:
      - comparison

    Sets:
      - ComparisonStatus: {CHANGED, UNCHANGED, SKIPPED}
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.COMPARISON,
            axes_written=(Axis.COMPARISON,),
        )

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run only when the engine produced output."""
        if ctx.is_halted or ctx.status.align not in {
            AlignStatus.ALIGNED,
            AlignStatus.NO_DIRECTIVES,
        }:
            ctx.status.comparison = ComparisonStatus.SKIPPED
            return False
        return True

    def run(self, ctx: ProcessingContext) -> None:
        """Compare ``original_text`` with ``aligned_text``."""
        original: str = ctx.original_text or ""
        aligned: str = ctx.aligned_text if ctx.aligned_text is not None else original
        if original == aligned:
            ctx.status.comparison = ComparisonStatus.UNCHANGED
            ctx.diff_text = None
            return

        ctx.status.comparison = ComparisonStatus.CHANGED
        ctx.diff_text = unified_diff(original, aligned, ctx.name)
        logger.debug("Comparer: %s changed (%d diff chars)", ctx.path, len(ctx.diff_text))
