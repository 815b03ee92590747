# topmark:header:start
#
#   project      : AlignBy
#   file         : runner.py
#   file_relpath : src/alignby/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run a step sequence over one processing context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from alignby.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from alignby.config.logging import AlignbyLogger
    from alignby.pipeline.context import ProcessingContext
    from alignby.pipeline.steps.base import Step

logger: AlignbyLogger = get_logger(__name__)


def run(ctx: ProcessingContext, steps: Sequence[Step]) -> ProcessingContext:
    """Execute the pipeline sequentially.

    Every step is invoked, even after a halt, so that later steps can record
    their ``SKIPPED`` status.

    Args:
        ctx (ProcessingContext): Mutable processing context.
        steps (Sequence[Step]): Ordered sequence of pipeline steps.

    Returns:
        ProcessingContext: The final processing context after all steps have run.
    """
    logger.trace("Running %d step(s) for %s", len(steps), ctx.name)
    for step in steps:
        ctx = step(ctx)
    return ctx
