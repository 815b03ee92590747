# topmark:header:start
#
#   project      : AlignBy
#   file         : base.py
#   file_relpath : src/alignby/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The engine and CLI invoke steps as *callables*. `BaseStep` implements
the common lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run? → hint
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from alignby.config.logging import get_logger

if TYPE_CHECKING:
    from alignby.config.logging import AlignbyLogger
    from alignby.pipeline.context import ProcessingContext
    from alignby.pipeline.status import Axis

logger: AlignbyLogger = get_logger(__name__)


class Step(Protocol):
    """Callable pipeline step."""

    name: str

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Process ``ctx`` and return it."""
        ...


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``may_proceed()``,
    ``run()``, and optionally ``hint()``.

    Attributes:
        name (str): Stable step identifier for logs/tracing.
        primary_axis (Axis | None): The axis this step represents in summaries.
        axes_written (tuple[Axis, ...]): Status axes this step is allowed to write.
    """

    name: str
    primary_axis: Axis | None
    axes_written: tuple[Axis, ...] = ()

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Invoke the step lifecycle: gate → run (if allowed) → hint.

        Args:
            ctx (ProcessingContext): The mutable processing context for the current file.

        Returns:
            ProcessingContext: The same context instance after mutation/hints.
        """
        ctx.steps.append(self)

        if self.may_proceed(ctx):
            logger.debug("Pipeline step %s - running for %s", self.name, ctx.name)
            self.run(ctx)
            if ctx.is_halted:
                logger.debug("Pipeline halted by %s: %s", ctx.flow.at_step, ctx.flow.reason)
        else:
            logger.debug("Pipeline step %s may not proceed for %s", self.name, ctx.name)

        self.hint(ctx)
        return ctx

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run given the current context.

        Default: run unless an earlier step halted the flow.
        """
        return not ctx.is_halted

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place."""

    def hint(self, ctx: ProcessingContext) -> None:
        """Attach non-binding diagnostics to ``ctx`` (optional)."""
