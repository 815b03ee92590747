# topmark:header:start
#
#   project      : AlignBy
#   file         : aligner.py
#   file_relpath : src/alignby/pipeline/steps/aligner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Aligner step: run the alignment engine on the file text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from alignby.config.logging import get_logger
from alignby.constants import DIRECTIVE_MARKER
from alignby.engine import AlignmentCanceled, MalformedDirectiveError, align_text
from alignby.pipeline.status import AlignStatus, Axis, ContentStatus
from alignby.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from alignby.config.logging import AlignbyLogger
    from alignby.pipeline.context import ProcessingContext

logger: AlignbyLogger = get_logger(__name__)


class AlignerStep(BaseStep):
    """Align directive blocks and set `AlignStatus`.

    Axes written:
      - align

    Sets:
      - AlignStatus: {ALIGNED, NO_DIRECTIVES, CANCELED, MALFORMED, SKIPPED}
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.ALIGN,
            axes_written=(Axis.ALIGN,),
        )

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run only on successfully decoded content."""
        if ctx.is_halted or ctx.status.content != ContentStatus.OK:
            ctx.status.align = AlignStatus.SKIPPED
            return False
        return True

    def run(self, ctx: ProcessingContext) -> None:
        """Run `align_text` and record the result or the abort reason."""
        text: str = ctx.original_text or ""
        try:
            ctx.aligned_text = align_text(text)
        except AlignmentCanceled as exc:
            ctx.status.align = AlignStatus.CANCELED
            ctx.directive_line = exc.line
            ctx.info(f"Alignment canceled by directive on line {exc.line + 1}")
            ctx.request_halt(reason="canceled", at_step=self)
            return
        except MalformedDirectiveError as exc:
            ctx.status.align = AlignStatus.MALFORMED
            ctx.directive_line = exc.line
            ctx.directive_column = exc.column
            ctx.directive_error = exc.reason
            ctx.error(
                f"Malformed directive at {exc.line + 1}:{exc.column + 1} "
                f"({exc.reason.value}): {exc.description}"
            )
            ctx.request_halt(reason="malformed", at_step=self)
            return

        ctx.status.align = (
            AlignStatus.ALIGNED if DIRECTIVE_MARKER in text else AlignStatus.NO_DIRECTIVES
        )
        logger.debug("Aligner: %s -> %s", ctx.path, ctx.status.align.value)
