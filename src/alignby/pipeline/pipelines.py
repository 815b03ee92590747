# topmark:header:start
#
#   project      : AlignBy
#   file         : pipelines.py
#   file_relpath : src/alignby/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipelines (ordered step sequences).

Use ``Pipeline.CHECK.steps`` for a dry run and ``Pipeline.APPLY.steps`` to
write results.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

from alignby.pipeline.steps.aligner import AlignerStep
from alignby.pipeline.steps.comparer import ComparerStep
from alignby.pipeline.steps.reader import ReaderStep
from alignby.pipeline.steps.writer import WriterStep

if TYPE_CHECKING:
    from alignby.pipeline.steps.base import Step

CHECK_STEPS: Final[tuple[Step, ...]] = (
    ReaderStep(),
    AlignerStep(),
    ComparerStep(),
)

APPLY_STEPS: Final[tuple[Step, ...]] = (
    *CHECK_STEPS,
    WriterStep(),
)


class Pipeline(Enum):
    """Enumerates the named step sequences."""

    CHECK = "check"
    APPLY = "apply"

    @property
    def steps(self) -> tuple[Step, ...]:
        """Return the steps of this pipeline."""
        return CHECK_STEPS if self is Pipeline.CHECK else APPLY_STEPS

    @classmethod
    def for_run(cls, *, apply: bool) -> Pipeline:
        """Return ``APPLY`` when writing, else ``CHECK``."""
        return cls.APPLY if apply else cls.CHECK
