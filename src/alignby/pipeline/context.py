# topmark:header:start
#
#   project      : AlignBy
#   file         : context.py
#   file_relpath : src/alignby/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processing context model for the AlignBy pipeline.

The central type is `ProcessingContext`, which carries configuration, per-axis
status, diagnostics and the original/aligned text of a single file between
steps.

Sections:
    ProcessingStatus:
        Per-axis status, the single source of truth for outcomes.
    FlowControl:
        Lets a step request early, graceful termination for a file.
    ProcessingContext:
        Per-file processing state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from alignby.config.logging import get_logger
from alignby.core.diagnostics import DiagnosticLog
from alignby.pipeline.status import (
    AlignStatus,
    Axis,
    ComparisonStatus,
    ContentStatus,
    FsStatus,
    WriteStatus,
)

if TYPE_CHECKING:
    from pathlib import Path

    from alignby.config.logging import AlignbyLogger
    from alignby.config.model import Config
    from alignby.engine.errors import DirectiveErrorReason
    from alignby.pipeline.steps.base import BaseStep
    from alignby.rendering.colored_enum import ColoredStrEnum

logger: AlignbyLogger = get_logger(__name__)

__all__: list[str] = [
    "FlowControl",
    "ProcessingContext",
    "ProcessingStatus",
]


@dataclass
class ProcessingStatus:
    """Tracks the status of each processing phase for a single file."""

    fs: FsStatus = FsStatus.PENDING
    content: ContentStatus = ContentStatus.PENDING
    align: AlignStatus = AlignStatus.PENDING
    comparison: ComparisonStatus = ComparisonStatus.PENDING
    write: WriteStatus = WriteStatus.PENDING

    def get(self, axis: Axis) -> ColoredStrEnum:
        """Return the status recorded for ``axis``."""
        match axis:
            case Axis.FS:
                return self.fs
            case Axis.CONTENT:
                return self.content
            case Axis.ALIGN:
                return self.align
            case Axis.COMPARISON:
                return self.comparison
            case Axis.WRITE:
                return self.write


@dataclass
class FlowControl:
    """Execution flow control for the current file."""

    halt: bool = False
    reason: str = ""  # short code, e.g. "canceled", "malformed"
    at_step: str = ""  # step name that requested the halt


@dataclass
class ProcessingContext:
    r"""Context for aligning one file.

    Attributes:
        path (Path): The file path to process.
        config (Config): Effective configuration at the time of processing.
        display_name (str | None): Name shown to users instead of ``path``
            (``"<stdin>"`` in stdin mode).
        steps (list[BaseStep]): Steps executed for this context, in order.
        status (ProcessingStatus): Per-axis status.
        flow (FlowControl): Halt flag and reason.
        original_text (str | None): File content as read (terminators preserved).
        aligned_text (str | None): Engine output, when the engine succeeded.
        newline_hist (dict[str, int]): Count of each terminator style present.
        newline_style (str): Dominant terminator (``"\\n"`` by default).
        ends_with_newline (bool | None): Whether the file ends with a terminator.
        mixed_newlines (bool | None): True if more than one terminator style is present.
        directive_line (int | None): Zero-based line of the directive that
            canceled the file or failed to parse.
        directive_column (int | None): Zero-based column of a malformed directive.
        directive_error (DirectiveErrorReason | None): Reason code of a malformed directive.
        diff_text (str | None): Unified diff between original and aligned text.
        diagnostics (DiagnosticLog): User-facing messages collected while processing.
    """

    path: Path
    config: Config
    display_name: str | None = None
    steps: list[BaseStep] = field(default_factory=lambda: [])
    status: ProcessingStatus = field(default_factory=ProcessingStatus)
    flow: FlowControl = field(default_factory=FlowControl)

    original_text: str | None = None
    aligned_text: str | None = None

    newline_hist: dict[str, int] = field(default_factory=lambda: {})
    newline_style: str = "\n"
    ends_with_newline: bool | None = None
    mixed_newlines: bool | None = None

    directive_line: int | None = None
    directive_column: int | None = None
    directive_error: DirectiveErrorReason | None = None

    diff_text: str | None = None

    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def bootstrap(
        cls, *, path: Path, config: Config, display_name: str | None = None
    ) -> ProcessingContext:
        """Create a fresh context with no derived state."""
        return cls(path=path, config=config, display_name=display_name)

    @property
    def name(self) -> str:
        """Name of the file as shown to users."""
        return self.display_name or str(self.path)

    @property
    def is_halted(self) -> bool:
        """Whether a step has requested the pipeline to stop for this file."""
        return self.flow.halt

    def request_halt(self, reason: str, at_step: BaseStep) -> None:
        """Stop processing this file after the current step."""
        logger.info("Flow halted in %s: %s", at_step.name, reason)
        self.flow = FlowControl(halt=True, reason=reason, at_step=at_step.name)

    @property
    def would_change(self) -> bool | None:
        """Return whether aligning changes the file (tri-state).

        Returns:
            bool | None: ``None`` when the comparison did not run (read error,
            malformed directive or cancellation).
        """
        if self.status.comparison == ComparisonStatus.CHANGED:
            return True
        if self.status.comparison == ComparisonStatus.UNCHANGED:
            return False
        return None

    # --- Convenience helpers -------------------------------------------------
    def info(self, message: str) -> None:
        """Add an ``info`` diagnostic."""
        self.diagnostics.add_info(message)

    def warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic."""
        self.diagnostics.add_warning(message)

    def error(self, message: str) -> None:
        """Add an ``error`` diagnostic."""
        self.diagnostics.add_error(message)
