# topmark:header:start
#
#   project      : AlignBy
#   file         : writer.py
#   file_relpath : src/alignby/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer step for committing aligned content to a sink.

This step is the only place where AlignBy writes results to a destination
(filesystem, stdout, or dry-run).

Sinks
-----
- FileSystemSink: atomically replaces the file (temporary sibling + ``os.replace``).
- StdoutSink: writes the aligned content to stdout (stdin-content mode).
- NullSink: no-op (dry-run).

Files are written only when the comparer reported a change; an unchanged
file is never touched, so its timestamps stay as they were.
"""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from alignby.config.logging import get_logger
from alignby.pipeline.status import Axis, ComparisonStatus, FsStatus, WriteStatus
from alignby.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from alignby.config.logging import AlignbyLogger
    from alignby.pipeline.context import ProcessingContext

logger: AlignbyLogger = get_logger(__name__)


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    status: WriteStatus
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for write sinks used by the writer step."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        """Write the aligned content for ``ctx`` to the target sink."""
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        """No-op write for dry-run mode."""
        return WriteResult(status=WriteStatus.SKIPPED, bytes_written=0)


class StdoutSink:
    """Standard-output sink (stdin-content mode)."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        """Emit the aligned content to standard output."""
        if ctx.aligned_text is None:
            return WriteResult(status=WriteStatus.SKIPPED, bytes_written=0)
        text: str = ctx.aligned_text
        sys.stdout.write(text)
        sys.stdout.flush()
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=len(text.encode("utf-8")))


def atomic_write_text(path: Path, text: str) -> int:
    """Replace ``path`` with ``text`` (UTF-8, terminators written verbatim).

    The content goes to a temporary file in the same directory which then
    replaces the target with ``os.replace``. On failure the temporary file is
    removed and the target is left as it was.

    Returns:
        int: Number of bytes written.

    Raises:
        OSError: If the temporary file cannot be created, written or moved.
    """
    # Write through symlinks: replace the link target, not the link.
    target: Path = path.resolve()
    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(text)
        shutil.copymode(target, tmp_path)
        os.replace(tmp_path, target)
    except OSError:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise
    return len(text.encode("utf-8"))


class FileSystemSink:
    """Filesystem sink that atomically replaces ``ctx.path``."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        """Write the aligned content in place of ``ctx.path``."""
        if ctx.aligned_text is None:
            logger.debug("FileSystemSink: no aligned text for %s: nothing to do", ctx.path)
            return WriteResult(status=WriteStatus.SKIPPED, bytes_written=0)
        bytes_written: int = atomic_write_text(ctx.path, ctx.aligned_text)
        logger.debug("FileSystemSink: wrote %d bytes to file %s", bytes_written, ctx.path)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=bytes_written)


def _select_sink(ctx: ProcessingContext) -> WriteSink:
    """Return ``NullSink`` when not applying, ``StdoutSink`` for stdin, else ``FileSystemSink``."""
    if not ctx.config.apply_changes:
        logger.debug("Selected NULL sink (ctx.config.apply_changes is False)")
        return NullSink()
    if ctx.config.stdin:
        logger.debug("Selected STDOUT sink (ctx.config.stdin is True)")
        return StdoutSink()
    logger.debug("Selected file system sink")
    return FileSystemSink()


class WriterStep(BaseStep):
    """Commit changed content to the selected sink.

    Axes written:
      - write
      - fs (``NO_WRITE_PERMISSION`` only)

    Sets:
      - WriteStatus: {WRITTEN, SKIPPED, FAILED}
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.WRITE,
            axes_written=(Axis.WRITE, Axis.FS),
        )

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Write only files the comparer found changed."""
        if ctx.is_halted or ctx.status.comparison != ComparisonStatus.CHANGED:
            ctx.status.write = WriteStatus.SKIPPED
            return False
        return True

    def run(self, ctx: ProcessingContext) -> None:
        """Write through the selected sink, mapping OS errors to `WriteStatus.FAILED`."""
        sink: WriteSink = _select_sink(ctx)
        try:
            result: WriteResult = sink.write(ctx=ctx)
        except PermissionError as exc:
            logger.error("Permission denied writing %s: %s", ctx.path, exc)
            ctx.status.fs = FsStatus.NO_WRITE_PERMISSION
            ctx.status.write = WriteStatus.FAILED
            ctx.error(f"Permission denied writing {ctx.name}")
            return
        except OSError as exc:
            logger.error("Failed to write %s: %s", ctx.path, exc)
            ctx.status.write = WriteStatus.FAILED
            ctx.error(f"Failed to write {ctx.name}: {exc.strerror or exc}")
            return
        ctx.status.write = result.status
