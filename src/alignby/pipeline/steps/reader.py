# topmark:header:start
#
#   project      : AlignBy
#   file         : reader.py
#   file_relpath : src/alignby/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""File reader step for the AlignBy pipeline.

Loads the file as UTF-8 text with native terminators preserved
(``newline=""``), records newline facts (histogram, dominant style, trailing
terminator) and maps I/O failures to `FsStatus` / `ContentStatus` values.

A file that mixes terminators is still processed: when it changes, the
aligned output uses the dominant style throughout. The reader flags the
situation with a warning diagnostic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from alignby.config.logging import get_logger
from alignby.engine.newline import NewlineStyle, detect_newline_style, newline_histogram
from alignby.pipeline.status import Axis, ContentStatus, FsStatus
from alignby.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from alignby.config.logging import AlignbyLogger
    from alignby.pipeline.context import ProcessingContext

logger: AlignbyLogger = get_logger(__name__)


class ReaderStep(BaseStep):
    """Read the file and set `FsStatus` and `ContentStatus`.

    Axes written:
      - fs
      - content

    Sets:
      - FsStatus: {OK, EMPTY, NOT_FOUND, NO_READ_PERMISSION, UNREADABLE}
      - ContentStatus: {OK, UNDECODABLE}
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.CONTENT,
            axes_written=(Axis.FS, Axis.CONTENT),
        )

    def _fail(self, ctx: ProcessingContext, status: FsStatus, message: str) -> None:
        ctx.status.fs = status
        ctx.error(message)
        ctx.request_halt(reason=status.value, at_step=self)

    def run(self, ctx: ProcessingContext) -> None:
        """Read ``ctx.path`` and record its text and newline facts.

        Args:
            ctx (ProcessingContext): The processing context for the current file.
        """
        try:
            with ctx.path.open("r", encoding="utf-8", newline="") as fh:
                text: str = fh.read()
        except (FileNotFoundError, IsADirectoryError):
            self._fail(ctx, FsStatus.NOT_FOUND, f"File not found: {ctx.name}")
            return
        except PermissionError:
            self._fail(ctx, FsStatus.NO_READ_PERMISSION, f"Permission denied: {ctx.name}")
            return
        except UnicodeDecodeError as exc:
            ctx.status.fs = FsStatus.OK
            ctx.status.content = ContentStatus.UNDECODABLE
            ctx.error(f"Not valid UTF-8 (byte offset {exc.start}): {ctx.name}")
            ctx.request_halt(reason=ContentStatus.UNDECODABLE.value, at_step=self)
            return
        except OSError as exc:
            logger.error("Cannot read %s: %s", ctx.path, exc)
            self._fail(ctx, FsStatus.UNREADABLE, f"Cannot read {ctx.name}: {exc.strerror or exc}")
            return

        ctx.original_text = text
        ctx.status.fs = FsStatus.EMPTY if not text else FsStatus.OK
        ctx.status.content = ContentStatus.OK

        hist: dict[NewlineStyle, int] = newline_histogram(text)
        ctx.newline_hist = {style.value: count for style, count in hist.items() if count}
        ctx.newline_style = detect_newline_style(text).value
        ctx.ends_with_newline = text.endswith(("\n", "\r"))
        ctx.mixed_newlines = len(ctx.newline_hist) > 1

        logger.debug(
            "Read %s: %d char(s), newlines=%r, dominant=%r",
            ctx.path,
            len(text),
            ctx.newline_hist,
            ctx.newline_style,
        )

    def hint(self, ctx: ProcessingContext) -> None:
        """Warn about mixed terminators."""
        if ctx.mixed_newlines:
            ctx.warning(
                f"Mixed line endings {sorted(ctx.newline_hist.items())!r}; "
                f"aligned output uses {ctx.newline_style!r}"
            )
