# topmark:header:start
#
#   project      : AlignBy
#   file         : status.py
#   file_relpath : src/alignby/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for each axis in the AlignBy pipeline.

Each enum captures one phase (fs, content, align, comparison, write). Steps
**must only** write to the axes listed in their ``axes_written`` contract.

Conventions:
  * All enums inherit from `ColoredStrEnum` for their colored rendering.
  * Values are human-readable strings used in CLI/diagnostics; prefer equality
    (`==`) over identity checks.
"""

from __future__ import annotations

from enum import Enum

from yachalk import chalk

from alignby.rendering.colored_enum import ColoredStrEnum


class Axis(str, Enum):
    """Pipeline axes, named after the `ProcessingStatus` attributes."""

    FS = "fs"
    CONTENT = "content"
    ALIGN = "align"
    COMPARISON = "comparison"
    WRITE = "write"


class FsStatus(ColoredStrEnum):
    """Represents the status of file system checks in the pipeline."""

    # Value format: (description: str, color_renderer: ChalkBuilder)
    PENDING = ("pending", chalk.gray)
    OK = ("ok", chalk.green)
    EMPTY = ("empty file", chalk.yellow)
    NOT_FOUND = ("not found", chalk.red)
    NO_READ_PERMISSION = ("no read permission", chalk.red_bright)
    NO_WRITE_PERMISSION = ("no write permission", chalk.red_bright)
    UNREADABLE = ("read error", chalk.red_bright)


class ContentStatus(ColoredStrEnum):
    """Represents the status of decoding the file content."""

    PENDING = ("file content pending", chalk.gray)
    OK = ("ok", chalk.green)
    UNDECODABLE = ("not valid UTF-8", chalk.red)


class AlignStatus(ColoredStrEnum):
    """Represents the outcome of running the alignment engine."""

    PENDING = ("alignment pending", chalk.gray)
    ALIGNED = ("directives processed", chalk.green)
    NO_DIRECTIVES = ("no directives", chalk.blue)
    CANCELED = ("canceled by directive", chalk.blue_bright)
    MALFORMED = ("malformed directive", chalk.red_bright)
    SKIPPED = ("alignment skipped", chalk.yellow)


class ComparisonStatus(ColoredStrEnum):
    """Represents the status of comparing original and aligned content."""

    PENDING = ("comparison pending", chalk.gray)
    CHANGED = ("changes found", chalk.red)
    UNCHANGED = ("no changes found", chalk.green)
    SKIPPED = ("comparison skipped", chalk.yellow)


class WriteStatus(ColoredStrEnum):
    """Represents the status of the write operation in the pipeline."""

    PENDING = ("write pending", chalk.gray)
    WRITTEN = ("changes written", chalk.green)
    SKIPPED = ("write skipped", chalk.yellow)
    FAILED = ("write failed", chalk.red_bright)
