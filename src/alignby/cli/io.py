# topmark:header:start
#
#   project      : AlignBy
#   file         : io.py
#   file_relpath : src/alignby/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""STDIN content mode helpers.

When ``-`` is the only PATH, the content to align is read from STDIN as raw
bytes (so line terminators survive untouched) and spooled to a temporary
file. The pipeline then processes that file like any other.
"""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from alignby.cli.errors import AlignbyIOError
from alignby.config.logging import get_logger

if TYPE_CHECKING:
    from alignby.config.logging import AlignbyLogger

logger: AlignbyLogger = get_logger(__name__)

STDIN_PATH_SENTINEL: str = "-"
STDIN_DISPLAY_NAME: str = "<stdin>"


def read_stdin_to_temp() -> Path:
    """Spool STDIN to a temporary file and return its path.

    The caller removes the file with `safe_unlink`.

    Raises:
        AlignbyIOError: If the temporary file cannot be written.
    """
    data: bytes = sys.stdin.buffer.read()
    try:
        with tempfile.NamedTemporaryFile(prefix="alignby-stdin-", delete=False) as tmp:
            tmp.write(data)
    except OSError as exc:
        raise AlignbyIOError(f"Failed to create temp file for STDIN content: {exc}") from exc
    logger.debug("Spooled %d byte(s) of STDIN to %s", len(data), tmp.name)
    return Path(tmp.name)


def safe_unlink(path: Path | None) -> None:
    """Delete ``path`` if it exists; failures are logged, not raised."""
    if path and path.exists():
        try:
            path.unlink()
        except OSError as e:
            logger.error("Failed to delete %s: %s", path, e)
