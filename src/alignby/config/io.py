# topmark:header:start
#
#   project      : AlignBy
#   file         : io.py
#   file_relpath : src/alignby/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and typed value getters for AlignBy configuration.

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
*checked* getters validate the expected shape of a value and record a warning
in a `DiagnosticLog` (and the log) instead of raising, so a typo in a config
file never aborts a run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from alignby.config.logging import get_logger
from alignby.constants import DEFAULT_MAX_FILE_SIZE

if TYPE_CHECKING:
    from pathlib import Path

    from alignby.config.logging import AlignbyLogger
    from alignby.core.diagnostics import DiagnosticLog

logger: AlignbyLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class Toml:
    """Section and key names used in AlignBy TOML files."""

    KEY_ROOT: Final[str] = "root"
    SECTION_FILES: Final[str] = "files"

    KEY_FILES: Final[str] = "files"
    KEY_INCLUDE_PATTERNS: Final[str] = "include_patterns"
    KEY_EXCLUDE_PATTERNS: Final[str] = "exclude_patterns"
    KEY_RESPECT_GITIGNORE: Final[str] = "respect_gitignore"
    KEY_MAX_FILE_SIZE: Final[str] = "max_file_size"


def load_defaults_dict() -> TomlTable:
    """Return AlignBy's runtime defaults as a TOML-shaped dict (no I/O)."""
    return {
        Toml.SECTION_FILES: {
            Toml.KEY_FILES: [],
            Toml.KEY_INCLUDE_PATTERNS: [],
            Toml.KEY_EXCLUDE_PATTERNS: [],
            Toml.KEY_RESPECT_GITIGNORE: True,
            Toml.KEY_MAX_FILE_SIZE: DEFAULT_MAX_FILE_SIZE,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``alignby.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content; an empty dict on failure (errors are logged).
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table at ``key``, or an empty dict when missing or not a table."""
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Expected table for key %s, got %r; ignoring", key, value)
    return {}


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected bool in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected bool in {loc}, got {type(value).__name__}: {value}")
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> int | None:
    """Return an optional non-negative int value, warning when the value is invalid.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value

    logger.warning("Expected non-negative int in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(
        f"Expected non-negative int in {loc}, got {type(value).__name__}: {value!r}"
    )
    return None


def get_string_list_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> list[str]:
    """Extract a list of strings, dropping (and reporting) entries of other types.

    Behavior:
        - If the key is missing, returns [].
        - If the value is not a list, a warning is recorded and [] is returned.
        - Non-string items are ignored with a warning each.
    """
    value: Any | None = table.get(key)
    if value is None:
        return []

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(value, list):
        logger.warning("Expected list in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected list in {loc}, got {type(value).__name__}: {value!r}")
        return []

    out: list[str] = []
    for v in cast("list[Any]", value):
        if isinstance(v, str):
            out.append(v)
        else:
            logger.warning("Ignoring non-string entry in %s: %r", loc, v)
            diagnostics.add_warning(f"Ignoring non-string entry in {loc}: {v!r}")
    return out
