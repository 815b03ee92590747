# topmark:header:start
#
#   project      : AlignBy
#   file         : constants.py
#   file_relpath : src/alignby/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AlignBy Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

ALIGNBY_VERSION: str = get_version("alignby")

# Directive vocabulary (case-sensitive, ASCII)
DIRECTIVE_MARKER: str = "align_by"
CANCEL_KEYWORD: str = "cancel_file"
PAUSE_KEYWORD: str = "pause"
RESUME_KEYWORD: str = "resume"

# Mode prefixes, matched in this order after the marker's single space
REGEX_SORT_PREFIX: str = "regex sort "
REGEX_PREFIX: str = "regex "
SORT_PREFIX: str = "sort "

QUOTE_CHAR: str = '"'
ESCAPE_CHAR: str = "\\"

# Configuration sources
ALIGNBY_TOML_NAME: str = "alignby.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "alignby"

# Files above this size (in bytes) are skipped during discovery
DEFAULT_MAX_FILE_SIZE: int = 1 << 20

GIT_DIR_NAME: str = ".git"
GITIGNORE_NAME: str = ".gitignore"
