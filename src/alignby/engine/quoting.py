# topmark:header:start
#
#   project      : AlignBy
#   file         : quoting.py
#   file_relpath : src/alignby/engine/quoting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Quoted-literal extraction for delimiter lists.

Escapes are *recognized* (an escaped quote does not terminate the literal and
a backslash escapes another backslash) but are kept verbatim in the result.
"""

from __future__ import annotations

from alignby.constants import ESCAPE_CHAR, QUOTE_CHAR


def scan_quoted(text: str) -> tuple[str, int | None]:
    """Scan ``text``, which starts right after an opening quote.

    Args:
        text (str): Remainder of the line after the opening quote.

    Returns:
        tuple[str, int | None]: The literal up to the first unescaped quote
        (escape characters preserved) and the index of that closing quote in
        ``text``, or ``None`` if the literal is never closed.
    """
    escaped: bool = False
    for index, char in enumerate(text):
        if escaped:
            escaped = False
        elif char == ESCAPE_CHAR:
            escaped = True
        elif char == QUOTE_CHAR:
            return text[:index], index
    return text, None


def extract_quote(text: str) -> str:
    """Return the literal at the start of ``text``, closed or not."""
    literal, _ = scan_quoted(text)
    return literal
