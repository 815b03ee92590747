# topmark:header:start
#
#   project      : AlignBy
#   file         : __init__.py
#   file_relpath : src/alignby/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directive-driven column alignment engine.

The engine is pure: it takes the full text of a document and returns the
aligned text, or raises `AlignmentCanceled` / `MalformedDirectiveError`. It never
reads or writes files; the pipeline layer owns all I/O.

Public entry points are re-exported here:

    from alignby.engine import align_text

    aligned = align_text(source)
"""

from __future__ import annotations

from alignby.engine.driver import Document, EngineState, align_document, align_text
from alignby.engine.errors import (
    AlignmentCanceled,
    AlignmentError,
    DirectiveErrorReason,
    MalformedDirectiveError,
)

__all__: list[str] = [
    "AlignmentCanceled",
    "AlignmentError",
    "DirectiveErrorReason",
    "Document",
    "EngineState",
    "MalformedDirectiveError",
    "align_document",
    "align_text",
]
