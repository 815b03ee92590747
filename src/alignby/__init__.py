# topmark:header:start
#
#   project      : AlignBy
#   file         : __init__.py
#   file_relpath : src/alignby/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AlignBy package.

AlignBy lines up columns in plain text files. Files carry their own
instructions as inline directives (for example ``align_by "="`` inside a
comment); the engine aligns the block of lines that follows each directive and
leaves everything else untouched. A CLI discovers files, previews or applies
the changes and reports an outcome per file.
"""

from __future__ import annotations
