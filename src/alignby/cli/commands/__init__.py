# topmark:header:start
#
#   project      : AlignBy
#   file         : __init__.py
#   file_relpath : src/alignby/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the ``alignby`` group."""

from __future__ import annotations
