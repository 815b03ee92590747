# topmark:header:start
#
#   project      : AlignBy
#   file         : __main__.py
#   file_relpath : src/alignby/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running AlignBy via ``python -m alignby``.

It delegates directly to :func:`alignby.cli.main.cli`, so the module interface
and the ``alignby`` console script share a single entry point.

Examples:
    Preview alignment changes for the current directory::

        python -m alignby check .
"""

from __future__ import annotations

from alignby.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
