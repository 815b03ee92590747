# topmark:header:start
#
#   project      : AlignBy
#   file         : errors.py
#   file_relpath : src/alignby/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the AlignBy CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. They print through the project console when one is
present in the Click context.
"""

from __future__ import annotations

from typing import IO, Any

import click

from alignby.core.exit_codes import ExitCode


class AlignbyError(click.ClickException):
    """Base class for all AlignBy CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colors are applied in `show()`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class AlignbyUsageError(AlignbyError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class AlignbyConfigError(AlignbyError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class AlignbyIOError(AlignbyError):
    """Error for I/O failures outside the per-file pipeline (e.g. reading STDIN)."""

    exit_code = ExitCode.IO_ERROR
