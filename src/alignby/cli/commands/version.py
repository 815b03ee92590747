# topmark:header:start
#
#   project      : AlignBy
#   file         : version.py
#   file_relpath : src/alignby/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AlignBy `version` command.

Prints the AlignBy version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from alignby.constants import ALIGNBY_VERSION

if TYPE_CHECKING:
    from alignby.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of AlignBy.",
)
def version_command() -> None:
    """Show the current version of AlignBy."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    if vlevel > 0:
        console.print(console.styled("AlignBy version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(ALIGNBY_VERSION, bold=True)}")
    else:
        console.print(console.styled(ALIGNBY_VERSION, bold=True))
