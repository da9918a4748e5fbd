# topmark:header:start
#
#   project      : ProblemGrab
#   file         : version.py
#   file_relpath : src/problemgrab/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""ProblemGrab `version` command.

Prints the current ProblemGrab version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from problemgrab.constants import PROBLEMGRAB_VERSION

if TYPE_CHECKING:
    from problemgrab.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ProblemGrab.",
)
def version_command() -> None:
    """Show the current version of ProblemGrab."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    if vlevel > 0:
        console.print(console.styled("ProblemGrab version:", bold=True, underline=True))
        console.print(f"    {console.styled(PROBLEMGRAB_VERSION, bold=True)}")
    else:
        console.print(console.styled(PROBLEMGRAB_VERSION, bold=True))
