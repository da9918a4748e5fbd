# topmark:header:start
#
#   project      : ProblemGrab
#   file         : main.py
#   file_relpath : src/problemgrab/cli/main.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""ProblemGrab click entry point.

Group-level options (verbosity and color) are initialized once and placed
into ``ctx.obj`` together with the program-output console; subcommands read
them from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from problemgrab.cli.commands.capture import capture_command
from problemgrab.cli.commands.version import version_command
from problemgrab.cli.console import ClickConsole
from problemgrab.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from problemgrab.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from problemgrab.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the click context.

    Args:
        ctx (click.Context): Current click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or None).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment, never from -v/-q.
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO.value)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ProblemGrab: capture IDE problems as a Markdown report.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the ProblemGrab CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'problemgrab capture --snapshot FILE' to build a report.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(capture_command)

if __name__ == "__main__":
    cli()
