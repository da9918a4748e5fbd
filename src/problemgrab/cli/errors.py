# topmark:header:start
#
#   project      : ProblemGrab
#   file         : errors.py
#   file_relpath : src/problemgrab/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Exceptions for the ProblemGrab CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. Domain errors from `problemgrab.errors` are translated into these
at the command boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the click context, they fall back to click's default.
"""

from __future__ import annotations

from typing import IO, Any

import click

from problemgrab.cli.exit_codes import ExitCode


class GrabError(click.ClickException):
    """Base class for all ProblemGrab CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class GrabUsageError(GrabError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class GrabConfigError(GrabError):
    """Error for configuration errors (invalid values in config files or flags)."""

    exit_code = ExitCode.CONFIG_ERROR


class GrabFileNotFoundError(GrabError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class GrabIOError(GrabError):
    """Error when the report cannot be delivered to its destination."""

    exit_code = ExitCode.IO_ERROR


class GrabSnapshotError(GrabError):
    """Error for unreadable or malformed diagnostics snapshots."""

    exit_code = ExitCode.FAILURE
