# topmark:header:start
#
#   project      : ProblemGrab
#   file         : capture.py
#   file_relpath : src/problemgrab/cli/commands/capture.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""ProblemGrab `capture` command.

Loads a diagnostics snapshot, collects the problems of one file or of the whole
project, renders them as Markdown and delivers the report to the clipboard, a
file or stdout. The four IDE actions map onto two flags::

    problemgrab capture --snapshot s.json --file src/app.py              # file, errors
    problemgrab capture --snapshot s.json --file src/app.py --all        # file, all
    problemgrab capture --snapshot s.json                                # project, errors
    problemgrab capture --snapshot s.json --all                          # project, all

When nothing is found, "No problems found." is printed and nothing is written.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from problemgrab.cli.cli_types import EnumChoiceParam
from problemgrab.cli.errors import (
    GrabConfigError,
    GrabFileNotFoundError,
    GrabIOError,
    GrabSnapshotError,
    GrabUsageError,
)
from problemgrab.config.diagnostics import ConfigLevel
from problemgrab.config.logging import get_logger
from problemgrab.config.model import MutableConfig, OutputTarget
from problemgrab.errors import NoActiveContextError, SinkError, SnapshotError
from problemgrab.model import Scope, SeverityMode
from problemgrab.pipeline.context import GrabContext
from problemgrab.runner import CaptureRequest, capture, deliver
from problemgrab.sinks import ClipboardSink, FileSink, StdoutSink
from problemgrab.sources.snapshot import SnapshotDiagnosticSource

if TYPE_CHECKING:
    from problemgrab.cli.console_api import ConsoleLike
    from problemgrab.config.logging import GrabLogger
    from problemgrab.config.model import Config
    from problemgrab.runner import CaptureResult
    from problemgrab.sinks import Sink

logger: GrabLogger = get_logger(__name__)


def _plural(count: int) -> str:
    return f"{count} problem" if count == 1 else f"{count} problems"


def _report_config_diagnostics(
    console: ConsoleLike, config: Config, *, vlevel: int, color: bool
) -> None:
    for diag in config.diagnostics:
        if diag.level is ConfigLevel.WARNING and vlevel < 0:
            continue
        prefix: str = f"[{diag.level.value}]"
        if color:
            prefix = diag.level.color(prefix)
        console.warn(f"{prefix} {diag.message}")


def _under_root(path: Path, root: Path) -> Path:
    return (path if path.is_absolute() else root / path).resolve()


def _make_sink(config: Config, console: ConsoleLike) -> Sink:
    if config.output_target is OutputTarget.FILE:
        return FileSink(config.output_path)
    if config.output_target is OutputTarget.STDOUT:
        return StdoutSink(console)
    return ClipboardSink()


@click.command(
    name="capture",
    help="Capture IDE problems from a diagnostics snapshot as a Markdown report.",
)
@click.option(
    "--snapshot",
    "snapshot_path",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="JSON snapshot of the diagnostics reported by the IDE.",
)
@click.option(
    "--scope",
    type=EnumChoiceParam(Scope),
    default=None,
    help="Inspect one file or the whole project (default: file when --file is given).",
)
@click.option(
    "--errors-only/--all",
    "errors_only",
    default=True,
    help="Keep only ERROR diagnostics (default) or every reportable severity.",
)
@click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="File to inspect for file-scoped captures, relative to the project root.",
)
@click.option(
    "--project-root",
    "project_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root directory (default: current directory).",
)
@click.option(
    "--config",
    "config_files",
    type=click.Path(dir_okay=False, path_type=Path),
    multiple=True,
    help="Additional config file(s), merged after discovered ones.",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Ignore problemgrab.toml and [tool.problemgrab] in the project root.",
)
@click.option(
    "--project-name",
    default=None,
    help="Name used in the report heading.",
)
@click.option(
    "--output",
    "output_target",
    type=EnumChoiceParam(OutputTarget),
    default=None,
    help="Report destination (default: clipboard).",
)
@click.option(
    "--output-file",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Report file, relative to the project root (implies --output=file).",
)
@click.option(
    "--context-radius",
    type=click.IntRange(min=0),
    default=None,
    help="Lines of context around each flagged line (default: 3).",
)
def capture_command(
    *,
    snapshot_path: Path,
    scope: Scope | None,
    errors_only: bool,
    file_path: Path | None,
    project_root: Path | None,
    config_files: tuple[Path, ...],
    no_config: bool,
    project_name: str | None,
    output_target: OutputTarget | None,
    output_path: Path | None,
    context_radius: int | None,
) -> None:
    """Capture diagnostics and deliver the rendered report."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    root: Path = (project_root or Path.cwd()).resolve()
    if not root.is_dir():
        raise GrabFileNotFoundError(f"Project root does not exist: {root}")
    for extra in config_files:
        if not extra.is_file():
            raise GrabFileNotFoundError(f"Config file not found: {extra}")
    if not snapshot_path.is_file():
        raise GrabFileNotFoundError(f"Snapshot not found: {snapshot_path}")

    try:
        source: SnapshotDiagnosticSource = SnapshotDiagnosticSource.from_file(
            snapshot_path, base=root
        )
    except SnapshotError as e:
        raise GrabSnapshotError(str(e)) from e

    draft: MutableConfig = MutableConfig.load_merged(
        project_root=root,
        extra_config_files=config_files,
        no_config=no_config,
    )
    if draft.project_name is None and source.project_name:
        draft.project_name = source.project_name
    draft.apply_cli_args(
        {
            "project_name": project_name,
            "context_radius": context_radius,
            "output_target": output_target
            or (OutputTarget.FILE if output_path is not None else None),
            "output_path": _under_root(output_path, root) if output_path is not None else None,
        }
    )
    config: Config = draft.freeze()
    _report_config_diagnostics(
        console, config, vlevel=vlevel, color=bool(ctx.obj.get("color_enabled", False))
    )
    if config.has_errors:
        raise GrabConfigError("Invalid configuration; see messages above.")

    effective_scope: Scope = scope or (Scope.FILE if file_path is not None else Scope.PROJECT)
    request = CaptureRequest(
        scope=effective_scope,
        mode=SeverityMode.ERRORS_ONLY if errors_only else SeverityMode.ALL,
        file_path=_under_root(file_path, root) if file_path is not None else None,
    )
    grab_ctx: GrabContext = GrabContext.from_config(config, source)

    try:
        result: CaptureResult = capture(grab_ctx, request)
    except NoActiveContextError as e:
        raise GrabUsageError(f"{e} (use --file PATH)") from e

    if result.document is None:
        console.print("No problems found.")
        return

    sink: Sink = _make_sink(config, console)
    try:
        deliver(result, sink)
    except SinkError as e:
        raise GrabIOError(str(e)) from e

    if config.output_target is OutputTarget.CLIPBOARD:
        console.print(f"{_plural(result.count)} copied to clipboard")
    elif config.output_target is OutputTarget.FILE:
        console.print(f"{_plural(result.count)} written to {config.output_path}")
    elif vlevel > 0:
        # The report itself is on stdout; keep the status line on stderr.
        console.warn(f"{_plural(result.count)} written to stdout")
