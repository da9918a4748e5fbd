# topmark:header:start
#
#   project      : ProblemGrab
#   file         : runner.py
#   file_relpath : src/problemgrab/runner.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Run a capture: collect, render, and hand the report to a sink.

A capture request combines two independent axes, `Scope` (FILE or PROJECT)
and `SeverityMode` (ERRORS_ONLY or ALL). An empty capture renders nothing, so
the sink is never touched and the previous clipboard or file content survives.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from problemgrab.config.logging import get_logger
from problemgrab.errors import NoActiveContextError
from problemgrab.model import Scope
from problemgrab.pipeline.collect import collect
from problemgrab.rendering.report import render_report

if TYPE_CHECKING:
    from pathlib import Path

    from problemgrab.config.logging import GrabLogger
    from problemgrab.model import Diagnostic, SeverityMode
    from problemgrab.pipeline.context import GrabContext
    from problemgrab.sinks import Sink

logger: GrabLogger = get_logger(__name__)


@dataclass(frozen=True)
class CaptureRequest:
    """What to capture: a scope, a severity mode and, for FILE scope, the file."""

    scope: Scope
    mode: SeverityMode
    file_path: Path | None = None


@dataclass(frozen=True)
class CaptureResult:
    """Outcome of a capture.

    Attributes:
        diagnostics (tuple[Diagnostic, ...]): Collected diagnostics, in traversal order.
        document (str | None): Rendered report, or None when nothing was found.
    """

    diagnostics: tuple[Diagnostic, ...]
    document: str | None

    @property
    def count(self) -> int:
        """Return the number of captured diagnostics."""
        return len(self.diagnostics)


def capture(ctx: GrabContext, request: CaptureRequest) -> CaptureResult:
    """Collect the diagnostics selected by ``request`` and render them.

    Args:
        ctx (GrabContext): Capture context.
        request (CaptureRequest): Scope, severity mode and optional file.

    Returns:
        CaptureResult: The diagnostics and the rendered report (None when empty).

    Raises:
        NoActiveContextError: If FILE scope is requested without a file.
    """
    if request.scope is Scope.FILE and request.file_path is None:
        raise NoActiveContextError("No file selected for a file-scoped capture")

    logger.info(
        "Capturing %s problems (%s) for %r",
        request.scope.value,
        request.mode.value,
        ctx.project_name,
    )
    diagnostics: list[Diagnostic] = collect(
        ctx, request.scope, request.mode.allow_list, request.file_path
    )
    if not diagnostics:
        logger.info("No problems found")
        return CaptureResult(diagnostics=(), document=None)

    document: str = render_report(ctx.project_name, diagnostics, project_root=ctx.project_root)
    return CaptureResult(diagnostics=tuple(diagnostics), document=document)


def deliver(result: CaptureResult, sink: Sink) -> bool:
    """Hand the rendered report to ``sink``.

    Returns:
        bool: True if something was delivered, False for an empty capture.

    Raises:
        SinkError: If the sink cannot accept the report.
    """
    if result.document is None:
        return False
    sink.deliver(result.document)
    return True
