# topmark:header:start
#
#   project      : ProblemGrab
#   file         : report.py
#   file_relpath : src/problemgrab/rendering/report.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Render captured diagnostics as a single Markdown report.

Layout:
    * ``# Project Problems: <name>`` and the total count;
    * severity and category summaries (only when there is something to summarize);
    * one ``## File <i>: <path>`` section per file, in the order files were first seen;
    * one ``### Problem <i>.<j>`` block per diagnostic with its fields, the
      normalized description, the flagged code line and the context window.

Problems within a file are separated by ``---`` and file sections by ``* * *``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from problemgrab.config.logging import get_logger
from problemgrab.pipeline.normalize import normalize_description
from problemgrab.rendering.markdown import (
    count_by,
    fenced_block,
    relative_path,
    render_bullets,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from problemgrab.config.logging import GrabLogger
    from problemgrab.model import Diagnostic

logger: GrabLogger = get_logger(__name__)

PROBLEM_SEPARATOR: Final[str] = "---"
FILE_SEPARATOR: Final[str] = "* * *"


def _render_problem(diagnostic: Diagnostic, file_index: int, problem_index: int) -> list[str]:
    description: str = normalize_description(diagnostic.description)
    lines: list[str] = [
        f"### Problem {file_index}.{problem_index}",
        f"- **Line**: {diagnostic.line}",
        f"- **Column**: {diagnostic.column}",
        f"- **Severity**: {diagnostic.severity.name}",
        f"- **Type**: {diagnostic.category_key}",
    ]
    if diagnostic.message and diagnostic.message != description:
        lines.append(f"- **Message**: {diagnostic.message}")
    if description:
        lines.append("- **Description**:")
        lines.append("")
        lines.extend(fenced_block(description))
        lines.append("")
    if diagnostic.fix:
        lines.append(f"- **Suggested fix**: {diagnostic.fix}")
    lines.append("")

    lines.append("#### Problematic Code")
    lines.extend(fenced_block(diagnostic.code))
    lines.append("")
    lines.append("#### Code Context")
    lines.extend(fenced_block(diagnostic.context))
    return lines


def _group_by_file(diagnostics: Sequence[Diagnostic]) -> dict[str, list[Diagnostic]]:
    groups: dict[str, list[Diagnostic]] = {}
    for d in diagnostics:
        groups.setdefault(d.file_path, []).append(d)
    return groups


def render_report(
    project_name: str,
    diagnostics: Sequence[Diagnostic],
    *,
    project_root: Path | str | None = None,
) -> str:
    """Render ``diagnostics`` as a Markdown report.

    Args:
        project_name (str): Name shown in the report heading.
        diagnostics (Sequence[Diagnostic]): Diagnostics in traversal order.
        project_root (Path | str | None): Prefix removed from file paths inside it.

    Returns:
        str: The report, ending with a newline.
    """
    lines: list[str] = [
        f"# Project Problems: {project_name}",
        f"Total problems: {len(diagnostics)}",
        "",
    ]

    if diagnostics:
        lines.append("## Problems by Severity")
        lines.extend(render_bullets(count_by(d.severity.name for d in diagnostics)))
        lines.append("")
        lines.append("## Problems by Type")
        lines.extend(render_bullets(count_by(d.category_key for d in diagnostics)))
        lines.append("")

    groups: dict[str, list[Diagnostic]] = _group_by_file(diagnostics)
    for file_index, (file_path, file_diagnostics) in enumerate(groups.items(), start=1):
        if file_index > 1:
            lines.append(FILE_SEPARATOR)
            lines.append("")
        lines.append(f"## File {file_index}: {relative_path(file_path, project_root)}")
        lines.append(f"Problems in file: {len(file_diagnostics)}")
        lines.append("")
        for problem_index, diagnostic in enumerate(file_diagnostics, start=1):
            if problem_index > 1:
                lines.append(PROBLEM_SEPARATOR)
                lines.append("")
            lines.extend(_render_problem(diagnostic, file_index, problem_index))
            lines.append("")

    logger.debug(
        "Rendered report for %r: %d diagnostic(s) in %d file(s)",
        project_name,
        len(diagnostics),
        len(groups),
    )
    return "\n".join(lines).rstrip("\n") + "\n"
