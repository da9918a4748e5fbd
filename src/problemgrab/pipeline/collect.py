# topmark:header:start
#
#   project      : ProblemGrab
#   file         : collect.py
#   file_relpath : src/problemgrab/pipeline/collect.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Collect filtered diagnostics for a single file or a whole project.

Project traversal visits modules in traverser order, then each module's
source roots in order, then walks every root depth-first. A directory
contributes the concatenation of its children's results, so the output order
is fully determined by the traverser.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from problemgrab.config.logging import get_logger
from problemgrab.errors import NoActiveContextError
from problemgrab.model import Scope
from problemgrab.pipeline.filter import filter_diagnostics

if TYPE_CHECKING:
    from collections.abc import Set
    from pathlib import Path

    from problemgrab.config.logging import GrabLogger
    from problemgrab.model import Diagnostic, Severity
    from problemgrab.pipeline.context import GrabContext
    from problemgrab.sources.interfaces import Document

logger: GrabLogger = get_logger(__name__)


def collect_for_file(
    ctx: GrabContext,
    path: Path,
    severity_allow: Set[Severity] | None = None,
) -> list[Diagnostic]:
    """Return the filtered diagnostics of one file.

    A file without a readable document yields an empty list.
    """
    document: Document | None = ctx.source.get_document(path)
    if document is None:
        logger.debug("No document available for %s", path)
        return []
    raw = ctx.source.get_diagnostics(path, document)
    logger.trace("%s: %d raw record(s)", path, len(raw))
    return filter_diagnostics(
        raw,
        file_path=str(path),
        document=document,
        severity_allow=severity_allow,
        excluded_categories=ctx.excluded_categories,
        radius=ctx.context_radius,
    )


def _collect_tree(
    ctx: GrabContext,
    path: Path,
    severity_allow: Set[Severity] | None,
) -> list[Diagnostic]:
    if not ctx.traverser.is_directory(path):
        return collect_for_file(ctx, path, severity_allow)
    result: list[Diagnostic] = []
    for child in ctx.traverser.children(path):
        result.extend(_collect_tree(ctx, child, severity_allow))
    return result


def collect_for_project(
    ctx: GrabContext,
    severity_allow: Set[Severity] | None = None,
) -> list[Diagnostic]:
    """Return the filtered diagnostics of every file under every source root.

    Args:
        ctx (GrabContext): Capture context.
        severity_allow (Set[Severity] | None): Optional severity allow-list.

    Returns:
        list[Diagnostic]: Diagnostics in module, root, then depth-first order.
    """
    result: list[Diagnostic] = []
    for module in ctx.traverser.modules():
        logger.debug("Collecting module %r (%d root(s))", module.name, len(module.source_roots))
        for root in module.source_roots:
            result.extend(_collect_tree(ctx, root, severity_allow))
    logger.debug("Project %r: %d diagnostic(s)", ctx.project_name, len(result))
    return result


def collect(
    ctx: GrabContext,
    scope: Scope,
    severity_allow: Set[Severity] | None = None,
    file_path: Path | None = None,
) -> list[Diagnostic]:
    """Dispatch to `collect_for_file` or `collect_for_project` based on ``scope``.

    Raises:
        NoActiveContextError: If ``scope`` is FILE and no ``file_path`` is given.
    """
    if scope is Scope.FILE:
        if file_path is None:
            raise NoActiveContextError("File scope requires a file to inspect")
        return collect_for_file(ctx, file_path, severity_allow)
    return collect_for_project(ctx, severity_allow)
