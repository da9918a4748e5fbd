# topmark:header:start
#
#   project      : ProblemGrab
#   file         : context.py
#   file_relpath : src/problemgrab/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Explicit capture context passed through the pipeline.

A `GrabContext` bundles everything a capture needs from its environment: the
project identity, the diagnostic source, the directory traverser and the
filter settings. Nothing in the pipeline reaches for global state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from problemgrab.constants import DEFAULT_CONTEXT_RADIUS
from problemgrab.pipeline.categories import DEFAULT_EXCLUDED_CATEGORIES
from problemgrab.sources.filesystem import FileSystemTraverser

if TYPE_CHECKING:
    from pathlib import Path

    from problemgrab.config.model import Config
    from problemgrab.sources.interfaces import DiagnosticSource, DirectoryTraverser


@dataclass(frozen=True)
class GrabContext:
    """Environment of a single capture.

    Attributes:
        project_name (str): Name used in the report heading.
        project_root (Path): Root used to relativize file paths in the report.
        source (DiagnosticSource): Provides documents and raw diagnostics.
        traverser (DirectoryTraverser): Enumerates modules, source roots and children.
        context_radius (int): Context window radius for code snippets.
        excluded_categories (frozenset[str]): Category keys dropped by the filter.
    """

    project_name: str
    project_root: Path
    source: DiagnosticSource
    traverser: DirectoryTraverser
    context_radius: int = DEFAULT_CONTEXT_RADIUS
    excluded_categories: frozenset[str] = DEFAULT_EXCLUDED_CATEGORIES

    @classmethod
    def from_config(cls, config: Config, source: DiagnosticSource) -> GrabContext:
        """Build a context from a frozen configuration and a diagnostic source."""
        traverser = FileSystemTraverser.from_config(
            config.project_root,
            ((m.name, m.source_roots) for m in config.modules),
            config.exclude_patterns,
        )
        return cls(
            project_name=config.project_name,
            project_root=config.project_root,
            source=source,
            traverser=traverser,
            context_radius=config.context_radius,
            excluded_categories=config.excluded_categories,
        )
