# topmark:header:start
#
#   project      : ProblemGrab
#   file         : interfaces.py
#   file_relpath : src/problemgrab/sources/interfaces.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Structural interfaces for the diagnostic engine and project traversal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from problemgrab.model import RawDiagnostic


class Document(Protocol):
    """Line-indexed view of a source file's text.

    Lines are 0-based; line end offsets exclude the line terminator.
    """

    @property
    def line_count(self) -> int:
        """Return the number of lines in the document."""
        ...

    def line_number(self, offset: int) -> int:
        """Return the 0-based line containing ``offset``."""
        ...

    def line_start_offset(self, line: int) -> int:
        """Return the offset of the first character of ``line``."""
        ...

    def line_end_offset(self, line: int) -> int:
        """Return the offset just past the last character of ``line`` (terminator excluded)."""
        ...

    def get_text(self, start: int, end: int) -> str:
        """Return the text between two offsets."""
        ...


class DiagnosticSource(Protocol):
    """Black-box access to the diagnostics the engine currently knows about."""

    def get_document(self, path: Path) -> Document | None:
        """Return the document for ``path``, or None when it cannot be analyzed."""
        ...

    def get_diagnostics(self, path: Path, document: Document) -> Sequence[RawDiagnostic]:
        """Return the raw diagnostic records of ``path`` in engine-reported order."""
        ...


@dataclass(frozen=True)
class Module:
    """A project module and its source-root directories."""

    name: str
    source_roots: tuple[Path, ...] = field(default_factory=tuple)


class DirectoryTraverser(Protocol):
    """Enumerates modules, source roots, and directory children of a project."""

    def modules(self) -> Sequence[Module]:
        """Return the project modules in a stable order."""
        ...

    def children(self, directory: Path) -> Sequence[Path]:
        """Return the files and subdirectories of ``directory`` in visiting order."""
        ...

    def is_directory(self, path: Path) -> bool:
        """Return True if ``path`` is a directory to descend into."""
        ...
