# topmark:header:start
#
#   project      : ProblemGrab
#   file         : filesystem.py
#   file_relpath : src/problemgrab/sources/filesystem.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Filesystem-backed `DirectoryTraverser`.

Modules and their source roots come from configuration; when none are
configured, the project root itself is the single source root of a single
module. Children are visited in name order so that reports are deterministic.
Exclude patterns follow ``.gitignore`` semantics (via `pathspec`) and are
evaluated relative to the project root.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec

from problemgrab.config.logging import get_logger
from problemgrab.sources.interfaces import Module

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from problemgrab.config.logging import GrabLogger

logger: GrabLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


@dataclass
class FileSystemTraverser:
    """Walk configured modules and source roots on disk.

    Attributes:
        project_root (Path): Root directory of the project.
        module_list (list[Module]): Configured modules; empty means "the root is the module".
        exclude_patterns (list[str]): Gitignore-style patterns of paths to skip.
    """

    project_root: Path
    module_list: list[Module] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    _spec: PathSpec | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.exclude_patterns:
            self._spec = PathSpec.from_lines("gitwildmatch", self.exclude_patterns)

    @classmethod
    def from_config(
        cls,
        project_root: Path,
        modules: Iterable[tuple[str, Sequence[str]]],
        exclude_patterns: Iterable[str] = (),
    ) -> FileSystemTraverser:
        """Build a traverser from configured ``(name, source_roots)`` pairs.

        Relative source roots are resolved against ``project_root``.
        """
        module_list: list[Module] = [
            Module(
                name=name,
                source_roots=tuple((project_root / root).resolve() for root in roots),
            )
            for name, roots in modules
        ]
        return cls(
            project_root=project_root.resolve(),
            module_list=module_list,
            exclude_patterns=list(exclude_patterns),
        )

    def is_excluded(self, path: Path) -> bool:
        """Return True if ``path`` matches one of the exclude patterns."""
        if self._spec is None:
            return False
        rel: str = _rel_for_match(path, self.project_root)
        if path.is_dir():
            # Directory patterns such as "build/" only match with a trailing slash.
            rel = rel.rstrip("/") + "/"
        return self._spec.match_file(rel)

    def modules(self) -> Sequence[Module]:
        """Return the configured modules (or the project root as a single module)."""
        if self.module_list:
            return self.module_list
        return [Module(name=self.project_root.name, source_roots=(self.project_root,))]

    def children(self, directory: Path) -> Sequence[Path]:
        """Return the non-excluded entries of ``directory`` sorted by name."""
        try:
            entries: list[Path] = sorted(directory.iterdir(), key=lambda p: p.name)
        except FileNotFoundError:
            logger.warning("Source root does not exist: %s", directory)
            return []
        except NotADirectoryError:
            return []
        except OSError as e:
            logger.warning("Cannot list %s: %s", directory, e)
            return []
        kept: list[Path] = []
        for entry in entries:
            if self.is_excluded(entry):
                logger.trace("Excluded by pattern: %s", entry)
                continue
            kept.append(entry)
        return kept

    def is_directory(self, path: Path) -> bool:
        """Return True for directories (symlinked directories are not followed)."""
        return path.is_dir() and not path.is_symlink()
