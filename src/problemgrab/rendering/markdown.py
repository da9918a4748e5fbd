# topmark:header:start
#
#   project      : ProblemGrab
#   file         : markdown.py
#   file_relpath : src/problemgrab/rendering/markdown.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Markdown utilities for ProblemGrab reports."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

MIN_FENCE_LENGTH: Final[int] = 3

_BACKTICK_RUN_RE: Final[re.Pattern[str]] = re.compile(r"`+")


def fence_for(text: str) -> str:
    """Return a backtick fence longer than any backtick run inside ``text``.

    Args:
        text (str): Content that will be placed inside the fenced block.

    Returns:
        str: At least three backticks, and always one more than the longest run.
    """
    longest: int = max((len(m.group(0)) for m in _BACKTICK_RUN_RE.finditer(text)), default=0)
    return "`" * max(MIN_FENCE_LENGTH, longest + 1)


def fenced_block(text: str) -> list[str]:
    """Return the lines of a fenced code block holding ``text``.

    A trailing newline in ``text`` does not produce an extra blank line.
    """
    fence: str = fence_for(text)
    body: str = text[:-1] if text.endswith("\n") else text
    return [fence, body, fence]


def relative_path(file_path: str, project_root: Path | str | None) -> str:
    """Rewrite ``file_path`` relative to ``project_root`` when it lies inside it.

    The root matches only at a path boundary, so ``/project`` does not claim
    ``/project2/x``. Leading separators left after removing the root are dropped.
    Paths outside the root are returned unchanged.
    """
    if project_root is None:
        return file_path
    root: str = str(project_root).rstrip("/\\")
    if not root:
        return file_path
    if file_path == root:
        return ""
    if file_path.startswith(root) and file_path[len(root)] in "/\\":
        return file_path[len(root) :].lstrip("/\\")
    return file_path


def count_by(keys: Iterable[str]) -> list[tuple[str, int]]:
    """Count ``keys`` and sort by descending count; ties keep first-seen order."""
    counts: dict[str, int] = {}
    for key in keys:
        counts[key] = counts.get(key, 0) + 1
    return sorted(counts.items(), key=lambda item: -item[1])


def render_bullets(items: Sequence[tuple[str, int]]) -> list[str]:
    """Render ``(label, count)`` pairs as a Markdown bullet list."""
    return [f"- {label}: {count}" for label, count in items]
