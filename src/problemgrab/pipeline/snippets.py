# topmark:header:start
#
#   project      : ProblemGrab
#   file         : snippets.py
#   file_relpath : src/problemgrab/pipeline/snippets.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Source snippet extraction.

Diagnostics may point at positions that no longer exist (the file was edited
after the engine ran). Out-of-range lines therefore produce an empty string
instead of an error.

Context window format, one entry per line::

       4:     previous line
       5: >>> flagged line
       6:     next line
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from problemgrab.constants import DEFAULT_CONTEXT_RADIUS

if TYPE_CHECKING:
    from problemgrab.sources.interfaces import Document

MARKER: Final[str] = ">>> "
NO_MARKER: Final[str] = "    "


def _in_range(document: Document, line_index: int) -> bool:
    return 0 <= line_index < document.line_count


def _line_text(document: Document, line_index: int) -> str:
    return document.get_text(
        document.line_start_offset(line_index),
        document.line_end_offset(line_index),
    )


def extract_line(document: Document, line_index: int) -> str:
    """Return the flagged source line, trimmed, or ``""`` when out of range.

    Args:
        document (Document): Source document.
        line_index (int): 0-based line index.

    Returns:
        str: The line text without its terminator and surrounding whitespace.
    """
    if not _in_range(document, line_index):
        return ""
    return _line_text(document, line_index).strip()


def extract_context(
    document: Document,
    line_index: int,
    radius: int = DEFAULT_CONTEXT_RADIUS,
) -> str:
    """Return a numbered window of ``radius`` lines around ``line_index``.

    Args:
        document (Document): Source document.
        line_index (int): 0-based index of the flagged line.
        radius (int): Number of lines shown before and after the flagged line.

    Returns:
        str: Newline-terminated entries ``"{n:>4}: {marker}{text}"`` for every line in
            ``[max(0, i - radius), min(line_count - 1, i + radius)]``, where ``n`` is the
            1-based line number; ``""`` when ``line_index`` is out of range.
    """
    if not _in_range(document, line_index):
        return ""
    radius = max(0, radius)
    start: int = max(0, line_index - radius)
    end: int = min(document.line_count - 1, line_index + radius)

    entries: list[str] = []
    for i in range(start, end + 1):
        marker: str = MARKER if i == line_index else NO_MARKER
        entries.append(f"{i + 1:>4}: {marker}{_line_text(document, i)}\n")
    return "".join(entries)
