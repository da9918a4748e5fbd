# topmark:header:start
#
#   project      : ProblemGrab
#   file         : document.py
#   file_relpath : src/problemgrab/sources/document.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""In-memory `Document` implementation over a text buffer."""

from __future__ import annotations

import bisect
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TextDocument:
    r"""Immutable text buffer with line/offset conversion.

    Recognized line terminators are ``"\r\n"``, ``"\n"`` and ``"\r"``. A trailing
    terminator does not open an extra line, so ``"a\nb\n"`` has two lines and the
    empty text has zero.

    Attributes:
        text (str): The full document text.
        starts (tuple[int, ...]): Offset of the first character of every line.
        ends (tuple[int, ...]): Offset just past the last character of every line,
            excluding its terminator.
    """

    text: str
    starts: tuple[int, ...]
    ends: tuple[int, ...]

    @classmethod
    def from_text(cls, text: str) -> TextDocument:
        """Index ``text`` into lines.

        Args:
            text (str): Document content.

        Returns:
            TextDocument: The indexed document.
        """
        starts: list[int] = []
        ends: list[int] = []
        pos: int = 0
        size: int = len(text)
        while pos < size:
            starts.append(pos)
            end: int = pos
            while end < size and text[end] not in "\r\n":
                end += 1
            ends.append(end)
            if end < size and text[end] == "\r" and end + 1 < size and text[end + 1] == "\n":
                pos = end + 2
            else:
                pos = end + 1
        return cls(text=text, starts=tuple(starts), ends=tuple(ends))

    @property
    def line_count(self) -> int:
        """Return the number of lines."""
        return len(self.starts)

    def line_number(self, offset: int) -> int:
        """Return the 0-based line containing ``offset``.

        Offsets are clamped to the document; an empty document reports line 0.
        """
        if not self.starts:
            return 0
        offset = max(0, min(offset, len(self.text)))
        return max(0, bisect.bisect_right(self.starts, offset) - 1)

    def line_start_offset(self, line: int) -> int:
        """Return the offset of the first character of ``line``."""
        return self.starts[line]

    def line_end_offset(self, line: int) -> int:
        """Return the offset just past the last character of ``line``."""
        return self.ends[line]

    def get_text(self, start: int, end: int) -> str:
        """Return the text in ``[start, end)``."""
        return self.text[start:end]
