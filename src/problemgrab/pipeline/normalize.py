# topmark:header:start
#
#   project      : ProblemGrab
#   file         : normalize.py
#   file_relpath : src/problemgrab/pipeline/normalize.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""HTML-to-Markdown normalization of diagnostic descriptions.

Engine tooltips are HTML fragments: inspection tables, bold/italic spans,
"more..." links, keyboard hints and "Powered by" footers. `normalize_description`
rewrites them into compact Markdown by applying nine rewrites in a fixed order;
each rewrite assumes the previous ones already ran:

1. convert the first ``<table>`` into a Markdown pipe table;
2. drop ``<a href="#inspection/...">more...</a>`` links;
3. drop the trailing "Powered by ..." paragraph;
4. drop ``(Ctrl+1)``-style keybinding hints;
5. turn flat ``<b>``/``<strong>`` into ``**x**`` and ``<i>``/``<em>`` into ``*x*``;
6. turn ``</p><p>`` boundaries into a blank line;
7. strip all remaining tags;
8. decode HTML entities;
9. collapse whitespace and trim.

Line breaks produced by steps 1 and 6 are carried as placeholder characters so
that step 9 does not flatten the table and paragraph structure; they become real
newlines at the very end.

Only the first table is converted; later tables lose their tags in step 7.
"""

from __future__ import annotations

import html
import re
from typing import TYPE_CHECKING, Final

from problemgrab.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from problemgrab.config.logging import GrabLogger

logger: GrabLogger = get_logger(__name__)

# Private-use code point standing in for "\n" until whitespace has been collapsed.
NEWLINE_TOKEN: Final[str] = "\ue000"

_TABLE_RE: Final[re.Pattern[str]] = re.compile(
    r"<table\b[^>]*>(?P<body>.*?)</table\s*>", re.IGNORECASE | re.DOTALL
)
_ROW_RE: Final[re.Pattern[str]] = re.compile(
    r"<tr\b[^>]*>(?P<cells>.*?)</tr\s*>", re.IGNORECASE | re.DOTALL
)
_CELL_RE: Final[re.Pattern[str]] = re.compile(
    r"<t[dh]\b[^>]*>(?P<cell>.*?)</t[dh]\s*>", re.IGNORECASE | re.DOTALL
)
_CELL_BOLD_RE: Final[re.Pattern[str]] = re.compile(
    r"<(?P<tag>b|strong)\b[^>]*>(?P<text>.*?)</(?P=tag)\s*>", re.IGNORECASE | re.DOTALL
)
_MORE_LINK_RE: Final[re.Pattern[str]] = re.compile(
    r"<a\s+href=\"#inspection/[^\"]*\"[^>]*>\s*more\s*(?:\.\.\.|…|&hellip;)?\s*</a\s*>",
    re.IGNORECASE,
)
_POWERED_BY_RE: Final[re.Pattern[str]] = re.compile(
    r"<p\b[^>]*>\s*powered\s+by\b.*\Z", re.IGNORECASE | re.DOTALL
)
_KEY_HINT_RE: Final[re.Pattern[str]] = re.compile(r"\(\s*Ctrl\+F?\d+\s*\)", re.IGNORECASE)
_STRONG_RE: Final[re.Pattern[str]] = re.compile(
    r"<(?P<tag>strong|b)(?:\s[^>]*)?>(?P<text>[^<]*)</(?P=tag)\s*>", re.IGNORECASE
)
_EMPHASIS_RE: Final[re.Pattern[str]] = re.compile(
    r"<(?P<tag>em|i)(?:\s[^>]*)?>(?P<text>[^<]*)</(?P=tag)\s*>", re.IGNORECASE
)
_PARAGRAPH_RE: Final[re.Pattern[str]] = re.compile(r"</p\s*>\s*<p\b[^>]*>", re.IGNORECASE)
_TAG_RE: Final[re.Pattern[str]] = re.compile(r"<[^>]+>")
_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s+")
_TOKEN_PADDING_RE: Final[re.Pattern[str]] = re.compile(rf" ?{NEWLINE_TOKEN} ?")

MIN_SEPARATOR_WIDTH: Final[int] = 3


def _clean_cell(cell_html: str) -> str:
    text: str = _CELL_BOLD_RE.sub(lambda m: f"**{m.group('text')}**", cell_html)
    text = _TAG_RE.sub("", text)
    # Cells live on one table row.
    return _WHITESPACE_RE.sub(" ", text).strip()


def _table_to_markdown(match: re.Match[str]) -> str:
    rows: list[list[str]] = []
    for row in _ROW_RE.finditer(match.group("body")):
        cells: list[str] = [
            _clean_cell(c.group("cell")) for c in _CELL_RE.finditer(row.group("cells"))
        ]
        if cells:
            rows.append(cells)
    if not rows:
        return ""

    header: list[str] = rows[0]
    lines: list[str] = ["| " + " | ".join(header) + " |"]
    separator: list[str] = ["-" * max(MIN_SEPARATOR_WIDTH, len(c)) for c in header]
    lines.append("| " + " | ".join(separator) + " |")
    lines.extend("| " + " | ".join(r) + " |" for r in rows[1:])

    block: str = NEWLINE_TOKEN.join(lines)
    return f"{NEWLINE_TOKEN * 2}{block}{NEWLINE_TOKEN * 2}"


def convert_first_table(text: str) -> str:
    """Step 1: convert the first HTML table into a Markdown pipe table."""
    return _TABLE_RE.sub(_table_to_markdown, text, count=1)


def strip_more_links(text: str) -> str:
    """Step 2: drop "more..." links pointing at the inspection description."""
    return _MORE_LINK_RE.sub("", text)


def strip_powered_by(text: str) -> str:
    """Step 3: drop the trailing "Powered by ..." paragraph."""
    return _POWERED_BY_RE.sub("", text)


def strip_key_hints(text: str) -> str:
    """Step 4: drop keybinding hints such as ``(Ctrl+1)``."""
    return _KEY_HINT_RE.sub("", text)


def convert_emphasis(text: str) -> str:
    """Step 5: convert flat bold/italic spans into Markdown emphasis."""
    text = _STRONG_RE.sub(lambda m: f"**{m.group('text')}**", text)
    return _EMPHASIS_RE.sub(lambda m: f"*{m.group('text')}*", text)


def convert_paragraph_breaks(text: str) -> str:
    """Step 6: turn adjacent paragraph boundaries into a blank line."""
    return _PARAGRAPH_RE.sub(NEWLINE_TOKEN * 2, text)


def strip_tags(text: str) -> str:
    """Step 7: strip every remaining tag."""
    return _TAG_RE.sub("", text)


def decode_entities(text: str) -> str:
    """Step 8: decode HTML/XML entities."""
    return html.unescape(text)


def collapse_whitespace(text: str) -> str:
    """Step 9: collapse whitespace runs to one space and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


NORMALIZATION_STEPS: Final[tuple[Callable[[str], str], ...]] = (
    convert_first_table,
    strip_more_links,
    strip_powered_by,
    strip_key_hints,
    convert_emphasis,
    convert_paragraph_breaks,
    strip_tags,
    decode_entities,
    collapse_whitespace,
)


def _restore_newlines(text: str) -> str:
    text = _TOKEN_PADDING_RE.sub(NEWLINE_TOKEN, text)
    text = re.sub(rf"{NEWLINE_TOKEN}{{3,}}", NEWLINE_TOKEN * 2, text)
    return text.replace(NEWLINE_TOKEN, "\n").strip()


def normalize_description(text: str) -> str:
    """Convert a rich-text diagnostic description into clean Markdown.

    Plain text (no ``<`` and no ``&``) is returned unchanged.

    Args:
        text (str): Raw description, possibly containing HTML.

    Returns:
        str: The normalized Markdown text.
    """
    if "<" not in text and "&" not in text:
        return text

    result: str = text
    for step in NORMALIZATION_STEPS:
        result = step(result)
        logger.trace("%s -> %r", step.__name__, result)
    return _restore_newlines(result)
