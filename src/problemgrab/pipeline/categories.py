# topmark:header:start
#
#   project      : ProblemGrab
#   file         : categories.py
#   file_relpath : src/problemgrab/pipeline/categories.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Category key extraction.

Engines describe the category of a diagnostic with an opaque string such as
``HighlightInfoType[severity=WARNING, key=UnusedImport]``. The token after
``key=`` is the real classification key; it drives both the "problems by type"
summary and the category deny-list.
"""

from __future__ import annotations

import re
from typing import Final

_KEY_RE: Final[re.Pattern[str]] = re.compile(r"key=(?P<key>[^,\]]+)")

# Low-value categories dropped from every capture: unused symbols and imports,
# documentation-comment nits, spelling/grammar, and brace/escape/modifier style nits.
DEFAULT_EXCLUDED_CATEGORIES: Final[frozenset[str]] = frozenset(
    {
        "unused",
        "unusedImport",
        "unused-import",
        "unused-variable",
        "UnusedImport",
        "UnusedDeclaration",
        "UnusedSymbol",
        "UNUSED_IMPORT",
        "UNUSED_VARIABLE",
        "UNUSED_PARAMETER",
        "SpellCheckingInspection",
        "GrazieInspection",
        "JavadocDeclaration",
        "JavadocReference",
        "JavadocBlankLines",
        "DanglingJavadoc",
        "KDocUnresolvedReference",
        "UnnecessaryUnicodeEscape",
        "ControlFlowStatementWithoutBraces",
        "RedundantModifiersValueLombok",
        "RedundantVisibilityModifier",
        "RemoveRedundantQualifierName",
        "RedundantSemicolon",
    }
)


def extract_key(category: str) -> str:
    """Return the classification key embedded in a category string.

    Args:
        category (str): Raw category string reported by the engine.

    Returns:
        str: The value of the ``key=<value>`` token (ending at ``,``, ``]`` or end of text),
            or ``category`` unchanged when no such token is present.
    """
    match: re.Match[str] | None = _KEY_RE.search(category)
    if match is None:
        return category
    key: str = match.group("key").strip()
    return key or category


def is_excluded_category(category: str, excluded: frozenset[str]) -> bool:
    """Return True if the category's key is in the ``excluded`` deny-list."""
    return extract_key(category) in excluded
