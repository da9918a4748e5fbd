# topmark:header:start
#
#   project      : ProblemGrab
#   file         : test_categories.py
#   file_relpath : tests/pipeline/test_categories.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Tests for category key extraction and the category deny-list."""

from __future__ import annotations

from problemgrab.pipeline.categories import (
    DEFAULT_EXCLUDED_CATEGORIES,
    extract_key,
    is_excluded_category,
)
from tests.conftest import parametrize


@parametrize(
    ("category", "expected"),
    [
        ("HighlightInfoType[severity=ERROR, key=FOO, attributes=x]", "FOO"),
        ("...key=FOO,...]", "FOO"),
        ("HighlightInfoType[key=UnusedImport]", "UnusedImport"),
        ("key=A", "A"),
    ],
)
def test_extract_key_returns_embedded_key(category: str, expected: str) -> None:
    assert extract_key(category) == expected


@parametrize("category", ["plain text, no key", "", "key=", "key=]"])
def test_extract_key_falls_back_to_input(category: str) -> None:
    """Without a usable key the input is returned unchanged."""
    assert extract_key(category) == category


def test_default_deny_list_matches_on_extracted_key() -> None:
    assert is_excluded_category("Type[key=UnusedImport, x=1]", DEFAULT_EXCLUDED_CATEGORIES)
    assert is_excluded_category("SpellCheckingInspection", DEFAULT_EXCLUDED_CATEGORIES)
    assert not is_excluded_category("Type[key=UnresolvedReference]", DEFAULT_EXCLUDED_CATEGORIES)


def test_empty_deny_list_excludes_nothing() -> None:
    assert not is_excluded_category("Type[key=UnusedImport]", frozenset())
