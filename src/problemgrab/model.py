# topmark:header:start
#
#   project      : ProblemGrab
#   file         : model.py
#   file_relpath : src/problemgrab/model.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Core diagnostic types for ProblemGrab.

Sections:
    * Severity: engine severity levels, ordered by importance, including the
      structural/internal levels that must never surface in a report.
    * Scope / SeverityMode: the two independent axes of a capture request.
    * RawDiagnostic: a record as reported by the diagnostic engine (0-based offsets).
    * Diagnostic: immutable, enriched diagnostic (1-based positions, code, context).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from problemgrab.pipeline.categories import extract_key

if TYPE_CHECKING:
    from collections.abc import Set


class Severity(Enum):
    """Severity levels reported by the diagnostic engine.

    The value is the rank used to order severities by importance
    (ERROR > WARNING > WEAK_WARNING > INFORMATION). Several engine levels are
    markers for highlighting rather than problems; they are collected in
    `PERMANENTLY_EXCLUDED` and never turned into a `Diagnostic`.

    Members sharing a rank are distinct because they carry distinct names; the
    enum is keyed by name through `Severity.from_name`.
    """

    ERROR = ("ERROR", 400)
    GENERIC_SERVER_ERROR_OR_WARNING = ("GENERIC_SERVER_ERROR_OR_WARNING", 350)
    WARNING = ("WARNING", 300)
    WEAK_WARNING = ("WEAK_WARNING", 200)
    INFORMATION = ("INFORMATION", 10)
    INFO = ("INFO", 10)
    TEXT_ATTRIBUTES = ("TEXT_ATTRIBUTES", 5)
    TYPO = ("TYPO", 3)
    GRAMMAR_ERROR = ("GRAMMAR_ERROR", 3)
    SYMBOL_TYPE_SEVERITY = ("SYMBOL_TYPE_SEVERITY", 2)
    INJECTED_FRAGMENT_SEVERITY = ("INJECTED_FRAGMENT_SEVERITY", 1)
    ELEMENT_UNDER_CARET_SEVERITY = ("ELEMENT_UNDER_CARET_SEVERITY", 1)
    ELEMENT_UNDER_CARET_READ = ("ELEMENT_UNDER_CARET_READ", 1)
    ELEMENT_UNDER_CARET_WRITE = ("ELEMENT_UNDER_CARET_WRITE", 1)

    @property
    def rank(self) -> int:
        """Return the importance rank of this severity (higher is more important)."""
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> Severity:
        """Look up a severity by its engine name (case-insensitive).

        Args:
            name (str): Engine severity name, e.g. ``"WEAK_WARNING"``.

        Returns:
            Severity: The matching member.

        Raises:
            ValueError: If ``name`` is not a known severity.
        """
        key: str = name.strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown severity: {name!r}") from None


PERMANENTLY_EXCLUDED: Final[frozenset[Severity]] = frozenset(
    {
        Severity.INFO,
        Severity.TEXT_ATTRIBUTES,
        Severity.TYPO,
        Severity.GRAMMAR_ERROR,
        Severity.SYMBOL_TYPE_SEVERITY,
        Severity.INJECTED_FRAGMENT_SEVERITY,
        Severity.ELEMENT_UNDER_CARET_SEVERITY,
        Severity.ELEMENT_UNDER_CARET_READ,
        Severity.ELEMENT_UNDER_CARET_WRITE,
    }
)


class Scope(str, Enum):
    """Which part of the project a capture inspects."""

    FILE = "file"
    PROJECT = "project"


class SeverityMode(str, Enum):
    """Which severities a capture keeps."""

    ERRORS_ONLY = "errors"
    ALL = "all"

    @property
    def allow_list(self) -> Set[Severity] | None:
        """Return the severity allow-list for this mode (None means no allow-list)."""
        if self is SeverityMode.ERRORS_ONLY:
            return frozenset({Severity.ERROR})
        return None


@dataclass(frozen=True, slots=True)
class RawDiagnostic:
    """A diagnostic record as reported by the engine, before filtering.

    Attributes:
        start_offset (int): 0-based character offset where the problem starts.
        end_offset (int): 0-based character offset where the problem ends.
        severity (str): Engine severity name (see `Severity`).
        type_tag (str): Opaque category string, possibly embedding ``key=<id>``.
        description (str | None): Short, plain message.
        tooltip (str | None): Rich-text (HTML) explanation.
        quick_fix (str | None): Text of the first suggested quick-fix action.
    """

    start_offset: int
    end_offset: int
    severity: str
    type_tag: str = ""
    description: str | None = None
    tooltip: str | None = None
    quick_fix: str | None = None


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Immutable, enriched diagnostic ready for rendering.

    Positions are 1-based. ``code`` is the flagged line and ``context`` the
    numbered window around it (the flagged line carries the ``>>>`` marker).
    """

    message: str
    description: str
    category: str
    file_path: str
    line: int
    column: int
    severity: Severity
    fix: str | None
    code: str
    context: str

    def __post_init__(self) -> None:
        if self.line < 1 or self.column < 1:
            raise ValueError(f"Positions are 1-based (got line={self.line}, col={self.column})")
        if self.severity in PERMANENTLY_EXCLUDED:
            raise ValueError(f"Severity {self.severity.name} never surfaces as a diagnostic")

    @property
    def category_key(self) -> str:
        """Return the classification key extracted from ``category``."""
        return extract_key(self.category)
