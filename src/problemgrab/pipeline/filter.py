# topmark:header:start
#
#   project      : ProblemGrab
#   file         : filter.py
#   file_relpath : src/problemgrab/pipeline/filter.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Filter raw engine records and enrich the survivors into `Diagnostic` objects.

A record survives when:
    * its severity is known and not in `PERMANENTLY_EXCLUDED`;
    * an allow-list, when given, contains its severity (both checks always apply);
    * its category key is not in the category deny-list.

Surviving records are converted to 1-based positions and paired with the
flagged source line and its context window. Engine order is preserved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from problemgrab.config.logging import get_logger
from problemgrab.constants import DEFAULT_CONTEXT_RADIUS, UNKNOWN_PROBLEM_MESSAGE
from problemgrab.model import PERMANENTLY_EXCLUDED, Diagnostic, Severity
from problemgrab.pipeline.categories import DEFAULT_EXCLUDED_CATEGORIES, is_excluded_category
from problemgrab.pipeline.snippets import extract_context, extract_line

if TYPE_CHECKING:
    from collections.abc import Iterable, Set

    from problemgrab.config.logging import GrabLogger
    from problemgrab.model import RawDiagnostic
    from problemgrab.sources.interfaces import Document

logger: GrabLogger = get_logger(__name__)


def accept_severity(severity: Severity, severity_allow: Set[Severity] | None) -> bool:
    """Return True if ``severity`` passes the permanent exclusion and the allow-list."""
    if severity in PERMANENTLY_EXCLUDED:
        return False
    return severity_allow is None or severity in severity_allow


def _to_diagnostic(
    raw: RawDiagnostic,
    severity: Severity,
    *,
    file_path: str,
    document: Document,
    radius: int,
) -> Diagnostic:
    line_index: int = 0
    column: int = 0
    if document.line_count > 0:
        # Offsets past the last line end are clamped onto the last line.
        size: int = document.line_end_offset(document.line_count - 1)
        start: int = max(0, min(raw.start_offset, size))
        line_index = document.line_number(start)
        column = start - document.line_start_offset(line_index)

    return Diagnostic(
        message=raw.description or UNKNOWN_PROBLEM_MESSAGE,
        description=raw.tooltip or "",
        category=raw.type_tag,
        file_path=file_path,
        line=line_index + 1,
        column=max(0, column) + 1,
        severity=severity,
        fix=raw.quick_fix or None,
        code=extract_line(document, line_index),
        context=extract_context(document, line_index, radius),
    )


def filter_diagnostics(
    raw_diagnostics: Iterable[RawDiagnostic],
    *,
    file_path: str,
    document: Document,
    severity_allow: Set[Severity] | None = None,
    excluded_categories: frozenset[str] = DEFAULT_EXCLUDED_CATEGORIES,
    radius: int = DEFAULT_CONTEXT_RADIUS,
) -> list[Diagnostic]:
    """Filter and enrich the raw records of one document.

    Args:
        raw_diagnostics (Iterable[RawDiagnostic]): Engine records in reported order.
        file_path (str): Absolute path of the document, stored on each diagnostic.
        document (Document): The document the records refer to.
        severity_allow (Set[Severity] | None): Optional allow-list, layered on top of the
            permanent exclusion set.
        excluded_categories (frozenset[str]): Category keys to drop.
        radius (int): Context window radius.

    Returns:
        list[Diagnostic]: The surviving diagnostics, in engine order.
    """
    result: list[Diagnostic] = []
    for raw in raw_diagnostics:
        try:
            severity: Severity = Severity.from_name(raw.severity)
        except ValueError:
            logger.warning(
                "Skipping record with unknown severity %r in %s", raw.severity, file_path
            )
            continue
        if not accept_severity(severity, severity_allow):
            logger.trace("Dropped by severity (%s): %r", severity.name, raw.description)
            continue
        if is_excluded_category(raw.type_tag, excluded_categories):
            logger.trace("Dropped by category (%s): %r", raw.type_tag, raw.description)
            continue
        result.append(
            _to_diagnostic(raw, severity, file_path=file_path, document=document, radius=radius)
        )

    logger.debug("%s: kept %d diagnostic(s)", file_path, len(result))
    return result
