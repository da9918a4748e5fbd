# topmark:header:start
#
#   project      : ProblemGrab
#   file         : test_filter.py
#   file_relpath : tests/pipeline/test_filter.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Tests for severity/category filtering and diagnostic enrichment."""

from __future__ import annotations

from problemgrab.model import PERMANENTLY_EXCLUDED, Severity
from problemgrab.pipeline.filter import accept_severity, filter_diagnostics
from problemgrab.sources.document import TextDocument
from tests.conftest import mark_pipeline, parametrize
from tests.fakes import raw

TEXT = "alpha\nbeta\ngamma\n"
DOC = TextDocument.from_text(TEXT)


@parametrize("severity", sorted(PERMANENTLY_EXCLUDED, key=lambda s: s.name))
def test_permanently_excluded_severities_never_pass(severity: Severity) -> None:
    assert not accept_severity(severity, None)
    assert not accept_severity(severity, {severity})


def test_allow_list_is_layered_on_top_of_exclusion() -> None:
    allow = {Severity.ERROR, Severity.TYPO}
    assert accept_severity(Severity.ERROR, allow)
    assert not accept_severity(Severity.WARNING, allow)
    assert not accept_severity(Severity.TYPO, allow)


def test_no_allow_list_keeps_every_reportable_severity() -> None:
    for severity in Severity:
        assert accept_severity(severity, None) is (severity not in PERMANENTLY_EXCLUDED)


@mark_pipeline
def test_filter_keeps_engine_order_and_drops_excluded() -> None:
    records = [
        raw("WARNING", description="first"),
        raw("TYPO", description="typo"),
        raw("ERROR", description="second"),
        raw("ERROR", key="UnusedImport", description="unused"),
        raw("INFORMATION", description="third"),
    ]
    result = filter_diagnostics(records, file_path="/project/a.txt", document=DOC)
    assert [d.message for d in result] == ["first", "second", "third"]


@mark_pipeline
def test_filter_with_errors_only_allow_list() -> None:
    records = [raw("WARNING"), raw("ERROR", description="boom"), raw("WEAK_WARNING")]
    result = filter_diagnostics(
        records, file_path="/project/a.txt", document=DOC, severity_allow={Severity.ERROR}
    )
    assert [(d.severity, d.message) for d in result] == [(Severity.ERROR, "boom")]


def test_custom_category_deny_list() -> None:
    records = [raw(key="Noisy"), raw(key="UnusedImport", description="kept")]
    result = filter_diagnostics(
        records,
        file_path="/project/a.txt",
        document=DOC,
        excluded_categories=frozenset({"Noisy"}),
    )
    assert [d.message for d in result] == ["kept"]
    assert result[0].category_key == "UnusedImport"


def test_unknown_severity_is_skipped() -> None:
    records = [raw("CATASTROPHIC"), raw("error", description="lower-case name")]
    result = filter_diagnostics(records, file_path="/project/a.txt", document=DOC)
    assert [d.message for d in result] == ["lower-case name"]


@parametrize(
    "offset, line, column, code",
    [
        (0, 1, 1, "alpha"),
        (5, 1, 6, "alpha"),
        (8, 2, 3, "beta"),
        (11, 3, 1, "gamma"),
        (1000, 3, 6, "gamma"),
        (-4, 1, 1, "alpha"),
    ],
)
def test_positions_are_one_based_and_clamped(
    offset: int, line: int, column: int, code: str
) -> None:
    (diag,) = filter_diagnostics([raw(start=offset)], file_path="/p/a", document=DOC)
    assert (diag.line, diag.column, diag.code) == (line, column, code)


def test_enrichment_fields() -> None:
    record = raw(
        "WARNING",
        start=8,
        description=None,
        tooltip="<b>why</b>",
        quick_fix="Do it",
    )
    (diag,) = filter_diagnostics([record], file_path="/p/a", document=DOC, radius=1)
    assert diag.message == "Unknown problem"
    assert diag.description == "<b>why</b>"
    assert diag.fix == "Do it"
    assert diag.file_path == "/p/a"
    assert diag.context == "   1:     alpha\n   2: >>> beta\n   3:     gamma\n"


def test_empty_quick_fix_means_no_fix() -> None:
    (diag,) = filter_diagnostics([raw(quick_fix="")], file_path="/p/a", document=DOC)
    assert diag.fix is None
    assert diag.description == ""


def test_empty_document_yields_first_position_without_code() -> None:
    empty = TextDocument.from_text("")
    (diag,) = filter_diagnostics([raw(start=3)], file_path="/p/empty", document=empty)
    assert (diag.line, diag.column, diag.code, diag.context) == (1, 1, "", "")
