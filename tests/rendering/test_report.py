# topmark:header:start
#
#   project      : ProblemGrab
#   file         : test_report.py
#   file_relpath : tests/rendering/test_report.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Tests for the Markdown report renderer."""

from __future__ import annotations

from problemgrab.model import Diagnostic, Severity
from problemgrab.rendering.report import FILE_SEPARATOR, PROBLEM_SEPARATOR, render_report
from tests.conftest import mark_pipeline


def _diag(
    *,
    key: str = "A",
    file_path: str = "/project/src/Foo",
    severity: Severity = Severity.ERROR,
    message: str = "Boom",
    description: str = "",
    fix: str | None = None,
    code: str = "x = 1",
) -> Diagnostic:
    return Diagnostic(
        message=message,
        description=description,
        category=f"HighlightInfoType[severity={severity.name}, key={key}]",
        file_path=file_path,
        line=2,
        column=3,
        severity=severity,
        fix=fix,
        code=code,
        context=f"   2: >>> {code}\n",
    )


@mark_pipeline
def test_single_problem_layout() -> None:
    expected = "\n".join(
        [
            "# Project Problems: demo",
            "Total problems: 1",
            "",
            "## Problems by Severity",
            "- ERROR: 1",
            "",
            "## Problems by Type",
            "- A: 1",
            "",
            "## File 1: src/Foo",
            "Problems in file: 1",
            "",
            "### Problem 1.1",
            "- **Line**: 2",
            "- **Column**: 3",
            "- **Severity**: ERROR",
            "- **Type**: A",
            "- **Message**: Boom",
            "",
            "#### Problematic Code",
            "```",
            "x = 1",
            "```",
            "",
            "#### Code Context",
            "```",
            "   2: >>> x = 1",
            "```",
        ]
    )
    assert render_report("demo", [_diag()], project_root="/project") == expected + "\n"


def test_empty_report_has_header_only() -> None:
    assert render_report("demo", []) == "# Project Problems: demo\nTotal problems: 0\n"


def test_summaries_sort_by_descending_count() -> None:
    report = render_report("demo", [_diag(key="B"), _diag(key="A"), _diag(key="A")])
    assert "## Problems by Type\n- A: 2\n- B: 1\n" in report
    assert "- ERROR: 3" in report


def test_files_are_grouped_in_first_seen_order_with_separators() -> None:
    diagnostics = [
        _diag(file_path="/project/b.py", message="b1"),
        _diag(file_path="/project/a.py", message="a1"),
        _diag(file_path="/project/b.py", message="b2"),
    ]
    report = render_report("demo", diagnostics, project_root="/project")
    assert report.index("## File 1: b.py") < report.index("## File 2: a.py")
    assert "Problems in file: 2" in report
    assert "### Problem 1.2" in report
    assert "### Problem 2.1" in report
    assert report.count(f"\n{PROBLEM_SEPARATOR}\n\n") == 1
    assert report.count(f"\n{FILE_SEPARATOR}\n\n") == 1
    assert report.endswith("```\n")
    assert not report.endswith("\n\n")


def test_description_is_normalized_and_message_deduplicated() -> None:
    report = render_report(
        "demo", [_diag(message="Bad thing", description="<html><b>Bad</b> thing</html>")]
    )
    assert "- **Message**: Bad thing" in report
    assert "- **Description**:\n\n```\n**Bad** thing\n```\n" in report

    same = render_report("demo", [_diag(message="Same text", description="Same text")])
    assert "- **Message**" not in same
    assert "- **Description**:\n\n```\nSame text\n```\n" in same


def test_suggested_fix_is_rendered_when_present() -> None:
    assert "- **Suggested fix**: Add import" in render_report("demo", [_diag(fix="Add import")])
    assert "Suggested fix" not in render_report("demo", [_diag()])


def test_code_with_backticks_gets_a_longer_fence() -> None:
    report = render_report("demo", [_diag(code="s = ```x```")])
    assert "#### Problematic Code\n````\ns = ```x```\n````\n" in report


def test_path_outside_root_is_kept_verbatim() -> None:
    report = render_report("demo", [_diag(file_path="/project2/Foo")], project_root="/project")
    assert "## File 1: /project2/Foo" in report
