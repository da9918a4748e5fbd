# topmark:header:start
#
#   project      : ProblemGrab
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Shared helpers for CLI tests.

Commands are run in-process with click's `CliRunner`. Color is disabled via
the environment so that assertions can match plain text.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner

from problemgrab.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from click.testing import Result

ERROR_RECORD: dict[str, Any] = {
    "startOffset": 4,
    "endOffset": 7,
    "description": "Unresolved reference 'foo'",
    "toolTip": "<html>Unresolved reference <b>foo</b></html>",
    "type": "HighlightInfoType[severity=ERROR, key=UnresolvedReference]",
    "severity": "ERROR",
    "quickFix": "Create function 'foo'",
}
WARNING_RECORD: dict[str, Any] = {
    "startOffset": 0,
    "endOffset": 1,
    "description": "Shadows built-in name 'x'",
    "type": "HighlightInfoType[severity=WARNING, key=ShadowingBuiltins]",
    "severity": "WARNING",
}


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Disable color regardless of the developer's environment."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


def run_cli(args: Sequence[str]) -> Result:
    """Invoke the top-level CLI with ``args``."""
    return CliRunner().invoke(cli, list(args), catch_exceptions=False)


def assert_exit(result: Result, code: int) -> None:
    """Assert the exit code, showing the output on failure."""
    assert result.exit_code == code, result.output


def write_project(
    root: Path,
    files: dict[str, list[dict[str, Any]]],
    *,
    project: str | None = "demo",
) -> Path:
    """Create ``src/app.py`` and a snapshot for ``files``; return the snapshot path."""
    app = root / "src" / "app.py"
    app.parent.mkdir(parents=True, exist_ok=True)
    app.write_text("x = foo()\ny = 2\n", encoding="utf-8")
    data: dict[str, Any] = {"files": files}
    if project is not None:
        data["project"] = project
    snapshot = root / "snapshot.json"
    snapshot.write_text(json.dumps(data), encoding="utf-8")
    return snapshot
