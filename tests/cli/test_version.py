# topmark:header:start
#
#   project      : ProblemGrab
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Tests for `problemgrab version` and the bare group."""

from __future__ import annotations

from problemgrab.cli.exit_codes import ExitCode
from problemgrab.constants import PROBLEMGRAB_VERSION
from tests.cli.conftest import assert_exit, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version() -> None:
    result = run_cli(["version"])
    assert_exit(result, ExitCode.SUCCESS)
    assert result.output.strip() == PROBLEMGRAB_VERSION


@mark_cli
def test_version_verbose() -> None:
    result = run_cli(["-v", "version"])
    assert_exit(result, ExitCode.SUCCESS)
    assert "ProblemGrab version:" in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])
    assert_exit(result, ExitCode.USAGE_ERROR)


@mark_cli
def test_group_without_command_prints_hint() -> None:
    result = run_cli([])
    assert_exit(result, ExitCode.SUCCESS)
    assert "Hint: use 'problemgrab capture" in result.output
    assert "capture" in result.output
