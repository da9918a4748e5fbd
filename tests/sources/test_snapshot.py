# topmark:header:start
#
#   project      : ProblemGrab
#   file         : test_snapshot.py
#   file_relpath : tests/sources/test_snapshot.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Tests for the JSON snapshot diagnostic source."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from problemgrab.errors import SnapshotError
from problemgrab.sources.snapshot import SnapshotDiagnosticSource, parse_record
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path

RECORD: dict[str, Any] = {
    "startOffset": 4,
    "endOffset": 9,
    "description": "Unresolved reference 'foo'",
    "toolTip": "<html>Unresolved reference <b>foo</b></html>",
    "type": "HighlightInfoType[severity=ERROR, key=UnresolvedReference]",
    "severity": "ERROR",
    "quickFix": "Create function 'foo'",
}


def test_parse_record_maps_fields() -> None:
    rec = parse_record(RECORD)
    assert (rec.start_offset, rec.end_offset, rec.severity) == (4, 9, "ERROR")
    assert rec.type_tag.endswith("key=UnresolvedReference]")
    assert rec.tooltip == RECORD["toolTip"]
    assert rec.quick_fix == "Create function 'foo'"


def test_parse_record_defaults() -> None:
    rec = parse_record({"severity": "WARNING"})
    assert (rec.start_offset, rec.end_offset, rec.type_tag) == (0, 0, "")
    assert rec.description is None


@parametrize(
    "record",
    [
        [],
        {},
        {"severity": "ERROR", "startOffset": "4"},
        {"severity": "ERROR", "startOffset": True},
        {"severity": "ERROR", "description": 3},
    ],
)
def test_parse_record_rejects_bad_shapes(record: Any) -> None:
    with pytest.raises(SnapshotError):
        parse_record(record)


def test_from_dict_resolves_relative_keys(tmp_path: Path) -> None:
    source = SnapshotDiagnosticSource.from_dict(
        {"project": "demo", "files": {"src/app.py": [RECORD], "b.py": []}},
        base=tmp_path,
    )
    assert source.project_name == "demo"
    assert source.files() == [(tmp_path / "src/app.py").resolve(), (tmp_path / "b.py").resolve()]


@parametrize(
    "data",
    [
        [],
        {"files": []},
        {"files": {"a.py": {}}},
        {"project": 1, "files": {}},
    ],
)
def test_from_dict_rejects_bad_documents(data: Any, tmp_path: Path) -> None:
    with pytest.raises(SnapshotError):
        SnapshotDiagnosticSource.from_dict(data, base=tmp_path)


def test_from_file_and_lookups(tmp_path: Path) -> None:
    app = tmp_path / "src" / "app.py"
    app.parent.mkdir()
    app.write_text("x = foo()\n", encoding="utf-8")
    snapshot = tmp_path / "snapshot.json"
    snapshot.write_text(json.dumps({"files": {"src/app.py": [RECORD]}}), encoding="utf-8")

    source = SnapshotDiagnosticSource.from_file(snapshot)
    doc = source.get_document(app)
    assert doc is not None
    assert doc.line_count == 1
    assert [r.severity for r in source.get_diagnostics(app, doc)] == ["ERROR"]
    assert source.get_diagnostics(tmp_path / "other.py", doc) == []


def test_missing_and_binary_files_have_no_document(tmp_path: Path) -> None:
    blob = tmp_path / "blob.bin"
    blob.write_bytes(b"\xff\xfe\x00\x81")
    source = SnapshotDiagnosticSource.from_dict(
        {"files": {"missing.py": [RECORD], "blob.bin": [RECORD]}}, base=tmp_path
    )
    assert source.get_document(tmp_path / "missing.py") is None
    assert source.get_document(blob) is None


def test_from_file_errors(tmp_path: Path) -> None:
    with pytest.raises(SnapshotError, match="Cannot read"):
        SnapshotDiagnosticSource.from_file(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(SnapshotError, match="not valid JSON"):
        SnapshotDiagnosticSource.from_file(bad)


def test_files_without_records_are_not_read(tmp_path: Path) -> None:
    clean = tmp_path / "clean.py"
    clean.write_text("pass\n", encoding="utf-8")
    source = SnapshotDiagnosticSource.from_dict({"files": {"other.py": [RECORD]}}, base=tmp_path)
    assert source.get_document(clean) is None
