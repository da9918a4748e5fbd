# topmark:header:start
#
#   project      : ProblemGrab
#   file         : snapshot.py
#   file_relpath : src/problemgrab/sources/snapshot.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Diagnostic source backed by a JSON snapshot exported from the IDE.

Snapshot shape::

    {
      "project": "demo",
      "files": {
        "src/app.py": [
          {
            "startOffset": 4,
            "endOffset": 9,
            "description": "Unresolved reference 'foo'",
            "toolTip": "<html>Unresolved reference <b>foo</b></html>",
            "type": "HighlightInfoType[severity=ERROR, key=UnresolvedReference]",
            "severity": "ERROR",
            "quickFix": "Create function 'foo'"
          }
        ]
      }
    }

Relative file keys are resolved against the snapshot's base directory (by
default, the project root). Documents are read from disk at lookup time; a file
that is missing or cannot be decoded as UTF-8 has no document, which the
pipeline treats as "no diagnostics for this file".
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from problemgrab.config.logging import get_logger
from problemgrab.errors import SnapshotError
from problemgrab.model import RawDiagnostic
from problemgrab.sources.document import TextDocument

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from problemgrab.config.logging import GrabLogger
    from problemgrab.sources.interfaces import Document

logger: GrabLogger = get_logger(__name__)

# Snapshot record keys (camelCase, as exported by the IDE side).
KEY_PROJECT = "project"
KEY_FILES = "files"
KEY_START = "startOffset"
KEY_END = "endOffset"
KEY_DESCRIPTION = "description"
KEY_TOOLTIP = "toolTip"
KEY_TYPE = "type"
KEY_SEVERITY = "severity"
KEY_QUICK_FIX = "quickFix"


def _optional_str(record: Mapping[str, Any], key: str) -> str | None:
    value: Any = record.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise SnapshotError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def parse_record(record: Any) -> RawDiagnostic:
    """Convert one snapshot record into a `RawDiagnostic`.

    Args:
        record (Any): Decoded JSON value of a single diagnostic record.

    Returns:
        RawDiagnostic: The parsed record.

    Raises:
        SnapshotError: If the record is not an object, or a field has the wrong type.
    """
    if not isinstance(record, dict):
        raise SnapshotError(f"Diagnostic record must be an object, got {type(record).__name__}")
    start: Any = record.get(KEY_START, 0)
    end: Any = record.get(KEY_END, start)
    if isinstance(start, bool) or not isinstance(start, int):
        raise SnapshotError(f"'{KEY_START}' must be an integer, got {start!r}")
    if isinstance(end, bool) or not isinstance(end, int):
        raise SnapshotError(f"'{KEY_END}' must be an integer, got {end!r}")
    severity: str | None = _optional_str(record, KEY_SEVERITY)
    if not severity:
        raise SnapshotError(f"Diagnostic record is missing '{KEY_SEVERITY}'")
    return RawDiagnostic(
        start_offset=start,
        end_offset=end,
        severity=severity,
        type_tag=_optional_str(record, KEY_TYPE) or "",
        description=_optional_str(record, KEY_DESCRIPTION),
        tooltip=_optional_str(record, KEY_TOOLTIP),
        quick_fix=_optional_str(record, KEY_QUICK_FIX),
    )


@dataclass
class SnapshotDiagnosticSource:
    """`DiagnosticSource` serving records from a decoded snapshot.

    Attributes:
        records (dict[Path, list[RawDiagnostic]]): Raw records keyed by absolute file path.
        project_name (str | None): Project name recorded in the snapshot, if any.
        encoding (str): Encoding used to read documents from disk.
    """

    records: dict[Path, list[RawDiagnostic]] = field(default_factory=lambda: {})
    project_name: str | None = None
    encoding: str = "utf-8"

    @classmethod
    def from_dict(cls, data: Any, *, base: Path) -> SnapshotDiagnosticSource:
        """Build a source from decoded snapshot JSON.

        Args:
            data (Any): Decoded JSON document.
            base (Path): Directory against which relative file keys are resolved.

        Returns:
            SnapshotDiagnosticSource: The populated source.

        Raises:
            SnapshotError: If the document does not have the snapshot shape.
        """
        if not isinstance(data, dict):
            raise SnapshotError("Snapshot must be a JSON object")
        files: Any = data.get(KEY_FILES, {})
        if not isinstance(files, dict):
            raise SnapshotError(f"'{KEY_FILES}' must be an object mapping paths to records")
        project: Any = data.get(KEY_PROJECT)
        if project is not None and not isinstance(project, str):
            raise SnapshotError(f"'{KEY_PROJECT}' must be a string")

        records: dict[Path, list[RawDiagnostic]] = {}
        for raw_path, raw_records in files.items():
            if not isinstance(raw_records, list):
                raise SnapshotError(f"Records for '{raw_path}' must be a list")
            path = Path(raw_path)
            if not path.is_absolute():
                path = base / path
            path = path.resolve()
            records.setdefault(path, []).extend(parse_record(r) for r in raw_records)
            logger.trace("Snapshot: %d record(s) for %s", len(raw_records), path)

        logger.debug("Snapshot: %d file(s) with diagnostics", len(records))
        return cls(records=records, project_name=project)

    @classmethod
    def from_file(cls, path: Path, *, base: Path | None = None) -> SnapshotDiagnosticSource:
        """Load a snapshot from a JSON file.

        Args:
            path (Path): Snapshot file.
            base (Path | None): Base directory for relative keys; defaults to the
                snapshot file's directory.

        Returns:
            SnapshotDiagnosticSource: The populated source.

        Raises:
            SnapshotError: If the file cannot be read or decoded.
        """
        logger.debug("Loading diagnostics snapshot: %s", path)
        try:
            text: str = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SnapshotError(f"Cannot read snapshot '{path}': {e}") from e
        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as e:
            raise SnapshotError(f"Snapshot '{path}' is not valid JSON: {e}") from e
        return cls.from_dict(data, base=base if base is not None else path.parent)

    def get_document(self, path: Path) -> Document | None:
        """Read ``path`` from disk, or return None when it has no records or cannot be read.

        Files without snapshot records are never read.
        """
        if path.resolve() not in self.records:
            logger.trace("No records for %s; not reading it", path)
            return None
        try:
            text: str = path.read_text(encoding=self.encoding)
        except FileNotFoundError:
            logger.debug("No document for %s (not found)", path)
            return None
        except UnicodeDecodeError:
            logger.debug("No document for %s (not decodable as %s)", path, self.encoding)
            return None
        except OSError as e:
            logger.warning("Cannot read %s: %s", path, e)
            return None
        return TextDocument.from_text(text)

    def get_diagnostics(self, path: Path, document: Document) -> Sequence[RawDiagnostic]:
        """Return the snapshot records of ``path`` in snapshot order."""
        return self.records.get(path.resolve(), [])

    def files(self) -> list[Path]:
        """Return the files with recorded diagnostics, in snapshot order."""
        return list(self.records)
