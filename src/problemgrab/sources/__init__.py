# topmark:header:start
#
#   project      : ProblemGrab
#   file         : __init__.py
#   file_relpath : src/problemgrab/sources/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Capabilities through which the pipeline reaches the host environment.

The diagnostic engine and the project layout are accessed through small
Protocols (`DiagnosticSource`, `DirectoryTraverser`, `Document`) so that the
pipeline can run against a JSON snapshot on disk or against in-memory fakes.
"""

from __future__ import annotations

from problemgrab.sources.document import TextDocument
from problemgrab.sources.filesystem import FileSystemTraverser
from problemgrab.sources.interfaces import (
    DiagnosticSource,
    DirectoryTraverser,
    Document,
    Module,
)
from problemgrab.sources.snapshot import SnapshotDiagnosticSource

__all__ = [
    "DiagnosticSource",
    "DirectoryTraverser",
    "Document",
    "FileSystemTraverser",
    "Module",
    "SnapshotDiagnosticSource",
    "TextDocument",
]
