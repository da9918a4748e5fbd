# topmark:header:start
#
#   project      : ProblemGrab
#   file         : errors.py
#   file_relpath : src/problemgrab/errors.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Domain exceptions raised by the ProblemGrab pipeline.

These are framework-agnostic; the CLI translates them into click exceptions
carrying a process exit code (see `problemgrab.cli.errors`).
"""

from __future__ import annotations


class ProblemGrabError(Exception):
    """Base class for all ProblemGrab pipeline errors."""


class NoActiveContextError(ProblemGrabError):
    """Raised when a capture is requested without a file or project to inspect."""


class SnapshotError(ProblemGrabError):
    """Raised when a diagnostics snapshot cannot be read or has an invalid shape."""


class SinkError(ProblemGrabError):
    """Raised when the rendered report cannot be delivered (clipboard or file)."""
