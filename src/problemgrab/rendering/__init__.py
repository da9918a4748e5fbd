# topmark:header:start
#
#   project      : ProblemGrab
#   file         : __init__.py
#   file_relpath : src/problemgrab/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Markdown rendering of captured diagnostics.

Exports:
    render_report: Render a complete problems report.
    fence_for: Return a code fence safe for a given text.
"""

from __future__ import annotations

from problemgrab.rendering.markdown import fence_for
from problemgrab.rendering.report import render_report

__all__ = [
    "fence_for",
    "render_report",
]
