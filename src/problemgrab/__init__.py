# topmark:header:start
#
#   project      : ProblemGrab
#   file         : __init__.py
#   file_relpath : src/problemgrab/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""ProblemGrab package.

ProblemGrab collects the diagnostics ("problems") reported by a development
environment, pairs each of them with the offending source lines, and renders
one Markdown report that can be pasted into a ticket or an LLM prompt. It
exposes a click CLI and a small typed pipeline API.
"""

from __future__ import annotations
