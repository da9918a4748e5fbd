# topmark:header:start
#
#   project      : ProblemGrab
#   file         : __init__.py
#   file_relpath : src/problemgrab/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""ProblemGrab CLI subcommands."""

from __future__ import annotations
