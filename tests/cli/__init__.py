# topmark:header:start
#
#   project      : ProblemGrab
#   file         : __init__.py
#   file_relpath : tests/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Tests for problemgrab.cli."""
