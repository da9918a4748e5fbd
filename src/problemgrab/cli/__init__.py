# topmark:header:start
#
#   project      : ProblemGrab
#   file         : __init__.py
#   file_relpath : src/problemgrab/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Command-line interface for ProblemGrab.

The entry point is `problemgrab.cli.main.cli`, a click group with the
``capture`` and ``version`` subcommands. Program output goes through a
`ConsoleLike` console stored in ``ctx.obj``; internal logging is configured
from the ``PROBLEMGRAB_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations
