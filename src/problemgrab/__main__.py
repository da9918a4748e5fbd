# topmark:header:start
#
#   project      : ProblemGrab
#   file         : __main__.py
#   file_relpath : src/problemgrab/__main__.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Module entry point for running ProblemGrab via ``python -m problemgrab``.

It delegates directly to :func:`problemgrab.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how ProblemGrab is launched.

Examples:
    Capture all problems of a project from an exported snapshot::

        python -m problemgrab capture --snapshot problems.json --scope project --all
"""

from __future__ import annotations

from problemgrab.cli.main import cli

if __name__ == "__main__":
    cli()
