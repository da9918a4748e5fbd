# topmark:header:start
#
#   project      : ProblemGrab
#   file         : constants.py
#   file_relpath : src/problemgrab/constants.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""ProblemGrab Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PROBLEMGRAB_VERSION: str = get_version("problemgrab")

# Config file names looked up in the project root:
PROJECT_CONFIG_NAME: str = "problemgrab.toml"
PYPROJECT_CONFIG_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "problemgrab"

# Environment variable consulted by `setup_logging()`:
LOG_LEVEL_ENV_VAR: str = "PROBLEMGRAB_LOG_LEVEL"

DEFAULT_CONTEXT_RADIUS: int = 3
DEFAULT_OUTPUT_FILE: str = "problems.md"

# Gitignore-style patterns skipped during project traversal unless configured otherwise.
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (".git/", ".venv/", "node_modules/")

# Message used when the engine reports a diagnostic without any text.
UNKNOWN_PROBLEM_MESSAGE: str = "Unknown problem"
