# topmark:header:start
#
#   project      : ProblemGrab
#   file         : keys.py
#   file_relpath : src/problemgrab/config/keys.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Canonical TOML section and key names for ProblemGrab configuration.

Keys defined here are the external configuration schema as it appears in
``problemgrab.toml`` and in ``[tool.problemgrab]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ProblemGrab configuration."""

    # Root table
    KEY_PROJECT_NAME: Final[str] = "project_name"
    KEY_CONTEXT_RADIUS: Final[str] = "context_radius"
    KEY_EXCLUDED_CATEGORIES: Final[str] = "excluded_categories"
    KEY_REPLACE_DEFAULT_CATEGORIES: Final[str] = "replace_default_categories"
    KEY_EXCLUDE: Final[str] = "exclude"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_TARGET: Final[str] = "target"
    KEY_PATH: Final[str] = "path"

    # [[modules]]
    SECTION_MODULES: Final[str] = "modules"

    KEY_MODULE_NAME: Final[str] = "name"
    KEY_SOURCE_ROOTS: Final[str] = "source_roots"

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
