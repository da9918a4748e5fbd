# topmark:header:start
#
#   project      : ProblemGrab
#   file         : __init__.py
#   file_relpath : src/problemgrab/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Configuration layer for ProblemGrab.

Submodules:
    * `problemgrab.config.keys`: TOML section and key names.
    * `problemgrab.config.io`: TOML loading (tomlkit) and checked value getters.
    * `problemgrab.config.diagnostics`: warnings and errors collected while loading.
    * `problemgrab.config.model`: `MutableConfig` builder and frozen `Config` snapshot.
    * `problemgrab.config.logging`: TRACE-aware logging setup.

Submodules are not imported here: `problemgrab.config.logging` must stay
importable from anywhere without cycles.
"""

from __future__ import annotations
