# topmark:header:start
#
#   project      : ProblemGrab
#   file         : diagnostics.py
#   file_relpath : src/problemgrab/config/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Diagnostics collected while loading and merging configuration."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import cast

from yachalk import chalk


class ConfigLevel(Enum):
    """Severity of a configuration diagnostic (ERROR > WARNING)."""

    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this level."""
        return cast(
            "Callable[[str], str]",
            {
                ConfigLevel.WARNING: chalk.yellow,
                ConfigLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class ConfigDiagnostic:
    """A single configuration problem with its level and message."""

    level: ConfigLevel
    message: str


@dataclass
class ConfigDiagnosticLog:
    """Mutable, ordered collection of `ConfigDiagnostic` items."""

    items: list[ConfigDiagnostic] = field(default_factory=lambda: [])

    def add_warning(self, message: str) -> None:
        """Record a warning."""
        self.items.append(ConfigDiagnostic(ConfigLevel.WARNING, message))

    def add_error(self, message: str) -> None:
        """Record an error."""
        self.items.append(ConfigDiagnostic(ConfigLevel.ERROR, message))

    def extend(self, other: ConfigDiagnosticLog) -> None:
        """Append all items of ``other``, preserving order."""
        self.items.extend(other.items)

    def __iter__(self) -> Iterator[ConfigDiagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
