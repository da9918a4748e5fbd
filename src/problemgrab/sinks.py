# topmark:header:start
#
#   project      : ProblemGrab
#   file         : sinks.py
#   file_relpath : src/problemgrab/sinks.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Destinations for a rendered report.

A sink receives the whole document at once; there are no partial writes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import pyperclip

from problemgrab.config.logging import get_logger
from problemgrab.errors import SinkError

if TYPE_CHECKING:
    from pathlib import Path

    from problemgrab.cli.console_api import ConsoleLike
    from problemgrab.config.logging import GrabLogger

logger: GrabLogger = get_logger(__name__)


class Sink(Protocol):
    """Receives a rendered report."""

    def deliver(self, document: str) -> None:
        """Hand ``document`` to the destination."""
        ...


class ClipboardSink:
    """Copy the report to the system clipboard."""

    def deliver(self, document: str) -> None:
        """Copy ``document`` to the clipboard.

        Raises:
            SinkError: If no clipboard mechanism is available.
        """
        try:
            pyperclip.copy(document)
        except pyperclip.PyperclipException as e:
            raise SinkError(f"Cannot access the clipboard: {e}") from e
        logger.debug("Copied %d character(s) to the clipboard", len(document))


@dataclass(frozen=True)
class FileSink:
    """Write the report to a UTF-8 file, creating parent directories."""

    path: Path

    def deliver(self, document: str) -> None:
        """Write ``document`` to ``path``, replacing any previous content.

        Raises:
            SinkError: If the file cannot be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(document, encoding="utf-8")
        except OSError as e:
            raise SinkError(f"Cannot write report to '{self.path}': {e}") from e
        logger.debug("Wrote report to %s", self.path)


@dataclass(frozen=True)
class StdoutSink:
    """Print the report through the CLI console."""

    console: ConsoleLike

    def deliver(self, document: str) -> None:
        """Print ``document`` without adding a trailing newline."""
        self.console.print(document, nl=False)
