# topmark:header:start
#
#   project      : ProblemGrab
#   file         : io.py
#   file_relpath : src/problemgrab/config/io.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""TOML loading and checked value getters.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
The *checked* getters validate the expected shape of a value and record a
warning in a `ConfigDiagnosticLog` (and log it) instead of raising, so that
user mistakes surface without aborting a capture.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from problemgrab.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from problemgrab.config.diagnostics import ConfigDiagnosticLog
    from problemgrab.config.logging import GrabLogger

logger: GrabLogger = get_logger(__name__)

TomlTable = dict[str, Any]

E = TypeVar("E", bound=Enum)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``problemgrab.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table at ``key``, or an empty dict if absent or not a table."""
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Expected table for %r, got %s", key, type(value).__name__)
    return {}


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: ConfigDiagnosticLog,
) -> str | None:
    """Return a string value, recording a warning for non-string values.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Human-readable location (e.g. ``"[output]"``) for messages.
        diagnostics (ConfigDiagnosticLog): Log receiving warnings.

    Returns:
        str | None: The string value, or None when absent or invalid.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    loc: str = f"{where}.{key}" if where else key
    message: str = f"Expected string in {loc}, got {type(value).__name__}: {value!r}"
    logger.warning(message)
    diagnostics.add_warning(message)
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: ConfigDiagnosticLog,
) -> bool | None:
    """Return a bool value, recording a warning for non-bool values."""
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    loc: str = f"{where}.{key}" if where else key
    message: str = f"Expected bool in {loc}, got {type(value).__name__}: {value!r}"
    logger.warning(message)
    diagnostics.add_warning(message)
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: ConfigDiagnosticLog,
) -> int | None:
    """Return an int value, recording a warning for non-int values (bools included)."""
    value: Any = table.get(key)
    if value is None:
        return None
    loc: str = f"{where}.{key}" if where else key
    if isinstance(value, bool) or not isinstance(value, int):
        message: str = f"Expected int in {loc}, got {type(value).__name__}: {value!r}"
        logger.warning(message)
        diagnostics.add_warning(message)
        return None
    return value


def get_string_list_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: ConfigDiagnosticLog,
) -> list[str]:
    """Return a list of strings, skipping (and reporting) non-string entries.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Human-readable location for messages.
        diagnostics (ConfigDiagnosticLog): Log receiving warnings.

    Returns:
        list[str]: The string entries; empty when absent or not a list.
    """
    value: Any = table.get(key)
    if value is None:
        return []
    loc: str = f"{where}.{key}" if where else key
    if not isinstance(value, list):
        message: str = f"Expected list in {loc}, got {type(value).__name__}: {value!r}"
        logger.warning(message)
        diagnostics.add_warning(message)
        return []
    result: list[str] = []
    for v in cast("list[Any]", value):
        if isinstance(v, str):
            result.append(v)
        else:
            logger.warning("Ignoring non-string entry in %s: %r", loc, v)
            diagnostics.add_warning(f"Ignoring non-string entry in {loc}: {v!r}")
    return result


def get_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: ConfigDiagnosticLog,
) -> E | None:
    """Return the enum member whose value matches the string at ``key``.

    Unknown values are reported with the list of allowed values and yield None.
    """
    raw: str | None = get_string_value_or_none_checked(
        table, key, where=where, diagnostics=diagnostics
    )
    if raw is None:
        return None
    for member in enum_cls:
        if member.value == raw.strip().lower():
            return member
    loc: str = f"{where}.{key}" if where else key
    allowed: str = ", ".join(str(m.value) for m in enum_cls)
    message: str = f"Invalid value for {loc}: {raw!r} (allowed: {allowed})"
    logger.warning(message)
    diagnostics.add_warning(message)
    return None
