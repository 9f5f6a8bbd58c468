# topmark:header:start
#
#   project      : IniFmt
#   file         : io.py
#   file_relpath : src/inifmt/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and read values from them.

This module provides I/O helpers for reading IniFmt configuration from on-disk
TOML files (``inifmt.toml`` / ``pyproject.toml``) plus small getters that validate
the shape of the parsed values.

Parsing is done with ``tomlkit`` and returned as plain ``dict`` structures.

Two loading flavours exist:
- [`read_toml_dict`][inifmt.config.io.read_toml_dict] raises
  [`TomlLoadError`][inifmt.config.io.TomlLoadError] (used for files the user named
  explicitly);
- [`load_toml_dict`][inifmt.config.io.load_toml_dict] logs and returns an empty dict
  (used for best-effort discovery).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from inifmt.config.keys import Toml
from inifmt.config.logging import get_logger
from inifmt.constants import DEFAULT_ENCODING, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_TABLE

if TYPE_CHECKING:
    from pathlib import Path

    from inifmt.config.logging import InifmtLogger
    from inifmt.core.diagnostics import DiagnosticLog

logger: InifmtLogger = get_logger(__name__)

TomlTable: TypeAlias = dict[str, Any]


class TomlLoadError(Exception):
    """Raised when a TOML config file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load config file {path}: {reason}")
        self.path = path
        self.reason = reason


# --- Type guards ---


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict``.
    """
    return isinstance(obj, dict)


# --- TOML file I/O ---


def read_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file, raising on failure.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        TomlLoadError: If the file cannot be read, decoded or parsed.
    """
    try:
        text: str = path.read_text(encoding=DEFAULT_ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        raise TomlLoadError(path, str(exc)) from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise TomlLoadError(path, str(exc)) from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        return read_toml_dict(path)
    except TomlLoadError as exc:
        logger.error("%s", exc)
        return {}


def extract_tool_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the IniFmt table from a parsed config document.

    For ``pyproject.toml`` this is ``[tool.inifmt]``; any other file is an IniFmt
    config document in its own right.

    Args:
        data (TomlTable): Parsed TOML document.
        path (Path): Path the document was read from.

    Returns:
        TomlTable | None: The IniFmt table, or ``None`` when a ``pyproject.toml``
        has no ``[tool.inifmt]`` table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool")
    if not is_toml_table(tool):
        return None
    table: Any = tool.get(PYPROJECT_TOOL_TABLE)
    return table if is_toml_table(table) else None


# --- Value getters ---


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table, or an empty dict.
    """
    value: Any = table.get(key)
    if is_toml_table(value):
        return value
    if value is not None:
        logger.debug("Expected a table for %r, got %r", key, value)
    return {}


def get_bool_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Extract an optional boolean, recording a warning for non-boolean values.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Human-readable location used in the warning (e.g. ``"[format]"``).
        diagnostics (DiagnosticLog): Log receiving the warning.

    Returns:
        bool | None: The boolean value, or ``None`` when the key is absent or invalid.
    """
    if key not in table:
        return None
    value: Any = table[key]
    if isinstance(value, bool):
        return value
    diagnostics.add_warning(
        f"Ignoring {where} {key} = {value!r}: expected true or false",
    )
    return None


def check_unknown_keys(
    table: TomlTable,
    *,
    source: str,
    diagnostics: DiagnosticLog,
) -> None:
    """Record a warning for every key IniFmt does not recognize.

    Args:
        table (TomlTable): The IniFmt configuration table.
        source (str): Name of the config source, used in warnings.
        diagnostics (DiagnosticLog): Log receiving the warnings.
    """
    for key in table:
        if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
            diagnostics.add_warning(f"{source}: unknown config key '{key}'")
    for section, allowed in Toml.ALLOWED_SECTION_KEYS.items():
        for key in get_table_value(table, section):
            if key not in allowed:
                diagnostics.add_warning(f"{source}: unknown key '{key}' in [{section}]")
