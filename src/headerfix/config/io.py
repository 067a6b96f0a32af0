# topmark:header:start
#
#   project      : HeaderFix
#   file         : io.py
#   file_relpath : src/headerfix/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read and write HeaderFix TOML configuration.

Parsing is done with `tomlkit`; documents are unwrapped into plain ``dict``
structures before they reach the config model. Type checking of individual
values happens here so that the model only sees well-formed data.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from headerfix.config.keys import Toml
from headerfix.config.logging import get_logger
from headerfix.constants import PYPROJECT_TOML_NAME
from headerfix.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from headerfix.config.logging import HeaderfixLogger

logger: HeaderfixLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def parse_toml_text(text: str, *, path: Path | None = None) -> TomlTable:
    """Parse TOML ``text`` into a plain dict.

    Args:
        text (str): TOML document text.
        path (Path | None): Source path, used in error messages.

    Returns:
        TomlTable: The unwrapped document.

    Raises:
        ConfigError: If the document is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"invalid TOML: {exc}", path=path) from exc
    return cast("TomlTable", doc.unwrap())


def load_toml_file(path: Path) -> TomlTable:
    """Read and parse a TOML file.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read configuration: {exc}", path=path) from exc
    logger.debug("Loaded configuration file %s", path)
    return parse_toml_text(text, path=path)


def extract_headerfix_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the HeaderFix part of a parsed config file.

    ``pyproject.toml`` files carry the configuration under ``[tool.headerfix]``; any
    other file is taken as a whole.

    Args:
        data (TomlTable): Parsed TOML document.
        path (Path): The file the document came from.

    Returns:
        TomlTable | None: The HeaderFix table, or ``None`` when a ``pyproject.toml``
        has no ``[tool.headerfix]`` section.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: object = data.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool, dict):
        return None
    table: object = cast("dict[str, object]", tool).get(Toml.SECTION_TOOL_NAME)
    if table is None:
        return None
    if not isinstance(table, dict):
        raise ConfigError(
            f"[{Toml.SECTION_TOOL}.{Toml.SECTION_TOOL_NAME}] must be a table", path=path
        )
    return cast("TomlTable", table)


def get_table(data: Mapping[str, Any], key: str, *, path: Path | None) -> TomlTable:
    """Return sub-table ``key`` of ``data`` (empty if missing).

    Raises:
        ConfigError: If the value exists but is not a table.
    """
    value: object = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table", path=path)
    return cast("TomlTable", value)


def get_str(data: Mapping[str, Any], key: str, *, path: Path | None) -> str | None:
    """Return string value ``key`` of ``data`` or ``None`` if missing.

    Raises:
        ConfigError: If the value exists but is not a string.
    """
    value: object = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string, got {type(value).__name__}", path=path)
    return value


def get_bool(data: Mapping[str, Any], key: str, *, path: Path | None) -> bool | None:
    """Return boolean value ``key`` of ``data`` or ``None`` if missing.

    Raises:
        ConfigError: If the value exists but is not a boolean.
    """
    value: object = data.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a boolean, got {type(value).__name__}", path=path)
    return value


def get_str_list(data: Mapping[str, Any], key: str, *, path: Path | None) -> list[str] | None:
    """Return list-of-strings value ``key`` of ``data`` or ``None`` if missing.

    Raises:
        ConfigError: If the value exists but is not a list of strings.
    """
    value: object = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(
        isinstance(v, str) for v in cast("list[object]", value)
    ):
        raise ConfigError(f"'{key}' must be a list of strings", path=path)
    return list(cast("list[str]", value))


def to_toml(data: TomlTable) -> str:
    """Render ``data`` as a TOML document (``None`` values are dropped)."""

    def _strip_none(value: object) -> object:
        if isinstance(value, dict):
            return {
                k: _strip_none(v)
                for k, v in cast("dict[str, object]", value).items()
                if v is not None
            }
        return value

    return tomlkit.dumps(cast("dict[str, Any]", _strip_none(data)))
