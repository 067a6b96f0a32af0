# topmark:header:start
#
#   project      : HeaderFix
#   file         : model.py
#   file_relpath : src/headerfix/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for HeaderFix.

Two classes split the lifecycle of a configuration:

- `MutableConfig` is the builder. Defaults, discovered project files, explicit
  ``--config`` files and CLI overrides are layered onto it with `merge_with`.
- `Config` is the immutable snapshot produced by `MutableConfig.freeze`. It is what
  the file host and the CLI consume, and it resolves the `HeaderSettings` handed to
  the header engine.

Unset builder values are ``None`` so that merging can tell "not configured" from
"configured to the default".
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from headerfix.config.io import (
    TomlTable,
    extract_headerfix_table,
    get_bool,
    get_str,
    get_str_list,
    get_table,
    load_toml_file,
)
from headerfix.config.keys import COMPANY_NAME_VARIABLE, Toml
from headerfix.config.logging import get_logger
from headerfix.constants import (
    DEFAULT_COMPANY_NAME,
    DEFAULT_COPYRIGHT_TEXT,
    DEFAULT_INCLUDE_PATTERNS,
    DEFAULT_XML_HEADER,
    HEADERFIX_TOML_NAME,
    PYPROJECT_TOML_NAME,
)
from headerfix.core.errors import ConfigError
from headerfix.core.settings import HeaderSettings

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from headerfix.config.logging import HeaderfixLogger

logger: HeaderfixLogger = get_logger(__name__)

_VARIABLE_RE: re.Pattern[str] = re.compile(r"\{(\w+)\}")


def expand_variables(text: str, variables: Mapping[str, str]) -> str:
    """Substitute ``{name}`` placeholders in ``text``.

    Unknown placeholders are left untouched and logged as a warning.

    Args:
        text (str): Template text.
        variables (Mapping[str, str]): Placeholder values.

    Returns:
        str: The expanded text.
    """

    def _sub(match: re.Match[str]) -> str:
        name: str = match.group(1)
        if name in variables:
            return variables[name]
        logger.warning("Unknown variable '{%s}' in copyright text; left as-is", name)
        return match.group(0)

    return _VARIABLE_RE.sub(_sub, text)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable, fully resolved HeaderFix configuration.

    Attributes:
        company_name (str): Company written into structured headers and available as
            the ``{companyName}`` variable.
        copyright_text (str): Copyright template (may span several lines and
            contain ``{variable}`` placeholders).
        xml_header (bool): Whether headers use the structured ``<copyright>`` form.
        variables (Mapping[str, str]): User-defined template variables.
        include_patterns (tuple[str, ...]): Gitwildmatch patterns a file must match.
        exclude_patterns (tuple[str, ...]): Gitwildmatch patterns that drop a file.
        config_files (tuple[Path | str, ...]): Provenance of merged config layers.
    """

    company_name: str
    copyright_text: str
    xml_header: bool
    variables: Mapping[str, str]
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    config_files: tuple[Path | str, ...] = ()

    def header_settings(self) -> HeaderSettings:
        """Resolve the `HeaderSettings` handed to the header engine.

        ``{companyName}`` always refers to `company_name`; user variables may not
        override it.
        """
        if "\n" in self.company_name or "\r" in self.company_name:
            # Rendered verbatim; the structured opening line is split in two.
            logger.warning(
                "company_name %r contains a line break; headers will not be stable",
                self.company_name,
            )
        variables: dict[str, str] = dict(self.variables)
        variables[COMPANY_NAME_VARIABLE] = self.company_name
        return HeaderSettings(
            copyright_template=expand_variables(self.copyright_text, variables),
            use_structured_wrap=self.xml_header,
            company_name=self.company_name,
        )

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            company_name=self.company_name,
            copyright_text=self.copyright_text,
            xml_header=self.xml_header,
            variables=dict(self.variables),
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the configuration in ``headerfix.toml`` shape."""
        header: TomlTable = {
            Toml.KEY_COMPANY_NAME: self.company_name,
            Toml.KEY_COPYRIGHT_TEXT: self.copyright_text,
            Toml.KEY_XML_HEADER: self.xml_header,
        }
        if self.variables:
            header[Toml.SECTION_VARIABLES] = dict(self.variables)
        return {
            Toml.SECTION_HEADER: header,
            Toml.SECTION_FILES: {
                Toml.KEY_INCLUDE_PATTERNS: list(self.include_patterns),
                Toml.KEY_EXCLUDE_PATTERNS: list(self.exclude_patterns),
            },
        }


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        company_name (str | None): Company name, ``None`` = inherit.
        copyright_text (str | None): Copyright template, ``None`` = inherit.
        xml_header (bool | None): Structured header flag, ``None`` = inherit.
        variables (dict[str, str]): Template variables; merged key by key.
        include_patterns (list[str] | None): Include patterns, ``None`` = inherit.
        exclude_patterns (list[str] | None): Exclude patterns, ``None`` = inherit.
        root (bool): ``root = true`` in a config file stops upward discovery.
        config_files (list[Path | str]): Provenance of merged config layers.
    """

    company_name: str | None = None
    copyright_text: str | None = None
    xml_header: bool | None = None
    variables: dict[str, str] = field(default_factory=lambda: {})
    include_patterns: list[str] | None = None
    exclude_patterns: list[str] | None = None
    root: bool = False
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, filling in defaults."""
        return Config(
            company_name=(
                self.company_name if self.company_name is not None else DEFAULT_COMPANY_NAME
            ),
            copyright_text=(
                self.copyright_text if self.copyright_text is not None else DEFAULT_COPYRIGHT_TEXT
            ),
            xml_header=self.xml_header if self.xml_header is not None else DEFAULT_XML_HEADER,
            variables=dict(self.variables),
            include_patterns=tuple(
                self.include_patterns
                if self.include_patterns is not None
                else DEFAULT_INCLUDE_PATTERNS
            ),
            exclude_patterns=tuple(self.exclude_patterns or ()),
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls(
            company_name=DEFAULT_COMPANY_NAME,
            copyright_text=DEFAULT_COPYRIGHT_TEXT,
            xml_header=DEFAULT_XML_HEADER,
            include_patterns=list(DEFAULT_INCLUDE_PATTERNS),
            exclude_patterns=[],
            config_files=["<defaults>"],
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, path: Path | None = None) -> MutableConfig:
        """Build a builder from a HeaderFix TOML table.

        Args:
            data (TomlTable): The ``headerfix.toml`` document (or ``[tool.headerfix]``).
            path (Path | None): Source file, for provenance and error messages.

        Returns:
            MutableConfig: A builder holding only the values present in ``data``.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        header: TomlTable = get_table(data, Toml.SECTION_HEADER, path=path)
        files: TomlTable = get_table(data, Toml.SECTION_FILES, path=path)
        raw_vars: TomlTable = get_table(header, Toml.SECTION_VARIABLES, path=path)

        variables: dict[str, str] = {}
        for name, value in raw_vars.items():
            if not isinstance(value, str):
                raise ConfigError(f"variable '{name}' must be a string", path=path)
            variables[name] = value

        root: bool | None = get_bool(data, Toml.KEY_ROOT, path=path)

        return cls(
            company_name=get_str(header, Toml.KEY_COMPANY_NAME, path=path),
            copyright_text=get_str(header, Toml.KEY_COPYRIGHT_TEXT, path=path),
            xml_header=get_bool(header, Toml.KEY_XML_HEADER, path=path),
            variables=variables,
            include_patterns=get_str_list(files, Toml.KEY_INCLUDE_PATTERNS, path=path),
            exclude_patterns=get_str_list(files, Toml.KEY_EXCLUDE_PATTERNS, path=path),
            root=bool(root),
            config_files=[path] if path is not None else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a config file; ``None`` for a ``pyproject.toml`` without our section.

        Raises:
            ConfigError: If the file cannot be read, parsed or validated.
        """
        table: TomlTable | None = extract_headerfix_table(load_toml_file(path), path)
        if table is None:
            logger.debug("No [tool.headerfix] section in %s", path)
            return None
        return cls.from_toml_dict(table, path=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Files are returned root-most first, nearest last. Within one directory
        ``pyproject.toml`` precedes ``headerfix.toml`` so the latter wins when merged.
        A file setting ``root = true`` stops the walk after its directory.

        Args:
            start (Path): Discovery anchor (a file anchors at its parent directory).

        Returns:
            list[Path]: Config files in merge order.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            dir_entries: list[Path] = []
            stop_here: bool = False
            for name in (PYPROJECT_TOML_NAME, HEADERFIX_TOML_NAME):
                candidate: Path = cur / name
                if not candidate.is_file():
                    continue
                mc: MutableConfig | None = cls.from_toml_file(candidate)
                if mc is None:
                    continue
                dir_entries.append(candidate)
                stop_here = stop_here or mc.root
            if dir_entries:
                per_dir.append(dir_entries)
            if stop_here or cur.parent == cur:
                break
            cur = cur.parent

        ordered: list[Path] = [p for entries in reversed(per_dir) for p in entries]
        logger.debug("Discovered config files: %s", ordered)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        input_paths: Iterable[Path] | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a builder.

        Merge order (lowest → highest precedence):
            1) Built-in defaults
            2) Project configs discovered upward from the anchor, root → nearest
            3) Extra config files (``--config``), in the order given

        Args:
            input_paths (Iterable[Path] | None): The first path (or the CWD) anchors
                discovery.
            extra_config_files (Iterable[Path] | None): Explicit files merged last.
            no_config (bool): Skip discovery.

        Returns:
            MutableConfig: The merged builder.
        """
        draft: MutableConfig = cls.from_defaults()

        paths: list[Path] = list(input_paths or ())
        anchor: Path = paths[0] if paths else Path.cwd()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            extra_path = Path(extra)
            mc = cls.from_toml_file(extra_path)
            if mc is None:
                raise ConfigError("no [tool.headerfix] section", path=extra_path)
            draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override this one.

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: The merged builder.
        """
        merged_vars: dict[str, str] = dict(self.variables)
        merged_vars.update(other.variables)

        return MutableConfig(
            company_name=(
                other.company_name if other.company_name is not None else self.company_name
            ),
            copyright_text=(
                other.copyright_text if other.copyright_text is not None else self.copyright_text
            ),
            xml_header=other.xml_header if other.xml_header is not None else self.xml_header,
            variables=merged_vars,
            include_patterns=(
                list(other.include_patterns)
                if other.include_patterns is not None
                else self.include_patterns
            ),
            exclude_patterns=(
                list(other.exclude_patterns)
                if other.exclude_patterns is not None
                else self.exclude_patterns
            ),
            root=self.root or other.root,
            config_files=[*self.config_files, *other.config_files],
        )
