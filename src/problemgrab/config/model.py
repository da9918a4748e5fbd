# topmark:header:start
#
#   project      : ProblemGrab
#   file         : model.py
#   file_relpath : src/problemgrab/config/model.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Configuration model: a mutable builder and its frozen runtime snapshot.

`MutableConfig` collects values from defaults, discovered config files,
explicit ``--config`` files and CLI overrides. Unset values stay ``None`` so
that layers can be merged last-wins without losing information. `freeze`
applies the built-in defaults and returns an immutable `Config`.

Merge order (lowest to highest precedence):
    1) Built-in defaults
    2) ``pyproject.toml`` ``[tool.problemgrab]`` in the project root
    3) ``problemgrab.toml`` in the project root
    4) Extra config files passed via ``--config`` (in the order provided)
    5) CLI overrides
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from problemgrab.config.diagnostics import ConfigDiagnostic, ConfigDiagnosticLog, ConfigLevel
from problemgrab.config.io import (
    get_bool_value_or_none_checked,
    get_enum_value_checked,
    get_int_value_or_none_checked,
    get_string_list_value_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_toml_dict,
)
from problemgrab.config.keys import Toml
from problemgrab.config.logging import get_logger
from problemgrab.constants import (
    DEFAULT_CONTEXT_RADIUS,
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_OUTPUT_FILE,
    PROJECT_CONFIG_NAME,
    PYPROJECT_CONFIG_NAME,
    PYPROJECT_TOOL_SECTION,
)
from problemgrab.pipeline.categories import DEFAULT_EXCLUDED_CATEGORIES

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from problemgrab.config.io import TomlTable
    from problemgrab.config.logging import GrabLogger

logger: GrabLogger = get_logger(__name__)

CLI_OVERRIDE_STR = "<CLI overrides>"


class OutputTarget(str, Enum):
    """Where a rendered report is delivered."""

    CLIPBOARD = "clipboard"
    FILE = "file"
    STDOUT = "stdout"


@dataclass(frozen=True, slots=True)
class ModuleConfig:
    """A configured module: a name and its source roots (relative to the project root)."""

    name: str
    source_roots: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        project_root (Path): Root directory of the inspected project.
        project_name (str): Name shown in the report heading.
        context_radius (int): Lines of context on each side of a flagged line.
        excluded_categories (frozenset[str]): Category keys dropped by the filter
            (built-in deny-list plus configured additions, unless replaced).
        exclude_patterns (tuple[str, ...]): Gitignore-style paths skipped during traversal.
        modules (tuple[ModuleConfig, ...]): Configured modules; empty means the
            project root is the only source root.
        output_target (OutputTarget): Where the report goes.
        output_path (Path): Destination when ``output_target`` is ``FILE``.
        config_files (tuple[Path | str, ...]): Config sources that contributed.
        diagnostics (tuple[ConfigDiagnostic, ...]): Problems found while loading.
    """

    project_root: Path
    project_name: str
    context_radius: int
    excluded_categories: frozenset[str]
    exclude_patterns: tuple[str, ...]
    modules: tuple[ModuleConfig, ...]
    output_target: OutputTarget
    output_path: Path
    config_files: tuple[Path | str, ...]
    diagnostics: tuple[ConfigDiagnostic, ...]

    @property
    def has_errors(self) -> bool:
        """Return True if any diagnostic is an error."""
        return any(d.level is ConfigLevel.ERROR for d in self.diagnostics)

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        The excluded categories are thawed as a replacement list so that
        ``thaw().freeze()`` reproduces the same set.
        """
        return MutableConfig(
            project_root=self.project_root,
            project_name=self.project_name,
            context_radius=self.context_radius,
            excluded_categories=sorted(self.excluded_categories),
            replace_default_categories=True,
            exclude_patterns=list(self.exclude_patterns),
            modules=list(self.modules),
            output_target=self.output_target,
            output_path=str(self.output_path),
            config_files=list(self.config_files),
            diagnostics=ConfigDiagnosticLog(items=list(self.diagnostics)),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        project_root (Path | None): Root directory; None means the current directory.
        project_name (str | None): Report name; None means the root directory name.
        context_radius (int | None): Context window radius.
        excluded_categories (list[str]): Category keys added to (or replacing) the defaults.
        replace_default_categories (bool | None): Replace the built-in deny-list
            instead of extending it.
        exclude_patterns (list[str]): Gitignore-style exclude patterns.
        modules (list[ModuleConfig]): Configured modules.
        output_target (OutputTarget | None): Delivery target.
        output_path (str | None): Output file for the ``file`` target.
        config_files (list[Path | str]): Contributing config sources.
        diagnostics (ConfigDiagnosticLog): Problems found while loading or merging.
    """

    project_root: Path | None = None
    project_name: str | None = None
    context_radius: int | None = None
    excluded_categories: list[str] = field(default_factory=lambda: [])
    replace_default_categories: bool | None = None
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    modules: list[ModuleConfig] = field(default_factory=lambda: [])
    output_target: OutputTarget | None = None
    output_path: str | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: ConfigDiagnosticLog = field(default_factory=ConfigDiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Apply defaults and return an immutable `Config`."""
        root: Path = (self.project_root or Path.cwd()).resolve()

        radius: int = DEFAULT_CONTEXT_RADIUS if self.context_radius is None else self.context_radius
        if radius < 0:
            message: str = f"{Toml.KEY_CONTEXT_RADIUS} must be >= 0, got {radius}"
            logger.error(message)
            self.diagnostics.add_error(message)
            radius = DEFAULT_CONTEXT_RADIUS

        base: frozenset[str] = (
            frozenset() if self.replace_default_categories else DEFAULT_EXCLUDED_CATEGORIES
        )
        output_path = Path(self.output_path or DEFAULT_OUTPUT_FILE)
        if not output_path.is_absolute():
            output_path = root / output_path

        return Config(
            project_root=root,
            project_name=self.project_name or root.name,
            context_radius=radius,
            excluded_categories=base | frozenset(self.excluded_categories),
            exclude_patterns=tuple(self.exclude_patterns),
            modules=tuple(self.modules),
            output_target=self.output_target or OutputTarget.CLIPBOARD,
            output_path=output_path,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding the built-in defaults."""
        return cls(
            context_radius=DEFAULT_CONTEXT_RADIUS,
            replace_default_categories=False,
            exclude_patterns=list(DEFAULT_EXCLUDE_PATTERNS),
            output_target=OutputTarget.CLIPBOARD,
            output_path=DEFAULT_OUTPUT_FILE,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Parse a TOML table (already unwrapped from ``[tool.problemgrab]``).

        Invalid values are reported in ``diagnostics`` and otherwise ignored.

        Args:
            data (TomlTable): Parsed configuration table.
            config_file (Path | None): Source file, used for messages and provenance.

        Returns:
            MutableConfig: The parsed draft.
        """
        draft = cls()
        diags: ConfigDiagnosticLog = draft.diagnostics
        where: str = ""

        draft.project_name = get_string_value_or_none_checked(
            data, Toml.KEY_PROJECT_NAME, where=where, diagnostics=diags
        )
        radius: int | None = get_int_value_or_none_checked(
            data, Toml.KEY_CONTEXT_RADIUS, where=where, diagnostics=diags
        )
        if radius is not None and radius < 0:
            message: str = f"{Toml.KEY_CONTEXT_RADIUS} must be >= 0, got {radius}"
            if config_file is not None:
                message = f"{message} ({config_file})"
            logger.error(message)
            diags.add_error(message)
            radius = None
        draft.context_radius = radius

        draft.excluded_categories = get_string_list_value_checked(
            data, Toml.KEY_EXCLUDED_CATEGORIES, where=where, diagnostics=diags
        )
        draft.replace_default_categories = get_bool_value_or_none_checked(
            data, Toml.KEY_REPLACE_DEFAULT_CATEGORIES, where=where, diagnostics=diags
        )
        draft.exclude_patterns = get_string_list_value_checked(
            data, Toml.KEY_EXCLUDE, where=where, diagnostics=diags
        )

        output: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT)
        output_where: str = f"[{Toml.SECTION_OUTPUT}]"
        draft.output_target = get_enum_value_checked(
            output, Toml.KEY_TARGET, OutputTarget, where=output_where, diagnostics=diags
        )
        output_path: str | None = get_string_value_or_none_checked(
            output, Toml.KEY_PATH, where=output_where, diagnostics=diags
        )
        if output_path is not None and config_file is not None:
            # Relative output paths are relative to the declaring config file.
            candidate = Path(output_path)
            if not candidate.is_absolute():
                output_path = str(config_file.parent / candidate)
        draft.output_path = output_path

        draft.modules = cls._parse_modules(data.get(Toml.SECTION_MODULES), diags)
        return draft

    @staticmethod
    def _parse_modules(value: Any, diags: ConfigDiagnosticLog) -> list[ModuleConfig]:
        if value is None:
            return []
        where: str = f"[[{Toml.SECTION_MODULES}]]"
        if not isinstance(value, list):
            diags.add_warning(f"Expected array of tables in {where}, got {type(value).__name__}")
            return []
        modules: list[ModuleConfig] = []
        for i, entry in enumerate(value):  # pyright: ignore[reportUnknownVariableType]
            if not isinstance(entry, dict):
                diags.add_warning(f"Ignoring non-table entry #{i + 1} in {where}")
                continue
            table: TomlTable = entry  # pyright: ignore[reportUnknownVariableType]
            name: str | None = get_string_value_or_none_checked(
                table, Toml.KEY_MODULE_NAME, where=where, diagnostics=diags
            )
            if not name:
                logger.warning("Ignoring module #%d without a name", i + 1)
                diags.add_warning(
                    f"Ignoring entry #{i + 1} in {where}: missing '{Toml.KEY_MODULE_NAME}'"
                )
                continue
            roots: list[str] = get_string_list_value_checked(
                table, Toml.KEY_SOURCE_ROOTS, where=where, diagnostics=diags
            )
            modules.append(ModuleConfig(name=name, source_roots=tuple(roots or ["."])))
        return modules

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        For ``pyproject.toml`` only the ``[tool.problemgrab]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The parsed draft, or None when a ``pyproject.toml``
                has no ``[tool.problemgrab]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_CONFIG_NAME:
            tool: TomlTable = get_table_value(toml_data, Toml.SECTION_TOOL)
            toml_data = get_table_value(tool, PYPROJECT_TOOL_SECTION)
            if not toml_data:
                logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
                return None

        draft: MutableConfig = cls.from_toml_dict(toml_data, config_file=path)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_config_files(cls, project_root: Path) -> list[Path]:
        """Return the config files present in ``project_root``.

        ``pyproject.toml`` comes first so that ``problemgrab.toml`` overrides it.
        """
        found: list[Path] = []
        for name in (PYPROJECT_CONFIG_NAME, PROJECT_CONFIG_NAME):
            candidate: Path = project_root / name
            if candidate.is_file():
                found.append(candidate)
        logger.debug("Discovered config files in %s: %s", project_root, found)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        project_root: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            project_root (Path | None): Project root; defaults to the current directory.
            extra_config_files (Iterable[Path] | None): Files merged after discovery.
            no_config (bool): If True, skip discovery in the project root.

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.
        """
        root: Path = (project_root or Path.cwd()).resolve()
        draft: MutableConfig = cls.from_defaults()
        draft.project_root = root

        paths: list[Path] = [] if no_config else cls.discover_config_files(root)
        paths.extend(Path(p) for p in extra_config_files or ())
        for path in paths:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Category additions accumulate across layers unless ``other`` replaces the
        defaults, in which case its list becomes the whole list. Exclude patterns
        always accumulate.
        """
        if other.replace_default_categories:
            categories: list[str] = list(other.excluded_categories)
        else:
            categories = self.excluded_categories + [
                c for c in other.excluded_categories if c not in self.excluded_categories
            ]

        diagnostics = ConfigDiagnosticLog(items=list(self.diagnostics))
        diagnostics.extend(other.diagnostics)

        return MutableConfig(
            project_root=other.project_root
            if other.project_root is not None
            else self.project_root,
            project_name=other.project_name
            if other.project_name is not None
            else self.project_name,
            context_radius=other.context_radius
            if other.context_radius is not None
            else self.context_radius,
            excluded_categories=categories,
            replace_default_categories=other.replace_default_categories
            if other.replace_default_categories is not None
            else self.replace_default_categories,
            exclude_patterns=self.exclude_patterns
            + [p for p in other.exclude_patterns if p not in self.exclude_patterns],
            modules=other.modules or self.modules,
            output_target=other.output_target
            if other.output_target is not None
            else self.output_target,
            output_path=other.output_path if other.output_path is not None else self.output_path,
            config_files=self.config_files + other.config_files,
            diagnostics=diagnostics,
        )

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Apply CLI overrides in place; keys that are absent or None are ignored.

        Recognized keys: ``project_name``, ``context_radius``, ``output_target``,
        ``output_path``.

        Returns:
            MutableConfig: This draft, for chaining.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        if args.get("project_name") is not None:
            self.project_name = args["project_name"]
        if args.get("context_radius") is not None:
            self.context_radius = int(args["context_radius"])
        if args.get("output_target") is not None:
            self.output_target = OutputTarget(args["output_target"])
        if args.get("output_path") is not None:
            self.output_path = str(args["output_path"])
        return self
