# topmark:header:start
#
#   project      : IniFmt
#   file         : model.py
#   file_relpath : src/inifmt/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot handed to the formatter and the CLI.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering (last wins):
    built-in defaults -> discovered config files (root-most first, nearest last)
    -> explicit ``--config`` files -> CLI arguments.

Immutability:
    - `Config` is ``frozen=True`` and stores tuples. Use `Config.thaw` -> edit ->
      `MutableConfig.freeze` for safe updates.

Tri-state fields:
    - On `MutableConfig` every option is ``bool | None``; ``None`` means "not set
      by this layer" and never overrides a lower layer during `merge_with`.
    - `freeze` resolves remaining ``None`` values to ``False``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from inifmt.config.io import (
    check_unknown_keys,
    extract_tool_table,
    get_bool_value_checked,
    get_table_value,
    load_toml_dict,
    read_toml_dict,
)
from inifmt.config.keys import Toml
from inifmt.config.logging import get_logger
from inifmt.constants import INIFMT_TOML_NAME, PYPROJECT_TOML_NAME
from inifmt.core.diagnostics import Diagnostic, DiagnosticLog
from inifmt.formatter.options import FormatOptions

if TYPE_CHECKING:
    from collections.abc import Iterable

    from inifmt.config.io import TomlTable
    from inifmt.config.logging import InifmtLogger

# ArgsLike: generic mapping accepted by `MutableConfig.apply_args` (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: InifmtLogger = get_logger(__name__)

DEFAULTS_SOURCE: str = "<defaults>"


def load_defaults_dict() -> TomlTable:
    """Return IniFmt's runtime defaults as a TOML-shaped dict.

    Returns:
        TomlTable: A new dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_FORMAT: {
            Toml.KEY_PER_SECTION: False,
            Toml.KEY_INCLUDE_COMMENTS: False,
            Toml.KEY_SINGLE_SPACE: False,
        },
    }


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for IniFmt.

    Attributes:
        per_section (bool): Align each section independently.
        include_comments (bool): Comments and blank lines take part in alignment.
        single_space (bool): Use the single-space normalizer instead of alignment.
        write (bool): Runtime intent: overwrite the input file with the result.
        check (bool): Runtime intent: report whether the input would change.
        diff (bool): Runtime intent: print a unified diff instead of the result.
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading and merging.
    """

    per_section: bool
    include_comments: bool
    single_space: bool

    write: bool
    check: bool
    diff: bool

    config_files: tuple[Path | str, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def format_options(self) -> FormatOptions:
        """Return the formatter options selected by this config."""
        return FormatOptions(
            per_section=self.per_section,
            include_comments=self.include_comments,
            single_space=self.single_space,
        )

    def to_toml_dict(self) -> TomlTable:
        """Convert the persistent part of this config into a TOML-shaped dict.

        Returns:
            TomlTable: ``{"format": {...}}``; runtime intent is not exported.
        """
        return {
            Toml.SECTION_FORMAT: {
                Toml.KEY_PER_SECTION: self.per_section,
                Toml.KEY_INCLUDE_COMMENTS: self.include_comments,
                Toml.KEY_SINGLE_SPACE: self.single_space,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            per_section=self.per_section,
            include_comments=self.include_comments,
            single_space=self.single_space,
            write=self.write,
            check=self.check,
            diff=self.diff,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Build with `from_defaults`, `from_toml_file` or `load_merged`, adjust with
    `apply_args`, then `freeze` into a `Config`.
    """

    per_section: bool | None = None
    include_comments: bool | None = None
    single_space: bool | None = None

    write: bool | None = None
    check: bool | None = None
    diff: bool | None = None

    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ------------------------------ Builders ------------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with IniFmt's built-in defaults."""
        return cls.from_toml_dict(load_defaults_dict(), source=DEFAULTS_SOURCE)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: Path | str) -> MutableConfig:
        """Create a draft from an IniFmt configuration table.

        Unknown keys and values of the wrong type are recorded as warnings on the
        draft's diagnostics and otherwise ignored.

        Args:
            data (TomlTable): The IniFmt table (``inifmt.toml`` top level, or
                ``[tool.inifmt]``).
            source (Path | str): Where the table came from (for provenance and warnings).

        Returns:
            MutableConfig: The resulting draft.
        """
        draft = cls(config_files=[source])
        check_unknown_keys(data, source=str(source), diagnostics=draft.diagnostics)

        format_tbl: TomlTable = get_table_value(data, Toml.SECTION_FORMAT)
        logger.trace("TOML [format] from %s: %s", source, format_tbl)

        where: str = f"{source} [{Toml.SECTION_FORMAT}]"
        draft.per_section = get_bool_value_checked(
            format_tbl, Toml.KEY_PER_SECTION, where=where, diagnostics=draft.diagnostics
        )
        draft.include_comments = get_bool_value_checked(
            format_tbl, Toml.KEY_INCLUDE_COMMENTS, where=where, diagnostics=draft.diagnostics
        )
        draft.single_space = get_bool_value_checked(
            format_tbl, Toml.KEY_SINGLE_SPACE, where=where, diagnostics=draft.diagnostics
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path, *, strict: bool = False) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``inifmt.toml`` and ``pyproject.toml`` (``[tool.inifmt]``).

        Args:
            path (Path): Path to the TOML file.
            strict (bool): If True, read/parse failures raise
                [`TomlLoadError`][inifmt.config.io.TomlLoadError]; otherwise they are
                logged and ``None`` is returned.

        Returns:
            MutableConfig | None: The draft, or ``None`` if the file holds no IniFmt
            configuration or could not be loaded in non-strict mode.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = read_toml_dict(path) if strict else load_toml_dict(path)
        table: TomlTable | None = extract_tool_table(data, path)
        if table is None:
            logger.debug("No [tool.inifmt] table in %s", path)
            return None
        return cls.from_toml_dict(table, source=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Files are returned root-most first, nearest last, so that a last-wins
        merge gives precedence to the nearest file. Within one directory
        ``pyproject.toml`` comes before ``inifmt.toml``. A config table with
        ``root = true`` stops the walk after its directory.

        Args:
            start (Path): Directory (or file) where discovery starts.

        Returns:
            list[Path]: Discovered config file paths in merge order.
        """
        found: list[Path] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            for name in (PYPROJECT_TOML_NAME, INIFMT_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                table: TomlTable | None = extract_tool_table(load_toml_dict(p), p)
                if table is None:
                    continue
                # Nearest directory is visited first; prepend per directory below.
                found.append(p)
                logger.debug("Discovered config file: %s", p)
                if table.get(Toml.KEY_ROOT) is True:
                    root_stop_here = True

            parent: Path = cur.parent
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            if parent == cur:
                break
            cur = parent

        # Re-order: directories root-most first, same-directory order preserved.
        by_dir: dict[Path, list[Path]] = {}
        for p in found:
            by_dir.setdefault(p.parent, []).append(p)
        ordered: list[Path] = []
        for directory in reversed(list(by_dir)):
            ordered.extend(by_dir[directory])
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Build a draft from defaults, discovered files and explicit config files.

        Args:
            start (Path | None): Discovery anchor; defaults to the current directory.
            extra_config_files (Iterable[Path]): Files named explicitly by the user,
                merged in order after discovered files. Failures raise
                [`TomlLoadError`][inifmt.config.io.TomlLoadError].
            no_config (bool): Skip upward discovery.

        Returns:
            MutableConfig: The merged draft (not yet frozen).
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            anchor: Path = start if start is not None else Path.cwd()
            for path in cls.discover_local_config_files(anchor):
                layer: MutableConfig | None = cls.from_toml_file(path)
                if layer is not None:
                    draft = draft.merge_with(layer)

        for path in extra_config_files:
            layer = cls.from_toml_file(path, strict=True)
            if layer is None:
                layer = cls(config_files=[path])
                layer.diagnostics.add_warning(f"{path}: no [tool.inifmt] table found")
            draft = draft.merge_with(layer)

        logger.debug("Merged config sources: %s", [str(p) for p in draft.config_files])
        return draft

    # ------------------------------ Editing ------------------------------

    def apply_args(self, args: ArgsLike) -> MutableConfig:
        """Overlay CLI/API arguments onto this draft.

        Only keys present with a non-``None`` value are applied. Flags that can
        only be switched on from the command line should be passed as ``True`` or
        ``None``.

        Args:
            args (ArgsLike): Mapping of option names to values.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        for name in ("per_section", "include_comments", "single_space", "write", "check", "diff"):
            value: Any = args.get(name)
            if value is not None:
                setattr(self, name, bool(value))
        logger.trace("Config after applying args: %s", self)
        return self

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set on ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """

        def pick(mine: bool | None, theirs: bool | None) -> bool | None:
            return theirs if theirs is not None else mine

        return MutableConfig(
            per_section=pick(self.per_section, other.per_section),
            include_comments=pick(self.include_comments, other.include_comments),
            single_space=pick(self.single_space, other.single_space),
            write=pick(self.write, other.write),
            check=pick(self.check, other.check),
            diff=pick(self.diff, other.diff),
            config_files=self.config_files + other.config_files,
            diagnostics=DiagnosticLog(items=[*self.diagnostics, *other.diagnostics]),
        )

    def sanitize(self) -> None:
        """Resolve conflicting options in place.

        Single-space mode excludes the alignment options; when both are set
        (possible through config files only) single-space wins and a warning is
        recorded.
        """
        if self.single_space and (self.per_section or self.include_comments):
            self.diagnostics.add_warning(
                "single_space is enabled; ignoring per_section/include_comments"
            )
            self.per_section = False
            self.include_comments = False

    def freeze(self) -> Config:
        """Sanitize and return an immutable `Config` snapshot."""
        self.sanitize()
        return Config(
            per_section=bool(self.per_section),
            include_comments=bool(self.include_comments),
            single_space=bool(self.single_space),
            write=bool(self.write),
            check=bool(self.check),
            diff=bool(self.diff),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )
