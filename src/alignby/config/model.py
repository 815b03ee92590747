# topmark:header:start
#
#   project      : AlignBy
#   file         : model.py
#   file_relpath : src/alignby/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the file resolver and
      the pipeline.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Sources, lowest precedence first:
    1) built-in defaults
    2) ``pyproject.toml`` (``[tool.alignby]``) and ``alignby.toml`` discovered
       upward from the working directory, root-most first
    3) files passed explicitly with ``--config``
    4) CLI overrides (`MutableConfig.apply_cli_args`)

Path semantics:
    - ``files`` entries declared in a config file are resolved against that
      file's directory.
    - Include/exclude patterns are gitwildmatch patterns evaluated relative to
      the invocation directory.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from alignby.config.io import (
    Toml,
    TomlTable,
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    get_string_list_value_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from alignby.config.logging import get_logger
from alignby.constants import (
    ALIGNBY_TOML_NAME,
    DEFAULT_MAX_FILE_SIZE,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from alignby.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from alignby.config.logging import AlignbyLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and test dicts).
ArgsLike = Mapping[str, Any]

logger: AlignbyLogger = get_logger(__name__)

CLI_OVERRIDE_STR = "<CLI overrides>"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for AlignBy.

    Attributes:
        verbosity_level (int | None): None = inherit, 0 = terse, 1+ = verbose.
        apply_changes (bool | None): Whether to write aligned files (None/False = dry run).
        stdin (bool | None): Whether the content to align comes from standard input.
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
        files (tuple[str, ...]): Paths to process (files or directories).
        include_patterns (tuple[str, ...]): Gitwildmatch patterns a file must match.
        exclude_patterns (tuple[str, ...]): Gitwildmatch patterns that drop a file.
        respect_gitignore (bool): Whether ``.gitignore`` files prune the traversal.
        max_file_size (int): Files larger than this many bytes are skipped.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading config.
    """

    verbosity_level: int | None
    apply_changes: bool | None
    stdin: bool | None

    config_files: tuple[Path | str, ...]

    files: tuple[str, ...]
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    respect_gitignore: bool
    max_file_size: int

    diagnostics: tuple[Diagnostic, ...]

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            verbosity_level=self.verbosity_level,
            apply_changes=self.apply_changes,
            stdin=self.stdin,
            config_files=list(self.config_files),
            files=list(self.files),
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            respect_gitignore=self.respect_gitignore,
            max_file_size=self.max_file_size,
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Tri-state fields (``None``) mean "not set by this layer" so that
    `merge_with` can tell an explicit ``false`` from an absent key.
    """

    verbosity_level: int | None = None
    apply_changes: bool | None = None
    stdin: bool | None = None

    config_files: list[Path | str] = field(default_factory=lambda: [])

    files: list[str] = field(default_factory=lambda: [])
    include_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    respect_gitignore: bool | None = None
    max_file_size: int | None = None

    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, filling unset fields."""
        return Config(
            verbosity_level=self.verbosity_level,
            apply_changes=self.apply_changes,
            stdin=self.stdin,
            config_files=tuple(self.config_files),
            files=tuple(self.files),
            include_patterns=tuple(self.include_patterns),
            exclude_patterns=tuple(self.exclude_patterns),
            respect_gitignore=True if self.respect_gitignore is None else self.respect_gitignore,
            max_file_size=DEFAULT_MAX_FILE_SIZE
            if self.max_file_size is None
            else self.max_file_size,
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Args:
            data (TomlTable): The AlignBy table (top level of ``alignby.toml``,
                or ``[tool.alignby]`` of ``pyproject.toml``).
            config_file (Path | None): Source file, used to resolve relative ``files``.

        Returns:
            MutableConfig: The resulting draft.
        """
        draft = cls()
        files_tbl: TomlTable = get_table_value(data, Toml.SECTION_FILES)
        where: str = f"[{Toml.SECTION_FILES}]"
        base: Path | None = config_file.parent if config_file is not None else None

        raw_files: list[str] = get_string_list_value_checked(
            files_tbl, Toml.KEY_FILES, where=where, diagnostics=draft.diagnostics
        )
        draft.files = [str(base / f) if base is not None else f for f in raw_files]
        draft.include_patterns = get_string_list_value_checked(
            files_tbl, Toml.KEY_INCLUDE_PATTERNS, where=where, diagnostics=draft.diagnostics
        )
        draft.exclude_patterns = get_string_list_value_checked(
            files_tbl, Toml.KEY_EXCLUDE_PATTERNS, where=where, diagnostics=draft.diagnostics
        )
        draft.respect_gitignore = get_bool_value_or_none_checked(
            files_tbl, Toml.KEY_RESPECT_GITIGNORE, where=where, diagnostics=draft.diagnostics
        )
        draft.max_file_size = get_int_value_or_none_checked(
            files_tbl, Toml.KEY_MAX_FILE_SIZE, where=where, diagnostics=draft.diagnostics
        )
        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        For ``pyproject.toml`` the ``[tool.alignby]`` table is used; a missing
        table yields ``None``.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, "tool"), PYPROJECT_TOOL_SECTION
            )
            if not tool_section:
                logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        return cls.from_toml_dict(toml_data, config_file=path)

    @staticmethod
    def _is_root(path: Path) -> bool:
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            data = get_table_value(get_table_value(data, "tool"), PYPROJECT_TOOL_SECTION)
        return data.get(Toml.KEY_ROOT) is True

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Files are returned root-most first. Within one directory
        ``pyproject.toml`` comes before ``alignby.toml`` so the latter wins on
        merge. A file setting ``root = true`` stops the walk after its directory.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, ALIGNBY_TOML_NAME):
                candidate: Path = cur / name
                if candidate.is_file():
                    dir_entries.append(candidate)
                    logger.debug("Discovered config file: %s", candidate)
                    if cls._is_root(candidate):
                        root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            anchor (Path | None): Directory where upward discovery starts (CWD if None).
            extra_config_files (Iterable[Path] | None): Files merged after discovery,
                in the given order.
            no_config (bool): If True, skip discovery (explicit files still apply).

        Returns:
            MutableConfig: The merged draft.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            extra_path = Path(extra)
            if not extra_path.is_file():
                msg: str = f"Config file not found: {extra_path}"
                logger.error(msg)
                draft.diagnostics.add_error(msg)
                continue
            mc = cls.from_toml_file(extra_path)
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            verbosity_level=other.verbosity_level
            if other.verbosity_level is not None
            else self.verbosity_level,
            apply_changes=other.apply_changes
            if other.apply_changes is not None
            else self.apply_changes,
            stdin=other.stdin if other.stdin is not None else self.stdin,
            config_files=self.config_files + other.config_files,
            files=other.files or self.files,
            include_patterns=other.include_patterns or self.include_patterns,
            exclude_patterns=other.exclude_patterns or self.exclude_patterns,
            respect_gitignore=other.respect_gitignore
            if other.respect_gitignore is not None
            else self.respect_gitignore,
            max_file_size=other.max_file_size
            if other.max_file_size is not None
            else self.max_file_size,
            diagnostics=DiagnosticLog(items=self.diagnostics.items + other.diagnostics.items),
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply overrides from a parsed arguments mapping (CLI or tests).

        Discovery flags (``--config``, ``--no-config``) are handled by
        `load_merged`, not here.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        if args.get("files"):
            self.files = [str(f) for f in args["files"]]
        if "include_patterns" in args:
            self.include_patterns.extend(args.get("include_patterns") or [])
        if "exclude_patterns" in args:
            self.exclude_patterns.extend(args.get("exclude_patterns") or [])
        if args.get("respect_gitignore") is not None:
            self.respect_gitignore = bool(args["respect_gitignore"])
        if args.get("max_file_size") is not None:
            self.max_file_size = int(args["max_file_size"])
        if "stdin" in args:
            self.stdin = bool(args["stdin"])
        if args.get("apply_changes") is not None:
            self.apply_changes = bool(args["apply_changes"])
        if args.get("verbosity_level") is not None:
            try:
                self.verbosity_level = int(args["verbosity_level"])
            except (TypeError, ValueError):
                logger.warning(
                    "Invalid verbosity_level=%r (expected int); keeping %r",
                    args["verbosity_level"],
                    self.verbosity_level,
                )

        logger.debug("apply_cli_args(): finalized stdin=%s files=%s", self.stdin, self.files)
        return self
