# topmark:header:start
#
#   project      : AlignBy
#   file         : file_resolver.py
#   file_relpath : src/alignby/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input files for AlignBy based on config, paths, and filters.

Directories are walked recursively. ``.git`` directories are never entered and,
unless disabled, every ``.gitignore`` met on the way applies to its own
subtree. Include/exclude patterns are gitwildmatch patterns evaluated relative
to the current working directory. Oversized files are skipped with a warning.
The result is a deterministic, sorted list of files to process.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from alignby.config.logging import get_logger
from alignby.constants import GIT_DIR_NAME, GITIGNORE_NAME

if TYPE_CHECKING:
    from collections.abc import Iterator

    from alignby.config.logging import AlignbyLogger
    from alignby.config.model import Config

logger: AlignbyLogger = get_logger(__name__)

IgnoreStack = tuple[tuple[Path, PathSpec], ...]


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def load_gitignore(directory: Path) -> PathSpec | None:
    """Return the spec of ``directory/.gitignore``, or None when absent or unreadable."""
    gitignore: Path = directory / GITIGNORE_NAME
    if not gitignore.is_file():
        return None
    try:
        text: str = gitignore.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read %s: %s", gitignore, e)
        return None
    return PathSpec.from_lines(GitWildMatchPattern, text.splitlines())


def _last_verdict(spec: PathSpec, rel: str) -> bool | None:
    """Return the verdict of the last pattern in ``spec`` matching ``rel``, if any."""
    verdict: bool | None = None
    for pattern in spec.patterns:
        if pattern.include is not None and pattern.match_file(rel) is not None:
            verdict = pattern.include
    return verdict


def is_ignored(path: Path, ignores: IgnoreStack) -> bool:
    """Return whether ``path`` is ignored by the stacked ``.gitignore`` specs.

    The nearest ``.gitignore`` with a matching pattern decides, so a deeper
    negation (``!keep.txt``) overrides an ancestor's pattern.
    """
    for base, spec in reversed(ignores):
        rel: str = _rel_for_match(path, base)
        if path.is_dir():
            rel += "/"
        verdict: bool | None = _last_verdict(spec, rel)
        if verdict is not None:
            return verdict
    return False


def walk_files(
    directory: Path,
    *,
    respect_gitignore: bool = True,
    ignores: IgnoreStack = (),
) -> Iterator[Path]:
    """Yield the files below ``directory``, pruning ``.git`` and ignored entries."""
    if respect_gitignore:
        spec: PathSpec | None = load_gitignore(directory)
        if spec is not None:
            ignores = (*ignores, (directory, spec))

    try:
        entries: list[Path] = sorted(directory.iterdir())
    except OSError as e:
        logger.warning("Cannot list directory %s: %s", directory, e)
        return

    for entry in entries:
        if entry.name == GIT_DIR_NAME and entry.is_dir():
            continue
        if respect_gitignore and is_ignored(entry, ignores):
            logger.trace("Ignored by .gitignore: %s", entry)
            continue
        if entry.is_dir():
            yield from walk_files(entry, respect_gitignore=respect_gitignore, ignores=ignores)
        elif entry.is_file():
            yield entry


def resolve_file_list(config: Config) -> list[Path]:
    """Return the list of input files to process.

    Semantics:
      1. **Candidate set**: the configured ``files`` (positional paths or config
         ``files``); the current directory when empty. Files are kept as given,
         directories are walked (see `walk_files`).
      2. **Include intersection**: with include patterns, only matching files stay.
      3. **Exclude subtraction**: files matching an exclude pattern are dropped.
      4. **Size limit**: files larger than ``max_file_size`` bytes are skipped
         with a warning.
      5. Returns a **sorted**, de-duplicated list.

    Args:
        config (Config): Configuration values influencing path collection and filters.

    Returns:
        list[Path]: Sorted list of files selected for processing.
    """
    logger.debug("resolve_file_list(): config: %s", config)
    workspace_root: Path = Path.cwd()
    input_paths: list[Path] = [Path(p) for p in config.files] or [Path(".")]

    candidate_set: set[Path] = set()
    for p in input_paths:
        if p.is_file():
            candidate_set.add(p)
        elif p.is_dir():
            candidate_set.update(walk_files(p, respect_gitignore=config.respect_gitignore))
        else:
            logger.warning("No such file or directory: %s", p)

    if config.include_patterns:
        include_spec: PathSpec = PathSpec.from_lines(
            GitWildMatchPattern, list(config.include_patterns)
        )
        candidate_set = {
            p for p in candidate_set if include_spec.match_file(_rel_for_match(p, workspace_root))
        }

    if config.exclude_patterns:
        exclude_spec: PathSpec = PathSpec.from_lines(
            GitWildMatchPattern, list(config.exclude_patterns)
        )
        candidate_set = {
            p
            for p in candidate_set
            if not exclude_spec.match_file(_rel_for_match(p, workspace_root))
        }

    selected: list[Path] = []
    for p in sorted(candidate_set):
        try:
            size: int = p.stat().st_size
        except OSError as e:
            logger.warning("Cannot stat %s: %s", p, e)
            continue
        if size > config.max_file_size:
            logger.warning(
                "Skipping file %s because it is over %d bytes in size.", p, config.max_file_size
            )
            continue
        selected.append(p)

    logger.trace("Files to process: %d -- %s", len(selected), selected)
    return selected
