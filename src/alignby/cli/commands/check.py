# topmark:header:start
#
#   project      : AlignBy
#   file         : check.py
#   file_relpath : src/alignby/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AlignBy `check` command (dry run by default, ``--apply`` to write).

Input modes supported:
  * **Paths mode (default)**: zero or more PATHS (files or directories). Without
    PATHS, the configured ``[files].files`` or the working directory is used.
  * **Content on STDIN**: a single ``-`` as the sole PATH. With ``--apply`` the
    aligned text is written to stdout.

Examples:
  Preview which files would change and print a summary:

    $ alignby check --summary src

  Align in place and show what changed:

    $ alignby check --apply --diff .

  Use as a filter:

    $ cat table.txt | alignby check --apply -
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from alignby.cli.errors import AlignbyConfigError, AlignbyUsageError
from alignby.cli.io import (
    STDIN_DISPLAY_NAME,
    STDIN_PATH_SENTINEL,
    read_stdin_to_temp,
    safe_unlink,
)
from alignby.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_file_and_filtering_options,
)
from alignby.cli.utils import (
    emit_diffs,
    render_diagnostics,
    render_per_file_results,
    render_summary_counts,
    render_tally,
)
from alignby.config.logging import get_logger
from alignby.config.model import MutableConfig
from alignby.core.diagnostics import DiagnosticLevel
from alignby.core.exit_codes import ExitCode
from alignby.file_resolver import resolve_file_list
from alignby.pipeline.engine import run_steps_for_files
from alignby.pipeline.outcomes import exit_code_for
from alignby.pipeline.pipelines import Pipeline
from alignby.pipeline.status import AlignStatus, WriteStatus

if TYPE_CHECKING:
    from alignby.cli.console import ConsoleLike
    from alignby.config.logging import AlignbyLogger
    from alignby.config.model import Config
    from alignby.pipeline.context import ProcessingContext

logger: AlignbyLogger = get_logger(__name__)


def _build_config(
    *,
    ctx: click.Context,
    files: list[str],
    stdin_mode: bool,
    no_config: bool,
    config_paths: tuple[str, ...],
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    max_file_size: int | None,
    no_gitignore: bool,
    apply_changes: bool,
) -> Config:
    """Merge discovered/explicit config with the CLI overrides and freeze it.

    Raises:
        AlignbyConfigError: If a config layer reported an error.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    draft.apply_cli_args(
        {
            "files": files,
            "include_patterns": list(include_patterns),
            "exclude_patterns": list(exclude_patterns),
            "max_file_size": max_file_size,
            "respect_gitignore": False if no_gitignore else None,
            "stdin": stdin_mode,
            "apply_changes": apply_changes,
            "verbosity_level": ctx.obj.get("verbosity_level"),
        }
    )
    config: Config = draft.freeze()
    logger.trace("Effective config: %s", config)

    errors: list[str] = [d.message for d in config.diagnostics if d.level == DiagnosticLevel.ERROR]
    if errors:
        raise AlignbyConfigError("; ".join(errors))
    return config


def _echo_stdin_result(results: list[ProcessingContext], console: ConsoleLike) -> None:
    """Complete STDIN filter mode: unchanged input is echoed verbatim.

    Changed content was already written by the pipeline's stdout sink.
    Diagnostics go to stderr so they never mix with the aligned text.
    """
    for r in results:
        if (
            r.status.write != WriteStatus.WRITTEN
            and r.status.align != AlignStatus.MALFORMED
            and r.original_text is not None
        ):
            sys.stdout.write(r.original_text)
            sys.stdout.flush()
        for d in r.diagnostics:
            if d.level != DiagnosticLevel.INFO:
                console.error(f"{r.name}: {d.message}")


@click.command(
    name="check",
    help="Align directive blocks (dry-run). Use --apply to write changes.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Preview which files would change (dry-run)
  alignby check src

  # Apply: align files in-place
  alignby check --apply .
""",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=str))
@common_config_options
@common_file_and_filtering_options
@click.option(
    "--apply", "apply_changes", is_flag=True, help="Write changes to files (off by default)."
)
@click.option("--diff", is_flag=True, help="Show unified diffs of the changes.")
@click.option(
    "--summary",
    "summary_mode",
    is_flag=True,
    help="Show outcome counts instead of per-file details.",
)
def check_command(
    *,
    paths: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    max_file_size: int | None,
    no_gitignore: bool,
    apply_changes: bool,
    diff: bool,
    summary_mode: bool,
) -> None:
    """Run alignment over PATHS (check/apply).

    Args:
        paths (tuple[str, ...]): Files or directories; a single ``-`` reads STDIN.
        no_config (bool): If True, skip config discovery.
        config_paths (tuple[str, ...]): Additional config files to merge.
        include_patterns (tuple[str, ...]): Patterns to *include* (intersection).
        exclude_patterns (tuple[str, ...]): Patterns to *exclude* (subtraction).
        max_file_size (int | None): Size ceiling in bytes (config/default when None).
        no_gitignore (bool): Disable ``.gitignore`` pruning.
        apply_changes (bool): Write changes; otherwise perform a dry run.
        diff (bool): Show unified diffs.
        summary_mode (bool): Show outcome counts instead of per-file lines.

    Raises:
        AlignbyUsageError: If ``-`` is combined with other PATHS.
        AlignbyConfigError: If a configuration file is missing or invalid.

    Exit Status:
        SUCCESS (0): No changes required or all changes were written.
        WOULD_CHANGE (2): Dry run found files that ``--apply`` would change.
        USAGE_ERROR (64): Invalid invocation.
        DATA_ERROR (65): A malformed directive or a file that is not valid UTF-8.
        FILE_NOT_FOUND (66): An input file could not be found.
        PIPELINE_ERROR (70): An internal processing step failed.
        IO_ERROR (74): A file could not be read or written.
        PERMISSION_DENIED (77): Insufficient permissions to read or write a file.
        CONFIG_ERROR (78): Invalid configuration.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    stdin_mode: bool = STDIN_PATH_SENTINEL in paths
    if stdin_mode and len(paths) > 1:
        raise AlignbyUsageError(
            f"{ctx.command.name}: '-' (content on STDIN) must be the only PATH."
        )

    config: Config = _build_config(
        ctx=ctx,
        files=[] if stdin_mode else list(paths),
        stdin_mode=stdin_mode,
        no_config=no_config,
        config_paths=config_paths,
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
        max_file_size=max_file_size,
        no_gitignore=no_gitignore,
        apply_changes=apply_changes,
    )
    render_diagnostics(config.diagnostics, verbosity=vlevel, indent="")

    temp_path: Path | None = read_stdin_to_temp() if stdin_mode else None
    try:
        file_list: list[Path] = [temp_path] if temp_path is not None else resolve_file_list(config)
        if not file_list:
            if vlevel >= 0:
                console.print(console.styled("No files to process.", fg="blue"))
            return

        results, encountered_error_code = run_steps_for_files(
            file_list=file_list,
            pipeline=Pipeline.for_run(apply=apply_changes).steps,
            config=config,
            display_names={temp_path: STDIN_DISPLAY_NAME} if temp_path is not None else None,
        )

        if stdin_mode and apply_changes:
            _echo_stdin_result(results, console)
        else:
            if summary_mode:
                render_summary_counts(results, total=len(file_list))
            elif vlevel >= 0:
                render_per_file_results(results, verbosity=vlevel, apply_changes=apply_changes)
            if diff:
                emit_diffs(results)
            if vlevel >= 0:
                render_tally(results, apply_changes=apply_changes)
    finally:
        safe_unlink(temp_path)

    exit_code: ExitCode = encountered_error_code or exit_code_for(results, apply=apply_changes)
    if exit_code != ExitCode.SUCCESS:
        ctx.exit(exit_code)
