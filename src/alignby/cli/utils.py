# topmark:header:start
#
#   project      : AlignBy
#   file         : utils.py
#   file_relpath : src/alignby/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable rendering helpers used by the CLI commands.

- per-file result lines with their diagnostics,
- the summary by outcome (``--summary``),
- the final tally,
- unified diffs (``--diff``).

All printing goes through a `ConsoleLike` obtained from
`alignby.cli.console.get_console_safely`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from alignby.cli.console import get_console_safely
from alignby.config.logging import get_logger
from alignby.core.diagnostics import DiagnosticLevel
from alignby.pipeline.outcomes import Outcome, classify_outcome, count_by_outcome
from alignby.utils.diff import render_patch

if TYPE_CHECKING:
    from collections.abc import Iterable

    from alignby.cli.console import ConsoleLike
    from alignby.config.logging import AlignbyLogger
    from alignby.core.diagnostics import Diagnostic
    from alignby.pipeline.context import ProcessingContext

logger: AlignbyLogger = get_logger(__name__)


def render_diagnostics(
    diagnostics: Iterable[Diagnostic], *, verbosity: int, indent: str = "   "
) -> None:
    """Print warnings and errors; info diagnostics only when verbose."""
    console: ConsoleLike = get_console_safely()
    for d in diagnostics:
        if d.level == DiagnosticLevel.INFO and verbosity <= 0:
            continue
        console.print(d.level.color(f"{indent}[{d.level.value}] {d.message}"))


def render_file_line(r: ProcessingContext) -> str:
    """Return the one-line, colored result for a file."""
    outcome: Outcome = classify_outcome(r)
    return f"{r.name}: {outcome.render()}"


def render_per_file_results(
    results: list[ProcessingContext], *, verbosity: int, apply_changes: bool
) -> None:
    """Echo one line per file, followed by its diagnostics.

    Unchanged files are listed only when ``verbosity > 0``.
    """
    console: ConsoleLike = get_console_safely()
    for r in results:
        outcome: Outcome = classify_outcome(r)
        if outcome == Outcome.UNCHANGED and verbosity <= 0 and not len(r.diagnostics):
            continue
        console.print(render_file_line(r))
        if outcome == Outcome.WOULD_ALIGN and not apply_changes:
            console.print(
                console.styled(
                    f"   Run `alignby check --apply {r.name}` to align this file.", fg="yellow"
                )
            )
        render_diagnostics(r.diagnostics, verbosity=verbosity)


def render_summary_counts(results: list[ProcessingContext], *, total: int) -> None:
    """Print the human summary (aligned counts by outcome)."""
    console: ConsoleLike = get_console_safely()
    console.print()
    console.print(console.styled("Summary by outcome:", bold=True, underline=True))

    counts: dict[Outcome, int] = count_by_outcome(results)
    label_width: int = max((len(o.value) for o in counts), default=0) + 1
    num_width: int = len(str(total))
    for outcome, n in counts.items():
        console.print(outcome.color(f"  {outcome.value:<{label_width}}: {n:>{num_width}}"))


def render_tally(results: list[ProcessingContext], *, apply_changes: bool) -> None:
    """Print the closing one-line tally of changed, unchanged and failed files."""
    console: ConsoleLike = get_console_safely()
    counts: dict[Outcome, int] = count_by_outcome(results)
    changed: int = counts.get(Outcome.ALIGNED, 0) + counts.get(Outcome.WOULD_ALIGN, 0)
    unchanged: int = counts.get(Outcome.UNCHANGED, 0) + counts.get(Outcome.CANCELED, 0)
    failed: int = sum(n for outcome, n in counts.items() if outcome.is_failure)
    verb: str = "aligned" if apply_changes else "would be aligned"
    line: str = f"{changed} file(s) {verb}, {unchanged} unchanged, {failed} failed."
    color: str = "green"
    if failed:
        color = "bright_red"
    elif changed and not apply_changes:
        color = "yellow"
    console.print(console.styled(line, fg=color, bold=True))


def emit_diffs(results: list[ProcessingContext]) -> None:
    """Print unified diffs for changed files. Files with no changes emit nothing."""
    console: ConsoleLike = get_console_safely()
    for r in results:
        if r.diff_text:
            console.print(render_patch(r.diff_text), nl=False)
