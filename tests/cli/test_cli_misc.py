# topmark:header:start
#
#   project      : AlignBy
#   file         : test_cli_misc.py
#   file_relpath : tests/cli/test_cli_misc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the command group, global options and `alignby version`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from alignby.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from alignby.constants import ALIGNBY_VERSION
from alignby.core.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, run_cli, run_cli_in
from tests.conftest import mark_cli, parametrize, write_raw

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_group_without_command_prints_hint_and_help() -> None:
    result: Result = run_cli([])
    assert_exit(result, ExitCode.SUCCESS)
    assert "Hint: use 'alignby check [PATHS...]'" in result.output
    assert "check" in result.output
    assert "version" in result.output


@mark_cli
def test_version() -> None:
    result: Result = run_cli(["version"])
    assert_exit(result, ExitCode.SUCCESS)
    assert result.output.strip() == ALIGNBY_VERSION


@mark_cli
def test_verbose_version_has_a_heading() -> None:
    result: Result = run_cli(["-v", "version"])
    assert_exit(result, ExitCode.SUCCESS)
    assert "AlignBy version:" in result.output
    assert ALIGNBY_VERSION in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result: Result = run_cli(["-v", "-q", "version"])
    assert_exit(result, ExitCode.USAGE_ERROR)
    assert "mutually exclusive" in result.output


@mark_cli
def test_check_help_lists_options() -> None:
    result: Result = run_cli(["check", "-h"])
    assert_exit(result, ExitCode.SUCCESS)
    for option in ("--apply", "--diff", "--summary", "--include", "--no-gitignore", "--config"):
        assert option in result.output


@mark_cli
def test_color_always_emits_ansi(tmp_path: Path) -> None:
    write_raw(tmp_path / "a.txt", '# align_by "="\na = 1\nbbb = 2\n')
    result: Result = run_cli_in(tmp_path, ["--color", "always", "check", "a.txt"])
    assert_exit(result, ExitCode.WOULD_CHANGE)
    assert "\x1b[" in result.output


@mark_cli
def test_no_color_wins(tmp_path: Path) -> None:
    write_raw(tmp_path / "a.txt", '# align_by "="\na = 1\nbbb = 2\n')
    result: Result = run_cli_in(tmp_path, ["--color", "always", "--no-color", "check", "a.txt"])
    assert "\x1b[" not in result.output


@parametrize(
    "verbose, quiet, expected",
    [(0, 0, 0), (2, 0, 2), (0, 1, -1), (0, 3, -1)],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected


@parametrize(
    "mode, isatty, expected",
    [
        (ColorMode.ALWAYS, False, True),
        (ColorMode.NEVER, True, False),
        (ColorMode.AUTO, True, True),
        (ColorMode.AUTO, False, False),
    ],
)
def test_resolve_color_mode(
    mode: ColorMode, isatty: bool, expected: bool, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    assert resolve_color_mode(cli_mode=mode, stdout_isatty=isatty) is expected
