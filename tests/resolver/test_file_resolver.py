# topmark:header:start
#
#   project      : AlignBy
#   file         : test_file_resolver.py
#   file_relpath : tests/resolver/test_file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for input file resolution: walking, ``.gitignore``, filters and size limits."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from alignby.file_resolver import resolve_file_list
from tests.conftest import make_config, write_raw


@pytest.fixture
def tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a small project tree and chdir into it."""
    write_raw(tmp_path / "a.txt", "a\n")
    write_raw(tmp_path / "src" / "b.py", "b\n")
    write_raw(tmp_path / "src" / "deep" / "c.cfg", "c\n")
    write_raw(tmp_path / "debug.log", "log\n")
    write_raw(tmp_path / "build" / "out.txt", "out\n")
    write_raw(tmp_path / ".git" / "config", "[core]\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _names(paths: list[Path]) -> list[str]:
    return [p.as_posix() for p in paths]


def test_directory_walk_is_sorted_and_skips_git(tree: Path) -> None:
    files: list[Path] = resolve_file_list(make_config(files=["."]))
    assert _names(files) == [
        "a.txt",
        "build/out.txt",
        "debug.log",
        "src/b.py",
        "src/deep/c.cfg",
    ]


def test_default_is_current_directory(tree: Path) -> None:
    assert resolve_file_list(make_config()) == resolve_file_list(make_config(files=["."]))


def test_gitignore_prunes_files_and_directories(tree: Path) -> None:
    write_raw(tree / ".gitignore", "*.log\nbuild/\n")
    files: list[str] = _names(resolve_file_list(make_config(files=["."])))
    assert files == [".gitignore", "a.txt", "src/b.py", "src/deep/c.cfg"]


def test_nested_gitignore_negation(tree: Path) -> None:
    write_raw(tree / ".gitignore", "*.cfg\n")
    write_raw(tree / "src" / "deep" / "keep.cfg", "k\n")
    write_raw(tree / "src" / "deep" / ".gitignore", "!keep.cfg\n")
    files: list[str] = _names(resolve_file_list(make_config(files=["."])))
    assert files == [
        ".gitignore",
        "a.txt",
        "build/out.txt",
        "debug.log",
        "src/b.py",
        "src/deep/.gitignore",
        "src/deep/keep.cfg",
    ]


def test_gitignore_can_be_disabled(tree: Path) -> None:
    write_raw(tree / ".gitignore", "*.log\n")
    files: list[str] = _names(
        resolve_file_list(make_config(files=["."], respect_gitignore=False))
    )
    assert "debug.log" in files
    assert not any(f.startswith(".git/") for f in files)


def test_explicit_file_is_kept_even_if_ignored(tree: Path) -> None:
    write_raw(tree / ".gitignore", "*.log\n")
    assert _names(resolve_file_list(make_config(files=["debug.log"]))) == ["debug.log"]


def test_include_and_exclude_patterns(tree: Path) -> None:
    files: list[str] = _names(
        resolve_file_list(
            make_config(
                files=["."],
                include_patterns=["src/"],
                exclude_patterns=["*.cfg"],
            )
        )
    )
    assert files == ["src/b.py"]


def test_duplicate_inputs_are_deduplicated(tree: Path) -> None:
    files: list[Path] = resolve_file_list(make_config(files=["src", "src/b.py", "src"]))
    assert _names(files) == ["src/b.py", "src/deep/c.cfg"]


def test_oversized_files_are_skipped_with_warning(
    tree: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING)
    write_raw(tree / "big.txt", "x" * 64)
    files: list[str] = _names(resolve_file_list(make_config(files=["."], max_file_size=10)))
    assert "big.txt" not in files
    assert "a.txt" in files
    assert "over 10 bytes" in caplog.text


def test_missing_path_is_reported(tree: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    assert resolve_file_list(make_config(files=["nope.txt"])) == []
    assert "No such file or directory: nope.txt" in caplog.text
