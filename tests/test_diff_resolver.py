# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for resolving changed files from git diff output."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path
from subprocess import CompletedProcess

import pytest

from csfix.core.runtime.process import CommandOptions, SubprocessExecutionError
from csfix.discovery.git import (
    RevisionDiffResolver,
    build_diff_command,
    matches_extension,
    parse_stat_paths,
)
from csfix.errors import DiffUnavailableError
from csfix.models import ChangedFile, RevisionPair


def test_equal_revisions_short_circuit_without_running_git(fake_git_factory, tmp_path: Path) -> None:
    git = fake_git_factory("src/a.php | 1 +\n 1 file changed")
    resolver = RevisionDiffResolver(runner=git)

    assert resolver.resolve(RevisionPair(previous="abc123", current="abc123"), tmp_path) == []
    assert git.calls == []


def test_missing_baseline_yields_no_changes(fake_git_factory, tmp_path: Path) -> None:
    git = fake_git_factory("src/a.php | 1 +\n 1 file changed")

    assert RevisionDiffResolver(runner=git).resolve(RevisionPair(previous=None, current="def"), tmp_path) == []
    assert git.calls == []


def test_stat_output_is_filtered_by_extension_and_existence(fake_git_factory, tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "a.php").write_text("<?php\n", encoding="utf-8")
    git = fake_git_factory("src/a.php | 3 ++-\nREADME.md | 1 +\n 2 files changed")

    files = RevisionDiffResolver(runner=git).resolve(RevisionPair(previous="abc", current="def"), tmp_path)

    assert files == [ChangedFile("src/a.php")]
    assert git.calls == [(["git", "diff", "--no-renames", "--stat=1000", "abc", "def"], tmp_path)]


def test_deleted_files_are_skipped(fake_git_factory, php_tree: Path) -> None:
    git = fake_git_factory("src/gone.php | 4 ----\nsrc/b.php | 1 +\n 2 files changed")

    files = RevisionDiffResolver(runner=git).resolve(RevisionPair("abc", "def"), php_tree)

    assert files == [ChangedFile("src/b.php")]


def test_order_follows_git_output(fake_git_factory, php_tree: Path) -> None:
    git = fake_git_factory(" src/b.php | 2 +-\n src/a.php | 2 +-\n 2 files changed, 2 insertions(+), 2 deletions(-)")

    files = RevisionDiffResolver(runner=git).resolve(RevisionPair("abc", "def"), php_tree)

    assert [entry.path for entry in files] == ["src/b.php", "src/a.php"]


def test_last_line_is_never_a_file(fake_git_factory, php_tree: Path) -> None:
    git = fake_git_factory("src/a.php | 2 +-\nsrc/b.php | 2 +-")

    files = RevisionDiffResolver(runner=git).resolve(RevisionPair("abc", "def"), php_tree)

    assert files == [ChangedFile("src/a.php")]


def test_directories_do_not_count_as_files(fake_git_factory, tmp_path: Path) -> None:
    (tmp_path / "odd.php").mkdir()
    git = fake_git_factory("odd.php | 1 +\n 1 file changed")

    assert RevisionDiffResolver(runner=git).resolve(RevisionPair("abc", "def"), tmp_path) == []


def test_custom_extension_filter(fake_git_factory, tmp_path: Path) -> None:
    (tmp_path / "view.phtml").write_text("<p></p>\n", encoding="utf-8")
    (tmp_path / "a.php").write_text("<?php\n", encoding="utf-8")
    git = fake_git_factory("view.phtml | 1 +\na.php | 1 +\n 2 files changed")

    files = RevisionDiffResolver(runner=git).resolve(RevisionPair("abc", "def"), tmp_path, ".phtml")

    assert files == [ChangedFile("view.phtml")]


@pytest.mark.parametrize(
    "error",
    [
        SubprocessExecutionError(["git", "diff"], 128, "", "fatal: bad revision"),
        FileNotFoundError("Executable 'git' was not found on PATH"),
    ],
)
def test_git_failures_raise_diff_unavailable(fake_git_factory, tmp_path: Path, error: Exception) -> None:
    git = fake_git_factory(error=error)

    with pytest.raises(DiffUnavailableError) as excinfo:
        RevisionDiffResolver(runner=git).resolve(RevisionPair("abc", "def"), tmp_path)

    assert excinfo.value.__cause__ is error


def test_parse_stat_paths_strips_the_change_column() -> None:
    lines = [" lib/deep/path/Thing.php   | 10 +++++-----", " 1 file changed"]

    assert list(parse_stat_paths(lines)) == ["lib/deep/path/Thing.php"]


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("src/a.php", True),
        ("a.php", True),
        (".php", False),
        ("src/A.PHP", False),
        ("src/a.php.bak", False),
        ("README.md", False),
    ],
)
def test_matches_extension_is_a_case_sensitive_suffix(path: str, expected: bool) -> None:
    assert matches_extension(path) is expected


def test_build_diff_command_requires_baseline() -> None:
    with pytest.raises(ValueError):
        build_diff_command(RevisionPair(previous=None, current="def"))


def test_default_runner_passes_the_build_environment(monkeypatch: pytest.MonkeyPatch, php_tree: Path) -> None:
    seen: list[CommandOptions] = []

    def fake_run(cmd: Sequence[str], *, options: CommandOptions) -> CompletedProcess[str]:
        seen.append(options)
        return CompletedProcess(list(cmd), 0, stdout="src/a.php | 1 +\n 1 file changed\n", stderr="")

    monkeypatch.setattr("csfix.discovery.git.run_command", fake_run)
    environment = {"PATH": "/usr/bin", "GIT_DIR": str(php_tree / ".git")}

    files = RevisionDiffResolver(environment=environment).resolve(RevisionPair("abc", "def"), php_tree)

    assert files == [ChangedFile("src/a.php")]
    assert seen[0].env == environment
    assert seen[0].cwd == php_tree


def _git(repo: Path, *args: str) -> str:
    completed = subprocess.run(
        ["git", "-c", "user.name=CsfixTest", "-c", "user.email=csfix@example.com", *args],
        cwd=repo,
        check=True,
        capture_output=True,
        text=True,
    )
    return completed.stdout.strip()


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
def test_resolves_changes_from_a_real_repository(tmp_path: Path) -> None:
    repo = tmp_path / "repo"
    (repo / "src").mkdir(parents=True)
    kept = repo / "src" / "Kept.php"
    removed = repo / "src" / "Removed.php"
    notes = repo / "notes.md"
    kept.write_text("<?php\n", encoding="utf-8")
    removed.write_text("<?php\n" + "// legacy helper\n" * 20, encoding="utf-8")
    notes.write_text("v1\n", encoding="utf-8")
    _git(repo, "init", "-q")
    _git(repo, "add", ".")
    _git(repo, "commit", "-q", "-m", "initial")
    baseline = _git(repo, "rev-parse", "HEAD")

    deep = repo / "src" / ("very_long_directory_name_" * 4) / "Deep.php"
    deep.parent.mkdir(parents=True)
    deep.write_text("<?php echo 1;\n", encoding="utf-8")
    kept.write_text("<?php echo 2;\n", encoding="utf-8")
    notes.write_text("v2\n", encoding="utf-8")
    removed.unlink()
    _git(repo, "add", "-A")
    _git(repo, "commit", "-q", "-m", "second")
    current = _git(repo, "rev-parse", "HEAD")

    files = RevisionDiffResolver().resolve(RevisionPair(baseline, current), repo)

    assert sorted(entry.path for entry in files) == sorted(
        ["src/Kept.php", str(deep.relative_to(repo).as_posix())]
    )


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
def test_unknown_revision_in_real_repository_is_unavailable(tmp_path: Path) -> None:
    _git(tmp_path, "init", "-q")

    with pytest.raises(DiffUnavailableError):
        RevisionDiffResolver().resolve(RevisionPair("deadbeef", "cafebabe"), tmp_path)


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
def test_renamed_and_edited_file_is_listed_under_its_new_path(tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "Old.php").write_text("<?php\n" + "echo 'line';\n" * 10, encoding="utf-8")
    _git(tmp_path, "init", "-q")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-q", "-m", "initial")
    baseline = _git(tmp_path, "rev-parse", "HEAD")
    _git(tmp_path, "mv", "src/Old.php", "src/New.php")
    with (tmp_path / "src" / "New.php").open("a", encoding="utf-8") as handle:
        handle.write("echo 'edited';\n")
    _git(tmp_path, "add", "-A")
    _git(tmp_path, "commit", "-q", "-m", "rename")
    current = _git(tmp_path, "rev-parse", "HEAD")

    files = RevisionDiffResolver().resolve(RevisionPair(baseline, current), tmp_path)

    assert files == [ChangedFile("src/New.php")]
