# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for php-cs-fixer command composition."""

from __future__ import annotations

from pathlib import Path

import pytest

from csfix.errors import FixerUnavailableError
from csfix.fixer.command import CommandComposer, compose_arguments, resolve_fixer_command
from csfix.models import ChangedFile, RunConfiguration


def test_project_parameters_replace_global_parameters() -> None:
    config = RunConfiguration(
        fixer_path_override="/usr/local/bin/php-cs-fixer",
        global_parameters="fix --level=psr2",
        project_parameters="fix --level=psr1",
    )

    args = compose_arguments(config, "src/a.php", fixer_command=["/usr/local/bin/php-cs-fixer"])

    assert args[-3:] == ["fix", "--level=psr1", "src/a.php"]
    assert "--level=psr2" not in args


def test_global_parameters_apply_when_project_parameters_blank() -> None:
    config = RunConfiguration(project_parameters="   ")

    args = compose_arguments(config, ChangedFile("src/a.php"), fixer_command=["php", "php-cs-fixer"])

    assert args == ["php", "php-cs-fixer", "fix", "--level=psr2", "--dry-run", "--diff", "src/a.php"]


def test_parameters_are_split_on_any_whitespace() -> None:
    config = RunConfiguration(global_parameters=" fix\t--dry-run \n --diff ")

    assert compose_arguments(config, "a.php", fixer_command=["fixer"]) == ["fixer", "fix", "--dry-run", "--diff", "a.php"]


def test_composition_is_deterministic() -> None:
    composer = CommandComposer(RunConfiguration(), ("php", "php-cs-fixer"))
    target = ChangedFile("src/a.php")

    assert composer.compose(target) == composer.compose(target)
    assert composer(target) == composer.compose(target)


def test_override_path_is_used_without_download(tmp_path: Path) -> None:
    class ExplodingAcquirer:
        def fetch(self) -> Path:
            raise AssertionError("download must not happen when an override is configured")

    config = RunConfiguration(fixer_path_override="vendor/bin/php-cs-fixer")

    assert resolve_fixer_command(config, tmp_path, acquirer=ExplodingAcquirer()) == ["vendor/bin/php-cs-fixer"]


def test_fallback_downloads_and_runs_through_php(tmp_path: Path) -> None:
    class RecordingAcquirer:
        fetched = 0

        def fetch(self) -> Path:
            self.fetched += 1
            return tmp_path / "php-cs-fixer"

    acquirer = RecordingAcquirer()

    command = resolve_fixer_command(RunConfiguration(), tmp_path, acquirer=acquirer)

    assert command == ["php", "php-cs-fixer"]
    assert acquirer.fetched == 1


def test_fallback_download_failure_propagates(tmp_path: Path) -> None:
    class FailingAcquirer:
        def fetch(self) -> Path:
            raise FixerUnavailableError("offline")

    with pytest.raises(FixerUnavailableError):
        resolve_fixer_command(RunConfiguration(), tmp_path, acquirer=FailingAcquirer())
