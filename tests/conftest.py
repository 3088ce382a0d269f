# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from csfix.console.classifier import LineSeverity
from csfix.console.decorator import ConsoleDecorator
from csfix.logging import StatusLogger


class RecordingDecorator(ConsoleDecorator):
    """Collect rendered lines and count terminal flushes."""

    def __init__(self) -> None:
        super().__init__()
        self.lines: list[tuple[str, LineSeverity | None]] = []
        self.force_eol_calls = 0

    def write_line(self, line: str, severity: LineSeverity | None) -> None:
        self.lines.append((line, severity))

    def force_eol(self) -> None:
        self.force_eol_calls += 1
        super().force_eol()


class FakeGit:
    """Git runner returning canned output and recording invocations."""

    def __init__(self, output: str = "", *, error: Exception | None = None) -> None:
        self.output = output
        self.error = error
        self.calls: list[tuple[list[str], Path]] = []

    def __call__(self, cmd: Sequence[str], root: Path) -> list[str]:
        self.calls.append((list(cmd), root))
        if self.error is not None:
            raise self.error
        return self.output.splitlines()


@pytest.fixture
def decorator() -> RecordingDecorator:
    """Return a decorator recording every emitted line."""
    return RecordingDecorator()


@pytest.fixture
def quiet_logger() -> StatusLogger:
    """Return a logger without emoji or colour."""
    return StatusLogger(use_emoji=False, use_color=False)


@pytest.fixture
def fake_git_factory() -> type[FakeGit]:
    """Return the fake git runner class."""
    return FakeGit


@pytest.fixture
def php_tree(tmp_path: Path) -> Path:
    """Return a working directory holding a couple of PHP sources."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "a.php").write_text("<?php echo 'a';\n", encoding="utf-8")
    (tmp_path / "src" / "b.php").write_text("<?php echo 'b';\n", encoding="utf-8")
    return tmp_path
