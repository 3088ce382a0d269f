# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the files changed between two git revisions."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping, Sequence
from pathlib import Path
from typing import Final

from ..core.runtime.process import CommandOptions, SubprocessExecutionError, run_command
from ..errors import DiffUnavailableError
from ..logging import StatusLogger
from ..models import DEFAULT_EXTENSION, ChangedFile, RevisionPair

GitRunner = Callable[[Sequence[str], Path], list[str]]

# git elides long paths in --stat output unless the width is raised.
STAT_WIDTH: Final[int] = 1000
_STAT_COLUMN_RE: Final[re.Pattern[str]] = re.compile(r"\|.*$")


def build_diff_command(pair: RevisionPair) -> list[str]:
    """Return the ``git diff`` invocation for ``pair``.

    Args:
        pair: Revisions bounding the change set; ``previous`` must be set.

    Returns:
        list[str]: Command arguments for a stat-style diff.
    """

    if pair.previous is None:
        raise ValueError("a baseline revision is required to build a diff command")
    # Renames are listed as deletion plus addition so the new path is checked.
    return ["git", "diff", "--no-renames", f"--stat={STAT_WIDTH}", pair.previous, pair.current]


def parse_stat_paths(lines: Sequence[str]) -> Iterator[str]:
    """Yield the file paths listed in ``git diff --stat`` output.

    The final line is the ``N files changed`` summary and is never a path.

    Args:
        lines: Output lines of the diff command.

    Yields:
        str: Path fragment preceding the ``|`` column of each entry.
    """

    for raw in lines[:-1]:
        path = _STAT_COLUMN_RE.sub("", raw).strip()
        if path:
            yield path


def matches_extension(path: str, extension: str = DEFAULT_EXTENSION) -> bool:
    """Return ``True`` when ``path`` names a file with ``extension``.

    The comparison is case-sensitive and requires at least one character
    before the extension, so a bare ``.php`` does not qualify.

    Args:
        path: Relative path reported by git.
        extension: Required filename suffix.

    Returns:
        bool: Whether the path passes the extension filter.
    """

    return len(path) > len(extension) and path.endswith(extension)


class RevisionDiffResolver:
    """Collect existing files of interest changed between two revisions."""

    def __init__(
        self,
        *,
        runner: GitRunner | None = None,
        environment: Mapping[str, str] | None = None,
        logger: StatusLogger | None = None,
    ) -> None:
        """Create a resolver.

        Args:
            runner: Optional command runner used to execute git commands. A
                default based on :func:`run_command` is used when omitted.
            environment: Environment the default runner hands to git; the
                current process environment when omitted.
            logger: Logger receiving debug output about dropped entries.
        """

        self._environment = environment
        self._runner = runner or self._default_runner
        self._logger = logger or StatusLogger()

    def resolve(
        self,
        pair: RevisionPair,
        working_dir: Path,
        extension_filter: str = DEFAULT_EXTENSION,
    ) -> list[ChangedFile]:
        """Return the changed files between the revisions of ``pair``.

        Args:
            pair: Baseline and current revisions.
            working_dir: Repository root the diff runs in.
            extension_filter: Filename suffix files must carry.

        Returns:
            list[ChangedFile]: Files in git output order.

        Raises:
            DiffUnavailableError: If git cannot be started or exits non-zero.
        """

        if pair.unchanged:
            self._logger.debug(f"diff skipped previous={pair.previous} current={pair.current}")
            return []
        cmd = build_diff_command(pair)
        self._logger.debug(f"resolving changes cmd=\"{' '.join(cmd)}\"")
        try:
            lines = self._runner(cmd, working_dir)
        except (OSError, SubprocessExecutionError) as exc:
            raise DiffUnavailableError(f"Unable to diff {pair.previous}..{pair.current}: {exc}") from exc

        changed: list[ChangedFile] = []
        for path in parse_stat_paths(lines):
            if not matches_extension(path, extension_filter):
                continue
            if not (working_dir / path).is_file():
                self._logger.debug(f"skipping missing path={path}")
                continue
            changed.append(ChangedFile(path))
        return changed

    def _default_runner(self, cmd: Sequence[str], root: Path) -> list[str]:
        """Execute ``cmd`` returning stdout lines.

        Args:
            cmd: Git command to execute.
            root: Repository root directory.

        Returns:
            list[str]: Raw stdout lines produced by the command.

        Raises:
            SubprocessExecutionError: If git exits with a non-zero status.
        """

        options = CommandOptions(cwd=root, env=self._environment, capture_output=True, text=True, check=True)
        cp = run_command(cmd, options=options)
        return (cp.stdout or "").splitlines()


def resolve_changed_files(
    pair: RevisionPair,
    working_dir: Path,
    extension_filter: str = DEFAULT_EXTENSION,
    *,
    runner: GitRunner | None = None,
    environment: Mapping[str, str] | None = None,
) -> list[ChangedFile]:
    """Return changed files using a default :class:`RevisionDiffResolver`."""

    return RevisionDiffResolver(runner=runner, environment=environment).resolve(pair, working_dir, extension_filter)


__all__ = [
    "STAT_WIDTH",
    "GitRunner",
    "RevisionDiffResolver",
    "build_diff_command",
    "matches_extension",
    "parse_stat_paths",
    "resolve_changed_files",
]
