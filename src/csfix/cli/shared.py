# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, decorators, reporting)."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from ..console.classifier import annotations_enabled
from ..console.decorator import ConsoleDecorator, HtmlConsoleDecorator, RichConsoleDecorator
from ..errors import ConfigError, CsfixError, DiffUnavailableError, FixerUnavailableError, ProcessError
from ..logging import StatusLogger, is_tty, shared_console
from ..models import RunResult

EXIT_OK: Final[int] = 0
EXIT_STYLE_VIOLATION: Final[int] = 1
EXIT_ERROR: Final[int] = 2
WORKSPACE_ENV: Final[str] = "WORKSPACE"


def build_cli_logger(*, emoji: bool, debug: bool = False, color: bool = True, html: bool = False) -> StatusLogger:
    """Return a :class:`StatusLogger` honouring CLI presentation flags.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        color: Whether terminal colour output is allowed.
        html: Whether stdout carries HTML fixer output; status lines then go
            to stderr.

    Returns:
        StatusLogger: Logger writing through the shared Rich consoles.
    """

    stream = sys.stderr if html else sys.stdout
    return StatusLogger(
        use_emoji=emoji,
        use_color=color and is_tty(stream),
        debug_enabled=debug,
        to_stderr=html,
    )


def build_decorator(
    *,
    html: bool,
    color: bool,
    emoji: bool,
    env: Mapping[str, str] | None = None,
) -> ConsoleDecorator:
    """Return the console decorator selected by the CLI flags."""

    enabled = annotations_enabled(env)
    if html:
        return HtmlConsoleDecorator(sys.stdout, enabled=enabled)
    return RichConsoleDecorator(shared_console(color=color, emoji=emoji), enabled=enabled)


def resolve_root(root: Path | None, env: Mapping[str, str] | None = None) -> Path:
    """Return the source tree root, falling back to ``$WORKSPACE`` then the cwd."""

    source = os.environ if env is None else env
    if root is not None:
        return root.resolve()
    workspace = source.get(WORKSPACE_ENV)
    return Path(workspace).resolve() if workspace else Path.cwd()


def report_result(result: RunResult, logger: StatusLogger) -> int:
    """Log the outcome of a run and return the process exit code.

    Args:
        result: Aggregated run result.
        logger: Logger receiving the summary.

    Returns:
        int: ``0`` on success, ``1`` when a file failed the style check.
    """

    seconds = result.elapsed_seconds
    if result.first_failure is None:
        logger.ok(f"php-cs-fixer passed on {len(result.files_processed)} file(s) in {seconds:.2f} seconds")
        return EXIT_OK
    failure = result.first_failure
    logger.fail(
        f"php-cs-fixer failed on {failure.file.path} (exit code {failure.exit_code}) "
        f"after {len(result.files_processed)} file(s) in {seconds:.2f} seconds; run aborted"
    )
    return EXIT_STYLE_VIOLATION


_ERROR_LABELS: Final[dict[type[CsfixError], str]] = {
    ConfigError: "Configuration error",
    DiffUnavailableError: "Unable to list changed files",
    FixerUnavailableError: "php-cs-fixer is unavailable",
    ProcessError: "Unable to run php-cs-fixer",
}


def report_error(exc: CsfixError, logger: StatusLogger) -> int:
    """Log a fatal error and return the process exit code.

    Args:
        exc: Error that aborted the run.
        logger: Logger receiving the message.

    Returns:
        int: Always ``2``.
    """

    label = next((text for kind, text in _ERROR_LABELS.items() if isinstance(exc, kind)), "Run failed")
    details = [str(exc)]
    if isinstance(exc, ProcessError):
        details.append(f"file: {exc.file.path}")
    if exc.elapsed_ms is not None:
        details.append(f"elapsed: {exc.elapsed_ms / 1000:.2f} seconds")
    logger.fail(f"{label}: {'; '.join(details)}")
    return EXIT_ERROR


__all__ = [
    "EXIT_ERROR",
    "EXIT_OK",
    "EXIT_STYLE_VIOLATION",
    "build_cli_logger",
    "build_decorator",
    "report_error",
    "report_result",
    "resolve_root",
]
