# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Compose php-cs-fixer command lines."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ..models import ChangedFile, RunConfiguration
from .acquire import FixerAcquirer


def compose_arguments(
    config: RunConfiguration,
    target_file: str | Path | ChangedFile,
    *,
    fixer_command: Sequence[str],
) -> list[str]:
    """Return the full argument list for checking ``target_file``.

    Project parameters replace the global parameters outright when present;
    the two are never merged.

    Args:
        config: Settings for the current run.
        target_file: File the fixer should process.
        fixer_command: Executable prefix, e.g. ``["php", "php-cs-fixer"]``.

    Returns:
        list[str]: Executable prefix, parameter tokens and the target file.
    """

    return [*fixer_command, *config.effective_parameters.split(), str(target_file)]


def fallback_command(config: RunConfiguration) -> list[str]:
    """Return the prefix used to run the downloaded artifact."""

    return [config.php_runtime, config.fixer_artifact]


def resolve_fixer_command(
    config: RunConfiguration,
    working_dir: Path,
    *,
    acquirer: FixerAcquirer | None = None,
) -> list[str]:
    """Return the executable prefix, downloading the fixer when required.

    Args:
        config: Settings for the current run.
        working_dir: Directory the artifact is downloaded into.
        acquirer: Download helper; built from ``config`` when omitted.

    Returns:
        list[str]: Executable prefix for :func:`compose_arguments`.

    Raises:
        FixerUnavailableError: If the fallback download fails.
    """

    if config.uses_override:
        return [config.fixer_path_override.strip()]
    fetcher = acquirer or FixerAcquirer(
        url=config.fixer_url,
        destination=working_dir / config.fixer_artifact,
        timeout=config.download_timeout,
    )
    fetcher.fetch()
    return fallback_command(config)


@dataclass(slots=True, frozen=True)
class CommandComposer:
    """Bind a resolved executable prefix to a run configuration."""

    config: RunConfiguration
    fixer_command: tuple[str, ...]

    def compose(self, target_file: str | Path | ChangedFile) -> list[str]:
        """Return the argument list for ``target_file``."""

        return compose_arguments(self.config, target_file, fixer_command=self.fixer_command)

    def __call__(self, target_file: str | Path | ChangedFile) -> list[str]:
        return self.compose(target_file)


__all__ = [
    "CommandComposer",
    "compose_arguments",
    "fallback_command",
    "resolve_fixer_command",
]
