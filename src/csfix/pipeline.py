# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Drive one build: resolve changed files, prepare the fixer, run it."""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path

from .config.loader import ConfigSupplier
from .console.decorator import ConsoleDecorator
from .discovery.git import RevisionDiffResolver
from .errors import CsfixError
from .fixer.acquire import FixerAcquirer
from .fixer.command import CommandComposer, resolve_fixer_command
from .logging import StatusLogger
from .models import RevisionPair, RunResult
from .runner import PerFileRunner, elapsed_ms_since


def run_build(
    supplier: ConfigSupplier,
    revisions: RevisionPair,
    working_dir: Path,
    environment: Mapping[str, str] | None,
    *,
    decorator: ConsoleDecorator,
    resolver: RevisionDiffResolver | None = None,
    acquirer: FixerAcquirer | None = None,
    runner: PerFileRunner | None = None,
    logger: StatusLogger | None = None,
) -> RunResult:
    """Check every changed file between ``revisions`` with the fixer.

    The decorator session spans the whole build, so its terminal flush runs
    exactly once whether the build succeeds, stops at a failing file, or
    raises. The reported elapsed time covers listing, download and the run.

    Args:
        supplier: Source of the settings for this build.
        revisions: Baseline and current revisions.
        working_dir: Source tree root.
        environment: Environment handed to git and the fixer.
        decorator: Console decorator receiving fixer output.
        resolver: Changed-file resolver; a default git resolver when omitted.
        acquirer: Fixer download helper used when no override is configured.
        runner: Per-file runner; built around ``decorator`` when omitted.
        logger: Logger for progress messages.

    Returns:
        RunResult: Aggregated outcome.

    Raises:
        ConfigError: If the supplier cannot produce a valid configuration.
        DiffUnavailableError: If the changed files cannot be listed.
        FixerUnavailableError: If the fixer cannot be fetched.
        ProcessError: If a fixer process cannot be started.
    """

    status = logger or StatusLogger()
    diff_resolver = resolver or RevisionDiffResolver(environment=environment, logger=status)
    file_runner = runner or PerFileRunner(decorator, logger=status)
    start = time.perf_counter()
    try:
        with decorator.session():
            config = supplier.load()
            files = diff_resolver.resolve(revisions, working_dir, config.extension_filter)
            if not files:
                status.info("No changed files to check")
                return RunResult(files_processed=(), first_failure=None, elapsed_ms=elapsed_ms_since(start))
            status.debug(f"changed files count={len(files)}")
            fixer_command = resolve_fixer_command(config, working_dir, acquirer=acquirer)
            composer = CommandComposer(config, tuple(fixer_command))
            result = file_runner.run(files, composer, working_dir, environment)
    except CsfixError as exc:
        exc.elapsed_ms = elapsed_ms_since(start)
        raise
    return replace(result, elapsed_ms=elapsed_ms_since(start))


__all__ = ["run_build"]
