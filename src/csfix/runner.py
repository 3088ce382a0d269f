# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the fixer over changed files, one at a time, stopping at the first failure."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Mapping, Sequence
from pathlib import Path

from .console.decorator import ConsoleDecorator
from .core.runtime.process import CommandOptions, OutputSink, stream_command
from .errors import CsfixError, ProcessError
from .logging import StatusLogger
from .models import ChangedFile, FileFailure, RunResult

Composer = Callable[[ChangedFile], Sequence[str]]
Executor = Callable[..., int]


def elapsed_ms_since(start: float) -> int:
    """Return whole milliseconds elapsed since the ``perf_counter`` reading ``start``."""

    return int((time.perf_counter() - start) * 1000)


class PerFileRunner:
    """Invoke the fixer sequentially for each changed file."""

    def __init__(
        self,
        decorator: ConsoleDecorator,
        *,
        executor: Executor = stream_command,
        logger: StatusLogger | None = None,
    ) -> None:
        """Create a runner.

        Args:
            decorator: Console decorator receiving the fixer output.
            executor: Callable with the :func:`stream_command` signature that
                runs one command and returns its exit status.
            logger: Logger used for progress messages.
        """

        self._decorator = decorator
        self._executor = executor
        self._logger = logger or StatusLogger()

    def run(
        self,
        files: Iterable[ChangedFile],
        composer: Composer,
        working_dir: Path,
        environment: Mapping[str, str] | None = None,
    ) -> RunResult:
        """Process ``files`` in order and aggregate the outcome.

        Args:
            files: Changed files to check, in processing order.
            composer: Callable returning the argument list for a file.
            working_dir: Source tree root used as the fixer's working directory.
            environment: Environment passed to each fixer process.

        Returns:
            RunResult: Files processed and the first failing file, if any.

        Raises:
            ProcessError: If a fixer process cannot be started.
            CsfixError: Any other run failure, with ``elapsed_ms`` populated.
        """

        options = CommandOptions(cwd=working_dir, env=environment, check=False, discard_stdin=True)
        sink: OutputSink = self._decorator.feed
        processed: list[ChangedFile] = []
        failure: FileFailure | None = None
        self._logger.info("Starting to run php-cs-fixer")
        start = time.perf_counter()
        try:
            with self._decorator.session():
                for changed in files:
                    args = list(composer(changed))
                    self._logger.debug(f"running file={changed.path} cmd=\"{' '.join(args)}\"")
                    try:
                        exit_code = self._executor(args, sink=sink, options=options)
                    except OSError as exc:
                        raise ProcessError(
                            f"Unable to run php-cs-fixer on {changed.path}: {exc}",
                            file=changed,
                        ) from exc
                    processed.append(changed)
                    if exit_code != 0:
                        failure = FileFailure(file=changed, exit_code=exit_code)
                        break
        except CsfixError as exc:
            if exc.elapsed_ms is None:
                exc.elapsed_ms = elapsed_ms_since(start)
            raise
        finally:
            self._logger.info(f"Finished php-cs-fixer in {(time.perf_counter() - start):.2f} seconds")

        return RunResult(files_processed=tuple(processed), first_failure=failure, elapsed_ms=elapsed_ms_since(start))


__all__ = ["Composer", "Executor", "PerFileRunner", "elapsed_ms_since"]
