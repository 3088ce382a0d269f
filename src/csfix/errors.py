# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the diff, fixer and runner layers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ChangedFile


class CsfixError(RuntimeError):
    """Base class for failures that abort a fixer run."""

    def __init__(self, message: str, *, elapsed_ms: int | None = None) -> None:
        """Initialise the error with a message and optional elapsed time.

        Args:
            message: Human-readable description of the failure.
            elapsed_ms: Wall-clock time spent before the failure, when known.
        """

        super().__init__(message)
        self.elapsed_ms = elapsed_ms


class ConfigError(CsfixError):
    """Raised when configuration input is invalid."""


class DiffUnavailableError(CsfixError):
    """Raised when the changed-file list cannot be computed."""


class FixerUnavailableError(CsfixError):
    """Raised when the fixer executable cannot be resolved or fetched."""


class ProcessError(CsfixError):
    """Raised when a per-file fixer invocation cannot be started."""

    def __init__(self, message: str, *, file: ChangedFile, elapsed_ms: int | None = None) -> None:
        """Initialise the error with the file whose invocation failed.

        Args:
            message: Human-readable description of the failure.
            file: Changed file being processed when the failure occurred.
            elapsed_ms: Wall-clock time spent before the failure, when known.
        """

        super().__init__(message, elapsed_ms=elapsed_ms)
        self.file = file


__all__ = [
    "ConfigError",
    "CsfixError",
    "DiffUnavailableError",
    "FixerUnavailableError",
    "ProcessError",
]
