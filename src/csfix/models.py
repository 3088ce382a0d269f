# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Value objects describing revisions, changed files and run outcomes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigError

DEFAULT_PARAMETERS: Final[str] = "fix --level=psr2 --dry-run --diff"
DEFAULT_EXTENSION: Final[str] = ".php"
DEFAULT_FIXER_URL: Final[str] = "http://get.sensiolabs.org/php-cs-fixer.phar"
DEFAULT_FIXER_ARTIFACT: Final[str] = "php-cs-fixer"
DEFAULT_PHP_RUNTIME: Final[str] = "php"

CURRENT_REVISION_ENV: Final[str] = "GIT_COMMIT"
PREVIOUS_REVISION_ENV: Final[str] = "GIT_PREVIOUS_COMMIT"
PREVIOUS_SUCCESSFUL_REVISION_ENV: Final[str] = "GIT_PREVIOUS_SUCCESSFUL_COMMIT"


@dataclass(slots=True, frozen=True)
class RevisionPair:
    """Baseline and current revisions bounding a change set."""

    previous: str | None
    current: str

    @property
    def unchanged(self) -> bool:
        """Return ``True`` when no diff should be computed for the pair.

        Returns:
            bool: ``True`` when the baseline is missing or equals ``current``.
        """

        return self.previous is None or self.previous == self.current

    @classmethod
    def from_environment(
        cls,
        env: Mapping[str, str],
        *,
        previous: str | None = None,
        current: str | None = None,
    ) -> RevisionPair:
        """Build a pair from CI revision variables.

        The previous successful revision wins over the plain previous one so
        that every file touched since the last green build is checked again.

        Args:
            env: Environment mapping exported by the CI server.
            previous: Explicit baseline overriding the environment.
            current: Explicit current revision overriding the environment.

        Returns:
            RevisionPair: Pair describing the change set to inspect.

        Raises:
            ConfigError: If no current revision can be determined.
        """

        resolved_current = current or env.get(CURRENT_REVISION_ENV)
        if not resolved_current:
            raise ConfigError(f"No current revision available; set {CURRENT_REVISION_ENV} or pass --current")
        resolved_previous = (
            previous or env.get(PREVIOUS_SUCCESSFUL_REVISION_ENV) or env.get(PREVIOUS_REVISION_ENV) or None
        )
        return cls(previous=resolved_previous, current=resolved_current)


@dataclass(slots=True, frozen=True)
class ChangedFile:
    """File reported as changed, relative to the working directory."""

    path: str

    def absolute(self, working_dir: Path) -> Path:
        """Return the location of the file under ``working_dir``.

        Args:
            working_dir: Source tree root the path is relative to.

        Returns:
            Path: Absolute path of the changed file.
        """

        return (working_dir / self.path).resolve()

    def __str__(self) -> str:
        return self.path


class RunConfiguration(BaseModel):
    """Immutable settings consumed by a single fixer run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    fixer_path_override: str = ""
    global_parameters: str = DEFAULT_PARAMETERS
    project_parameters: str = ""
    extension_filter: str = Field(default=DEFAULT_EXTENSION, min_length=1)
    fixer_url: str = DEFAULT_FIXER_URL
    fixer_artifact: str = DEFAULT_FIXER_ARTIFACT
    php_runtime: str = DEFAULT_PHP_RUNTIME
    download_timeout: float = Field(default=60.0, gt=0)

    @property
    def effective_parameters(self) -> str:
        """Return the parameter string used for the run.

        Returns:
            str: Project parameters when set, otherwise the global parameters.
        """

        if self.project_parameters.strip():
            return self.project_parameters
        return self.global_parameters

    @property
    def uses_override(self) -> bool:
        """Return ``True`` when an explicit fixer executable is configured."""

        return bool(self.fixer_path_override.strip())


@dataclass(slots=True, frozen=True)
class FileFailure:
    """First file whose fixer invocation exited non-zero."""

    file: ChangedFile
    exit_code: int


@dataclass(slots=True, frozen=True)
class RunResult:
    """Outcome of processing a sequence of changed files."""

    files_processed: tuple[ChangedFile, ...]
    first_failure: FileFailure | None
    elapsed_ms: int

    @property
    def success(self) -> bool:
        """Return ``True`` when every file exited cleanly."""

        return self.first_failure is None

    @property
    def elapsed_seconds(self) -> float:
        """Return the elapsed time in seconds."""

        return self.elapsed_ms / 1000


__all__ = [
    "CURRENT_REVISION_ENV",
    "DEFAULT_EXTENSION",
    "DEFAULT_FIXER_ARTIFACT",
    "DEFAULT_FIXER_URL",
    "DEFAULT_PARAMETERS",
    "DEFAULT_PHP_RUNTIME",
    "PREVIOUS_REVISION_ENV",
    "PREVIOUS_SUCCESSFUL_REVISION_ENV",
    "ChangedFile",
    "FileFailure",
    "RevisionPair",
    "RunConfiguration",
    "RunResult",
]
