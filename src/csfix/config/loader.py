# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Layered settings loading and conversion into run configurations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from ..errors import ConfigError
from ..models import RunConfiguration
from .models import CsfixSettings
from .sources import (
    CONFIG_FILENAME,
    PYPROJECT_FILENAME,
    ConfigSource,
    DefaultConfigSource,
    PyProjectConfigSource,
    TomlConfigSource,
    deep_merge,
)


def default_sources(root: Path, *, config_path: Path | None = None) -> list[ConfigSource]:
    """Return configuration sources for ``root`` in increasing precedence.

    Args:
        root: Project root searched for ``pyproject.toml`` and ``csfix.toml``.
        config_path: Explicit TOML file replacing ``csfix.toml``.

    Returns:
        list[ConfigSource]: Defaults, pyproject and the dedicated config file.

    Raises:
        ConfigError: If ``config_path`` was given but does not exist.
    """

    if config_path is not None and not config_path.is_file():
        raise ConfigError(f"Configuration file {config_path} does not exist")
    return [
        DefaultConfigSource(),
        PyProjectConfigSource(root / PYPROJECT_FILENAME),
        TomlConfigSource(config_path or root / CONFIG_FILENAME),
    ]


def load_settings(
    root: Path,
    *,
    config_path: Path | None = None,
    sources: Sequence[ConfigSource] | None = None,
) -> CsfixSettings:
    """Merge every configuration source and validate the result.

    Args:
        root: Project root directory.
        config_path: Explicit TOML file replacing ``csfix.toml``.
        sources: Sources to merge instead of :func:`default_sources`.

    Returns:
        CsfixSettings: Validated settings.

    Raises:
        ConfigError: If a source cannot be read or the merged data is invalid.
    """

    merged: dict[str, Any] = {}
    for source in sources if sources is not None else default_sources(root, config_path=config_path):
        merged = deep_merge(merged, source.load())
    try:
        return CsfixSettings.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


class ConfigSupplier(Protocol):
    """Supply the configuration for one build."""

    def load(self) -> RunConfiguration:
        """Return the run configuration."""


@dataclass(slots=True, frozen=True)
class RunOverrides:
    """Command-line values taking precedence over loaded settings."""

    fixer_path: str | None = None
    parameters: str | None = None
    project_parameters: str | None = None
    extension: str | None = None


@dataclass(slots=True, frozen=True)
class SettingsConfigSupplier:
    """Build a :class:`RunConfiguration` from settings and overrides."""

    settings: CsfixSettings
    overrides: RunOverrides = RunOverrides()

    def load(self) -> RunConfiguration:
        global_settings = self.settings.global_
        project_settings = self.settings.project
        overrides = self.overrides
        try:
            return RunConfiguration(
                fixer_path_override=_pick(overrides.fixer_path, global_settings.fixer_path),
                global_parameters=_pick(overrides.parameters, global_settings.parameters),
                project_parameters=_pick(overrides.project_parameters, project_settings.project_parameters),
                extension_filter=_pick(overrides.extension, project_settings.extension),
                fixer_url=global_settings.fixer_url,
                fixer_artifact=global_settings.fixer_artifact,
                php_runtime=global_settings.php_runtime,
                download_timeout=global_settings.download_timeout,
            )
        except ValidationError as exc:
            raise ConfigError(f"Invalid run configuration: {exc}") from exc


def _pick(override: str | None, value: str) -> str:
    return value if override is None else override


__all__ = [
    "ConfigSupplier",
    "RunOverrides",
    "SettingsConfigSupplier",
    "default_sources",
    "load_settings",
]
