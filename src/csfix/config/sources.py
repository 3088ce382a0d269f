# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources (defaults, TOML, pyproject)."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any, Final, Protocol

from ..errors import ConfigError
from .models import CsfixSettings

PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "csfix"
CONFIG_FILENAME: Final[str] = "csfix.toml"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"


class ConfigSource(Protocol):
    """Provide configuration data loaded from disk or other mediums."""

    def load(self) -> Mapping[str, Any]:
        """Provide configuration values as a mapping."""


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated recursively with ``override``; nested tables merge key by key."""

    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    def load(self) -> Mapping[str, Any]:
        return CsfixSettings().to_dict()


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> Mapping[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {self._path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Unable to read {self._path}: {exc}") from exc
        if not isinstance(data, MutableMapping):
            raise ConfigError(f"Configuration at {self._path} must be a table")
        return dict(data)


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.csfix]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        csfix_section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(csfix_section, Mapping):
            return {}
        return dict(csfix_section)


__all__ = [
    "CONFIG_FILENAME",
    "PYPROJECT_FILENAME",
    "ConfigSource",
    "DefaultConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "deep_merge",
]
