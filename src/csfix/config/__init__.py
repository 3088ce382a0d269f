# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models, sources and loaders."""

from __future__ import annotations

from ..errors import ConfigError
from .loader import (
    ConfigSupplier,
    RunOverrides,
    SettingsConfigSupplier,
    default_sources,
    load_settings,
)
from .models import CsfixSettings, GlobalSettings, ProjectSettings
from .sources import DefaultConfigSource, PyProjectConfigSource, TomlConfigSource

__all__ = [
    "ConfigError",
    "ConfigSupplier",
    "CsfixSettings",
    "DefaultConfigSource",
    "GlobalSettings",
    "ProjectSettings",
    "PyProjectConfigSource",
    "RunOverrides",
    "SettingsConfigSupplier",
    "TomlConfigSource",
    "default_sources",
    "load_settings",
]
