# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings models for global and project-level fixer configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..models import (
    DEFAULT_EXTENSION,
    DEFAULT_FIXER_ARTIFACT,
    DEFAULT_FIXER_URL,
    DEFAULT_PARAMETERS,
    DEFAULT_PHP_RUNTIME,
)


class GlobalSettings(BaseModel):
    """Settings shared by every project using the fixer."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    fixer_path: str = ""
    parameters: str = DEFAULT_PARAMETERS
    fixer_url: str = DEFAULT_FIXER_URL
    fixer_artifact: str = DEFAULT_FIXER_ARTIFACT
    php_runtime: str = DEFAULT_PHP_RUNTIME
    download_timeout: float = Field(default=60.0, gt=0)


class ProjectSettings(BaseModel):
    """Settings scoped to a single project."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    project_parameters: str = ""
    extension: str = Field(default=DEFAULT_EXTENSION, min_length=1)


class CsfixSettings(BaseModel):
    """Top-level settings document."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid", populate_by_name=True)

    global_: GlobalSettings = Field(default_factory=GlobalSettings, alias="global")
    project: ProjectSettings = Field(default_factory=ProjectSettings)

    def to_dict(self) -> dict[str, object]:
        """Return the settings as a plain mapping keyed by TOML table names."""

        return self.model_dump(by_alias=True)


__all__ = ["CsfixSettings", "GlobalSettings", "ProjectSettings"]
