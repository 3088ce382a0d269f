# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Changed-file discovery."""

from __future__ import annotations

from .git import GitRunner, RevisionDiffResolver, resolve_changed_files

__all__ = ["GitRunner", "RevisionDiffResolver", "resolve_changed_files"]
