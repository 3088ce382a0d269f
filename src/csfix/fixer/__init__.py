# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fixer acquisition and command composition."""

from __future__ import annotations

from .acquire import FixerAcquirer
from .command import CommandComposer, compose_arguments, fallback_command, resolve_fixer_command

__all__ = [
    "CommandComposer",
    "FixerAcquirer",
    "compose_arguments",
    "fallback_command",
    "resolve_fixer_command",
]
