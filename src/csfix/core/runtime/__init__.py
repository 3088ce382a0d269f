# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Subprocess execution helpers."""

from __future__ import annotations

from .process import (
    CommandOptions,
    OutputSink,
    SubprocessExecutionError,
    run_command,
    stream_command,
)

__all__ = [
    "CommandOptions",
    "OutputSink",
    "SubprocessExecutionError",
    "run_command",
    "stream_command",
]
