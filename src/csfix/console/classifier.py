# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Classify fixer output lines by the PHP error they report."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Final


class LineSeverity(str, Enum):
    """Enumerate the PHP error families highlighted in console output."""

    NOTICE = "notice"
    WARNING = "warning"
    PARSE = "parse"
    FATAL = "fatal"


LineClassifier = Callable[[str], LineSeverity | None]

ANNOTATIONS_DISABLED_ENV: Final[str] = "CSFIX_ANNOTATIONS_DISABLED"
_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})

# Checked in order; the first marker found in a line decides its severity.
SEVERITY_MARKERS: Final[tuple[tuple[str, LineSeverity], ...]] = (
    ("Notice", LineSeverity.NOTICE),
    ("Warning error", LineSeverity.WARNING),
    ("Parse error", LineSeverity.PARSE),
    ("Fatal error", LineSeverity.FATAL),
)


def classify_line(text: str) -> LineSeverity | None:
    """Return the severity reported by ``text``.

    Args:
        text: Single line of fixer output without its line terminator.

    Returns:
        LineSeverity | None: Matching severity, or ``None`` for plain output.
    """

    for marker, severity in SEVERITY_MARKERS:
        if marker in text:
            return severity
    return None


def annotations_enabled(env: Mapping[str, str] | None = None) -> bool:
    """Return ``False`` when console annotations were switched off.

    Args:
        env: Environment to inspect; defaults to the process environment.

    Returns:
        bool: ``True`` unless ``CSFIX_ANNOTATIONS_DISABLED`` is truthy.
    """

    source = os.environ if env is None else env
    return source.get(ANNOTATIONS_DISABLED_ENV, "").strip().lower() not in _TRUTHY


__all__ = [
    "ANNOTATIONS_DISABLED_ENV",
    "SEVERITY_MARKERS",
    "LineClassifier",
    "LineSeverity",
    "annotations_enabled",
    "classify_line",
]
