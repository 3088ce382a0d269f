# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console annotation for streamed fixer output."""

from __future__ import annotations

from .classifier import LineClassifier, LineSeverity, annotations_enabled, classify_line
from .decorator import ConsoleDecorator, HtmlConsoleDecorator, RichConsoleDecorator

__all__ = [
    "ConsoleDecorator",
    "HtmlConsoleDecorator",
    "LineClassifier",
    "LineSeverity",
    "RichConsoleDecorator",
    "annotations_enabled",
    "classify_line",
]
