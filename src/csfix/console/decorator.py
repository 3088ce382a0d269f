# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decorators that render streamed fixer output."""

from __future__ import annotations

import html
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Final, Self, TextIO

from rich.console import Console
from rich.text import Text

from .classifier import LineClassifier, LineSeverity, classify_line

DEFAULT_STYLES: Final[Mapping[LineSeverity, str]] = {
    LineSeverity.NOTICE: "cyan",
    LineSeverity.WARNING: "yellow",
    LineSeverity.PARSE: "bold magenta",
    LineSeverity.FATAL: "bold red",
}


class ConsoleDecorator(ABC):
    """Turn raw output chunks into classified lines.

    Output arrives in arbitrary chunks; complete lines are emitted as soon as
    they are seen and a trailing partial line is held until :meth:`force_eol`.
    """

    def __init__(self, *, classifier: LineClassifier = classify_line, enabled: bool = True) -> None:
        """Create a decorator.

        Args:
            classifier: Callable assigning a severity to each line.
            enabled: When ``False`` lines are written without classification.
        """

        self._classifier = classifier
        self._enabled = enabled
        self._pending = ""
        self._depth = 0

    def feed(self, chunk: str) -> None:
        """Accept a chunk of output, emitting every completed line.

        Args:
            chunk: Raw text read from the process.
        """

        *lines, self._pending = (self._pending + chunk).split("\n")
        for line in lines:
            self._emit(line.rstrip("\r"))

    def force_eol(self) -> None:
        """Emit any pending partial line and flush the underlying output."""

        if self._pending:
            line, self._pending = self._pending, ""
            self._emit(line.rstrip("\r"))
        self.flush()

    @contextmanager
    def session(self) -> Iterator[Self]:
        """Scope a run; :meth:`force_eol` runs once when the outermost scope exits.

        Yields:
            Self: The decorator itself.
        """

        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1
            if self._depth == 0:
                self.force_eol()

    def _emit(self, line: str) -> None:
        severity = self._classifier(line) if self._enabled else None
        self.write_line(line, severity)

    @abstractmethod
    def write_line(self, line: str, severity: LineSeverity | None) -> None:
        """Render one complete line.

        Args:
            line: Line text without terminator.
            severity: Classification of the line, ``None`` for plain output.
        """

    def flush(self) -> None:
        """Flush buffered output; no-op by default."""


class RichConsoleDecorator(ConsoleDecorator):
    """Render output to a Rich console, styling classified lines."""

    def __init__(
        self,
        console: Console,
        *,
        classifier: LineClassifier = classify_line,
        enabled: bool = True,
        styles: Mapping[LineSeverity, str] | None = None,
    ) -> None:
        super().__init__(classifier=classifier, enabled=enabled)
        self._console = console
        self._styles = dict(DEFAULT_STYLES if styles is None else styles)

    def write_line(self, line: str, severity: LineSeverity | None) -> None:
        style = self._styles.get(severity, "") if severity is not None else ""
        self._console.print(Text(line, style=style))

    def flush(self) -> None:
        self._console.file.flush()


class HtmlConsoleDecorator(ConsoleDecorator):
    """Write output as escaped HTML, wrapping classified lines in spans."""

    CSS_PREFIX: Final[str] = "phing-phperror-"

    def __init__(
        self,
        stream: TextIO,
        *,
        classifier: LineClassifier = classify_line,
        enabled: bool = True,
    ) -> None:
        super().__init__(classifier=classifier, enabled=enabled)
        self._stream = stream

    def write_line(self, line: str, severity: LineSeverity | None) -> None:
        escaped = html.escape(line, quote=False)
        if severity is not None:
            escaped = f"<span class='{self.CSS_PREFIX}{severity.value}'>{escaped}</span>"
        self._stream.write(f"{escaped}\n")

    def flush(self) -> None:
        self._stream.flush()


__all__ = [
    "DEFAULT_STYLES",
    "ConsoleDecorator",
    "HtmlConsoleDecorator",
    "RichConsoleDecorator",
]
