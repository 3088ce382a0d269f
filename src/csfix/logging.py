# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Status messages for csfix runs, rendered through shared Rich consoles."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Final, TextIO

from rich.console import Console
from rich.text import Text

_KEY_VALUE_RE: Final[re.Pattern[str]] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")

# level -> (emoji prefix, style)
_LEVELS: Final[dict[str, tuple[str, str]]] = {
    "info": ("ℹ️ ", "cyan"),
    "ok": ("✅ ", "green"),
    "fail": ("❌ ", "red"),
}


def is_tty(stream: TextIO | None = None) -> bool:
    """Return ``True`` when ``stream`` (stdout by default) is a terminal."""

    target = sys.stdout if stream is None else stream
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=None)
def _console_for(color: bool, emoji: bool, tty: bool, stderr: bool) -> Console:
    return Console(
        color_system="auto" if color and tty else None,
        force_terminal=tty,
        no_color=not (color and tty),
        emoji=emoji,
        stderr=stderr,
        soft_wrap=True,
        highlight=False,
    )


def shared_console(*, color: bool, emoji: bool, stderr: bool = False) -> Console:
    """Return the process-wide console matching the presentation flags.

    Consoles are cached per flag combination and per terminal state of the
    target stream, so repeated calls share one instance.

    Args:
        color: ``True`` when ANSI colour output is allowed.
        emoji: ``True`` when Rich should render emoji glyphs.
        stderr: ``True`` to write to standard error instead of stdout.

    Returns:
        Console: Cached console bound to the selected stream.
    """

    tty = is_tty(sys.stderr if stderr else sys.stdout)
    return _console_for(color, emoji, tty, stderr)


@dataclass(slots=True)
class StatusLogger:
    """Progress and outcome messages for a build.

    Library code receives one of these instead of printing directly so the
    CLI decides where and how messages are rendered. ``to_stderr`` keeps
    status lines out of stdout when stdout carries HTML fixer output.
    """

    use_emoji: bool = True
    use_color: bool | None = None
    debug_enabled: bool = False
    to_stderr: bool = False
    console: Console | None = field(default=None, repr=False)

    def info(self, message: str) -> None:
        """Log an informational message."""

        self._emit("info", message)

    def ok(self, message: str) -> None:
        """Log a success message."""

        self._emit("ok", message)

    def fail(self, message: str) -> None:
        """Log a failure message."""

        self._emit("fail", message)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        ``key=value`` pairs are highlighted so command lines stand out.

        Args:
            message: Debug payload rendered with simple highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in _KEY_VALUE_RE.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            text.append(raw_value, style="bold blue" if key == "cmd" else "bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self._target().print(text)

    def _color_enabled(self) -> bool:
        if self.use_color is not None:
            return self.use_color
        return is_tty(sys.stderr if self.to_stderr else sys.stdout)

    def _target(self) -> Console:
        if self.console is not None:
            return self.console
        return shared_console(color=self._color_enabled(), emoji=self.use_emoji, stderr=self.to_stderr)

    def _emit(self, level: str, message: str) -> None:
        prefix, style = _LEVELS[level]
        text = Text(f"{prefix}{message}" if self.use_emoji else message)
        if self._color_enabled():
            text.stylize(style)
        self._target().print(text)


__all__ = ["StatusLogger", "is_tty", "shared_console"]
