# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reusable Typer option declarations."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..models import CURRENT_REVISION_ENV, PREVIOUS_REVISION_ENV

ROOT_OPTION = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Source tree root (defaults to $WORKSPACE or the current directory)."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="TOML configuration file replacing csfix.toml."),
]
FIXER_PATH_OPTION = Annotated[
    str | None,
    typer.Option("--fixer-path", help="php-cs-fixer executable; downloads the phar when empty."),
]
PARAMETERS_OPTION = Annotated[
    str | None,
    typer.Option("--parameters", help="Global fixer parameters."),
]
PROJECT_PARAMETERS_OPTION = Annotated[
    str | None,
    typer.Option("--project-parameters", help="Project fixer parameters; replace the global ones when set."),
]
EXTENSION_OPTION = Annotated[
    str | None,
    typer.Option("--extension", help="Filename suffix of files to check."),
]
PREVIOUS_OPTION = Annotated[
    str | None,
    typer.Option(
        "--previous",
        help=f"Baseline revision (defaults to GIT_PREVIOUS_SUCCESSFUL_COMMIT, then {PREVIOUS_REVISION_ENV}).",
    ),
]
CURRENT_OPTION = Annotated[
    str | None,
    typer.Option("--current", help=f"Current revision (defaults to {CURRENT_REVISION_ENV})."),
]
HTML_OPTION = Annotated[
    bool,
    typer.Option("--html", help="Write fixer output as annotated HTML."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
COLOR_OPTION = Annotated[
    bool,
    typer.Option("--color/--no-color", help="Toggle coloured output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Emit debug logging."),
]

__all__ = [
    "COLOR_OPTION",
    "CONFIG_OPTION",
    "CURRENT_OPTION",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "EXTENSION_OPTION",
    "FIXER_PATH_OPTION",
    "HTML_OPTION",
    "PARAMETERS_OPTION",
    "PREVIOUS_OPTION",
    "PROJECT_PARAMETERS_OPTION",
    "ROOT_OPTION",
]
