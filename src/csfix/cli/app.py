# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

import os

import typer

from ..config import ConfigSupplier, RunOverrides, SettingsConfigSupplier, load_settings
from ..discovery.git import RevisionDiffResolver
from ..errors import CsfixError
from ..models import RevisionPair
from ..pipeline import run_build
from .options import (
    COLOR_OPTION,
    CONFIG_OPTION,
    CURRENT_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    EXTENSION_OPTION,
    FIXER_PATH_OPTION,
    HTML_OPTION,
    PARAMETERS_OPTION,
    PREVIOUS_OPTION,
    PROJECT_PARAMETERS_OPTION,
    ROOT_OPTION,
)
from .shared import (
    EXIT_OK,
    build_cli_logger,
    build_decorator,
    report_error,
    report_result,
    resolve_root,
)

app = typer.Typer(
    name="csfix",
    help="Run php-cs-fixer against the files changed between two revisions.",
    no_args_is_help=True,
    add_completion=False,
)


@app.command("run")
def run_fixer(
    root: ROOT_OPTION = None,
    config: CONFIG_OPTION = None,
    fixer_path: FIXER_PATH_OPTION = None,
    parameters: PARAMETERS_OPTION = None,
    project_parameters: PROJECT_PARAMETERS_OPTION = None,
    extension: EXTENSION_OPTION = None,
    previous: PREVIOUS_OPTION = None,
    current: CURRENT_OPTION = None,
    html: HTML_OPTION = False,
    emoji: EMOJI_OPTION = True,
    color: COLOR_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Check the changed files with php-cs-fixer, stopping at the first failure."""

    env = dict(os.environ)
    logger = build_cli_logger(emoji=emoji, debug=debug, color=color, html=html)
    working_dir = resolve_root(root, env)
    decorator = build_decorator(html=html, color=color, emoji=emoji, env=env)
    overrides = RunOverrides(
        fixer_path=fixer_path,
        parameters=parameters,
        project_parameters=project_parameters,
        extension=extension,
    )
    try:
        supplier: ConfigSupplier = SettingsConfigSupplier(load_settings(working_dir, config_path=config), overrides)
        revisions = RevisionPair.from_environment(env, previous=previous, current=current)
        result = run_build(supplier, revisions, working_dir, env, decorator=decorator, logger=logger)
    except CsfixError as exc:
        raise typer.Exit(code=report_error(exc, logger)) from exc
    raise typer.Exit(code=report_result(result, logger))


@app.command("changed")
def list_changed(
    root: ROOT_OPTION = None,
    config: CONFIG_OPTION = None,
    extension: EXTENSION_OPTION = None,
    previous: PREVIOUS_OPTION = None,
    current: CURRENT_OPTION = None,
    emoji: EMOJI_OPTION = True,
    color: COLOR_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """List the changed files that ``run`` would check."""

    env = dict(os.environ)
    logger = build_cli_logger(emoji=emoji, debug=debug, color=color)
    working_dir = resolve_root(root, env)
    try:
        settings = load_settings(working_dir, config_path=config)
        run_config = SettingsConfigSupplier(settings, RunOverrides(extension=extension)).load()
        revisions = RevisionPair.from_environment(env, previous=previous, current=current)
        resolver = RevisionDiffResolver(environment=env, logger=logger)
        files = resolver.resolve(revisions, working_dir, run_config.extension_filter)
    except CsfixError as exc:
        raise typer.Exit(code=report_error(exc, logger)) from exc
    for changed in files:
        typer.echo(changed.path)
    raise typer.Exit(code=EXIT_OK)


__all__ = ["app"]
