# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from ..catalog import Registry, build_registry
from ..config import ShopExpanderConfig, find_config, load_config
from ..errors import ConfigError
from ..host import StaticItemFactory
from ..logging import configure_logging
from ..resolver import ShopContext, resolve_owner
from .shared import CLIError, CLILogger, build_cli_logger

app = typer.Typer(
    name="shopexpander",
    help="Inspect shop expansion catalogs and owner resolution.",
    no_args_is_help=True,
    add_completion=False,
)


def _locate(path: Path) -> Path:
    if path.is_dir():
        found = find_config(path)
        if found is None:
            raise CLIError(f"No configuration file in {path}", exit_code=2)
        return found
    if not path.exists():
        raise CLIError(f"Configuration not found: {path}", exit_code=2)
    return path


def _load(path: Path) -> ShopExpanderConfig:
    try:
        return load_config(path)
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=2) from exc


def _render_registry(registry: Registry, logger: CLILogger) -> None:
    table = Table(title="Catalog")
    table.add_column("Name")
    table.add_column("Owner")
    table.add_column("Amount", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Condition")
    for entry in registry:
        table.add_row(
            entry.derived_name,
            entry.owner_id,
            str(entry.quantity),
            str(entry.base.sale_price),
            entry.condition or "-",
        )
    logger.console.print(table)


@app.command("check")
def check(
    config_path: Annotated[Path, typer.Argument(help="Configuration file (TOML or JSON) or a directory containing one.")],
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Use emoji in output.")] = True,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colour output.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log rejected entries.")] = False,
) -> None:
    """Build the catalog from a configuration file and print the accepted entries."""

    logger = build_cli_logger(emoji=emoji, no_color=no_color)
    configure_logging(logging.DEBUG if verbose else logging.ERROR, use_color=not no_color)
    try:
        path = _locate(config_path)
        logger.info(f"Using configuration {path}")
        config = _load(path)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    registry = build_registry(config.objects, item_factory=StaticItemFactory(config.items))
    _render_registry(registry, logger)
    rejected = len(config.objects) - len(registry)
    if rejected:
        logger.warn(f"{rejected} of {len(config.objects)} entries were rejected or duplicated")
    logger.ok(f"{len(registry)} entries for {len(registry.owners)} shops")
    raise typer.Exit(code=0)


@app.command("resolve")
def resolve(
    speaker: Annotated[str | None, typer.Option("--speaker", help="Speaker name shown by the shop.")] = None,
    greeting: Annotated[str | None, typer.Option("--greeting", help="Greeting text shown by the shop.")] = None,
    location: Annotated[str | None, typer.Option("--location", help="Current location name.")] = None,
) -> None:
    """Print the owner id resolved for a shop interface."""

    owner = resolve_owner(ShopContext(speaker_name=speaker, greeting=greeting, location_name=location))
    typer.echo(owner)


__all__ = ["app"]
