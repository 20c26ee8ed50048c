# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Envstrata CLI -- validate, inspect and export layered .env files.

The CLI is split into per-command modules under this package.  The ``cli``
click group, shared helpers (``console``, ``file_arguments``, ``_load``,
etc.) live here so every command module can import them.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from envstrata import __version__
from envstrata.config import EnvstrataConfig, load_config
from envstrata.errors import DotEnvParseError
from envstrata.result import EnvMapping
from envstrata.sources import FileSource, get_source_entries

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _setup_logging(verbose: bool) -> None:
    """Route ``envstrata`` debug logging to stderr through rich when verbose."""
    if not verbose:
        return
    logger = logging.getLogger("envstrata")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_time=False, show_path=False))
    logger.setLevel(logging.DEBUG)


def _sources(ctx: click.Context, files: tuple[str, ...]) -> list[FileSource]:
    """FileSources for *files*, or for the configured files when none are given."""
    cfg: EnvstrataConfig = ctx.obj["config"]
    options = ctx.obj["options"]
    if files:
        return [FileSource(f, options=options) for f in files]
    return [
        FileSource(p, optional=cfg.optional, options=options)
        for p in cfg.resolve_files()
    ]


def _load_source(source: FileSource) -> EnvMapping:
    try:
        return source.load()
    except DotEnvParseError as e:
        raise click.ClickException(f"{source.describe()}: {e}")
    except FileNotFoundError as e:
        raise click.ClickException(str(e))


def _load(ctx: click.Context, files: tuple[str, ...]) -> EnvMapping:
    """Parse and merge *files* in order; later files win."""
    merged = EnvMapping()
    for source in _sources(ctx, files):
        merged.update(_load_source(source))
    return merged


def file_arguments(f: object) -> object:
    """Add an optional FILE... argument to a command."""
    return click.argument(
        "files", nargs=-1, type=click.Path(dir_okay=False, path_type=str)
    )(f)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option("--strict/--no-strict", default=None, help="Report malformed lines instead of skipping them.")
@click.option("--expand/--no-expand", "expand", default=None, help="Expand ${VAR} and $VAR references (default: on).")
@click.option("--alt-comments/--no-alt-comments", default=None, help="Also treat ';' and '//' as comment markers.")
@click.option(
    "--duplicates",
    type=click.Choice(["last", "first", "error"]),
    default=None,
    help="Duplicate key policy (default: from .envstrata.toml, else last).",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    strict: bool | None,
    expand: bool | None,
    alt_comments: bool | None,
    duplicates: str | None,
    verbose: bool,
) -> None:
    """Validate, inspect and export layered .env files."""
    _setup_logging(verbose)
    try:
        cfg = load_config()
        options = cfg.parse_options(
            strict=strict,
            expand_variables=expand,
            alternative_comments=alt_comments,
            duplicate_keys=duplicates,
        )
    except ValueError as e:
        raise click.UsageError(f"Invalid configuration: {e}")
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["options"] = options
    ctx.obj["verbose"] = verbose


@cli.command("sources")
def sources_list() -> None:
    """List available source kinds."""
    table = Table(title="Available Sources")
    table.add_column("Name", style="cyan")
    table.add_column("Description", style="white")
    for name, source_cls in get_source_entries():
        table.add_row(name, source_cls.source_display_name)
    console.print(table)


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from envstrata.cli import (  # noqa: E402, F401
    check_cmd,
    export_cmd,
    get_cmd,
    list_cmd,
)
