# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envstrata get`` command."""

from __future__ import annotations

import click

from envstrata.cli import _load, cli, file_arguments


@cli.command()
@click.argument("key")
@file_arguments
@click.pass_context
def get(ctx: click.Context, key: str, files: tuple[str, ...]) -> None:
    """Print the merged value of KEY (case-insensitive).

    A key assigned nothing (``KEY=``) prints an empty line.
    """
    values = _load(ctx, files)
    if key not in values:
        raise click.ClickException(f"Key '{key}' not found.")
    click.echo(values[key] or "")
