# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envstrata list`` command."""

from __future__ import annotations

import click
from rich.table import Table
from rich.text import Text

from envstrata.cli import _load, cli, console, file_arguments
from envstrata.util import mask


@cli.command("list")
@click.option("--reveal", is_flag=True, help="Show values instead of masking them.")
@file_arguments
@click.pass_context
def list_keys(ctx: click.Context, reveal: bool, files: tuple[str, ...]) -> None:
    """List merged keys with masked values."""
    values = _load(ctx, files)
    title = "Variables" if not files else f"Variables ({', '.join(files)})"
    table = Table(title=title)
    table.add_column("Key", style="white", no_wrap=True)
    table.add_column("Value" if reveal else "Value (masked)", style="dim")
    if not values:
        table.add_row("(empty)", "(empty)")
    else:
        for key in sorted(values, key=str.casefold):
            val = values[key]
            if val is None:
                shown = "(absent)"
            else:
                shown = val if reveal else mask(val)
            table.add_row(Text(key), Text(shown))
    console.print(table)
