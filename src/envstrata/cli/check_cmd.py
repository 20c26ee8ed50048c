# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envstrata check`` -- validate .env files and report the first error in each."""

from __future__ import annotations

import click
from rich.markup import escape

from envstrata.cli import _sources, cli, console, file_arguments
from envstrata.errors import DotEnvParseError


@cli.command()
@file_arguments
@click.pass_context
def check(ctx: click.Context, files: tuple[str, ...]) -> None:
    """Parse each FILE and report whether it is valid.

    Every file is checked even after a failure; the exit status is non-zero
    if any file failed.  Combine with --strict to also reject lines that
    would otherwise be skipped.
    """
    failed = 0
    for source in _sources(ctx, files):
        try:
            values = source.load()
        except DotEnvParseError as e:
            failed += 1
            console.print(
                f"[red]FAIL[/red] {escape(str(source.path))} line {e.line}: [bold]{e.code}[/bold] {escape(e.message)}",
                highlight=False,
                soft_wrap=True,
            )
            continue
        except FileNotFoundError as e:
            failed += 1
            console.print(f"[red]FAIL[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
            continue
        if not values and source.optional and not source.path.is_file():
            console.print(f"[dim]SKIP {escape(str(source.path))} (not found)[/dim]", highlight=False, soft_wrap=True)
            continue
        console.print(f"[green]OK[/green] {escape(str(source.path))} ({len(values)} key(s))", highlight=False, soft_wrap=True)

    if failed:
        raise click.ClickException(f"{failed} file(s) failed validation.")
