# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envstrata export`` command."""

from __future__ import annotations

import json
from pathlib import Path

import click

from envstrata.cli import HAS_YAML, _load, cli, console, file_arguments
from envstrata.util import EXPORT_FORMATS, format_export_lines

if HAS_YAML:
    import yaml


@cli.command("export")
@click.option(
    "--format", "fmt",
    type=click.Choice([*EXPORT_FORMATS, "json", "yaml"]),
    default="dotenv",
    help="Output format: dotenv (default, KEY=value), unix (export KEY=value), win (PowerShell), json, yaml.",
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False),
    default=None,
    help="Output file path (default: stdout).",
)
@file_arguments
@click.pass_context
def export(ctx: click.Context, fmt: str, output: str | None, files: tuple[str, ...]) -> None:
    """Export the merged variables to stdout or a file.

    Default format is dotenv, quoted so the output parses back to the same
    values. Use --format unix for shell sourcing:
    eval "$(envstrata export --format unix)". Use --format win for
    PowerShell: envstrata export --format win | Invoke-Expression (or iex).
    Absent values (KEY=) are kept in dotenv, json and yaml output and
    skipped for shells.
    """
    pairs = _load(ctx, files).to_dict()

    if fmt == "yaml" and not HAS_YAML:
        raise click.ClickException("PyYAML is not installed. Install with: pip install pyyaml")

    if fmt == "json":
        text = json.dumps(pairs, indent=2) + "\n"
    elif fmt == "yaml":
        text = yaml.safe_dump(pairs, default_flow_style=False, sort_keys=True)
    else:
        lines = format_export_lines(pairs, fmt)
        text = "".join(line + "\n" for line in lines)

    if output:
        path = Path(output)
        with path.open("w", encoding="utf-8") as f:
            f.write(text)
        console.print(f"[green]Exported {len(pairs)} variable(s) to {output}[/green]", soft_wrap=True)
    else:
        click.echo(text, nl=False)
