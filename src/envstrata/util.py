# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared utilities."""

from __future__ import annotations

from collections.abc import Mapping

from envstrata.env_file import format_env_value

EXPORT_FORMATS: tuple[str, ...] = ("dotenv", "unix", "win")


def mask(value: str | None) -> str:
    """Mask a value for display, keeping a short prefix and suffix of long values."""
    if value is None:
        return "(absent)"
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


def shell_escape(value: str) -> str:
    """Escape for Unix sh: single-quote wrapped, internal ' -> '\\''."""
    if not value or any(c in value for c in " \t\n'\"\\$`!#&|;(){}*?<>~"):
        return "'" + value.replace("'", "'\\''") + "'"
    return value


def powershell_escape(value: str) -> str:
    """Escape for PowerShell single-quoted string: ' -> ''."""
    return value.replace("'", "''")


def format_export_lines(pairs: Mapping[str, str | None], fmt: str) -> list[str]:
    """Render *pairs* sorted by key for ``dotenv``, ``unix`` or ``win`` output.

    Absent values are written as ``KEY=`` in dotenv output and skipped for shells.
    """
    lines: list[str] = []
    for key, value in sorted(pairs.items(), key=lambda kv: kv[0].casefold()):
        if fmt == "dotenv":
            lines.append(f"{key}={format_env_value(value)}")
        elif value is None:
            continue
        elif fmt == "unix":
            lines.append(f"export {key}={shell_escape(value)}")
        elif fmt == "win":
            lines.append(f"$env:{key} = '{powershell_escape(value)}'")
        else:
            raise ValueError(f"Unknown export format {fmt!r}")
    return lines
