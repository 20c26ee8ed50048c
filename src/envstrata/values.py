# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Decode the raw text to the right of ``=`` into a value."""

from __future__ import annotations

from envstrata.errors import ENV004, DotEnvParseError
from envstrata.expand import Resolver, decode_double_quoted, expand_variables
from envstrata.options import ParseOptions


def is_balanced(value: str, quote: str) -> bool:
    """True if *value* holds an even number (at least two) of unescaped *quote* characters."""
    count = 0
    escaped = False
    for ch in value:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == quote:
            count += 1
    return count >= 2 and count % 2 == 0


def find_inline_comment(value: str, options: ParseOptions) -> int:
    """Index of the earliest space-preceded comment marker in *value*, or -1."""
    found = [
        index
        for index in (value.find(" " + marker) for marker in options.comment_markers)
        if index >= 0
    ]
    return min(found) if found else -1


def _is_quoted(value: str, quote: str) -> bool:
    return len(value) >= 2 and value[0] == quote and value[-1] == quote


def decode_value(
    raw: str,
    options: ParseOptions,
    resolve: Resolver,
    line: int,
) -> str | None:
    """Return the decoded value, or ``None`` for an unquoted empty value.

    Double-quoted values are unescaped then expanded, single-quoted values
    are taken literally, and unquoted values lose any inline comment and
    trailing whitespace before expansion.
    """
    stripped = raw.strip()
    if not stripped:
        return None

    if _is_quoted(stripped, '"'):
        if not is_balanced(stripped, '"'):
            raise DotEnvParseError(ENV004, line, "Unclosed double quote")
        return decode_double_quoted(
            stripped[1:-1], resolve if options.expand_variables else None
        )

    if _is_quoted(stripped, "'"):
        if not is_balanced(stripped, "'"):
            raise DotEnvParseError(ENV004, line, "Unclosed single quote")
        return stripped[1:-1]

    value = raw
    comment = find_inline_comment(value, options)
    if comment >= 0:
        value = value[:comment]
    value = value.rstrip()
    if not value:
        return None
    if options.expand_variables:
        value = expand_variables(value, resolve)
    return value
