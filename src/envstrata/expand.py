# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Escape handling and ``${VAR}`` / ``$VAR`` expansion.

Double-quoted content understands ``\\"``, ``\\n``, ``\\r``, ``\\t`` and
``\\\\``.  Every other backslash sequence is kept as written.  Each backslash
is consumed at most once, so ``\\\\n`` is a backslash followed by ``n``.

Expansion replaces ``${NAME}`` and ``$NAME`` using a resolver.  A reference
the resolver cannot satisfy is left in place, and so is anything that does
not look like a reference (``${``, ``${}``, ``$``, ``${{X}}``).  A ``$``
preceded by an unescaped backslash is not expanded; the backslash is
dropped and the ``$`` kept.
"""

from __future__ import annotations

import re
from collections.abc import Callable

Resolver = Callable[[str], "str | None"]

_NAME = r"[A-Za-z_][A-Za-z0-9_]*"

_ESCAPES = {'"': '"', "n": "\n", "r": "\r", "t": "\t", "\\": "\\", "$": "$"}

_UNESCAPE_RE = re.compile(r'\\(["nrt\\])')

_QUOTED_RE = re.compile(
    rf'\\(?P<esc>["nrt\\$])'
    rf"|\$\{{(?P<braced>{_NAME})\}}"
    rf"|\$(?P<bare>{_NAME})"
)

_UNQUOTED_RE = re.compile(
    r"(?P<pair>\\\\)"
    r"|\\(?P<esc>\$)"
    rf"|\$\{{(?P<braced>{_NAME})\}}"
    rf"|\$(?P<bare>{_NAME})"
)


def unescape(text: str) -> str:
    """Apply the double-quote escape table to *text*."""
    return _UNESCAPE_RE.sub(lambda m: _ESCAPES[m.group(1)], text)


def _substitute(pattern: re.Pattern[str], text: str, resolve: Resolver) -> str:
    def replace(match: re.Match[str]) -> str:
        if match.lastgroup == "pair":
            return match.group(0)
        if match.lastgroup == "esc":
            return _ESCAPES[match.group("esc")]
        name = match.group(match.lastgroup)
        value = resolve(name)
        if value is None:
            return match.group(0)
        return value

    return pattern.sub(replace, text)


def expand_variables(text: str, resolve: Resolver) -> str:
    """Expand references in an unquoted value."""
    if "$" not in text:
        return text
    return _substitute(_UNQUOTED_RE, text, resolve)


def decode_double_quoted(text: str, resolve: Resolver | None = None) -> str:
    """Unescape the interior of a double-quoted value, expanding if *resolve* is given."""
    if resolve is None:
        return unescape(text)
    return _substitute(_QUOTED_RE, text, resolve)
