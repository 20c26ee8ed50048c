# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Split a candidate line at its assignment and validate the key."""

from __future__ import annotations

import re

from envstrata.errors import ENV003, ENV006, DotEnvParseError

_KEY_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def split_assignment(line: str) -> tuple[str, str] | None:
    """Split a trimmed line at the first ``=`` into (key, raw value).

    Returns ``None`` when there is no ``=`` or it is the first character.
    The key is trimmed; the raw value is returned exactly as written.
    """
    index = line.find("=")
    if index <= 0:
        return None
    return line[:index].strip(), line[index + 1:]


def is_valid_key(key: str) -> bool:
    """True if *key* is a letter or underscore followed by letters, digits or underscores."""
    return _KEY_RE.fullmatch(key) is not None


def validate_key(key: str, line: int) -> None:
    """Raise :class:`DotEnvParseError` if *key* is not a valid variable name."""
    if "\n" in key or "\r" in key:
        raise DotEnvParseError(ENV006, line, "Keys cannot span multiple lines")
    if not is_valid_key(key):
        raise DotEnvParseError(
            ENV003,
            line,
            "Invalid key format - must start with letter or underscore "
            "and contain only letters, numbers, and underscores",
        )
