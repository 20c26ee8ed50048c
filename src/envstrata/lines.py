# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Turn physical lines into logical lines and classify them.

A physical line whose right-trimmed text ends in a single backslash is
joined with the next one.  The backslash is dropped and the two pieces are
separated by a newline in the assembled text::

    LONG=first \\
    second

assembles to ``"LONG=first \\nsecond"`` reported at line 1.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import NamedTuple

from envstrata.errors import ENV005, DotEnvParseError
from envstrata.options import ParseOptions

logger = logging.getLogger(__name__)


class LogicalLine(NamedTuple):
    """Assembled line text and the 1-based number of its first physical line."""

    number: int
    text: str


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    CANDIDATE = "candidate"


def _continues(line: str) -> bool:
    trimmed = line.rstrip()
    return trimmed.endswith("\\") and not trimmed.endswith("\\\\")


def is_comment(text: str, options: ParseOptions) -> bool:
    """True if *text* (already trimmed) starts with a comment marker."""
    return text.startswith(options.comment_markers)


def contains_comment(text: str, options: ParseOptions) -> bool:
    """True if a comment marker occurs anywhere in *text*."""
    return any(marker in text for marker in options.comment_markers)


def iter_logical_lines(
    physical_lines: Iterable[str],
    options: ParseOptions | None = None,
) -> Iterator[LogicalLine]:
    """Yield logical lines from *physical_lines* (terminators already removed).

    Raises :class:`DotEnvParseError` (ENV005) for a comment on a continuation
    line, or when the input ends inside a continuation.
    """
    opts = options or ParseOptions()
    parts: list[str] = []
    start = 0
    number = 0

    for number, raw in enumerate(physical_lines, start=1):
        if parts:
            if contains_comment(raw, opts):
                raise DotEnvParseError(
                    ENV005, number, "Comments are not allowed on line continuation"
                )
            if _continues(raw):
                parts.append(raw.rstrip()[:-1])
                continue
            parts.append(raw)
            logger.debug("Assembled lines %d-%d into one logical line", start, number)
            yield LogicalLine(start, "\n".join(parts))
            parts = []
            continue

        if _continues(raw):
            start = number
            parts.append(raw.rstrip()[:-1])
            continue
        yield LogicalLine(number, raw)

    if parts:
        raise DotEnvParseError(ENV005, number, "Invalid line continuation at end of file")


def classify_line(text: str, options: ParseOptions | None = None) -> LineKind:
    """Classify a logical line's text as blank, comment or a key/value candidate."""
    stripped = text.strip()
    if not stripped:
        return LineKind.BLANK
    if is_comment(stripped, options or ParseOptions()):
        return LineKind.COMMENT
    return LineKind.CANDIDATE
