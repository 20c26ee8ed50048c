# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse .env content into a case-insensitive key/value mapping.

Handles:
  - blank lines and ``#`` comments (``;`` and ``//`` with alternative comments)
  - backslash line continuation
  - single-quoted (literal) and double-quoted (escaped, expanded) values
  - inline comments after unquoted values when preceded by a space
  - ``${VAR}`` / ``$VAR`` expansion against earlier keys, then ``os.environ``
  - duplicate keys resolved by :class:`~envstrata.options.DuplicateKeyBehavior`
  - strict mode, which reports malformed lines instead of skipping them
"""

from __future__ import annotations

import io
import logging
import os
import re
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import IO, Union

from envstrata.errors import ENV001, ENV002, DotEnvParseError
from envstrata.expand import Resolver
from envstrata.keys import is_valid_key, split_assignment, validate_key
from envstrata.lines import LineKind, classify_line, iter_logical_lines
from envstrata.options import DuplicateKeyBehavior, ParseOptions
from envstrata.result import EnvMapping
from envstrata.values import decode_value

logger = logging.getLogger(__name__)

EnvInput = Union[IO[str], IO[bytes], Iterable[str], Iterable[bytes]]


def _physical_lines(lines: Iterable[str | bytes]) -> Iterator[str]:
    for number, line in enumerate(lines):
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        if number == 0:
            line = line.lstrip("\ufeff")
        yield line.rstrip("\r\n")


def _resolver(data: EnvMapping) -> Resolver:
    def resolve(name: str) -> str | None:
        if name in data:
            return data[name] or ""
        return os.environ.get(name)

    return resolve


def _process(line_number: int, text: str, data: EnvMapping, options: ParseOptions) -> None:
    line = text.strip()
    pair = split_assignment(line)
    if pair is None:
        if options.strict:
            raise DotEnvParseError(
                ENV001, line_number, "Invalid line format - missing assignment operator"
            )
        logger.debug("Skipping line %d: no assignment", line_number)
        return

    key, raw = pair
    if options.strict:
        validate_key(key, line_number)
    elif not is_valid_key(key):
        logger.debug("Skipping line %d: invalid key", line_number)
        return

    if key in data:
        behavior = options.duplicate_key_behavior
        if behavior is DuplicateKeyBehavior.THROW:
            raise DotEnvParseError(ENV002, line_number, f"Duplicate key '{key}'")
        if behavior is DuplicateKeyBehavior.USE_FIRST:
            logger.debug("Keeping first value of %s, ignoring line %d", key, line_number)
            return

    data[key] = decode_value(raw, options, _resolver(data), line_number)


def parse(stream: EnvInput, options: ParseOptions | None = None) -> EnvMapping:
    """Parse .env content from *stream* and return the resulting mapping.

    *stream* may be a text stream, a binary stream (decoded as UTF-8) or any
    iterable of lines.  Raises :class:`DotEnvParseError` on the first error;
    no partial result is returned.  Binary streams are wrapped only for the
    duration of the call and are left open for the caller.
    """
    if stream is None:
        raise ValueError("stream must not be None")
    if isinstance(stream, (str, bytes)):
        raise TypeError("parse() expects a stream or an iterable of lines; use parse_string() for text")
    opts = options or ParseOptions()
    data = EnvMapping()

    buffered: io.BufferedReader | None = None
    reader: io.TextIOWrapper | None = None
    if isinstance(stream, io.RawIOBase):
        buffered = io.BufferedReader(stream)
        stream = buffered
    if isinstance(stream, io.BufferedIOBase):
        reader = io.TextIOWrapper(stream, encoding="utf-8-sig", newline=None)
        lines: Iterable[str | bytes] = reader
    else:
        lines = stream  # type: ignore[assignment]

    try:
        for number, text in iter_logical_lines(_physical_lines(lines), opts):
            if classify_line(text, opts) is not LineKind.CANDIDATE:
                continue
            _process(number, text, data, opts)
    finally:
        if reader is not None:
            reader.detach()
        if buffered is not None:
            buffered.detach()

    logger.debug("Parsed %d key(s)", len(data))
    return data


def parse_string(text: str, options: ParseOptions | None = None) -> EnvMapping:
    """Parse .env content held in a string."""
    return parse(io.StringIO(text.lstrip("\ufeff"), newline=None), options)


def parse_env_file(path: str | Path, options: ParseOptions | None = None) -> EnvMapping:
    """Read a .env file and return its mapping.

    Raises :class:`FileNotFoundError` if *path* does not exist.
    """
    with Path(path).open("r", encoding="utf-8-sig", newline=None) as f:
        return parse(f, options)


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

_NEEDS_QUOTES = re.compile(r"""[\s#;/"'\\$=]""")


def format_env_value(value: str | None, *, expand_variables: bool = True) -> str:
    """Format a value so that parsing it back yields the same value."""
    if value is None:
        return ""
    if not value:
        return '""'
    if not _NEEDS_QUOTES.search(value):
        return value
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    if expand_variables:
        escaped = escaped.replace("$", "\\$")
    return f'"{escaped}"'


def dumps(mapping: Mapping[str, str | None], *, expand_variables: bool = True) -> str:
    """Serialize *mapping* as .env text, one ``KEY=value`` per line."""
    lines = [
        f"{key}={format_env_value(value, expand_variables=expand_variables)}"
        for key, value in mapping.items()
    ]
    return "\n".join(lines) + "\n" if lines else ""
