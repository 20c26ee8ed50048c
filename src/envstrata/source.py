# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Abstract base class for .env sources and plugin API for new source kinds."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from envstrata.options import ParseOptions
from envstrata.result import EnvMapping


class EnvSource(ABC):
    """Something that can produce a parsed .env mapping.

    A source owns acquiring its input (opening a file, reading a stream) and
    hands the text to :func:`envstrata.env_file.parse` with its
    :class:`~envstrata.options.ParseOptions`.  Acquisition failures such as a
    missing file are reported with their own exception types, never as a
    :class:`~envstrata.errors.DotEnvParseError`.

    **Plugin API**: third-party sources register under the
    ``envstrata.sources`` entry-point group.  Each source class defines
    ``source_name`` (short name, e.g. ``"file"``) and
    ``source_display_name`` (human-readable description) for listings.
    """

    source_name: ClassVar[str] = ""
    source_display_name: ClassVar[str] = ""

    def __init__(self, options: ParseOptions | None = None) -> None:
        self.options = options or ParseOptions()

    @abstractmethod
    def load(self) -> EnvMapping:
        """Parse the source and return its mapping."""

    @abstractmethod
    def describe(self) -> str:
        """Return a short description used in logs and error messages."""

    def __repr__(self) -> str:
        return self.describe()
