# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""FileSource -- parse a .env file from disk.

Used for every path given on the command line, in ``ENVSTRATA_PATH`` or in
the ``files`` list of ``.envstrata.toml``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from envstrata.env_file import parse_env_file
from envstrata.options import ParseOptions
from envstrata.result import EnvMapping
from envstrata.source import EnvSource

logger = logging.getLogger(__name__)


class FileSource(EnvSource):
    """Parse a single .env file; a missing optional file loads as empty."""

    source_name: str = "file"
    source_display_name: str = "Plain .env file"

    def __init__(
        self,
        path: str | Path,
        *,
        optional: bool = False,
        options: ParseOptions | None = None,
    ) -> None:
        if not str(path):
            raise ValueError("path must not be empty")
        super().__init__(options)
        self.path = Path(path)
        self.optional = optional

    def load(self) -> EnvMapping:
        if not self.path.is_file():
            if self.optional:
                logger.debug("Optional file %s not found, skipping", self.path)
                return EnvMapping()
            raise FileNotFoundError(f"The .env file '{self.path}' was not found.")
        logger.debug("Loading %s", self.path)
        return parse_env_file(self.path, self.options)

    def describe(self) -> str:
        kind = "Optional" if self.optional else "Required"
        return f"FileSource for '{self.path}' ({kind})"
