# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Merge several .env sources into one view; the last registered source wins."""

from __future__ import annotations

import logging
from pathlib import Path

from envstrata.env_file import EnvInput
from envstrata.options import ParseOptions
from envstrata.result import EnvMapping
from envstrata.source import EnvSource
from envstrata.sources.file_source import FileSource
from envstrata.sources.stream_source import StreamSource

logger = logging.getLogger(__name__)


class LayeredConfig:
    """Ordered stack of sources.

    Each source is parsed on its own (expansion never sees keys from another
    source) and the results are overlaid in registration order.
    """

    def __init__(self, options: ParseOptions | None = None) -> None:
        self.options = options or ParseOptions()
        self.sources: list[EnvSource] = []
        self._merged: EnvMapping | None = None

    def add_source(self, source: EnvSource) -> LayeredConfig:
        self.sources.append(source)
        self._merged = None
        return self

    def add_file(
        self,
        path: str | Path,
        *,
        optional: bool = False,
        options: ParseOptions | None = None,
    ) -> LayeredConfig:
        return self.add_source(
            FileSource(path, optional=optional, options=options or self.options)
        )

    def add_stream(self, stream: EnvInput, *, options: ParseOptions | None = None) -> LayeredConfig:
        return self.add_source(StreamSource(stream, options=options or self.options))

    def build(self) -> EnvMapping:
        """Load every source and return the merged mapping."""
        merged = EnvMapping()
        for source in self.sources:
            values = source.load()
            logger.debug("%s: %d key(s)", source.describe(), len(values))
            merged.update(values)
        self._merged = merged
        return merged.copy()

    def _view(self) -> EnvMapping:
        if self._merged is None:
            self.build()
        assert self._merged is not None
        return self._merged

    def get(self, key: str, default: str | None = None) -> str | None:
        view = self._view()
        return view[key] if key in view else default

    def __getitem__(self, key: str) -> str | None:
        return self._view()[key]

    def __contains__(self, key: object) -> bool:
        return key in self._view()
